import argparse
import logging
from commands import (
    cat_file, list_branches, log, commit_tree, config, interactive
)
# The main entry point for peek, a read-only viewer for git object stores
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="Peek: read commits, trees and blobs straight out of a .git directory.")
    parser.add_argument("--git-dir", help="Path to the .git directory (default: search upwards from the current directory).")
    parser.add_argument("--config", help="Config file to use instead of ~/.peekconfig.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every object read.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Show the type and contents of an object.")
    cat_file_parser.add_argument("object_hash", help="The 40-character object id.")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Command: list-branches
    list_branches_parser = subparsers.add_parser("list-branches", help="List branches, marking the current one.")
    list_branches_parser.set_defaults(func=list_branches.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the history of a branch.")
    log_parser.add_argument("branch", help="The branch whose history to show.")
    log_parser.set_defaults(func=log.run)

    # Command: commit-tree
    commit_tree_parser = subparsers.add_parser("commit-tree", help="List every file in a commit's snapshot.")
    commit_tree_parser.add_argument("commit_hash", help="The 40-character commit id.")
    commit_tree_parser.set_defaults(func=commit_tree.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a display or decoding option.")
    config_parser.add_argument("key", help="The configuration key (e.g., display.timestamp_format).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Command: interactive
    interactive_parser = subparsers.add_parser("interactive", help="Prompt for the .git directory and the command to run.")
    interactive_parser.set_defaults(func=interactive.run)
    # Parse the arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
