# The command: peek interactive
# What it does: Asks for the git directory and a command on standard input, then runs that command
# How it does: Reads one line for the `.git` location and one for the command name. `cat-file`, `log` and `commit-tree` ask one more
# question (the object hash or branch name) before running. Failures are reported and end the session with status 1
# What data structure it uses: Map / Dictionary (command name to the prompt it needs)

import sys
from utils import repository, config as config_utils
from utils.errors import PeekError
from . import cat_file, list_branches, log, commit_tree

PROMPTS = {
    'cat-file': "Enter git object hash:",
    'list-branches': None,
    'log': "Enter branch name:",
    'commit-tree': "Enter commit-hash:",
}


def session(read_line=input, config_path=None): # Runs one prompted command and returns the exit status
    print("Enter .git directory location:")
    location = read_line().strip()
    print("Enter command:")
    command = read_line().strip()

    if command not in PROMPTS:
        print("Unknown command.")
        return 0

    try:
        git_dir = repository.resolve_git_dir(location or None)
        settings = config_utils.load_settings(config_path)

        argument = None
        if PROMPTS[command]:
            print(PROMPTS[command])
            argument = read_line()

        if command == 'cat-file':
            cat_file.cat_file(git_dir, argument, settings)
        elif command == 'list-branches':
            list_branches.list_branches(git_dir)
        elif command == 'log':
            log.log(git_dir, argument, settings)
        else:
            commit_tree.commit_tree(git_dir, argument, settings)
    except PeekError as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1
    return 0


def run(args):
    try:
        status = session(config_path=args.config)
    except EOFError:
        print("fatal: unexpected end of input", file=sys.stderr)
        sys.exit(1)
    if status:
        sys.exit(status)
