# The command: peek commit-tree <hash>
# What it does: Prints the path of every file in the snapshot a commit records, one per line, relative to the repository root
# How it does: It reads the commit to find its root tree and expands that tree, descending into each subdirectory where it appears
# What data structure it uses: Tree (the directory hierarchy), walked depth-first with a Stack

import sys
from utils import objects, trees, repository, config as config_utils
from utils.errors import PeekError


def commit_tree(git_dir, commit_hash, settings):
    for path in trees.flatten_commit_tree(git_dir, objects.check_object_id(commit_hash), settings.strict_trees):
        print(path)


def run(args):
    try:
        git_dir = repository.resolve_git_dir(args.git_dir)
        settings = config_utils.load_settings(args.config)
        commit_tree(git_dir, args.commit_hash, settings)
    except PeekError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
