# The command: peek log <branch>
# What it does: Displays the history of a branch, newest first
# How it does: It starts at the commit the branch points to and follows first parents down to the root commit. A merge commit's second
# parent is shown once right after the merge, marked `(merged)`, without walking its own history
# What data structure it uses: It performs a Graph Traversal along first parents of the Directed Acyclic Graph formed by the commits

import sys
from utils import repository, render, config as config_utils
from utils.errors import PeekError


def log(git_dir, branch_name, settings):
    head_commit = repository.get_branch_commit(git_dir, branch_name.strip())
    for block in render.render_log(git_dir, head_commit, settings.timestamp_format, settings.utc_as_z):
        print(block)
        print()


def run(args):
    try:
        git_dir = repository.resolve_git_dir(args.git_dir)
        settings = config_utils.load_settings(args.config)
        log(git_dir, args.branch, settings)
    except PeekError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
