# The command: peek list-branches
# What it does: Lists all branches, marking the one HEAD points to with an asterisk
# How it does: It reads every file under `refs/heads` and compares each name with the branch named in `HEAD`
# What data structure it uses: List (branch names, sorted for display)

import sys
from utils import repository
from utils.errors import PeekError


def list_branches(git_dir):
    for branch in repository.get_all_branches(git_dir):
        if branch.is_current:
            print(f"* {branch.name}")
        else:
            print(f"  {branch.name}")


def run(args):
    try:
        list_branches(repository.resolve_git_dir(args.git_dir))
    except PeekError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
