# What it does: Finds the git directory and reads its branch pointers (HEAD and the files under refs/heads)
# How it does: `find_git_dir` walks up the directory tree until it finds a `.git` directory, or a directory that already is one.
# Branch files hold a 40-hex commit id as text, and HEAD holds `ref: refs/heads/<branch>` unless it is detached
# What data structure it uses: Recursion (linear, up the directory tree) for the lookup, and a sorted List of Branch named tuples for listing

import os
from collections import namedtuple

from .errors import NotARepository, RefNotFound

Branch = namedtuple('Branch', ['name', 'head_commit_id', 'is_current'])

HEADS_PREFIX = 'refs/heads/'


def is_git_dir(path): # A git directory has an objects directory and a HEAD file
    return os.path.isdir(os.path.join(path, 'objects')) and os.path.isfile(os.path.join(path, 'HEAD'))


def find_git_dir(path='.'): # Recursively searches upwards for the git directory, None when there is none
    path = os.path.abspath(path)
    if is_git_dir(path):
        return path
    dot_git = os.path.join(path, '.git')
    if os.path.isdir(dot_git) and is_git_dir(dot_git):
        return dot_git
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_git_dir(parent_path)


def resolve_git_dir(git_dir=None): # The git directory given on the command line, or the one around the working directory
    if git_dir:
        if not is_git_dir(git_dir):
            raise NotARepository(f"not a git directory: {git_dir}")
        return os.path.abspath(git_dir)
    found = find_git_dir()
    if not found:
        raise NotARepository("not a git repository (or any of the parent directories): .git")
    return found


def get_current_branch(git_dir): # The branch HEAD points to, or None if HEAD is detached
    head_path = os.path.join(git_dir, 'HEAD')
    try:
        with open(head_path, 'r') as f:
            head_content = f.read().strip()
    except OSError as e:
        raise RefNotFound(f"cannot read HEAD in {git_dir}") from e

    if not head_content.startswith('ref:'):
        return None
    ref = head_content.split(':', 1)[1].strip()
    if ref.startswith(HEADS_PREFIX):
        return ref[len(HEADS_PREFIX):]
    return ref.split('/')[-1]


def get_branch_commit(git_dir, branch_name): # The commit id a branch points to
    branch_path = os.path.join(git_dir, 'refs', 'heads', *branch_name.split('/'))
    try:
        with open(branch_path, 'r') as f:
            content = f.read().strip()
    except OSError as e:
        raise RefNotFound(f"no such branch: '{branch_name}'") from e

    if len(content) != 40 or any(c not in '0123456789abcdef' for c in content.lower()):
        raise RefNotFound(f"branch '{branch_name}' does not point to a commit")
    return content.lower()


def get_all_branches(git_dir): # Every branch under refs/heads, sorted by name
    heads_dir = os.path.join(git_dir, 'refs', 'heads')
    if not os.path.isdir(heads_dir):
        return []

    current_branch = get_current_branch(git_dir)
    names = []
    for dirpath, _, filenames in os.walk(heads_dir):
        rel_dir = os.path.relpath(dirpath, heads_dir)
        for filename in filenames:
            name = filename if rel_dir == '.' else os.path.join(rel_dir, filename).replace(os.sep, '/')
            names.append(name)

    return [
        Branch(name, get_branch_commit(git_dir, name), name == current_branch)
        for name in sorted(names)
    ]
