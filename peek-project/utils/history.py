# What it does: Walks the history of a branch for `peek log`
# How it does: Starting at a commit it follows the first parent (the mainline) until it reaches a root commit.
# When a commit has exactly two parents, the second one is reported once right after it, marked as merged,
# but that merged commit's own parents are never walked
# What data structure it uses: A single cursor over the commit Graph (a linked list along first parents), exposed as a generator

import logging
from collections import namedtuple

from .commits import read_commit

logger = logging.getLogger(__name__)

LogEntry = namedtuple('LogEntry', ['id', 'commit', 'merged'])


def traverse(git_dir, start_hash):
    current = start_hash
    while current is not None:
        commit = read_commit(git_dir, current)
        yield LogEntry(current, commit, False)

        if len(commit.parent_ids) == 2:
            merged_hash = commit.parent_ids[1]
            logger.debug("%s merges %s", current, merged_hash)
            yield LogEntry(merged_hash, read_commit(git_dir, merged_hash), True)

        current = commit.parent_ids[0] if commit.parent_ids else None
