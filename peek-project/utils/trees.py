# What it does: Decodes tree objects into their entries and expands a tree into the full list of file paths beneath it
# How it does: A tree body is packed binary, one record after another: `<mode> <name>\0` followed by the 20 raw bytes of the entry's id.
# Expansion walks subtrees (mode 40000) depth-first, keeping the entries in the order they are stored
# What data structure it uses: Tuple of TreeEntry named tuples per tree, and an explicit Stack of iterators for the depth-first walk
# so deep trees do not hit the recursion limit

import logging
from collections import namedtuple

from .errors import MalformedObject
from .objects import TREE, index_of, read_typed_object
from .commits import read_commit

logger = logging.getLogger(__name__)

TREE_MODE = '40000'
ID_LENGTH = 20

TreeEntry = namedtuple('TreeEntry', ['mode', 'id', 'name'])


def _truncated(reason, strict):
    if strict:
        raise MalformedObject(f"truncated tree record: {reason}")
    logger.debug("dropping truncated tree record: %s", reason)


def decode_tree(body, strict=False):
    """
    Parses a tree body into a tuple of TreeEntry in on-disk order.
    A truncated trailing record is dropped, or raises MalformedObject when strict is set.
    """
    entries = []
    cursor = 0

    while cursor < len(body):
        space = index_of(body, b' ', cursor)
        if space == -1:
            _truncated("no space after mode", strict)
            break

        null_byte = index_of(body, b'\0', space + 1)
        if null_byte == -1:
            _truncated("no NUL after name", strict)
            break

        id_start = null_byte + 1
        if id_start + ID_LENGTH > len(body):
            _truncated(f"only {len(body) - id_start} id bytes left", strict)
            break

        mode = body[cursor:space].decode('utf-8', errors='replace')
        name = body[space + 1:null_byte].decode('utf-8', errors='replace')
        entry_id = body[id_start:id_start + ID_LENGTH].hex()
        entries.append(TreeEntry(mode, entry_id, name))

        cursor = id_start + ID_LENGTH

    return tuple(entries)


def read_tree(git_dir, tree_hash, strict=False): # Loads and decodes a tree object
    return decode_tree(read_typed_object(git_dir, tree_hash, TREE), strict)


def expand_tree(git_dir, tree_hash, prefix='', strict=False):
    """
    Yields the path of every file reachable from tree_hash, each one prefixed with `prefix`.
    A subdirectory's files are yielded where the subdirectory appears, before its later siblings.
    """
    stack = [(tree_hash, prefix, iter(read_tree(git_dir, tree_hash, strict)))]

    while stack:
        _, path_prefix, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        if entry.mode != TREE_MODE:
            yield path_prefix + entry.name
            continue

        if any(frame[0] == entry.id for frame in stack):
            raise MalformedObject(f"tree {entry.id} contains itself")
        child_entries = read_tree(git_dir, entry.id, strict)
        stack.append((entry.id, path_prefix + entry.name + '/', iter(child_entries)))


def flatten_commit_tree(git_dir, commit_hash, strict=False): # Every file path in the snapshot recorded by a commit
    commit = read_commit(git_dir, commit_hash)
    yield from expand_tree(git_dir, commit.tree_id, '', strict)
