# Shared pytest fixtures for peek tests

import pytest
import os
import sys
import shutil
import tempfile
import hashlib
import zlib

# Add peek-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'peek-project'))

# 2020-03-29 14:18:20 UTC
AUTHOR = "Test User <test@example.com> 1585491500 +0300"
COMMITTER = "Test User <test@example.com> 1585491500 +0300"


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def git_dir(temp_dir):
    # Creates an empty .git directory whose HEAD points at master
    path = os.path.join(temp_dir, '.git')
    os.makedirs(os.path.join(path, 'objects'))
    os.makedirs(os.path.join(path, 'refs', 'heads'))
    with open(os.path.join(path, 'HEAD'), 'w') as f:
        f.write('ref: refs/heads/master\n')
    return path


class ObjectWriter:
    # Writes loose objects the way git does, so the reader can be tested against real bytes

    def __init__(self, git_dir):
        self.git_dir = git_dir

    def write(self, kind, body):
        data = f'{kind} {len(body)}\0'.encode() + body
        sha1 = hashlib.sha1(data).hexdigest()
        self.write_raw(sha1, zlib.compress(data))
        return sha1

    def write_raw(self, sha1, raw_bytes):
        object_dir = os.path.join(self.git_dir, 'objects', sha1[:2])
        os.makedirs(object_dir, exist_ok=True)
        with open(os.path.join(object_dir, sha1[2:]), 'wb') as f:
            f.write(raw_bytes)

    def blob(self, content):
        if isinstance(content, str):
            content = content.encode()
        return self.write('blob', content)

    def tree(self, entries):
        # entries: list of (mode, name, sha1) in the order they should be stored
        return self.write('tree', tree_body(entries))

    def commit(self, tree, parents=(), message='Initial commit\n', author=AUTHOR, committer=COMMITTER):
        return self.write('commit', commit_body(tree, parents, message, author, committer))

    def branch(self, name, sha1):
        branch_path = os.path.join(self.git_dir, 'refs', 'heads', *name.split('/'))
        os.makedirs(os.path.dirname(branch_path), exist_ok=True)
        with open(branch_path, 'w') as f:
            f.write(f"{sha1}\n")


def tree_body(entries):
    return b''.join(f'{mode} {name}'.encode() + b'\0' + bytes.fromhex(sha1) for mode, name, sha1 in entries)


def commit_body(tree, parents=(), message='Initial commit\n', author=AUTHOR, committer=COMMITTER):
    lines = [f"tree {tree}"]
    lines.extend(f"parent {parent}" for parent in parents)
    lines.append(f"author {author}")
    lines.append(f"committer {committer}")
    return ('\n'.join(lines) + '\n\n' + message).encode()


@pytest.fixture
def store(git_dir):
    return ObjectWriter(git_dir)


@pytest.fixture
def history(store):
    # master: root <- second <- merge, where merge also has feature as its second parent
    # feature: root <- feature
    readme = store.blob('# Test Project\n')
    main_txt = store.blob('print("hi")\n')
    src = store.tree([('100644', 'main.txt', main_txt)])
    root_tree = store.tree([('100644', 'README', readme)])
    full_tree = store.tree([('100644', 'README', readme), ('40000', 'src', src)])

    root = store.commit(root_tree, message='Initial commit\n')
    second = store.commit(full_tree, [root], message='Add src\n')
    feature = store.commit(full_tree, [root], message='Feature work\n')
    merge = store.commit(full_tree, [second, feature], message="Merge branch 'feature'\n")

    store.branch('master', merge)
    store.branch('feature', feature)

    return {
        'readme': readme,
        'main_txt': main_txt,
        'src': src,
        'root_tree': root_tree,
        'full_tree': full_tree,
        'root': root,
        'second': second,
        'feature': feature,
        'merge': merge,
    }


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
