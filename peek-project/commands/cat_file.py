# The command: peek cat-file <hash>
# What it does: Prints the type of a loose object and then its decoded contents
# How it does: It reads the object, prints `*COMMIT*`, `*TREE*` or `*BLOB*` from its header, then hands the body to the decoder and renderer for that type
# What data structure it uses: Hash Table (object store lookup), Tuple of tree entries for trees

import sys
from utils import objects, commits, trees, render, repository, config as config_utils
from utils.errors import PeekError


def cat_file(git_dir, object_hash, settings):
    obj = objects.read_object(git_dir, objects.check_object_id(object_hash))
    print(f"*{obj.kind.upper()}*")

    if obj.kind == objects.COMMIT:
        commit = commits.decode_commit(obj.body)
        print(render.render_commit(commit, settings.timestamp_format, settings.utc_as_z))
    elif obj.kind == objects.TREE:
        entries = trees.decode_tree(obj.body, settings.strict_trees)
        if entries:
            print(render.render_tree(entries))
    else:
        content = render.render_blob(obj.body)
        print(content)


def run(args):
    try:
        git_dir = repository.resolve_git_dir(args.git_dir)
        settings = config_utils.load_settings(args.config)
        cat_file(git_dir, args.object_hash, settings)
    except PeekError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
