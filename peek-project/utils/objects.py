# What it does: Reads loose objects out of a git object store: resolves an id to its file, inflates it, and splits the header from the body
# How it does: The id is sharded into `objects/<first 2 hex>/<remaining 38 hex>`. The file is zlib-inflated, and the bytes before the first NUL
# are the `<type> <size>` header. Nothing is cached, every call goes back to disk
# What data structure it uses: Hash Table / Dictionary (the object store is a content-addressed map from SHA-1 to compressed bytes)

import logging
import os
import zlib
from collections import namedtuple

from .errors import ObjectNotFound, CorruptObject, MalformedObject, InvalidObjectName

logger = logging.getLogger(__name__)

COMMIT = 'commit'
TREE = 'tree'
BLOB = 'blob'
OBJECT_KINDS = (COMMIT, TREE, BLOB)

DecodedObject = namedtuple('DecodedObject', ['kind', 'body'])


def index_of(data, delimiter, start=0): # Position of the next delimiter byte at or after start, -1 when there is none
    if start >= len(data):
        return -1
    return data.find(delimiter, start)


def object_path(git_dir, object_id): # Where the loose object for an id lives on disk
    return os.path.join(git_dir, 'objects', object_id[:2], object_id[2:])


def load_object(git_dir, object_id):
    """
    Reads the compressed file for object_id and returns the inflated bytes, header included.
    Inflation starts with a buffer twice the input size and grows as needed.
    """
    path = object_path(git_dir, object_id)
    try:
        with open(path, 'rb') as f:
            compressed = f.read()
    except OSError as e:
        raise ObjectNotFound(object_id, path) from e

    try:
        data = zlib.decompress(compressed, bufsize=max(len(compressed) * 2, 1))
    except zlib.error as e:
        raise CorruptObject(object_id, str(e)) from e

    if not data:
        raise CorruptObject(object_id, "inflated to zero bytes")

    logger.debug("loaded %s (%d -> %d bytes)", object_id, len(compressed), len(data))
    return data


def split_object(data): # Separates `<type> <size>\0<body>` into (kind, body)
    null_byte_index = index_of(data, b'\0')
    if null_byte_index == -1:
        raise MalformedObject("object header is not NUL-terminated")

    try:
        header = data[:null_byte_index].decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedObject(f"object header is not valid UTF-8: {e}") from e

    # The size field is advisory and not checked against the body
    obj_type = header.split(' ')[0].lower()
    if obj_type not in OBJECT_KINDS:
        raise MalformedObject(f"unknown object type '{obj_type}'")

    return obj_type, data[null_byte_index + 1:]


def read_object(git_dir, object_id): # Loads an object by id and returns it as a DecodedObject with the header stripped
    kind, body = split_object(load_object(git_dir, object_id))
    logger.debug("%s is a %s of %d bytes", object_id, kind, len(body))
    return DecodedObject(kind, body)


def read_typed_object(git_dir, object_id, expected_kind): # Like read_object, but the object must be of the given kind
    obj = read_object(git_dir, object_id)
    if obj.kind != expected_kind:
        raise MalformedObject(f"object {object_id} is a {obj.kind}, not a {expected_kind}")
    return obj.body


def check_object_id(value): # Normalizes a user-supplied id, which must be 40 hex characters
    object_id = value.strip().lower()
    if len(object_id) != 40 or any(c not in '0123456789abcdef' for c in object_id):
        raise InvalidObjectName(f"not a valid object name: '{value.strip()}'")
    return object_id
