# What it does: Parses the body of a commit object into its tree, parents, author, committer and message
# How it does: The body is UTF-8 text. Header lines run up to the first blank line, each one `<keyword> <value>`, and everything after that
# blank line is the message. Author and committer lines are split from the right so names containing spaces survive
# What data structure it uses: Immutable named tuples (Commit, PersonStamp), with parents kept as an ordered tuple because index 0 is the mainline

import logging
from collections import namedtuple
from datetime import timedelta, timezone

from .errors import MalformedObject
from .objects import COMMIT, read_typed_object

logger = logging.getLogger(__name__)

Commit = namedtuple('Commit', ['tree_id', 'parent_ids', 'author', 'committer', 'message'])


class PersonStamp(namedtuple('PersonStamp', ['name', 'email', 'epoch_seconds', 'utc_offset_minutes'])):
    __slots__ = ()

    @property
    def zone(self): # The offset as `±HH:MM`
        return format_offset(self.utc_offset_minutes)

    @property
    def tzinfo(self):
        return timezone(timedelta(minutes=self.utc_offset_minutes))


def format_offset(minutes):
    sign = '-' if minutes < 0 else '+'
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def parse_offset(token):
    """
    Turns a `±HHMM` token into minutes east of UTC.
    The sign and hours are the first three characters, the minutes the last two.
    """
    if len(token) != 5 or token[0] not in '+-' or not token[1:].isdigit():
        raise MalformedObject(f"invalid time zone offset '{token}'")

    hours, minutes = int(token[1:3]), int(token[3:])
    if hours > 23 or minutes > 59:
        raise MalformedObject(f"invalid time zone offset '{token}'")

    total = hours * 60 + minutes
    return -total if token[0] == '-' else total


def parse_person(line):
    """
    Parses `author|committer <name> <email> <epoch> <offset>` into a PersonStamp.
    The email loses its angle brackets.
    """
    if len(line.split()) < 5:
        raise MalformedObject(f"incomplete identity line: '{line}'")

    _, rest = line.split(None, 1)
    ident, epoch, offset = rest.rsplit(None, 2)

    lt = ident.find('<')
    if lt == -1:
        name, _, email = ident.rpartition(' ')
    else:
        name, email = ident[:lt], ident[lt:]
    email = email.replace('<', '').replace('>', '').strip()

    try:
        epoch_seconds = int(epoch)
    except ValueError as e:
        raise MalformedObject(f"invalid timestamp '{epoch}'") from e

    return PersonStamp(name.strip(), email, epoch_seconds, parse_offset(offset))


def decode_commit(body):
    try:
        text = body.decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedObject(f"commit is not valid UTF-8: {e}") from e

    header, _, message = text.partition('\n\n')

    tree_id = None
    parent_ids = []
    author = None
    committer = None

    for line in header.split('\n'):
        if not line or line.startswith(' '):
            # Continuation of a multi-line header such as gpgsig
            continue
        keyword, _, value = line.partition(' ')
        if keyword == 'tree' and tree_id is None:
            tree_id = value.strip()
        elif keyword == 'parent':
            parent_ids.append(value.strip())
        elif keyword == 'author':
            author = parse_person(line)
        elif keyword == 'committer':
            committer = parse_person(line)

    if not tree_id:
        raise MalformedObject("commit has no tree line")
    if author is None:
        raise MalformedObject("commit has no author line")
    if committer is None:
        raise MalformedObject("commit has no committer line")

    return Commit(tree_id, tuple(parent_ids), author, committer, message)


def read_commit(git_dir, commit_hash): # Loads and decodes a commit object
    commit = decode_commit(read_typed_object(git_dir, commit_hash, COMMIT))
    logger.debug("commit %s has %d parent(s)", commit_hash, len(commit.parent_ids))
    return commit
