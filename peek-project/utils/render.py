# What it does: Turns decoded commits, trees and blobs into the text the commands print
# How it does: Each object kind has its own render function. Times are shown in the zone recorded with the commit, never the
# host's local zone, and a zero offset can be shown as `Z`
# What data structure it uses: Lists of output lines joined with newlines, and a generator of text blocks for the log

from datetime import datetime, timedelta, timezone

from .commits import format_offset
from .errors import MalformedObject
from .history import traverse

DEFAULT_TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def format_timestamp(epoch_seconds, utc_offset_minutes, timestamp_format=DEFAULT_TIMESTAMP_FORMAT, utc_as_z=True):
    tz = timezone(timedelta(minutes=utc_offset_minutes))
    try:
        moment = datetime.fromtimestamp(epoch_seconds, tz)
    except (ValueError, OverflowError, OSError) as e:
        raise MalformedObject(f"timestamp {epoch_seconds} out of range") from e
    zone = 'Z' if utc_as_z and utc_offset_minutes == 0 else format_offset(utc_offset_minutes)
    return f"{moment.strftime(timestamp_format)} {zone}"


def message_lines(message): # The message split into lines, without the empty line a final newline would add
    if message.endswith('\n'):
        message = message[:-1]
    return message.split('\n') if message else []


def _person(person, label, utc_offset_minutes, timestamp_format, utc_as_z):
    when = format_timestamp(person.epoch_seconds, utc_offset_minutes, timestamp_format, utc_as_z)
    return f"{person.name} {person.email} {label}: {when}"


def render_commit(commit, timestamp_format=DEFAULT_TIMESTAMP_FORMAT, utc_as_z=True):
    """
    Renders a commit the way `cat-file` shows it.
    Both times are shown in the author's zone so the two lines always agree.
    """
    zone = commit.author.utc_offset_minutes
    lines = [f"tree: {commit.tree_id}"]
    if commit.parent_ids:
        lines.append(f"parents: {' | '.join(commit.parent_ids)}")
    lines.append("author: " + _person(commit.author, 'original timestamp', zone, timestamp_format, utc_as_z))
    lines.append("committer: " + _person(commit.committer, 'commit timestamp', zone, timestamp_format, utc_as_z))
    lines.append("commit message:")
    lines.extend(message_lines(commit.message))
    return '\n'.join(lines)


def render_tree(entries):
    return '\n'.join(f"{entry.mode} {entry.id} {entry.name}" for entry in entries)


def render_blob(body):
    return body.decode('utf-8', errors='replace')


def render_log_entry(entry, timestamp_format=DEFAULT_TIMESTAMP_FORMAT, utc_as_z=True): # One block of `peek log` output
    committer = entry.commit.committer
    lines = [f"Commit: {entry.id}{' (merged)' if entry.merged else ''}"]
    lines.append(_person(committer, 'commit timestamp', committer.utc_offset_minutes, timestamp_format, utc_as_z))
    lines.extend(message_lines(entry.commit.message))
    return '\n'.join(lines)


def render_log(git_dir, branch_head, timestamp_format=DEFAULT_TIMESTAMP_FORMAT, utc_as_z=True):
    for entry in traverse(git_dir, branch_head):
        yield render_log_entry(entry, timestamp_format, utc_as_z)
