"""File name handling: splitting names apart, querying files and listing matches."""

from __future__ import annotations

import fnmatch
import os
import stat
from typing import Iterator

__all__ = [
    "name",
    "ext",
    "ext_all",
    "body",
    "body_all",
    "with_backslash",
    "dir_only",
    "drive_only",
    "compact",
    "is_file",
    "is_directory",
    "exists",
    "is_read_only",
    "last_write_time",
    "find_first",
    "find_files",
]

_SEPARATORS = ("\\", "/")
_ELLIPSIS = "..."


def _last_separator(path: str) -> int:
    return max(path.rfind("\\"), path.rfind("/"))


def name(path: str) -> str:
    """Return the part after the last slash or backslash."""
    return path[_last_separator(path) + 1:]


def ext(path: str) -> str:
    """Return the text after the last dot of the name, or '' if it has none."""
    base = name(path)
    dot = base.rfind(".")
    return "" if dot < 0 else base[dot + 1:]


def ext_all(path: str) -> str:
    """Return the text after the first dot of the name, or '' if it has none."""
    base = name(path)
    dot = base.find(".")
    return "" if dot < 0 else base[dot + 1:]


def body(path: str) -> str:
    """Return the name without its last extension."""
    base = name(path)
    dot = base.rfind(".")
    return base if dot < 0 else base[:dot]


def body_all(path: str) -> str:
    """Return the name without everything from its first dot."""
    base = name(path)
    dot = base.find(".")
    return base if dot < 0 else base[:dot]


def with_backslash(path: str, add: bool) -> str:
    """Ensure a trailing separator (``add``) or remove one (not ``add``).

    A separator is added as a backslash, and never to an empty path.
    """
    if path and path[-1] in _SEPARATORS:
        return path if add else path[:-1]
    if add and path:
        return path + "\\"
    return path


def dir_only(path: str) -> str:
    """Return the directory part, keeping its trailing separator."""
    return path[:_last_separator(path) + 1]


def drive_only(path: str) -> str:
    """Return the drive or root: everything up to the first separator from index 2."""
    if len(path) > 2:
        for i in range(2, len(path)):
            if path[i] in _SEPARATORS:
                return path[:i + 1]
    return path


def compact(path: str, limit: int) -> str:
    """Shorten ``path`` to ``limit`` characters by putting ``...`` in its middle.

    The file name is kept whole where room allows; otherwise its head is cut.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if len(path) <= limit:
        return path
    fn = name(path)
    remaining = limit - len(fn)
    head = path[:max(remaining - 3, 3)]
    if remaining >= 6:
        result = head + _ELLIPSIS + fn
    elif remaining >= 3:
        result = (head + _ELLIPSIS)[:remaining] + fn
    else:
        if limit < 6:
            raise ValueError(f"limit {limit} is too small to compact {path!r}")
        result = head + _ELLIPSIS + fn[6 - remaining:][:limit - 6]
    return result[:limit]


def is_file(path: str) -> bool:
    """Return True for an existing path that is not a directory and has no trailing separator."""
    if not path or path[-1] in _SEPARATORS:
        return False
    return os.path.exists(path) and not os.path.isdir(path)


def is_directory(path: str) -> bool:
    """Return True if ``path`` is an existing directory."""
    return os.path.isdir(path)


def exists(path: str) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    return os.path.exists(path)


def is_read_only(path: str) -> bool:
    """Return True if ``path`` exists and its owner write permission is off."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return not mode & stat.S_IWUSR


def last_write_time(path: str) -> float:
    """Return the modification time in seconds since the epoch, or 0.0 if unknown."""
    try:
        return os.stat(path).st_mtime
    except OSError:
        return 0.0


def find_files(pattern: str) -> Iterator[str]:
    """Yield, sorted, the entry names in the pattern's directory that match its last part.

    The entries ``.`` and ``..`` are never yielded.
    """
    directory = dir_only(pattern) or "."
    wildcard = name(pattern)
    try:
        entries = sorted(entry.name for entry in os.scandir(directory))
    except OSError:
        return
    for entry in entries:
        if entry in (".", ".."):
            continue
        if fnmatch.fnmatch(entry, wildcard):
            yield entry


def find_first(pattern: str) -> str | None:
    """Return the first entry name matching ``pattern``, or None."""
    return next(find_files(pattern), None)