"""Whole-file reading, buffered file writing and a simple line logger."""

from __future__ import annotations

import io
import os
import sys
import threading
from pathlib import Path
from typing import BinaryIO

__all__ = ["BUFSIZE", "FileReader", "FileWriter", "Logger"]

#: Size of the write buffer kept by :class:`FileWriter`.
BUFSIZE = 32768


class FileReader:
    """Reads a whole file into memory in one go."""

    def __init__(self) -> None:
        self._data: bytes = b""
        self._open = False

    @property
    def size(self) -> int:
        """Number of bytes read, 0 when nothing is open."""
        return len(self._data)

    @property
    def data(self) -> bytes:
        """The file's contents."""
        return self._data

    @property
    def is_open(self) -> bool:
        """True while a file is held."""
        return self._open

    def open(self, path: str | os.PathLike[str], always: bool = False) -> None:
        """Read the file at ``path``.

        With ``always`` a missing file is created empty; otherwise a missing
        file raises :class:`FileNotFoundError`.
        """
        self.close()
        target = Path(path)
        if always and not target.exists():
            target.touch()
        with target.open("rb") as fh:
            self._data = fh.read()
        self._open = True

    def close(self) -> None:
        """Release the contents read."""
        self._data = b""
        self._open = False

    def __enter__(self) -> FileReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class FileWriter:
    """Writes to a file through a fixed-size buffer."""

    def __init__(self) -> None:
        self._handle: BinaryIO | None = None
        self._buf = bytearray()

    @property
    def is_open(self) -> bool:
        """True while a file is open for writing."""
        return self._handle is not None

    @property
    def buffered(self) -> int:
        """Number of bytes waiting in the buffer."""
        return len(self._buf)

    def open(self, path: str | os.PathLike[str], create: bool = True) -> None:
        """Open ``path`` for writing.

        With ``create`` the file is made anew, emptying any old contents.
        Without it the file must exist and is written from its start,
        keeping whatever lies past the bytes written.
        """
        self.close()
        self._handle = open(path, "wb" if create else "r+b")
        self._buf.clear()

    def close(self) -> None:
        """Flush the buffer and close the file."""
        if self._handle is not None:
            try:
                self.flush()
            finally:
                self._handle.close()
                self._handle = None

    def _require_open(self) -> BinaryIO:
        if self._handle is None:
            raise ValueError("file is not open for writing")
        return self._handle

    def flush(self) -> None:
        """Write the buffer's contents to the file and empty it."""
        handle = self._require_open()
        if self._buf:
            handle.write(self._buf)
            self._buf.clear()

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Write bytes, flushing each time the buffer fills."""
        self._require_open()
        view = memoryview(data).cast("B")
        while BUFSIZE - len(self._buf) <= len(view):
            room = BUFSIZE - len(self._buf)
            self._buf += view[:room]
            view = view[room:]
            self.flush()
        self._buf += view

    def write_byte(self, b: int) -> None:
        """Write a single byte."""
        self._require_open()
        if not 0 <= b <= 255:
            raise ValueError(f"byte value out of range: {b}")
        if BUFSIZE - len(self._buf) <= 1:
            self.flush()
        self._buf.append(b)

    def write_encoded(self, encoding: str, text: str) -> None:
        """Write ``text`` in ``encoding``; characters it cannot hold become ``?``."""
        self._require_open()
        self.write(text.encode(encoding, errors="replace"))

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _default_log_path() -> Path:
    exe = sys.argv[0] if sys.argv and sys.argv[0] else "kitext"
    try:
        return Path(exe).with_suffix(".log")
    except ValueError:
        return Path("kitext.log")


class Logger:
    """Appends lines of UTF-16 text to a log file.

    The first line a process writes to a given file empties it and starts it
    with a byte order mark; later lines are added to the end.
    """

    _started: set[str] = set()
    _lock = threading.Lock()

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else _default_log_path()

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by CR LF."""
        payload = (text + "\r\n").encode("utf-16-le", errors="surrogatepass")
        key = os.path.abspath(self.path)
        with Logger._lock:
            first = key not in Logger._started
            with io.open(self.path, "wb" if first else "ab") as fh:
                if first:
                    fh.write(b"\xff\xfe")
                fh.write(payload)
            Logger._started.add(key)