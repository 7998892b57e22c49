"""Settings stored in an INI file, read and written key by key."""

from __future__ import annotations

import getpass
import re
import struct
import sys
from pathlib import Path

from kitext.numconv import parse_int
from kitext.strcompare import is_compatible_with_codepage

__all__ = ["CODEPAGE", "encode_path", "decode_path", "IniFile"]

#: Code page a path must fit to be stored without escaping.
CODEPAGE = "cp1252"

_SECTION_MAX = 63
_HEX = "0123456789abcdef"
_LEADING_INT = re.compile(r"[+-]?\d+")

Rect = tuple[int, int, int, int]


def _utf16_units(s: str) -> list[int]:
    data = s.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(data) // 2}H", data))


def _from_utf16_units(units: list[int]) -> str:
    data = struct.pack(f"<{len(units)}H", *units)
    return data.decode("utf-16-le", "surrogatepass")


def _hex_digit(unit: int) -> int | None:
    ch = chr(unit)
    if "0" <= ch <= "9":
        return unit - ord("0")
    if "A" <= ch <= "F":
        return unit - ord("A") + 10
    if "a" <= ch <= "f":
        return unit - ord("a") + 10
    return None


def encode_path(value: str) -> str:
    """Return the stored form of a path.

    A path that fits :data:`CODEPAGE` is stored as it is. Otherwise it is
    prefixed with ``#`` and every UTF-16 unit above 127, and every ``%``,
    is written as ``%`` followed by four lower-case hex digits.
    """
    if is_compatible_with_codepage(value, CODEPAGE):
        return value
    parts = ["#"]
    for unit in _utf16_units(value):
        if unit > 127 or unit == ord("%"):
            parts.append("%" + "".join(_HEX[(unit >> shift) & 0xF] for shift in (12, 8, 4, 0)))
        else:
            parts.append(chr(unit))
    return "".join(parts)


def decode_path(value: str) -> str:
    """Return the path a stored value stands for; the inverse of :func:`encode_path`."""
    if not value or value[0] != "#":
        return value
    units = _utf16_units(value)
    out: list[int] = []
    i = 1
    while i < len(units):
        v = units[i]
        if v == ord("%") and i + 4 < len(units):
            for unit in units[i + 1:i + 5]:
                digit = _hex_digit(unit)
                if digit is not None:
                    v = (16 * v + digit) & 0xFFFF
            i += 4
        out.append(v)
        i += 1
    return _from_utf16_units(out)


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _default_ini_path() -> Path:
    exe = sys.argv[0] if sys.argv and sys.argv[0] else "kitext"
    try:
        return Path(exe).with_suffix(".ini")
    except ValueError:
        return Path("kitext.ini")


class IniFile:
    """Reads and writes keys in one section of an INI file.

    The file is read on every lookup and rewritten on every change, so
    several objects may share one file.
    """

    def __init__(self, path: str | Path | None = None, section: str = "Default") -> None:
        self.path = Path(path) if path is not None else _default_ini_path()
        self.encoding = "utf-8"
        self.section = ""
        self.set_section(section)

    @property
    def name(self) -> str:
        """The file name as text."""
        return str(self.path)

    # -- sections ---------------------------------------------------------

    def set_section(self, section: str) -> None:
        """Make ``section`` the one keys are read from and written to."""
        self.section = section[:_SECTION_MAX]

    def set_section_as_user_name(self) -> None:
        """Use the login name as the section, or ``Default`` if it is unknown."""
        try:
            user = getpass.getuser()
        except Exception:
            user = ""
        self.set_section(user or "Default")

    def set_section_as_user_name_if_not_shared(self, section: str) -> bool:
        """Use ``section`` if it is enabled, else the user's own; return whether shared."""
        shared = self.has_section_enabled(section)
        if shared:
            self.set_section(section)
        else:
            self.set_section_as_user_name()
        return shared

    def has_section_enabled(self, section: str) -> bool:
        """Return True if ``section`` holds a non-zero ``Enable`` key."""
        return self._int_value(section, "Enable", 0) != 0

    # -- file access ------------------------------------------------------

    def _read_lines(self) -> list[str]:
        try:
            text = self.path.read_text(encoding=self.encoding, errors="replace")
        except FileNotFoundError:
            return []
        return text.splitlines()

    def _write_lines(self, lines: list[str]) -> None:
        text = "".join(line + "\n" for line in lines)
        self.path.write_text(text, encoding=self.encoding)

    @staticmethod
    def _section_bounds(lines: list[str], section: str) -> tuple[int, int] | None:
        start = None
        wanted = section.strip().lower()
        for idx, line in enumerate(lines):
            stripped = line.strip()
            if stripped.startswith("[") and "]" in stripped:
                if start is not None:
                    return start, idx
                if stripped[1:stripped.index("]")].strip().lower() == wanted:
                    start = idx
        return None if start is None else (start, len(lines))

    @staticmethod
    def _key_index(lines: list[str], start: int, end: int, key: str) -> int | None:
        wanted = key.strip().lower()
        for idx in range(start + 1, end):
            line = lines[idx]
            if line.lstrip().startswith(";") or "=" not in line:
                continue
            if line.split("=", 1)[0].strip().lower() == wanted:
                return idx
        return None

    def _raw_value(self, section: str, key: str) -> str | None:
        lines = self._read_lines()
        bounds = self._section_bounds(lines, section)
        if bounds is None:
            return None
        idx = self._key_index(lines, *bounds, key)
        if idx is None:
            return None
        return _unquote(lines[idx].split("=", 1)[1])

    def _int_value(self, section: str, key: str, default: int) -> int:
        raw = self._raw_value(section, key)
        if raw is None:
            return default
        match = _LEADING_INT.match(raw.strip())
        return int(match.group()) if match else 0

    def _write_value(self, section: str, key: str, value: str | None) -> None:
        lines = self._read_lines()
        bounds = self._section_bounds(lines, section)
        if bounds is None:
            if value is None:
                return
            if lines and lines[-1].strip():
                lines.append("")
            lines.extend([f"[{section}]", f"{key}={value}"])
        else:
            start, end = bounds
            idx = self._key_index(lines, start, end, key)
            if idx is not None:
                if value is None:
                    del lines[idx]
                else:
                    lines[idx] = f"{key}={value}"
            elif value is not None:
                insert_at = start + 1
                for pos in range(start + 1, end):
                    if lines[pos].strip():
                        insert_at = pos + 1
                lines.insert(insert_at, f"{key}={value}")
        self._write_lines(lines)

    # -- reading ----------------------------------------------------------

    def get_int(self, key: str, default: int) -> int:
        """Return the leading integer of a value; ``default`` if the key is absent."""
        return self._int_value(self.section, key, default)

    def get_bool(self, key: str, default: bool) -> bool:
        """Return True if the value's integer is non-zero."""
        return self.get_int(key, int(bool(default))) != 0

    def get_rect(self, key: str, default: Rect) -> Rect:
        """Return a ``left,top,right,bottom`` value; missing parts read as 0."""
        raw = self.get_str(key, "")
        if not raw:
            return tuple(default)
        parts = raw.split(",", 3)
        parts += [""] * (4 - len(parts))
        left, top, right, bottom = (parse_int(p) for p in parts)
        return left, top, right, bottom

    def get_str(self, key: str, default: str | None) -> str:
        """Return the text of a key in the current section."""
        return self.get_str_in_section(key, self.section, default)

    def get_str_in_section(self, key: str, section: str, default: str | None) -> str:
        """Return the text of a key in ``section``, or ``default``."""
        raw = self._raw_value(section, key)
        if raw is None:
            return default or ""
        return raw

    def get_path(self, key: str, default: str | None) -> str:
        """Return a path stored with :meth:`put_path`."""
        return decode_path(self.get_str(key, default))

    # -- writing ----------------------------------------------------------

    def put_int(self, key: str, value: int) -> bool:
        """Store an integer."""
        return self.put_str(key, str(int(value)))

    def put_bool(self, key: str, value: bool) -> bool:
        """Store a flag as ``1`` or ``0``."""
        return self.put_str(key, "1" if value else "0")

    def put_rect(self, key: str, rect: Rect) -> bool:
        """Store a rectangle as ``left,top,right,bottom``."""
        left, top, right, bottom = rect
        return self.put_str(key, f"{int(left)},{int(top)},{int(right)},{int(bottom)}")

    def put_str(self, key: str, value: str | None) -> bool:
        """Store text in the current section; None removes the key."""
        return self.put_str_in_section(key, self.section, value)

    def put_str_in_section(self, key: str, section: str, value: str | None) -> bool:
        """Store text in ``section``; None removes the key.

        Text with a double quote at each end gets another pair, since one
        pair is stripped when the value is read back.
        """
        if value and value[0] == '"' and value[-1] == '"':
            value = f'"{value}"'
        self._write_value(section, key, value)
        return True

    def put_path(self, key: str, value: str) -> bool:
        """Store a path, escaping it when it does not fit :data:`CODEPAGE`."""
        return self.put_str(key, encode_path(value))