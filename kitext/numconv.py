"""Integer to text conversions and lenient text to integer parsing."""

from __future__ import annotations

__all__ = [
    "int_to_str",
    "ulong_to_str",
    "ptr_to_hex",
    "hex_to_ulong",
    "octal_to_ulong",
    "parse_int",
    "parse_ulong",
]

_ULONG_BITS = 32
_ULONG_MASK = (1 << _ULONG_BITS) - 1


def _check_unsigned(n: int) -> int:
    n = int(n)
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return n


def int_to_str(n: int) -> str:
    """Return the decimal text of a signed integer."""
    return str(int(n))


def ulong_to_str(n: int) -> str:
    """Return the decimal text of an unsigned integer."""
    return str(_check_unsigned(n))


def ptr_to_hex(n: int) -> str:
    """Return the upper-case hexadecimal text of an unsigned integer, without prefix."""
    return format(_check_unsigned(n), "X")


def hex_to_ulong(s: str) -> int:
    """Read hexadecimal digits until a character below '0' or the end of the text.

    Digits beyond '9' are read as letters: up to 'F' relative to 'A', otherwise
    relative to 'a'. The result wraps to an unsigned 32-bit value.
    """
    value = 0
    for ch in s:
        if ch < "0":
            break
        if ch <= "9":
            digit = ord(ch) - ord("0")
        elif ch <= "F":
            digit = ord(ch) + 10 - ord("A")
        else:
            digit = ord(ch) + 10 - ord("a")
        value = ((value << 4) | (digit & _ULONG_MASK)) & _ULONG_MASK
    return value


def octal_to_ulong(s: str) -> int:
    """Read octal digits until a character below '0' or the end of the text.

    The result wraps to an unsigned 32-bit value.
    """
    value = 0
    for ch in s:
        if ch < "0":
            break
        digit = ord(ch) - ord("0")
        value = ((value << 3) | (digit & _ULONG_MASK)) & _ULONG_MASK
    return value


def _digits_value(s: str) -> int | None:
    value = 0
    for ch in s:
        if not "0" <= ch <= "9":
            return None
        value = value * 10 + (ord(ch) - ord("0"))
    return value


def parse_int(s: str) -> int:
    """Parse an optionally signed decimal integer; any stray character yields 0."""
    negative = s.startswith("-")
    if negative or s.startswith("+"):
        s = s[1:]
    value = _digits_value(s)
    if value is None:
        return 0
    return -value if negative else value


def parse_ulong(s: str) -> int:
    """Parse an unsigned decimal integer; any non-digit character yields 0."""
    value = _digits_value(s)
    return 0 if value is None else value