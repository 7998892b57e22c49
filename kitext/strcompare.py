"""Plain code-point string comparison and single character case mapping."""

from __future__ import annotations

__all__ = [
    "compare",
    "compare_n",
    "compare_ascii_ignore_case",
    "starts_with",
    "copy_n",
    "char_upper",
    "char_lower",
    "is_char_lower",
    "is_compatible_with_codepage",
]


def _code(s: str, i: int) -> int:
    """Code point at ``i``, or 0 past the end of the text."""
    return ord(s[i]) if i < len(s) else 0


def _ascii_lower(code: int) -> int:
    return code | (0x20 if 0x41 <= code <= 0x5A else 0)


def compare(a: str, b: str) -> int:
    """Compare code point by code point; return the difference at the first mismatch.

    A NUL character ends a string, as does the end of the text.
    """
    i = 0
    while _code(a, i) and _code(a, i) == _code(b, i):
        i += 1
    return _code(a, i) - _code(b, i)


def compare_n(a: str, b: str, n: int) -> int:
    """Like :func:`compare`, but look at no more than ``n`` characters.

    A count of 0 places no limit on the comparison.
    """
    if n < 0:
        raise ValueError(f"character count must not be negative, got {n}")
    i = 0
    remaining = n
    while True:
        if n:
            remaining -= 1
            if remaining == 0:
                break
        if not (_code(a, i) and _code(a, i) == _code(b, i)):
            break
        i += 1
    return _code(a, i) - _code(b, i)


def compare_ascii_ignore_case(a: str, b: str) -> int:
    """Compare with ASCII letters folded to lower case; other characters as they are."""
    i = 0
    while _code(a, i) and _ascii_lower(_code(a, i)) == _ascii_lower(_code(b, i)):
        i += 1
    return _ascii_lower(_code(a, i)) - _ascii_lower(_code(b, i))


def starts_with(x: str, y: str) -> bool:
    """Return True if ``y`` is found at the start of ``x``."""
    i = 0
    while _code(x, i) and _code(x, i) == _code(y, i):
        i += 1
    return _code(y, i) == 0


def copy_n(s: str, n: int) -> str:
    """Return at most ``n`` characters of ``s``, stopping at the first NUL."""
    if n < 0:
        raise ValueError(f"character count must not be negative, got {n}")
    head = s[:n]
    nul = head.find("\0")
    return head if nul < 0 else head[:nul]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def char_upper(c: str) -> str:
    """Upper-case one character; keep it when the mapping is not one character."""
    _check_char(c)
    upper = c.upper()
    return upper if len(upper) == 1 else c


def char_lower(c: str) -> str:
    """Lower-case one character; keep it when the mapping is not one character."""
    _check_char(c)
    lower = c.lower()
    return lower if len(lower) == 1 else c


def is_char_lower(c: str) -> bool:
    """Return True if the character is a lower-case letter."""
    _check_char(c)
    return c.islower()


def is_compatible_with_codepage(s: str, encoding: str) -> bool:
    """Return True if ``s`` survives a round trip through ``encoding`` unchanged."""
    if not s:
        return True
    try:
        encoded = s.encode(encoding)
    except UnicodeEncodeError:
        return False
    try:
        decoded = encoded.decode(encoding)
    except UnicodeDecodeError:
        return False
    return decoded == s