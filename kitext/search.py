"""Boyer-Moore style forward and backward text search."""

from __future__ import annotations

from enum import Enum

from kitext.strcompare import char_upper

__all__ = ["Comparison", "BMSearch", "BMSearchRev", "NSearch", "NSearchRev"]


class Comparison(Enum):
    """How characters are compared during a search."""

    CASE_SENSITIVE = "case_sensitive"
    IGNORE_CASE = "ignore_case"

    def map(self, c: str) -> str:
        """Return the form of ``c`` under which characters are compared."""
        if self is Comparison.CASE_SENSITIVE:
            return c
        if ord(c) < 128:
            return c.upper() if "a" <= c <= "z" else c
        return char_upper(c)

    def equal(self, a: str, b: str) -> bool:
        """Return True if ``a`` and ``b`` match under this comparison."""
        if self is Comparison.CASE_SENSITIVE:
            return a == b
        return self.map(a) == self.map(b)


def _char_at(text: str, k: int) -> str | None:
    return text[k] if k < len(text) else None


class BMSearch:
    """Forward search for a fixed key."""

    def __init__(self, key: str, policy: Comparison = Comparison.CASE_SENSITIVE) -> None:
        self.key = key
        self.policy = policy
        self._last = {policy.map(ch): i for i, ch in enumerate(key)}

    def search(self, text: str) -> int:
        """Return the index of the first match in ``text``, or -1."""
        key, policy = self.key, self.policy
        keylen = len(key)
        end = len(text) - keylen
        i = 0
        while i <= end:
            j = keylen - 1
            while j >= 0 and policy.equal(key[j], text[i + j]):
                j -= 1
            if j < 0:
                return i
            t = self._last.get(policy.map(text[i + j]), -1)
            i += j - t if j > t else 1
        return -1


class BMSearchRev:
    """Backward search for a fixed key."""

    def __init__(self, key: str, policy: Comparison = Comparison.CASE_SENSITIVE) -> None:
        self.key = key
        self.policy = policy
        self._first: dict[str, int] = {}
        for i, ch in enumerate(key):
            self._first.setdefault(policy.map(ch), i)

    def search(self, text: str) -> int:
        """Return the index of the last match in ``text``, or -1.

        A match that ends exactly at the end of the text is not reported.
        """
        return self._search(text, len(text))

    def _search(self, text: str, length: int) -> int:
        key, policy = self.key, self.policy
        keylen = len(key)
        i = length - keylen - 1
        while i >= 0:
            j = 0
            while j < keylen:
                ch = _char_at(text, i + j)
                if ch is None or not policy.equal(key[j], ch):
                    break
                j += 1
            if j >= keylen:
                return i
            ch = _char_at(text, i + j)
            t = -1 if ch is None else self._first.get(policy.map(ch), -1)
            if t == -1:
                t = keylen
            i -= t - j if t > j else 1
        return -1


class NSearch:
    """Forward search from a start position, reporting the matched span."""

    def __init__(self, key: str, policy: Comparison = Comparison.CASE_SENSITIVE) -> None:
        self._searcher = BMSearch(key, policy)

    def search(self, text: str, start: int) -> tuple[int, int] | None:
        """Return ``(begin, end)`` of the first match at or after ``start``, or None."""
        n = self._searcher.search(text[start:])
        if n < 0:
            return None
        begin = start + n
        return begin, begin + len(self._searcher.key)


class NSearchRev:
    """Backward search from a start position, reporting the matched span."""

    def __init__(self, key: str, policy: Comparison = Comparison.CASE_SENSITIVE) -> None:
        self._searcher = BMSearchRev(key, policy)

    def search(self, text: str, start: int) -> tuple[int, int] | None:
        """Return ``(begin, end)`` of the last match starting before ``start``, or None."""
        keylen = len(self._searcher.key)
        n = self._searcher._search(text, start + keylen)
        if n < 0:
            return None
        return n, n + keylen