"""A gap buffer: a sequence with cheap repeated edits at one place."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar, overload

__all__ = ["GapBuffer"]

T = TypeVar("T")

_MIN_CAPACITY = 16
_SHRINK_THRESHOLD = 128


class GapBuffer(Generic[T]):
    """Random-access sequence whose inserts and removals at the gap move no data.

    Elements are kept in one list with a gap of free slots. Editing at the
    gap position only moves the gap's borders; editing elsewhere first moves
    the gap there.
    """

    def __init__(self, alloc_size: int = 32) -> None:
        capacity = max(int(alloc_size), _MIN_CAPACITY)
        self._buf: list[T | None] = [None] * capacity
        self._gs = 0
        self._ge = capacity

    # -- internal helpers -------------------------------------------------

    @property
    def capacity(self) -> int:
        """Number of slots held, used and free."""
        return len(self._buf)

    def _gap(self) -> int:
        return self._ge - self._gs

    def _physical(self, i: int) -> int:
        return i if i < self._gs else i + self._gap()

    def _element_index(self, i: int) -> int:
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"index {i} out of range for length {n}")
        return i

    def _position(self, i: int) -> int:
        n = len(self)
        if not 0 <= i <= n:
            raise IndexError(f"position {i} out of range for length {n}")
        return i

    def _check_range(self, i: int, count: int) -> None:
        n = len(self)
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if i < 0 or i + count > n:
            raise IndexError(f"range {i}..{i + count} out of range for length {n}")

    def _move_gap(self, i: int) -> None:
        buf, gs, ge = self._buf, self._gs, self._ge
        if i < gs:
            shift = gs - i
            buf[ge - shift:ge] = buf[i:gs]
            vacated_end = min(gs, ge - shift)
            buf[i:vacated_end] = [None] * (vacated_end - i)
            self._ge = ge - shift
        elif i > gs:
            j = i + (ge - gs)
            count = j - ge
            buf[gs:gs + count] = buf[ge:j]
            vacated_start = max(ge, gs + count)
            buf[vacated_start:j] = [None] * (j - vacated_start)
            self._ge = j
        self._gs = i

    def _reallocate(self, new_capacity: int) -> None:
        buf, gs, ge = self._buf, self._gs, self._ge
        tail = len(buf) - ge
        self._buf = buf[:gs] + [None] * (new_capacity - gs - tail) + buf[ge:]
        self._ge = new_capacity - tail

    # -- editing ----------------------------------------------------------

    def insert(self, i: int, x: T) -> None:
        """Insert one element before position ``i``."""
        i = self._position(i)
        if self._gs + 1 >= self._ge:
            self._reallocate(len(self._buf) * 2)
        self._move_gap(i)
        self._buf[self._gs] = x
        self._gs += 1

    def insert_many(self, i: int, items: Iterable[T]) -> None:
        """Insert several elements, in order, before position ``i``."""
        i = self._position(i)
        new_items = list(items)
        count = len(new_items)
        if self._gap() <= count:
            capacity = len(self._buf)
            self._reallocate(max(capacity + count + 1, capacity * 2))
        self._move_gap(i)
        self._buf[self._gs:self._gs + count] = new_items
        self._gs += count

    def append(self, x: T) -> None:
        """Add one element at the end."""
        self.insert(len(self), x)

    def extend(self, items: Iterable[T]) -> None:
        """Add several elements at the end."""
        self.insert_many(len(self), items)

    def remove(self, i: int, count: int = 1) -> None:
        """Remove ``count`` elements starting at position ``i``."""
        self._check_range(i, count)
        buf = self._buf
        if i <= self._gs <= i + count:
            front = self._gs - i
            buf[i:self._gs] = [None] * front
            count -= front
            self._gs = i
        else:
            self._move_gap(i)
        buf[self._ge:self._ge + count] = [None] * count
        self._ge += count

        size = len(self)
        if len(buf) > _SHRINK_THRESHOLD and size <= len(buf) >> 2:
            self._reallocate(max(size, _MIN_CAPACITY))

    def clear(self) -> None:
        """Remove every element."""
        self.remove(0, len(self))

    def remove_to_tail(self, i: int) -> None:
        """Remove every element from position ``i`` to the end."""
        i = self._position(i)
        self.remove(i, len(self) - i)

    # -- reading ----------------------------------------------------------

    def copy(self, i: int, count: int) -> list[T]:
        """Return ``count`` elements starting at position ``i`` as a list."""
        self._check_range(i, count)
        buf, gs = self._buf, self._gs
        out: list = []
        if i < gs:
            take = min(count, gs - i)
            out.extend(buf[i:i + take])
            i += take
            count -= take
        start = i + self._gap()
        out.extend(buf[start:start + count])
        return out

    def copy_to_tail(self, i: int) -> list[T]:
        """Return the elements from position ``i`` to the end as a list."""
        i = self._position(i)
        return self.copy(i, len(self) - i)

    def __len__(self) -> int:
        return len(self._buf) - self._gap()

    @overload
    def __getitem__(self, i: int) -> T: ...

    @overload
    def __getitem__(self, i: slice) -> list[T]: ...

    def __getitem__(self, i):
        if isinstance(i, slice):
            return list(self)[i]
        return self._buf[self._physical(self._element_index(i))]

    def __setitem__(self, i: int, value: T) -> None:
        self._buf[self._physical(self._element_index(i))] = value

    def __iter__(self) -> Iterator[T]:
        head = self._buf[:self._gs]
        tail = self._buf[self._ge:]
        yield from head
        yield from tail

    def __repr__(self) -> str:
        return f"GapBuffer({list(self)!r})"