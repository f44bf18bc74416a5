"""A growable list of slots that may be empty, with an element destructor."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional

__all__ = ["DEFAULT_SIZE", "ArrayList"]

DEFAULT_SIZE = 32

FreeFn = Optional[Callable[[Any], None]]
CompareFn = Callable[[Any, Any], int]


class ArrayList:
    """Ordered slots holding values or None.

    Values that are replaced or deleted are handed to ``free_fn``. The list
    tracks an allocated capacity that grows and shrinks like a reserved buffer.
    """

    def __init__(self, free_fn: FreeFn = None, initial_size: int = DEFAULT_SIZE) -> None:
        if initial_size < 0:
            raise ValueError("initial_size must not be negative")
        self._items: list[Any] = []
        self._size = initial_size
        self._free_fn = free_fn

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._size

    def _release(self, data: Any) -> None:
        if data is not None and self._free_fn is not None:
            self._free_fn(data)

    def _expand(self, needed: int) -> None:
        if needed < self._size:
            return
        self._size = max(self._size * 2, needed)

    @staticmethod
    def _check_index(idx: int) -> None:
        if idx < 0:
            raise IndexError(f"index {idx} is negative")

    def get(self, idx: int) -> Any:
        """Return the value at idx, or None when idx is past the end."""
        if idx < 0 or idx >= len(self._items):
            return None
        return self._items[idx]

    def put(self, idx: int, data: Any) -> None:
        """Set slot idx, freeing any value it held and padding gaps with None."""
        self._check_index(idx)
        self._expand(idx + 1)
        if idx < len(self._items):
            self._release(self._items[idx])
            self._items[idx] = data
            return
        self._items.extend([None] * (idx - len(self._items)))
        self._items.append(data)

    def insert(self, idx: int, data: Any) -> None:
        """Insert at idx, shifting later values; past the end this is put()."""
        self._check_index(idx)
        if idx >= len(self._items):
            self.put(idx, data)
            return
        self._expand(len(self._items) + 1)
        self._items.insert(idx, data)

    def append(self, data: Any) -> None:
        """Add a value at the end."""
        self._expand(len(self._items) + 1)
        self._items.append(data)

    def delete(self, idx: int, count: int) -> None:
        """Remove count values starting at idx, freeing each one."""
        if idx < 0 or count < 0:
            raise IndexError("index and count must not be negative")
        stop = idx + count
        if idx >= len(self._items) or stop > len(self._items):
            raise IndexError(f"range {idx}..{stop} is outside the list")
        for data in self._items[idx:stop]:
            self._release(data)
        del self._items[idx:stop]

    def sort(self, compare: CompareFn) -> None:
        """Sort in place with a three-way comparison function."""
        self._items.sort(key=cmp_to_key(compare))

    def bsearch(self, key: Any, compare: CompareFn) -> Any:
        """Binary-search a sorted list; return the matching value or None."""
        low, high = 0, len(self._items)
        while low < high:
            mid = (low + high) // 2
            item = self._items[mid]
            order = compare(key, item)
            if order < 0:
                high = mid
            elif order > 0:
                low = mid + 1
            else:
                return item
        return None

    def shrink(self, empty_slots: int) -> None:
        """Reserve exactly enough slots for the values plus empty_slots."""
        if empty_slots < 0:
            raise ValueError("empty_slots must not be negative")
        new_size = len(self._items) + empty_slots
        if new_size == self._size:
            return
        if new_size > self._size:
            self._expand(new_size)
            return
        self._size = max(new_size, 1)

    def free(self) -> None:
        """Free every value and empty the list."""
        for data in self._items:
            self._release(data)
        self._items.clear()