"""Growable arrays with explicit capacity management.

Includes a raw fixed-item-size byte array, a fixed-length string array,
a general dynamic array, a sorted array and an auto-extending array.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Optional

NPOS = -1
"""Returned by the ``index_of`` methods when a value is not found."""


class ArrayError(Exception):
    """Raised on out-of-range access and other misuse of the array classes."""


def _check_index(index: int, limit: int) -> int:
    index = operator.index(index)
    if index < 0 or index >= limit:
        raise ArrayError(f"Element with index {index} not found!")
    return index


def _grow_delta(capacity: int) -> int:
    """Growth step for the current capacity: 25% for large arrays."""
    if capacity > 64:
        return capacity // 4
    if capacity > 8:
        return 16
    return 4


class RawArray:
    """Array of untyped items, each exactly ``item_size`` bytes long."""

    def __init__(self, item_size: int = 1) -> None:
        if item_size <= 0:
            raise ArrayError("Error in THArrayRaw: ItemSize cannot be zero!")
        self._item_size = item_size
        self._items: list[bytes] = []
        self._capacity = 0

    @property
    def item_size(self) -> int:
        return self._item_size

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def _pack(self, value: bytes) -> bytes:
        data = bytes(value)[: self._item_size]
        return data.ljust(self._item_size, b"\0")

    def _chunks(self, values: bytes) -> list[bytes]:
        data = bytes(values)
        if len(data) % self._item_size:
            raise ArrayError("Buffer length is not a multiple of the item size!")
        size = self._item_size
        return [data[pos : pos + size] for pos in range(0, len(data), size)]

    def _ensure(self, count: int) -> None:
        if count <= self._capacity:
            return
        self._capacity = max(count, self._capacity + _grow_delta(self._capacity))

    def add(self, value: bytes) -> int:
        """Append one item and return its index."""
        return self.insert(len(self._items), value)

    def add_many(self, values: bytes) -> None:
        """Append every ``item_size`` chunk of ``values``."""
        self.insert_many(len(self._items), values)

    def insert(self, index: int, value: bytes) -> int:
        index = _check_index(index, len(self._items) + 1)
        self._ensure(len(self._items) + 1)
        self._items.insert(index, self._pack(value))
        return index

    def insert_many(self, index: int, values: bytes) -> None:
        index = _check_index(index, len(self._items) + 1)
        chunks = self._chunks(values)
        self._ensure(len(self._items) + len(chunks))
        self._items[index:index] = chunks

    def update(self, index: int, value: bytes) -> None:
        index = _check_index(index, len(self._items))
        self._items[index] = self._pack(value)

    def update_many(self, index: int, values: bytes) -> None:
        chunks = self._chunks(values)
        if not chunks:
            return
        index = _check_index(index, len(self._items))
        _check_index(index + len(chunks) - 1, len(self._items))
        self._items[index : index + len(chunks)] = chunks

    def delete(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items down."""
        index = _check_index(index, len(self._items))
        self._items.pop(index)

    def get(self, index: int) -> bytes:
        return self._items[_check_index(index, len(self._items))]

    def hold(self) -> None:
        """Shrink capacity to the current number of items."""
        self.set_capacity(len(self._items))

    def zero(self) -> None:
        blank = bytes(self._item_size)
        self._items = [blank] * len(self._items)

    def set_capacity(self, value: int) -> None:
        if value < 0:
            raise ArrayError("Capacity cannot be negative!")
        self._capacity = value
        del self._items[value:]

    def add_fill_values(self, count: int) -> None:
        """Append ``count`` zero-filled items."""
        self._ensure(len(self._items) + count)
        self._items.extend([bytes(self._item_size)] * count)

    def swap(self, index1: int, index2: int) -> None:
        i = _check_index(index1, len(self._items))
        j = _check_index(index2, len(self._items))
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def clear(self) -> None:
        """Drop all items but keep the allocated capacity."""
        self._items.clear()

    def clear_mem(self) -> None:
        """Drop all items and release the capacity."""
        self._items.clear()
        self._capacity = 0


class FixedStringArray:
    """Array of strings that are all exactly ``length`` characters long.

    Shorter strings are padded with NUL characters, longer ones truncated.
    """

    _ENCODING = "latin-1"

    def __init__(self, length: int) -> None:
        self._data = RawArray(length)

    @property
    def length(self) -> int:
        return self._data.item_size

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> str:
        return self._data.get(index).decode(self._ENCODING)

    def __setitem__(self, index: int, value: str) -> None:
        self._data.update(index, value.encode(self._ENCODING))

    def add(self, value: str) -> int:
        return self._data.add(value.encode(self._ENCODING))

    def insert(self, index: int, value: str) -> int:
        return self._data.insert(index, value.encode(self._ENCODING))

    def delete(self, index: int) -> None:
        self._data.delete(index)

    def add_fill_values(self, count: int) -> None:
        self._data.add_fill_values(count)

    def add_chars(self, value: bytes) -> int:
        """Append raw characters given as bytes and return the new index."""
        return self._data.add(value)

    def swap(self, index1: int, index2: int) -> None:
        self._data.swap(index1, index2)

    def reverse(self) -> None:
        count = len(self._data)
        for i in range(count // 2):
            self._data.swap(i, count - 1 - i)

    def clear(self) -> None:
        self._data.clear()


class DynArray:
    """Dynamic array with explicit capacity and cheap removal at the front.

    ``default`` is the value placed in slots created by filling or zeroing.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None, default: Any = None) -> None:
        self._items: list[Any] = []
        self._capacity = 0
        self._front = 0  # free slots left before the first item
        self._default = default
        for item in items or ():
            self.add(item)

    # capacity bookkeeping -------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    def _enough(self, count: int) -> bool:
        return self._front + count <= self._capacity

    def _grow_to(self, count: int) -> None:
        if self._enough(count):
            return
        delta = _grow_delta(self._capacity)
        if self._front + count > self._capacity + delta:
            self.set_capacity(count)
        else:
            self.set_capacity(self._capacity + delta)

    def _ensure(self, count: int) -> None:
        if not self._enough(count):
            self._grow_to(count)

    # sequence protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[_check_index(index, len(self._items))]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[_check_index(index, len(self._items))] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynArray):
            return NotImplemented
        return self._items == other._items

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DynArray):
            return NotImplemented
        for mine, theirs in zip(self._items, other._items):
            if mine > theirs:
                return True
            if theirs > mine:
                return False
        return len(self._items) > len(other._items)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # modification --------------------------------------------------------

    def add(self, value: Any) -> int:
        """Append ``value`` and return its index."""
        return self.insert(len(self._items), value)

    def insert(self, index: int, value: Any) -> int:
        count = len(self._items)
        index = _check_index(index, count + 1)
        self._ensure(count + 1)
        if index < count // 2 and self._front > 0:
            self._front -= 1
        self._items.insert(index, value)
        return index

    def delete(self, index: int) -> None:
        count = len(self._items)
        index = _check_index(index, count)
        if index < count // 2:
            self._front += 1
        del self._items[index]

    def index_of(
        self,
        value: Any,
        start: int = 0,
        key: Optional[Callable[[Any], Any]] = None,
    ) -> int:
        """Index of the first item equal to ``value`` from ``start``, or ``NPOS``.

        With ``key``, items are compared by ``key(item) == key(value)``.
        """
        if key is None:
            for index in range(max(start, 0), len(self._items)):
                if self._items[index] == value:
                    return index
            return NPOS
        wanted = key(value)
        for index in range(max(start, 0), len(self._items)):
            if key(self._items[index]) == wanted:
                return index
        return NPOS

    def add_fill_values(self, count: int) -> None:
        """Append ``count`` copies of the default value."""
        self._ensure(len(self._items) + count)
        self._items.extend([self._default] * count)

    def push(self, value: Any) -> None:
        self.add(value)

    def pop(self) -> Any:
        _check_index(0, len(self._items))
        return self._items.pop()

    def pop_front(self) -> Any:
        _check_index(0, len(self._items))
        self._front += 1
        return self._items.pop(0)

    def last(self) -> Any:
        if not self._items:
            raise ArrayError("Element with index -1 not found!")
        return self._items[-1]

    def swap(self, index1: int, index2: int) -> None:
        i = _check_index(index1, len(self._items))
        j = _check_index(index2, len(self._items))
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def reverse(self, end_index: Optional[int] = None) -> None:
        """Reverse the array, or only its items up to ``end_index`` inclusive."""
        count = len(self._items)
        if count < 2:
            return
        if end_index is None or end_index >= count:
            end_index = count - 1
        if end_index <= 0:
            return
        self._items[: end_index + 1] = self._items[end_index::-1]

    def zero(self) -> None:
        """Replace every item with the default value."""
        self._items = [self._default] * len(self._items)

    def clear(self) -> None:
        """Drop all items but keep the allocated capacity."""
        self._items.clear()

    def clear_mem(self) -> None:
        """Drop all items and release the capacity."""
        self._items.clear()
        self._capacity = 0
        self._front = 0

    def hold(self) -> None:
        """Shrink capacity to the current number of items."""
        self.set_capacity(len(self._items))

    def set_capacity(self, value: int) -> None:
        if value < 0:
            raise ArrayError("Capacity cannot be negative!")
        self._capacity = value
        self._front = 0
        del self._items[value:]

    def set_count(self, value: int) -> None:
        """Resize to ``value`` items, filling new slots with the default."""
        if value < 0:
            raise ArrayError("Count cannot be negative!")
        if value > self._capacity:
            self._grow_to(value)
        count = len(self._items)
        if value < count:
            del self._items[value:]
        else:
            self._items.extend([self._default] * (value - count))


class SortedArray(DynArray):
    """Array kept in ascending order; lookups use binary search.

    ``key`` maps items to the values they are ordered and compared by.
    """

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        key: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self._key: Callable[[Any], Any] = key if key is not None else (lambda item: item)
        super().__init__(items)

    def _search(self, value: Any, start: int) -> int:
        """Index of a match, or ``-(insertion point + 1)`` when absent."""
        count = len(self._items)
        if start < 0 or (start >= count and count != 0):
            raise ArrayError(
                f"Error in THArraySorted: Start index {start} is out of bounds!"
            )
        if count == 0:
            return -1
        wanted = self._key(value)
        left, remaining = start, count - start
        while remaining > 0:
            step = remaining // 2
            middle = left + step
            current = self._key(self._items[middle])
            if wanted > current:
                left = middle + 1
                remaining -= step + 1
            elif wanted < current:
                remaining = step
            else:
                return middle
        if left < count and wanted == self._key(self._items[left]):
            return left
        return -(left + 1)

    def add(self, value: Any) -> int:
        """Insert ``value`` at its sorted position and return that position."""
        found = self._search(value, 0)
        position = found if found >= 0 else -(found + 1)
        DynArray.insert(self, position, value)
        return position

    def index_of(self, value: Any, start: int = 0) -> int:  # type: ignore[override]
        found = self._search(value, start)
        return found if found >= 0 else NPOS

    def _unsupported(self, operation: str) -> TypeError:
        return TypeError(f"{operation} is not supported on a sorted array")

    def __setitem__(self, index: int, value: Any) -> None:
        raise self._unsupported("assignment by index")

    def insert(self, index: int, value: Any) -> int:
        raise self._unsupported("insert")

    def push(self, value: Any) -> None:
        raise self._unsupported("push")

    def pop(self) -> Any:
        raise self._unsupported("pop")

    def pop_front(self) -> Any:
        raise self._unsupported("pop_front")

    def swap(self, index1: int, index2: int) -> None:
        raise self._unsupported("swap")

    def reverse(self, end_index: Optional[int] = None) -> None:
        raise self._unsupported("reverse")

    def add_fill_values(self, count: int) -> None:
        raise self._unsupported("add_fill_values")


class AutoArray(DynArray):
    """Array that grows on access past its end instead of raising.

    New slots are filled with the default value.
    """

    def _ensure_index(self, index: int) -> int:
        index = operator.index(index)
        if index >= len(self._items):
            self.add_fill_values(index - len(self._items) + 1)
        return index

    def __getitem__(self, index: int) -> Any:
        return super().__getitem__(self._ensure_index(index))

    def __setitem__(self, index: int, value: Any) -> None:
        super().__setitem__(self._ensure_index(index), value)