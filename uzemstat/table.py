"""Keyed tables: a sorted one with binary search and an unsorted sequence one."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
T = TypeVar("T")

_MISSING = object()


@dataclass
class TableItem(Generic[K, T]):
    """A key together with the data stored under it."""

    key: K
    data: T


class _SequenceTable(Generic[K, T]):
    """Storage and lookup helpers shared by tables kept as a list of items."""

    def __init__(self) -> None:
        self._items: list[TableItem[K, T]] = []

    def _find_item(self, key: K) -> TableItem[K, T] | None:
        return next((item for item in self._items if item.key == key), None)

    def _require_item(self, key: K) -> TableItem[K, T]:
        item = self._find_item(key)
        if item is None:
            raise KeyError(f"no such key in the table: {key!r}")
        return item

    def _lookup(self, key: K, default: Any) -> Any:
        item = self._find_item(key)
        return default if item is None else item.data

    def _pop(self, key: K) -> T:
        item = self._require_item(key)
        self._items.remove(item)
        return item.data

    def _pairs(self) -> Iterator[tuple[K, T]]:
        return ((item.key, item.data) for item in self._items)

    def _equals(self, other: object) -> bool:
        # Every item of the other table must be found here with equal data.
        if type(other) is not type(self):
            return NotImplemented
        return all(
            self._lookup(key, _MISSING) == data
            for key, data in other._pairs()  # type: ignore[attr-defined]
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._pairs())!r})"


class SortedTable(_SequenceTable[K, T]):
    """Table whose items are kept ordered by key and searched by bisection."""

    def _index_of(self, key: K) -> tuple[int, bool]:
        keys = [item.key for item in self._items]
        index = bisect_left(keys, key)
        found = index < len(keys) and keys[index] == key
        return index, found

    def _find_item(self, key: K) -> TableItem[K, T] | None:
        index, found = self._index_of(key)
        return self._items[index] if found else None

    def insert(self, key: K, data: T) -> None:
        """Insert data under key at its sorted place; raise KeyError if key exists."""
        index, found = self._index_of(key)
        if found:
            raise KeyError(f"key already exists: {key!r}")
        self._items.insert(index, TableItem(key, data))

    def find(self, key: K) -> T:
        """Return the data stored under key; raise KeyError if absent."""
        return self._require_item(key).data

    def get(self, key: K, default: Any = None) -> Any:
        """Return the data stored under key, or default if absent."""
        return self._lookup(key, default)

    def remove(self, key: K) -> T:
        """Remove key from the table and return its data; raise KeyError if absent."""
        return self._pop(key)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def items(self) -> Iterator[tuple[K, T]]:
        """Yield (key, data) pairs in key order."""
        return self._pairs()

    def values(self) -> Iterator[T]:
        """Yield stored data in key order."""
        return (item.data for item in self._items)

    def __contains__(self, key: object) -> bool:
        return self._find_item(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return (item.key for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        return self._equals(other)


class UnsortedTable(_SequenceTable[K, T]):
    """Table keeping items in insertion order, with positional access and swaps."""

    def insert(self, key: K, data: T) -> None:
        """Append data under key; raise KeyError if key exists."""
        if key in self:
            raise KeyError(f"key already exists: {key!r}")
        self._items.append(TableItem(key, data))

    def find(self, key: K) -> T:
        """Return the data stored under key; raise KeyError if absent."""
        return self._require_item(key).data

    def get(self, key: K, default: Any = None) -> Any:
        """Return the data stored under key, or default if absent."""
        return self._lookup(key, default)

    def remove(self, key: K) -> T:
        """Remove key from the table and return its data; raise KeyError if absent."""
        return self._pop(key)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def item_at(self, index: int) -> TableItem[K, T]:
        """Return the item at a position in [0, len); raise IndexError otherwise."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid index: {index}")
        return self._items[index]

    def swap(self, first: int, second: int) -> None:
        """Exchange the items at two positions."""
        a = self.item_at(first)
        b = self.item_at(second)
        self._items[first], self._items[second] = b, a

    def items(self) -> Iterator[tuple[K, T]]:
        """Yield (key, data) pairs in table order."""
        return self._pairs()

    def values(self) -> Iterator[T]:
        """Yield stored data in table order."""
        return (item.data for item in self._items)

    def __contains__(self, key: object) -> bool:
        return self._find_item(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return (item.key for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        return self._equals(other)