"""List of scalar items stored one key per item in a preference store.

A list with base key ``Scores`` keeps its length under ``Scores/Count`` and
item ``i`` under ``Scores/<i>``. The persisted count is the only source of
truth for the length: entries at or above the count may linger in the store
after the list shrinks and are never read back as list content.

There is no caching and no locking. Every operation reads and writes the
store directly, and operations that shift items (``insert``, ``remove_at``)
are not atomic across keys.
"""
from __future__ import annotations
import logging
from collections.abc import MutableSequence
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from prefutils.errors import PrefListIndexError
from prefutils.pref import Pref

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float, str, bool)

COUNT_SUFFIX = "/Count"


class PrefList(MutableSequence, Generic[T]):
    """Mutable sequence persisted item by item into a key-value store.

    Args:
        key: base key of the list, unique within the store.
        getter: reads an item, e.g. ``store.get_int``.
        setter: writes an item, e.g. ``store.set_int``.
        delete: removes an item key, e.g. ``store.delete_key``.
        count_getter: reads the count as ``(key, default) -> int``.
        count_setter: writes the count.

    Indices are never wrapped: negative indices are out of range, as is any
    index at or above ``len(self)``. Out of range access raises
    ``PrefListIndexError`` before anything is written.
    """

    def __init__(
        self,
        key: str,
        getter: Callable[[str], T],
        setter: Callable[[str, T], None],
        delete: Callable[[str], None],
        count_getter: Callable[[str, int], int],
        count_setter: Callable[[str, int], None],
    ) -> None:
        self.key = key
        self._getter = getter
        self._setter = setter
        self._delete = delete
        self._count: Pref[int] = Pref(key + COUNT_SUFFIX, count_getter, count_setter, 0)

    def _index_key(self, i: int) -> str:
        return f"{self.key}/{i}"

    def _check_index(self, i, upper: int) -> int:
        # `upper` is inclusive for insert, exclusive everywhere else
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"PrefList indices must be integers, not {type(i).__name__}")
        if i < 0 or i >= upper:
            raise PrefListIndexError(i, len(self))
        return i

    @property
    def is_read_only(self) -> bool:
        return False

    def __len__(self) -> int:
        return self._count.value

    def __getitem__(self, i: int) -> T:
        self._check_index(i, len(self))
        return self._getter(self._index_key(i))

    def __setitem__(self, i: int, value: T) -> None:
        self._check_index(i, len(self))
        self._setter(self._index_key(i), value)

    def __delitem__(self, i: int) -> None:
        self.remove_at(i)

    def __iter__(self) -> Iterator[T]:
        # The count is re-read on every step so mutations made while
        # iterating are observed.
        i = 0
        while i < len(self):
            yield self._getter(self._index_key(i))
            i += 1

    def __contains__(self, value: object) -> bool:
        return self.index_of(value) >= 0

    def append(self, value: T) -> None:
        count = len(self)
        self._setter(self._index_key(count), value)
        self._count.value = count + 1

    def clear(self) -> None:
        count = len(self)
        for i in range(count):
            self._delete(self._index_key(i))
        self._count.value = 0
        logger.debug("Cleared %d items from %s", count, self.key)

    def contains(self, value: T) -> bool:
        return value in self

    def index_of(self, value: object) -> int:
        """Return the index of the first item equal to `value`, or -1."""
        for i in range(len(self)):
            if self._getter(self._index_key(i)) == value:
                return i
        return -1

    def insert(self, index: int, value: T) -> None:
        """Insert `value` before `index`; `index == len(self)` appends."""
        count = len(self)
        self._check_index(index, count + 1)
        # Shift right starting from the top so no item is overwritten
        # before it has been copied.
        for j in range(count, index, -1):
            self._setter(self._index_key(j), self._getter(self._index_key(j - 1)))
        self._setter(self._index_key(index), value)
        self._count.value = count + 1
        logger.debug("Inserted into %s at %d, shifted %d items", self.key, index, count - index)

    def remove_at(self, index: int) -> None:
        count = len(self)
        self._check_index(index, count)
        for j in range(index, count - 1):
            self._setter(self._index_key(j), self._getter(self._index_key(j + 1)))
        self._count.value = count - 1
        logger.debug("Removed %s[%d], shifted %d items", self.key, index, count - 1 - index)

    def remove(self, value: T) -> bool:  # type: ignore[override]
        """Remove the first item equal to `value`.

        Returns True when an item was removed and False when `value` is not
        in the list. Unlike ``list.remove`` a missing value is not an error.
        """
        index = self.index_of(value)
        if index >= 0:
            self.remove_at(index)
        return index >= 0

    def pop(self, index: Optional[int] = None) -> T:
        if index is None:
            index = len(self) - 1
        value = self[index]
        self.remove_at(index)
        return value

    def copy_to(self, array: List[T], array_index: int = 0) -> None:
        """Copy every item into `array` starting at `array_index`.

        `array` must already be long enough; it is written by index. A
        negative `array_index` raises `IndexError` and a too short `array`
        raises `ValueError`, both before anything is written.
        """
        if array_index < 0:
            raise IndexError(f"array_index {array_index} must not be negative")
        count = len(self)
        if len(array) - array_index < count:
            raise ValueError(
                f"array of length {len(array)} cannot hold {count} items from index {array_index}"
            )
        for i, value in enumerate(self):
            array[array_index + i] = value

    def __repr__(self) -> str:
        return f"PrefList(key={self.key!r}, items={list(self)!r})"
