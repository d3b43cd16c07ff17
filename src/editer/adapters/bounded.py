"""
--------------------------------------------------------------------------------
<editer project>
editer/adapters/bounded.py

Fixed-capacity list. Growth past `capacity` raises CapacityError before any
item moves, so a refused edit leaves the contents untouched.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List

from ..errors import CapacityError, ConfigError
from ..sequence import EditableSequence, check_index, check_insert_index


class BoundedList(EditableSequence):
    def __init__(self, capacity: int, items: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ConfigError(f"capacity must be >= 0 (got {capacity})")
        self.capacity = capacity
        self._items: List[Any] = list(items)
        if len(self._items) > capacity:
            raise CapacityError(
                f"{len(self._items)} initial items exceed capacity {capacity}"
            )

    @property
    def remaining(self) -> int:
        return self.capacity - len(self._items)

    @property
    def is_full(self) -> bool:
        return self.remaining == 0

    def _require_room(self, extra: int) -> None:
        if extra > self.remaining:
            raise CapacityError(
                f"BoundedList at {len(self._items)}/{self.capacity} cannot take {extra} more item(s)"
            )

    # ── contract
    def length(self) -> int:
        return len(self._items)

    def read(self, index: int) -> Any:
        check_index(index, len(self._items))
        return self._items[index]

    def write(self, index: int, item: Any) -> None:
        check_index(index, len(self._items))
        self._items[index] = item

    def insert_at(self, index: int, item: Any) -> None:
        check_insert_index(index, len(self._items))
        self._require_room(1)
        self._items.insert(index, item)

    def insert_range(self, index: int, items: Iterable[Any]) -> None:
        check_insert_index(index, len(self._items))
        items = list(items)
        self._require_room(len(items))
        self._items[index:index] = items

    def remove_at(self, index: int) -> None:
        check_index(index, len(self._items))
        del self._items[index]

    def replace_range(self, index: int, items: Iterable[Any]) -> None:
        check_index(index, len(self._items))
        items = list(items)
        self._require_room(len(items) - 1)
        self._items[index : index + 1] = items

    # ── container conveniences
    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def to_list(self) -> List[Any]:
        return list(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedList):
            return self.capacity == other.capacity and self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedList(capacity={self.capacity}, items={self._items!r})"
