"""
--------------------------------------------------------------------------------
<editer project>
editer/adapters/builtin.py

Adapters for the standard library's mutable sequences.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

from ..errors import CapacityError
from ..sequence import EditableSequence, check_index, check_insert_index


class MutableSequenceAdapter(EditableSequence):
    """Drives anything with len/[]/insert/del; replace_range is the derived default."""

    def __init__(self, data: Any) -> None:
        self.data = data

    def length(self) -> int:
        return len(self.data)

    def read(self, index: int) -> Any:
        check_index(index, len(self.data))
        return self.data[index]

    def write(self, index: int, item: Any) -> None:
        check_index(index, len(self.data))
        self.data[index] = item

    def insert_at(self, index: int, item: Any) -> None:
        # list.insert clamps out-of-range indices instead of failing
        check_insert_index(index, len(self.data))
        self.data.insert(index, item)

    def remove_at(self, index: int) -> None:
        check_index(index, len(self.data))
        del self.data[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class ListAdapter(MutableSequenceAdapter):
    def insert_range(self, index: int, items: Iterable[Any]) -> None:
        check_insert_index(index, len(self.data))
        self.data[index:index] = list(items)

    def replace_range(self, index: int, items: Iterable[Any]) -> None:
        check_index(index, len(self.data))
        self.data[index : index + 1] = list(items)


class DequeAdapter(MutableSequenceAdapter):
    """collections.deque; a bounded deque (maxlen) refuses to grow instead of dropping items."""

    data: deque

    def _require_room(self, extra: int) -> None:
        maxlen = self.data.maxlen
        if maxlen is not None and len(self.data) + extra > maxlen:
            raise CapacityError(
                f"deque at {len(self.data)}/{maxlen} cannot take {extra} more item(s)"
            )

    def insert_at(self, index: int, item: Any) -> None:
        check_insert_index(index, len(self.data))
        self._require_room(1)
        self.data.insert(index, item)

    def insert_range(self, index: int, items: Iterable[Any]) -> None:
        items = list(items)
        check_insert_index(index, len(self.data))
        self._require_room(len(items))
        super().insert_range(index, items)

    def replace_range(self, index: int, items: Iterable[Any]) -> None:
        items = list(items)
        check_index(index, len(self.data))
        self._require_room(len(items) - 1)
        super().replace_range(index, items)
