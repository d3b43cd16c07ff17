"""
--------------------------------------------------------------------------------
<editer project>
editer/sequence.py

The backing-sequence contract consumed by the walk.

A backend implements five primitives (length, read, write, insert_at,
remove_at). Multi-item insert and replace are derived from them; backends
with a native splice override insert_range / replace_range but must keep the
same element order.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable

from .errors import IndexOutOfRangeError


def check_index(index: int, length: int) -> None:
    """Require 0 <= index < length."""
    if not 0 <= index < length:
        raise IndexOutOfRangeError(
            f"index {index} out of range for sequence of length {length}"
        )


def check_insert_index(index: int, length: int) -> None:
    """Require 0 <= index <= length (index == length appends)."""
    if not 0 <= index <= length:
        raise IndexOutOfRangeError(
            f"insert index {index} out of range for sequence of length {length}"
        )


class EditableSequence(ABC):
    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def read(self, index: int) -> Any: ...

    @abstractmethod
    def write(self, index: int, item: Any) -> None: ...

    @abstractmethod
    def insert_at(self, index: int, item: Any) -> None:
        """Insert before `index`, shifting successors right."""
        ...

    @abstractmethod
    def remove_at(self, index: int) -> None:
        """Delete the item at `index`, shifting successors left."""
        ...

    def insert_range(self, index: int, items: Iterable[Any]) -> None:
        """
        Insert `items` in order before `index` (index == length appends).

        Fixed-capacity backends override this to refuse the whole batch
        before inserting any of it.
        """
        check_insert_index(index, self.length())
        for offset, item in enumerate(items):
            self.insert_at(index + offset, item)

    def replace_range(self, index: int, items: Iterable[Any]) -> None:
        """
        Replace the single slot at `index` with `items`, in order.

        First item overwrites in place, the rest are inserted behind it;
        no items means the slot is removed.
        """
        check_index(index, self.length())
        it = iter(items)
        try:
            first = next(it)
        except StopIteration:
            self.remove_at(index)
            return
        self.write(index, first)
        for offset, item in enumerate(it, start=1):
            self.insert_at(index + offset, item)

    def __len__(self) -> int:
        return self.length()

    def edit(self, callback: Callable, **kwargs) -> None:
        from .engine import edit

        edit(self, callback, **kwargs)

    def try_edit(self, callback: Callable, **kwargs):
        from .engine import try_edit

        return try_edit(self, callback, **kwargs)
