"""
--------------------------------------------------------------------------------
<editer project>
editer/cursor.py

Single-use handle on the item at the walk's current position.

A cursor lives for one callback invocation. It allows any number of reads
and in-place writes, and at most one structural edit (insert_before,
insert_after, replace, replace_with, remove). A structural edit consumes the
cursor; the engine releases it when the callback returns. Any use after
that raises CursorConsumedError.

The structural edit records how many slots the current position now spans
(the stride), which is how far the walk advances next.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterable

from .errors import CursorConsumedError
from .sequence import EditableSequence

_LIVE = "live"
_CONSUMED = "consumed"
_RELEASED = "released"


class Stride:
    """Slots spanned by the current position after its step; 1 until an edit says otherwise."""

    __slots__ = ("value", "kind")

    def __init__(self) -> None:
        self.value = 1
        self.kind: str | None = None

    def set(self, value: int, kind: str) -> None:
        self.value = value
        self.kind = kind


class Cursor:
    __slots__ = ("_sequence", "_index", "_stride", "_state")

    def __init__(self, sequence: EditableSequence, index: int, stride: Stride) -> None:
        self._sequence = sequence
        self._index = index
        self._stride = stride
        self._state = _LIVE

    # ── state
    @property
    def index(self) -> int:
        return self._index

    @property
    def consumed(self) -> bool:
        return self._state != _LIVE

    def _require_live(self, op: str) -> None:
        if self._state == _CONSUMED:
            raise CursorConsumedError(
                f"cannot {op}: cursor at position {self._index} already performed a structural edit"
            )
        if self._state == _RELEASED:
            raise CursorConsumedError(
                f"cannot {op}: cursor at position {self._index} outlived its step"
            )

    def _consume(self, op: str) -> None:
        self._require_live(op)
        self._state = _CONSUMED

    def _release(self) -> None:
        if self._state == _LIVE:
            self._state = _RELEASED

    # ── current item
    def read(self) -> Any:
        self._require_live("read")
        return self._sequence.read(self._index)

    def write(self, item: Any) -> None:
        self._require_live("write")
        self._sequence.write(self._index, item)

    @property
    def item(self) -> Any:
        return self.read()

    @item.setter
    def item(self, value: Any) -> None:
        self.write(value)

    # ── structural edits
    def insert_before(self, *items: Any) -> None:
        self._consume("insert_before")
        self._sequence.insert_range(self._index, items)
        self._stride.set(len(items) + 1, "insert")

    def insert_after(self, *items: Any) -> None:
        self._consume("insert_after")
        self._sequence.insert_range(self._index + 1, items)
        self._stride.set(len(items) + 1, "insert")

    def replace(self, items: Iterable[Any]) -> None:
        """Overwrite the current item with items[0] and insert the rest after it; [] removes."""
        self._consume("replace")
        items = list(items)
        if not items:
            self._sequence.remove_at(self._index)
        else:
            self._sequence.replace_range(self._index, items)
        self._stride.set(len(items), "replace" if items else "remove")

    def replace_with(self, build: Callable[[Any], Iterable[Any]]) -> None:
        """
        Replace the current item with whatever `build(item)` returns.

        `build` gets a shallow copy, so mutating it leaves the sequence alone
        until the replace itself runs.
        """
        self._require_live("replace_with")
        items = list(build(copy.copy(self._sequence.read(self._index))))
        self.replace(items)

    def remove(self) -> None:
        self._consume("remove")
        self._sequence.remove_at(self._index)
        self._stride.set(0, "remove")

    def __repr__(self) -> str:
        if self._state == _LIVE:
            return f"Cursor(index={self._index}, item={self._sequence.read(self._index)!r})"
        return f"Cursor(index={self._index}, {self._state})"
