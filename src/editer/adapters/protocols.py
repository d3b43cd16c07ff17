"""
--------------------------------------------------------------------------------
<editer project>
editer/adapters/protocols.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsIndexedEdits(Protocol):
    """Duck-typed list: anything MutableSequenceAdapter can drive without subclassing."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: int) -> Any: ...
    def __setitem__(self, index: int, item: Any) -> None: ...
    def __delitem__(self, index: int) -> None: ...
    def insert(self, index: int, item: Any) -> None: ...
