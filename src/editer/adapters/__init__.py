"""
--------------------------------------------------------------------------------
<editer project>
editer/adapters/__init__.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from collections import deque
from collections.abc import MutableSequence

from ..registry import register_adapter
from .bounded import BoundedList
from .builtin import DequeAdapter, ListAdapter, MutableSequenceAdapter
from .numpy_vector import NumpyVector
from .protocols import SupportsIndexedEdits

# Concrete types (matched through the MRO)
register_adapter(list, ListAdapter)
register_adapter(deque, DequeAdapter)

# Structural fallbacks (matched by isinstance, in this order)
register_adapter(MutableSequence, MutableSequenceAdapter)
register_adapter(SupportsIndexedEdits, MutableSequenceAdapter)

__all__ = [
    "BoundedList",
    "DequeAdapter",
    "ListAdapter",
    "MutableSequenceAdapter",
    "NumpyVector",
    "SupportsIndexedEdits",
]
