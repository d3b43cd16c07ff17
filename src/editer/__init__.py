"""
--------------------------------------------------------------------------------
<editer project>
editer/__init__.py

In-place editing of a sequence while walking it once.

Public API:
  - edit(sequence, callback)      : walk, callback may edit at the cursor
  - try_edit(sequence, callback)  : same, first callback failure stops the walk
  - Cursor                        : single-use handle on the current item
  - EditableSequence              : backend contract (plus adapters/registry)
  - configure()                   : application-level settings (trace, log level)

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

# Side-effect import: registers adapters for list, deque, MutableSequence
from . import adapters  # noqa: F401
from .adapters import BoundedList, DequeAdapter, ListAdapter, MutableSequenceAdapter, NumpyVector
from .config import EditerSettings, active_settings, configure, load_settings
from .cursor import Cursor
from .engine import EditOutcome, EditStats, edit, try_edit
from .errors import (
    AdapterError,
    CapacityError,
    ConfigError,
    CursorConsumedError,
    EditerError,
    IndexOutOfRangeError,
)
from .registry import adapt, get_adapter_cls, list_adapters, register_adapter, unregister_adapter
from .sequence import EditableSequence

__all__ = [
    "AdapterError",
    "BoundedList",
    "CapacityError",
    "ConfigError",
    "Cursor",
    "CursorConsumedError",
    "DequeAdapter",
    "EditOutcome",
    "EditStats",
    "EditableSequence",
    "EditerError",
    "EditerSettings",
    "IndexOutOfRangeError",
    "ListAdapter",
    "MutableSequenceAdapter",
    "NumpyVector",
    "active_settings",
    "adapt",
    "configure",
    "edit",
    "get_adapter_cls",
    "list_adapters",
    "load_settings",
    "register_adapter",
    "try_edit",
    "unregister_adapter",
]
