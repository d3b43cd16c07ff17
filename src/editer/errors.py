"""
--------------------------------------------------------------------------------
<editer project>
editer/errors.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations


class EditerError(Exception):
    """Base exception for this package."""


class IndexOutOfRangeError(EditerError, IndexError):
    """An index outside the sequence reached read/write/insert_at/remove_at."""


class CursorConsumedError(EditerError, RuntimeError):
    """A cursor was used after a structural edit or after its step ended."""


class CapacityError(EditerError, OverflowError):
    """Insertion into a fixed-capacity backend that is already full."""


class AdapterError(EditerError, TypeError): ...


class ConfigError(EditerError, ValueError): ...


# Defects in the walk itself; try_edit never captures these.
CONTRACT_ERRORS = (IndexOutOfRangeError, CursorConsumedError)
