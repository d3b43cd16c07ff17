"""
--------------------------------------------------------------------------------
<editer project>
editer/engine.py

Single forward pass over a sequence that the callback may edit as it goes.

Each step hands the callback a Cursor on the item at `position`, then
advances `position` by the stride the cursor recorded:

  no structural edit         -> 1
  insert n before/after      -> n + 1   (inserted items are never visited)
  replace with n items       -> n
  remove (or replace with []) -> 0      (successor slides into `position`)

The loop bound is the live length, re-read on every step.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional, Tuple, Type, Union

from ._logging import get_logger
from .config import active_settings
from .cursor import Cursor, Stride
from .errors import CONTRACT_ERRORS
from .registry import adapt
from .sequence import EditableSequence

_LOG = get_logger(__name__)

Callback = Callable[[Cursor], Any]
Catch = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


@dataclass
class EditStats:
    """
    Per-walk counters.

    visited  : positions handed to the callback (a failing step included)
    inserted : items added by insert_before/insert_after and by the tail of a replace
    removed  : slots removed (remove() or replace([]))
    replaced : slots overwritten by a non-empty replace
    """

    visited: int = 0
    inserted: int = 0
    removed: int = 0
    replaced: int = 0


@dataclass(frozen=True)
class EditOutcome:
    error: Optional[BaseException]
    position: int
    stats: EditStats

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> None:
        if self.error is not None:
            raise self.error


class _Walk:
    def __init__(self, sequence: EditableSequence, *, trace: bool) -> None:
        self.sequence = sequence
        self.position = 0
        self.stats = EditStats()
        self.trace = trace

    def run(self, callback: Callback) -> None:
        while self.position < self.sequence.length():
            self.step(callback)

    def step(self, callback: Callback) -> None:
        stride = Stride()
        cursor = Cursor(self.sequence, self.position, stride)
        before = self.sequence.length()
        self.stats.visited += 1
        try:
            callback(cursor)
        finally:
            cursor._release()
        self._record(stride, self.sequence.length() - before)
        if self.trace:
            _LOG.info(
                "step position=%d stride=%d edit=%s length=%d",
                self.position,
                stride.value,
                stride.kind or "-",
                self.sequence.length(),
            )
        self.position += stride.value

    def _record(self, stride: Stride, delta: int) -> None:
        if stride.kind == "remove":
            self.stats.removed += 1
        elif stride.kind == "replace":
            self.stats.replaced += 1
        if delta > 0:
            self.stats.inserted += delta


def _start(sequence: Any, trace: Optional[bool]) -> _Walk:
    if trace is None:
        trace = active_settings().trace
    return _Walk(adapt(sequence), trace=trace)


def edit(sequence: Any, callback: Callback, *, trace: Optional[bool] = None) -> None:
    """
    Visit every item of `sequence` once, letting `callback` edit at the cursor.

    `sequence` is an EditableSequence or any container with a registered
    adapter (list, deque, MutableSequence). Exceptions from the callback
    propagate; edits already applied stay applied.
    """
    walk = _start(sequence, trace)
    walk.run(callback)
    _LOG.debug(
        "edit finished: length=%d %s", walk.sequence.length(), asdict(walk.stats)
    )


def try_edit(
    sequence: Any,
    callback: Callback,
    *,
    catch: Catch = Exception,
    trace: Optional[bool] = None,
) -> EditOutcome:
    """
    Like edit(), but a callback failure (an exception matching `catch`) ends the
    walk and is returned in the outcome instead of raised.

    No rollback: edits made before the failure, including any made by the
    failing callback itself, remain applied. `outcome.position` is the failing
    position. Cursor misuse and out-of-range indices are never captured.
    """
    walk = _start(sequence, trace)
    try:
        walk.run(callback)
    except CONTRACT_ERRORS:
        raise
    except catch as e:
        _LOG.debug(
            "try_edit stopped at position=%d: %s: %s",
            walk.position,
            type(e).__name__,
            e,
        )
        return EditOutcome(error=e, position=walk.position, stats=walk.stats)
    _LOG.debug(
        "try_edit finished: length=%d %s", walk.sequence.length(), asdict(walk.stats)
    )
    return EditOutcome(error=None, position=walk.position, stats=walk.stats)
