"""
--------------------------------------------------------------------------------
<editer project>
src/editer/tests/test_sequence_contract.py

The derived replace_range and the index preconditions shared by backends.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from collections import deque

import pytest

from editer import (
    BoundedList,
    DequeAdapter,
    EditableSequence,
    IndexOutOfRangeError,
    ListAdapter,
    NumpyVector,
    edit,
)


class RecordingSequence(EditableSequence):
    """Only the five primitives; records each call."""

    def __init__(self, items):
        self.items = list(items)
        self.ops = []

    def length(self):
        return len(self.items)

    def read(self, index):
        return self.items[index]

    def write(self, index, item):
        self.ops.append(("write", index, item))
        self.items[index] = item

    def insert_at(self, index, item):
        self.ops.append(("insert", index, item))
        self.items.insert(index, item)

    def remove_at(self, index):
        self.ops.append(("remove", index))
        del self.items[index]


def test_default_replace_range_writes_then_inserts_in_order():
    seq = RecordingSequence([1, 2, 3])
    seq.replace_range(1, iter([7, 8, 9]))
    assert seq.items == [1, 7, 8, 9, 3]
    assert seq.ops == [("write", 1, 7), ("insert", 2, 8), ("insert", 3, 9)]


def test_default_replace_range_with_nothing_removes():
    seq = RecordingSequence([1, 2, 3])
    seq.replace_range(2, [])
    assert seq.items == [1, 2]
    assert seq.ops == [("remove", 2)]


def test_default_replace_range_checks_the_index():
    seq = RecordingSequence([1, 2, 3])
    with pytest.raises(IndexOutOfRangeError):
        seq.replace_range(3, [1])
    assert seq.ops == []


def test_walk_over_a_primitive_only_backend():
    seq = RecordingSequence([1, 2, 3, 4])

    def callback(cursor):
        if cursor.item == 2:
            cursor.replace([5, 6])
        elif cursor.item == 4:
            cursor.insert_before(7)

    edit(seq, callback)
    assert seq.items == [1, 5, 6, 3, 7, 4]
    assert len(seq) == 6


@pytest.mark.parametrize(
    "build",
    [
        lambda items: ListAdapter(list(items)),
        lambda items: DequeAdapter(deque(items)),
        lambda items: BoundedList(16, items),
        lambda items: NumpyVector(items),
    ],
)
def test_native_splices_match_the_derived_order(build):
    native = build([1, 2, 3])
    derived = RecordingSequence([1, 2, 3])
    native.replace_range(0, [4, 5, 6])
    derived.replace_range(0, [4, 5, 6])
    assert [native.read(i) for i in range(native.length())] == derived.items


@pytest.mark.parametrize(
    "build",
    [
        lambda items: ListAdapter(list(items)),
        lambda items: DequeAdapter(deque(items)),
        lambda items: BoundedList(16, items),
        lambda items: NumpyVector(items),
    ],
)
def test_backends_reject_out_of_range_indices(build):
    seq = build([1, 2, 3])
    with pytest.raises(IndexOutOfRangeError):
        seq.read(3)
    with pytest.raises(IndexOutOfRangeError):
        seq.read(-1)
    with pytest.raises(IndexOutOfRangeError):
        seq.write(3, 0)
    with pytest.raises(IndexOutOfRangeError):
        seq.insert_at(4, 0)
    with pytest.raises(IndexOutOfRangeError):
        seq.remove_at(3)
    assert seq.length() == 3


def test_insert_at_length_appends():
    items = [1, 2]
    seq = ListAdapter(items)
    seq.insert_at(2, 3)
    assert items == [1, 2, 3]


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        ListAdapter([]).read(0)


def test_default_insert_range_inserts_one_by_one_in_order():
    seq = RecordingSequence([1, 2, 3])
    seq.insert_range(1, (7, 8))
    assert seq.items == [1, 7, 8, 2, 3]
    assert seq.ops == [("insert", 1, 7), ("insert", 2, 8)]


def test_default_insert_range_checks_the_index_first():
    seq = RecordingSequence([1, 2, 3])
    with pytest.raises(IndexOutOfRangeError):
        seq.insert_range(4, (7, 8))
    assert seq.ops == []


@pytest.mark.parametrize(
    "build",
    [
        lambda items: ListAdapter(list(items)),
        lambda items: DequeAdapter(deque(items)),
        lambda items: BoundedList(16, items),
        lambda items: NumpyVector(items),
    ],
)
def test_native_insert_ranges_match_the_derived_order(build):
    native = build([1, 2, 3])
    derived = RecordingSequence([1, 2, 3])
    native.insert_range(3, [4, 5])
    derived.insert_range(3, [4, 5])
    native.insert_range(0, [])
    assert [native.read(i) for i in range(native.length())] == derived.items
