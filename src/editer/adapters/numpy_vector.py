"""
--------------------------------------------------------------------------------
<editer project>
editer/adapters/numpy_vector.py

Growable 1-D numpy array. ndarrays cannot change length in place, so every
insert/remove rebinds `.array`; read the result from there after a walk.

Each item occupies exactly one slot: a tuple stored into an object vector
stays one element. Items that would lose information when cast to the
vector's dtype (2.7 into int64, None into float64) raise ValueError before
anything moves.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

import numpy as np

from ..sequence import EditableSequence, check_index, check_insert_index


class NumpyVector(EditableSequence):
    def __init__(self, data: Any = (), dtype: Optional[Any] = None) -> None:
        # always copy: writes must not leak into the caller's array when inserts do not
        arr = np.array(data, dtype=dtype)
        if arr.ndim != 1:
            raise ValueError(f"NumpyVector wraps 1-D data (got ndim={arr.ndim})")
        self.array: np.ndarray = arr

    @property
    def dtype(self) -> np.dtype:
        return self.array.dtype

    def _check_item(self, item: Any) -> None:
        if self.array.dtype == object:
            return
        src = np.asarray(item)
        if src.ndim != 0:
            raise ValueError(
                f"NumpyVector[{self.array.dtype}] holds scalars; got shape {src.shape}"
            )
        if not np.can_cast(src.dtype, self.array.dtype, casting="same_kind"):
            raise ValueError(
                f"cannot store {item!r} ({src.dtype}) in NumpyVector[{self.array.dtype}] without loss"
            )

    def _fill(self, items: Iterable[Any]) -> np.ndarray:
        items = list(items)
        fill = np.empty(len(items), dtype=self.array.dtype)
        for i, item in enumerate(items):
            self._check_item(item)
            fill[i] = item
        return fill

    def length(self) -> int:
        return int(self.array.shape[0])

    def read(self, index: int) -> Any:
        check_index(index, self.length())
        return self.array[index]

    def write(self, index: int, item: Any) -> None:
        check_index(index, self.length())
        self._check_item(item)
        self.array[index] = item

    def insert_at(self, index: int, item: Any) -> None:
        self.insert_range(index, [item])

    def insert_range(self, index: int, items: Iterable[Any]) -> None:
        check_insert_index(index, self.length())
        fill = self._fill(items)
        self.array = np.concatenate([self.array[:index], fill, self.array[index:]])

    def remove_at(self, index: int) -> None:
        check_index(index, self.length())
        self.array = np.delete(self.array, index)

    def replace_range(self, index: int, items: Iterable[Any]) -> None:
        check_index(index, self.length())
        fill = self._fill(items)
        self.array = np.concatenate([self.array[:index], fill, self.array[index + 1 :]])

    def __iter__(self) -> Iterator[Any]:
        return iter(self.array)

    def tolist(self) -> List[Any]:
        return self.array.tolist()

    def __repr__(self) -> str:
        return f"NumpyVector({self.array!r})"
