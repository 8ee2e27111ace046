# -*- coding: utf-8 -*-
import operator
from typing import Any

import numpy as np

from bitree.tree.errors import IndexOutOfRange, InvalidSize, PreconditionViolated
from bitree.tree.fenwick import check_range


class NaiveArray:
    """Plain O(n) array with the same 1-based interface as the trees

    Reference implementation for differential checking.
    """

    def __init__(self, size: int, dtype: Any = np.int64):
        size = operator.index(size)
        if size < 1:
            raise InvalidSize(size)

        self._size = size
        self._value = np.zeros([size], dtype=dtype)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def update(self, index: int, value: Any) -> None:
        index = self._check_index(index, 1)
        slots = self._value[index - 1 : index]
        np.add(slots, value, out=slots, casting="same_kind")

    def update_range(self, beg: int, end: int, value: Any) -> None:
        beg, end = check_range(beg, end, self._size)
        slots = self._value[beg - 1 : end]
        np.add(slots, value, out=slots, casting="same_kind")

    def query(self, index: int) -> Any:
        index = self._check_index(index, 0)
        return self._value[:index].sum()

    def read_single(self, index: int) -> Any:
        index = self._check_index(index, 1)
        return self._value[index - 1]

    def reduce(self, beg: int, end: int) -> Any:
        beg, end = check_range(beg, end, self._size)
        return self._value[beg - 1 : end].sum()

    def scale(self, factor: Any) -> None:
        np.multiply(self._value, factor, out=self._value, casting="same_kind")

    def get_index(self, cumulative: Any) -> int:
        if cumulative < self._value[0]:
            raise PreconditionViolated(
                f"cumulative value {cumulative} is smaller than the first value {self._value[0]}"
            )
        return int(np.searchsorted(self.prefix_sums(), cumulative, side="right"))

    def prefix_sums(self) -> np.ndarray:
        return np.cumsum(self._value)

    def values(self) -> np.ndarray:
        return self._value.copy()

    def _check_index(self, index: int, low: int) -> int:
        index = operator.index(index)
        if not low <= index <= self._size:
            raise IndexOutOfRange(index, low, self._size)
        return index
