# -*- coding: utf-8 -*-
import operator
from typing import Any, Iterator

import numpy as np

from bitree.tree.errors import IndexOutOfRange, InvalidSize
from bitree.tree.fenwick import FenwickTree, check_range


class RangeFenwickTree:
    """Fenwick tree with range updates and point queries

    Let S(i) = A[1] + ... + A[i]. Adding x to A[l..r] shifts S(i) by
    (i - l + 1) * x = x * i - x * (l - 1) for l <= i <= r, and by
    (r - l + 1) * x for i > r. Both shifts are linear in i, so S is kept as

        S(i) = mul.query(i) * i + add.query(i)

    where mul and add are plain Fenwick trees holding the coefficients. A range
    update is then four point updates:

        mul.update(l, x)
        add.update(l, -x * (l - 1))
        mul.update(r, -x)
        add.update(r, x * r)

    Reference: http://petr-mitrichev.blogspot.com/2013/05/fenwick-tree-range-updates.html
    """

    def __init__(self, size: int, dtype: Any = np.int64):
        size = operator.index(size)
        if size < 1:
            raise InvalidSize(size)

        self._size = size
        self._mul = FenwickTree(size, dtype)
        self._add = FenwickTree(size, dtype)

    @property
    def size(self) -> int:
        return self._size

    @property
    def dtype(self) -> np.dtype:
        return self._mul.dtype

    @property
    def mul(self) -> FenwickTree:
        return self._mul

    @property
    def add(self) -> FenwickTree:
        return self._add

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())

    def __getitem__(self, index: int) -> Any:
        return self.read_single(index)

    def update(self, index: int, value: Any) -> None:
        """Add value to A[index]"""

        index = self._check_index(index)
        self.update_range(index, index, value)

    def update_range(self, beg: int, end: int, value: Any) -> None:
        """Add value to every A[i] with beg <= i <= end"""

        beg, end = check_range(beg, end, self._size)

        self._mul.update(beg, value)
        self._add.update(beg, -(beg - 1) * value)
        self._mul.update(end, -value)
        self._add.update(end, end * value)

    def query(self, index: int) -> Any:
        """Return A[1] + ... + A[index]"""

        index = self._check_index(index)
        return self._mul.query(index) * index + self._add.query(index)

    def read_single(self, index: int) -> Any:
        index = self._check_index(index)
        if index == 1:
            return self.query(1)
        return self.query(index) - self.query(index - 1)

    def reduce(self, beg: int, end: int) -> Any:
        """Return A[beg] + ... + A[end]"""

        beg, end = check_range(beg, end, self._size)

        if beg == 1:
            return self.query(end)
        return self.query(end) - self.query(beg - 1)

    def scale(self, factor: Any) -> None:
        self._mul.scale(factor)
        self._add.scale(factor)

    def prefix_sums(self) -> np.ndarray:
        return np.array([self.query(i) for i in range(1, self._size + 1)], dtype=self.dtype)

    def values(self) -> np.ndarray:
        return np.array([self.read_single(i) for i in range(1, self._size + 1)], dtype=self.dtype)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 1 <= index <= self._size:
            raise IndexOutOfRange(index, 1, self._size)
        return index
