# -*- coding: utf-8 -*-
import operator
from typing import Any, Iterator, Sequence, Tuple

import numpy as np

from bitree.tree.errors import IndexOutOfRange, InvalidRange, InvalidSize, PreconditionViolated


def lowbit(index: int) -> int:
    return index & -index


def check_range(beg: int, end: int, size: int) -> Tuple[int, int]:
    beg, end = operator.index(beg), operator.index(end)
    if not 1 <= beg <= end <= size:
        raise InvalidRange(beg, end, size)
    return beg, end


class FenwickTree:
    """Fenwick tree (binary indexed tree) over the logical array A[1..size]

    Slot i of the backing array holds A[i - lowbit(i) + 1] + ... + A[i], so a
    prefix sum is rebuilt from O(log size) slots. Slot 0 is never written and
    keeps the identity element, which makes it the starting value of every sum.

    Any numpy dtype works as value type. Use ``dtype=object`` to store arbitrary
    python group elements (Fraction, modular integers, ...).

    Reference: Peter Fenwick, A New Data Structure for Cumulative Frequency
    Tables, Software - Practice And Experience 24(3), 327-336, 1994.
    """

    def __init__(self, size: int, dtype: Any = np.int64):
        size = operator.index(size)
        if size < 1:
            raise InvalidSize(size)

        self._size = size
        self._value = np.zeros([size + 1], dtype=dtype)

    @classmethod
    def from_values(cls, values: Sequence[Any], dtype: Any = None) -> "FenwickTree":
        """Build the tree of A[1..n] = values in O(n)"""

        values = np.asarray(values, dtype=dtype)
        assert values.ndim == 1

        tree = cls(len(values), dtype=values.dtype)
        tree._value[1:] = values
        for index in range(1, tree._size + 1):
            parent = index + lowbit(index)
            if parent <= tree._size:
                tree._value[parent] = tree._value[parent] + tree._value[index]

        return tree

    @property
    def size(self) -> int:
        return self._size

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    @property
    def raw(self) -> np.ndarray:
        """Read-only view of the partial sums stored in slots 1..size"""

        view = self._value[1:]
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())

    def __getitem__(self, index: int) -> Any:
        return self.read_single(index)

    def update(self, index: int, value: Any) -> None:
        """Add value to A[index]"""

        index = self._check_index(index, 1)

        path = []
        while index <= self._size:
            path.append(index)
            index += lowbit(index)

        # refuse values the dtype cannot hold, e.g. floats on an int tree
        slots = self._value[path]
        np.add(slots, value, out=slots, casting="same_kind")
        self._value[path] = slots

    def query(self, index: int) -> Any:
        """Return A[1] + ... + A[index], the identity for index 0"""

        index = self._check_index(index, 0)

        result = self._value[0]
        while index > 0:
            result = result + self._value[index]
            index -= lowbit(index)

        return result

    def read_single(self, index: int) -> Any:
        """Return A[index]

        Walks down from index - 1 and takes off every slot that lies inside
        the range of slot index, stopping at index - lowbit(index) where the
        range starts. Same result as query(index) - query(index - 1) but
        touches fewer slots.
        """

        index = self._check_index(index, 1)

        result = self._value[index]
        join = index - lowbit(index)
        index -= 1
        while index > join:
            result = result - self._value[index]
            index -= lowbit(index)

        return result

    def reduce(self, beg: int, end: int) -> Any:
        """Return A[beg] + ... + A[end]"""

        beg, end = check_range(beg, end, self._size)

        return self.query(end) - self.query(beg - 1)

    def scale(self, factor: Any) -> None:
        """Multiply every A[i] by factor"""

        slots = self._value[1:]
        np.multiply(slots, factor, out=slots, casting="same_kind")

    def get_index(self, cumulative: Any) -> int:
        """Return the greatest index with A[1] + ... + A[index] <= cumulative

        All A[i] must be non-negative, so that prefix sums are non-decreasing.
        """

        first = self.query(1)
        if cumulative < first:
            raise PreconditionViolated(
                f"cumulative value {cumulative} is smaller than the first value {first}"
            )

        if self._size == 1:
            return 1

        mask = 1 << (self._size.bit_length() - 1)
        base = 0
        while mask > 0:
            mid = base + mask
            if mid <= self._size and self._value[mid] <= cumulative:
                cumulative = cumulative - self._value[mid]
                base = mid
            mask >>= 1

        return base

    def prefix_sums(self) -> np.ndarray:
        return np.array([self.query(i) for i in range(1, self._size + 1)], dtype=self.dtype)

    def values(self) -> np.ndarray:
        return np.array([self.read_single(i) for i in range(1, self._size + 1)], dtype=self.dtype)

    def _check_index(self, index: int, low: int) -> int:
        index = operator.index(index)
        if not low <= index <= self._size:
            raise IndexOutOfRange(index, low, self._size)
        return index
