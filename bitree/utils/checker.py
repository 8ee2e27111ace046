# -*- coding: utf-8 -*-
from typing import Any, Optional, Tuple, Union

import numpy as np
import tqdm

from bitree.tree.fenwick import FenwickTree
from bitree.tree.range_fenwick import RangeFenwickTree
from bitree.utils.naive import NaiveArray


class Checker:
    """Drive a tree and a NaiveArray with the same random updates and compare them"""

    def __init__(
        self,
        tree: Union[FenwickTree, RangeFenwickTree],
        reference: Optional[NaiveArray] = None,
        max_value: int = 10,
        allow_negative: bool = False,
        verbose: bool = True,
    ):
        assert max_value > 0
        self.tree = tree
        self.reference = NaiveArray(len(tree), tree.dtype) if reference is None else reference
        assert len(self.reference) == len(self.tree)
        self.max_value = max_value
        self.allow_negative = allow_negative
        self.verbose = verbose
        self.reset()

    def reset(self) -> None:
        self.round = 0
        self.update_count = 0
        self.checked = 0
        self.mismatches = 0

    @property
    def range_updates(self) -> bool:
        return isinstance(self.tree, RangeFenwickTree)

    def run(self, rounds: int, updates_per_round: int = 100) -> int:
        """Return the number of mismatches seen over all rounds"""

        for _ in range(rounds):
            self.round += 1

            with tqdm.tqdm(total=updates_per_round, **self.tqdm_cfg()) as t:
                for _ in range(updates_per_round):
                    self.step()
                    t.update()
                    t.set_postfix({"updates": self.update_count})

            checked, mismatches = self.check()
            if self.verbose:
                print(f"Round #{self.round}: {checked} checked, {mismatches} mismatches")

        return self.mismatches

    def step(self) -> None:
        size = len(self.tree)
        low = -self.max_value if self.allow_negative else 0
        value = np.random.randint(low, self.max_value + 1)

        if self.range_updates:
            beg, end = sorted(np.random.randint(1, size + 1, size=2).tolist())
            self.tree.update_range(beg, end, value)
            self.reference.update_range(beg, end, value)
        else:
            index = np.random.randint(1, size + 1)
            self.tree.update(index, value)
            self.reference.update(index, value)

        self.update_count += 1

    def check(self) -> Tuple[int, int]:
        checked = 0
        mismatches = 0
        for index in range(1, len(self.tree) + 1):
            for op in ("query", "read_single"):
                checked += 1
                mismatches += not self.same(
                    getattr(self.tree, op)(index), getattr(self.reference, op)(index)
                )

        if not self.allow_negative and not self.range_updates:
            first = self.reference.query(1)
            total = self.reference.query(len(self.reference))
            for cumulative in range(int(np.ceil(first)), int(total) + 2):
                checked += 1
                mismatches += self.tree.get_index(cumulative) != self.reference.get_index(
                    cumulative
                )

        self.checked += checked
        self.mismatches += mismatches
        return checked, mismatches

    def same(self, a: Any, b: Any) -> bool:
        if np.issubdtype(self.tree.dtype, np.inexact):
            return bool(np.isclose(a, b))
        return a == b

    def tqdm_cfg(self):
        return dict(
            ascii=True,
            dynamic_ncols=True,
            desc=f"Round #{self.round}",
            disable=not self.verbose,
        )
