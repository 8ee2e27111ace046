# -*- coding: utf-8 -*-
from typing import Union

from bitree.data.types import TreeDump
from bitree.tree.fenwick import FenwickTree
from bitree.tree.range_fenwick import RangeFenwickTree


def dump(tree: Union[FenwickTree, RangeFenwickTree]) -> TreeDump:
    """Return the backing array(s), prefix sums and values of tree

    Only reads the tree. A range tree has no array of its own, so the prefix
    sums of its two coefficient trees are reported instead.
    """

    if isinstance(tree, RangeFenwickTree):
        raw = [
            ("Mul array", tree.mul.prefix_sums()),
            ("Add array", tree.add.prefix_sums()),
        ]
    else:
        raw = [("Internal array", tree.raw.copy())]

    return TreeDump(raw=raw, prefix_sums=tree.prefix_sums(), values=tree.values())


def render(tree: Union[FenwickTree, RangeFenwickTree]) -> str:
    return str(dump(tree))
