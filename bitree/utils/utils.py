# -*- coding: utf-8 -*-
from typing import Union

import numpy as np

from bitree.tree.fenwick import FenwickTree
from bitree.tree.range_fenwick import RangeFenwickTree


def process_cfg(cfg: dict) -> dict:
    seed = cfg["seed"]
    if seed is not None:
        np.random.seed(seed)

    def make_tree() -> Union[FenwickTree, RangeFenwickTree]:
        return cfg["tree_cls"](**cfg["tree"])

    cfg["make_tree"] = make_tree

    return cfg
