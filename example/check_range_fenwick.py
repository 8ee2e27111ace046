# -*- coding: utf-8 -*-
import numpy as np

from bitree.tree.range_fenwick import RangeFenwickTree
from bitree.utils.check import check_tree


def get_cfg() -> dict:
    cfg = dict(
        seed=0,
        tree_cls=RangeFenwickTree,
        tree=dict(
            size=10,
            dtype=np.int64,
        ),
        checker=dict(
            max_value=5,
            allow_negative=True,
            verbose=True,
        ),
        run=dict(
            rounds=3,
            updates_per_round=20,
        ),
        show=True,
    )

    return cfg


if __name__ == "__main__":
    cfg = get_cfg()
    check_tree(cfg)
