# -*- coding: utf-8 -*-
import numpy as np

from bitree.tree.fenwick import FenwickTree
from bitree.utils.check import check_tree


def get_cfg() -> dict:
    cfg = dict(
        seed=None,
        tree_cls=FenwickTree,
        tree=dict(
            size=1000,
            dtype=np.int64,
        ),
        checker=dict(
            max_value=10,
            allow_negative=False,
            verbose=True,
        ),
        run=dict(
            rounds=10,
            updates_per_round=1000,
        ),
        show=False,
    )

    return cfg


if __name__ == "__main__":
    cfg = get_cfg()
    check_tree(cfg)
