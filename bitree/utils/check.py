# -*- coding: utf-8 -*-
from bitree.utils.checker import Checker
from bitree.utils.render import render
from bitree.utils.utils import process_cfg


def check_tree(cfg: dict) -> int:
    cfg = process_cfg(cfg)

    tree = cfg["make_tree"]()
    checker = Checker(tree, **cfg["checker"])
    mismatches = checker.run(**cfg["run"])

    if cfg.get("show", False):
        print(render(tree))

    return mismatches
