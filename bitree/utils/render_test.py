from fractions import Fraction

import numpy as np

from bitree.tree.fenwick import FenwickTree
from bitree.tree.range_fenwick import RangeFenwickTree
from bitree.utils.render import dump, render


def test_dump_fenwick():
    ft = FenwickTree(10)
    ft.update(1, 2)
    ft.update(4, 5)
    ft.update(2, 1)
    ft.update(10, 1)
    raw = ft.raw.copy()

    d = dump(ft)

    assert len(d) == 10
    assert [name for name, _ in d.rows()] == ["Internal array", "Cumulative sums", "Values"]
    assert d.raw[0][1].tolist() == [2, 3, 0, 8, 0, 0, 0, 8, 0, 1]
    assert d.prefix_sums.tolist() == [2, 3, 3, 8, 8, 8, 8, 8, 8, 9]
    assert d.values.tolist() == [2, 1, 0, 5, 0, 0, 0, 0, 0, 1]
    assert (ft.raw == raw).all()

    # the dump owns its arrays
    ft.update(3, 1)
    assert d.raw[0][1].tolist() == [2, 3, 0, 8, 0, 0, 0, 8, 0, 1]


def test_render_fenwick():
    ft = FenwickTree.from_values([1, 0, 2])

    assert render(ft).split("\n") == [
        "Internal array:\t\t1 1 2",
        "Cumulative sums:\t1 1 3",
        "Values:\t\t\t1 0 2",
    ]


def test_dump_range_fenwick():
    rft = RangeFenwickTree(10)
    rft.update_range(2, 5, 1)
    rft.update_range(4, 8, 2)
    rft.update_range(9, 9, 3)

    d = dump(rft)

    assert [name for name, _ in d.rows()] == [
        "Mul array",
        "Add array",
        "Cumulative sums",
        "Values",
    ]
    assert d.prefix_sums.tolist() == [0, 1, 2, 5, 8, 10, 12, 14, 17, 17]
    assert d.values.tolist() == [0, 1, 1, 3, 3, 2, 2, 2, 3, 0]
    mul, add = d.raw[0][1], d.raw[1][1]
    assert (mul * np.arange(1, 11) + add).tolist() == d.prefix_sums.tolist()

    lines = str(d).split("\n")
    assert lines[0].startswith("Mul array:\t\t")
    assert lines[1].startswith("Add array:\t\t")
    assert lines[3] == "Values:\t\t\t0 1 1 3 3 2 2 2 3 0"


def test_dump_to_dict():
    ft = FenwickTree(3, dtype=object)
    ft.update(2, Fraction(1, 2))

    d = dump(ft).to_dict()

    assert d["Values"] == [0, Fraction(1, 2), 0]
    assert d["Cumulative sums"] == [0, Fraction(1, 2), Fraction(1, 2)]
    assert d["Internal array"] == [0, Fraction(1, 2), 0]


if __name__ == "__main__":
    test_dump_fenwick()
    test_dump_range_fenwick()
