from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple

import numpy as np


@dataclass
class TreeDump:
    """Snapshot of a tree: its backing array(s), prefix sums and values"""

    raw: List[Tuple[str, np.ndarray]]
    prefix_sums: np.ndarray
    values: np.ndarray
    size: int = field(init=False)

    def __post_init__(self):
        self.size = len(self.values)
        assert len(self.prefix_sums) == self.size
        assert all(len(arr) == self.size for _, arr in self.raw)

    def __len__(self):
        return self.size

    def rows(self) -> List[Tuple[str, np.ndarray]]:
        return self.raw + [
            ("Cumulative sums", self.prefix_sums),
            ("Values", self.values),
        ]

    def to_dict(self) -> dict:
        return {name: to_list(arr) for name, arr in self.rows()}

    def __str__(self) -> str:
        lines = []
        for name, arr in self.rows():
            label = f"{name}:"
            tabs = "\t" * max(1, 3 - len(label) // 8)
            lines.append(label + tabs + " ".join(str(v) for v in arr))
        return "\n".join(lines)


def to_list(arr: np.ndarray) -> List[Any]:
    return arr.tolist() if arr.dtype != object else list(arr)
