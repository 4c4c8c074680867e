"""
Structural analysis over snailfish numbers.
No mutation, no reduction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from snailfish.core.number import Pair, SnailNumber


@dataclass(frozen=True)
class NumberStats:
    nodes: int
    depth: int
    leaves: int
    max_leaf: int


def analyze_number(x: SnailNumber) -> NumberStats:
    """
    Compute basic structural metrics:
    - total node count
    - depth (a bare leaf is 0)
    - leaf count and largest leaf value
    """

    def walk(n: SnailNumber) -> Tuple[int, int, int, int]:
        if not isinstance(n, Pair):
            return 1, 0, 1, n.value

        ln, ld, ll, lm = walk(n.left)
        rn, rd, rl, rm = walk(n.right)
        return 1 + ln + rn, 1 + max(ld, rd), ll + rl, max(lm, rm)

    nodes, depth, leaves, max_leaf = walk(x)
    return NumberStats(nodes=nodes, depth=depth, leaves=leaves, max_leaf=max_leaf)
