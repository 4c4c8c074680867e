"""
Snailfish reduction rules: explode and split.

Both rules walk the tree once, depth-first and left to right, with an
explicit stack of (level, parent, side) entries instead of host
recursion. Keeping the parent and side of every visited node is what
lets a rule replace that node in place.

Levels count pairs enclosing a node: the root's children sit at level 1,
so a pair at level 4 is nested inside four pairs.

Each call applies at most one rewrite and reports whether it did.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from snailfish.core.number import Leaf, Pair, SnailNumber
from snailfish.errors import InvariantViolation

EXPLODE_LEVEL = 4
SPLIT_THRESHOLD = 10

_Entry = Tuple[int, Pair, str]


def _children(level: int, node: Pair) -> List[_Entry]:
    # right first: the stack pops the left child next
    return [(level, node, "right"), (level, node, "left")]


def explode(number: SnailNumber) -> bool:
    """
    Explode the leftmost pair nested inside EXPLODE_LEVEL pairs.

    The pair's left value is added to the nearest leaf on its left, its
    right value to the nearest leaf on its right (picked up later in the
    same pass), and the pair itself becomes Leaf(0).

    Returns False without touching the tree when no pair qualifies.
    Raises InvariantViolation if the qualifying pair holds a pair.
    """
    if not isinstance(number, Pair):
        return False

    stack: List[_Entry] = _children(1, number)
    left_neighbour: Optional[Leaf] = None
    exploded = False
    carry = 0

    while stack:
        level, parent, side = stack.pop()
        node = getattr(parent, side)

        if isinstance(node, Pair):
            if not exploded and level >= EXPLODE_LEVEL:
                left, right = node.left, node.right
                if not (isinstance(left, Leaf) and isinstance(right, Leaf)):
                    raise InvariantViolation(
                        f"pair at level {level} must hold two regular numbers: {node}"
                    )
                if left_neighbour is not None:
                    left_neighbour.value += left.value
                carry = right.value
                setattr(parent, side, Leaf(0))
                exploded = True
                continue
            stack.extend(_children(level + 1, node))
            continue

        if not exploded:
            left_neighbour = node
        else:
            node.value += carry
            return True

    return exploded


def split(number: SnailNumber) -> bool:
    """
    Split the leftmost leaf >= SPLIT_THRESHOLD into
    Pair(Leaf(v // 2), Leaf((v + 1) // 2)).

    Returns False without touching the tree when no leaf qualifies.
    A root leaf cannot be replaced in place: a large one raises
    InvariantViolation.
    """
    if isinstance(number, Leaf):
        if number.value >= SPLIT_THRESHOLD:
            raise InvariantViolation(f"cannot split a bare root leaf in place: {number}")
        return False

    stack: List[_Entry] = _children(1, number)  # type: ignore[arg-type]

    while stack:
        level, parent, side = stack.pop()
        node = getattr(parent, side)

        if isinstance(node, Pair):
            stack.extend(_children(level + 1, node))
            continue

        v = node.value
        if v >= SPLIT_THRESHOLD:
            setattr(parent, side, Pair(Leaf(v // 2), Leaf((v + 1) // 2)))
            return True

    return False
