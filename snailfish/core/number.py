"""
SNAILFISH NUMBER CORE
=====================
A snailfish number is a binary tree:

    Leaf(v)        a non-negative integer
    Pair(l, r)     two owned sub-numbers

Nodes are mutable: the reducer rewrites trees in place (explode turns a
Pair into Leaf(0), split turns a Leaf into a Pair). A Pair owns its two
children exclusively, so no node is ever reachable from two parents.
"""

from __future__ import annotations

from typing import Iterator, List


class SnailNumber:
    """Common base for Leaf and Pair."""

    __slots__ = ()

    # nodes are mutated in place, so they must not be used as dict keys
    __hash__ = None  # type: ignore[assignment]

    # ---------- primitive queries ----------

    def is_leaf(self) -> bool:
        return isinstance(self, Leaf)

    def is_pair(self) -> bool:
        return isinstance(self, Pair)

    # ---------- structural analysis tools ----------

    def depth(self) -> int:
        if isinstance(self, Leaf):
            return 0
        return 1 + max(self.left.depth(), self.right.depth())

    def count_nodes(self) -> int:
        if isinstance(self, Leaf):
            return 1
        return 1 + self.left.count_nodes() + self.right.count_nodes()

    def iter_leaves(self) -> Iterator["Leaf"]:
        """Leaves in left-to-right order."""
        stack: List[SnailNumber] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Pair):
                stack.append(node.right)
                stack.append(node.left)
            else:
                yield node  # type: ignore[misc]

    def leaves(self) -> List[int]:
        return [leaf.value for leaf in self.iter_leaves()]

    # ---------- arithmetic ----------

    def __add__(self, other: "SnailNumber") -> "SnailNumber":
        # consumes both operands, same as combine()
        from snailfish.engine.arith import combine

        if not isinstance(other, SnailNumber):
            return NotImplemented
        return combine(self, other)

    def copy(self) -> "SnailNumber":
        raise NotImplementedError


class Leaf(SnailNumber):
    """A regular number."""

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Leaf value must be int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"Leaf value must be non-negative, got {value}")
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Leaf) and self.value == other.value

    def __repr__(self) -> str:
        return f"Leaf({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def copy(self) -> "Leaf":
        return Leaf(self.value)


class Pair(SnailNumber):
    """Two owned sub-numbers. Order matters: Pair(a, b) != Pair(b, a)."""

    __slots__ = ("left", "right")

    def __init__(self, left: SnailNumber, right: SnailNumber) -> None:
        for side, child in (("left", left), ("right", right)):
            if not isinstance(child, SnailNumber):
                raise TypeError(f"Pair {side} must be a SnailNumber, got {type(child).__name__}")
        if left is right:
            raise ValueError("Pair children must be distinct objects")
        self.left = left
        self.right = right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return False
        return self.left == other.left and self.right == other.right

    def __repr__(self) -> str:
        return f"Pair({self.left!r}, {self.right!r})"

    def __str__(self) -> str:
        return f"[{self.left},{self.right}]"

    def copy(self) -> "Pair":
        return Pair(self.left.copy(), self.right.copy())


def pair_of(a: int, b: int) -> Pair:
    """Shorthand for Pair(Leaf(a), Leaf(b))."""
    return Pair(Leaf(a), Leaf(b))
