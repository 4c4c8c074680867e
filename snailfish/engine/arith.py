"""
Snailfish arithmetic: addition (combine), magnitude, and the list sum.

combine() consumes its operands: the new pair adopts them and the reducer
rewrites them in place. Callers that reuse a number must pass a copy.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from snailfish.core.number import Pair, SnailNumber
from snailfish.reduction.reducer import reduce

LEFT_WEIGHT = 3
RIGHT_WEIGHT = 2


def combine(a: SnailNumber, b: SnailNumber) -> Pair:
    """a + b: Pair(a, b) reduced to normal form. Not commutative."""
    res = Pair(a, b)
    reduce(res)
    return res


def magnitude(number: SnailNumber) -> int:
    """
    3 * magnitude(left) + 2 * magnitude(right) for a pair, the value for a leaf.

    Each leaf contributes value * (product of the weights on its path), so
    one pass with a multiplier stack gives the same total.
    """
    stack: List[Tuple[int, SnailNumber]] = [(1, number)]
    total = 0
    while stack:
        mult, node = stack.pop()
        if isinstance(node, Pair):
            stack.append((mult * RIGHT_WEIGHT, node.right))
            stack.append((mult * LEFT_WEIGHT, node.left))
        else:
            total += mult * node.value
    return total


def sum_numbers(numbers: Sequence[SnailNumber]) -> SnailNumber:
    """
    Left fold of combine over `numbers`: ((n0 + n1) + n2) + ...

    Works on copies; the caller's numbers are left untouched.
    """
    if not numbers:
        raise ValueError("sum_numbers needs at least one number")
    acc = numbers[0].copy()
    for n in numbers[1:]:
        acc = combine(acc, n.copy())
    return acc
