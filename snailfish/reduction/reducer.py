"""
Reduce-to-fixed-point loop over the explode/split rules.

reduce()        mutates in place until neither rule applies
trace_reduce()  same loop, recording each rewrite (debug lens)
is_reduced()    read-only check of the normal form
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from snailfish.core.number import Leaf, SnailNumber
from snailfish.logging_utils import get_logger
from snailfish.reduction.rules import EXPLODE_LEVEL, SPLIT_THRESHOLD, explode, split

logger = get_logger(__name__)


def reduce(number: SnailNumber) -> None:
    """Apply explode (preferred) and split until neither applies."""
    rewrites = 0
    while explode(number) or split(number):
        rewrites += 1
    logger.debug("reduced in %d rewrites", rewrites)


def is_reduced(number: SnailNumber) -> bool:
    """True if no pair sits at EXPLODE_LEVEL or deeper and no leaf needs a split."""
    stack = [(0, number)]
    while stack:
        level, node = stack.pop()
        if isinstance(node, Leaf):
            if node.value >= SPLIT_THRESHOLD:
                return False
            continue
        if level >= EXPLODE_LEVEL:
            return False
        stack.append((level + 1, node.right))
        stack.append((level + 1, node.left))
    return True


@dataclass(frozen=True)
class TraceStep:
    i: int
    action: str
    value: str


@dataclass(frozen=True)
class TraceResult:
    result: SnailNumber
    steps: List[TraceStep]
    converged: bool


def trace_reduce(number: SnailNumber, *, max_steps: Optional[int] = None) -> TraceResult:
    """
    Reduce `number` in place, capturing the canonical text after every rewrite.

    Step 0 is the input ("start"). If `max_steps` rewrites happen without
    reaching the normal form, the result is returned with converged=False.
    """
    steps: List[TraceStep] = [TraceStep(i=0, action="start", value=str(number))]

    while max_steps is None or len(steps) <= max_steps:
        if explode(number):
            action = "explode"
        elif split(number):
            action = "split"
        else:
            return TraceResult(result=number, steps=steps, converged=True)
        steps.append(TraceStep(i=len(steps), action=action, value=str(number)))

    # capped: converged only if nothing is left to do
    return TraceResult(result=number, steps=steps, converged=is_reduced(number))
