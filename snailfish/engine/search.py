"""
Pairwise search driver.

Reads a list of numbers and finds the largest magnitude of a + b over
every ordered pair of distinct positions. Addition is not commutative,
so both a + b and b + a are evaluated for each unordered pair.

Every evaluation works on fresh copies: combine() consumes its inputs
and the same source numbers are reused across many pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple, Union

from snailfish.core.number import SnailNumber
from snailfish.core.parser import parse_lines
from snailfish.engine.arith import combine, magnitude
from snailfish.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PairResult:
    magnitude: int
    left: int
    right: int


def read_numbers(path: Union[str, Path]) -> List[SnailNumber]:
    """
    Parse one number per line from a UTF-8 file.

    FileNotFoundError and ParseError propagate: a run never continues
    past bad input.
    """
    p = Path(path)
    with p.open(encoding="utf-8") as f:
        numbers = parse_lines(f)
    logger.debug("read %d numbers from %s", len(numbers), p)
    return numbers


def evaluate_pairs(numbers: Sequence[SnailNumber]) -> Iterator[Tuple[int, int, int]]:
    """
    Yield (i, j, magnitude(numbers[i] + numbers[j])) for every i < j,
    followed by the reversed ordering (j, i, ...).
    """
    for i, x in enumerate(numbers):
        for j in range(i + 1, len(numbers)):
            y = numbers[j]
            yield i, j, magnitude(combine(x.copy(), y.copy()))
            yield j, i, magnitude(combine(y.copy(), x.copy()))


def max_pair_magnitude(numbers: Sequence[SnailNumber]) -> PairResult:
    """
    Largest magnitude over all ordered pairs of distinct positions.
    The first ordering reaching the maximum wins ties.
    """
    if len(numbers) < 2:
        raise ValueError(f"need at least two numbers, got {len(numbers)}")

    pairs = evaluate_pairs(numbers)
    i, j, m = next(pairs)
    best = PairResult(magnitude=m, left=i, right=j)
    evaluated = 1
    for i, j, m in pairs:
        evaluated += 1
        if m > best.magnitude:
            best = PairResult(magnitude=m, left=i, right=j)

    logger.debug("evaluated %d ordered pairs", evaluated)
    return best
