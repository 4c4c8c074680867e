# snailfish/__init__.py
"""
snailfish public API surface.

    - Tree model: SnailNumber, Leaf, Pair, pair_of
    - Text: parse_number, format_number, parse_lines
    - Reduction: explode, split, reduce, is_reduced, trace_reduce
    - Arithmetic: combine, magnitude, sum_numbers
    - Search: read_numbers, evaluate_pairs, max_pair_magnitude
    - Errors: ParseError, InvariantViolation
"""

from __future__ import annotations

from .errors import InvariantViolation, ParseError

# ---------------------------------------------------------------------------
# Tree model and text
# ---------------------------------------------------------------------------

from .core.number import Leaf, Pair, SnailNumber, pair_of
from .core.parser import format_number, parse_lines, parse_number

# ---------------------------------------------------------------------------
# Reduction
# ---------------------------------------------------------------------------

from .reduction.rules import explode, split
from .reduction.reducer import TraceResult, TraceStep, is_reduced, reduce, trace_reduce

# ---------------------------------------------------------------------------
# Arithmetic and search
# ---------------------------------------------------------------------------

from .engine.arith import combine, magnitude, sum_numbers
from .engine.search import PairResult, evaluate_pairs, max_pair_magnitude, read_numbers


__all__ = [
    # errors
    "ParseError",
    "InvariantViolation",

    # tree model
    "SnailNumber",
    "Leaf",
    "Pair",
    "pair_of",

    # text
    "parse_number",
    "format_number",
    "parse_lines",

    # reduction
    "explode",
    "split",
    "reduce",
    "is_reduced",
    "trace_reduce",
    "TraceStep",
    "TraceResult",

    # arithmetic
    "combine",
    "magnitude",
    "sum_numbers",

    # search
    "read_numbers",
    "evaluate_pairs",
    "max_pair_magnitude",
    "PairResult",
]
