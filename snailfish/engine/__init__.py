from snailfish.engine.arith import combine, magnitude, sum_numbers  # noqa: F401
from snailfish.engine.analyze import NumberStats, analyze_number  # noqa: F401
from snailfish.engine.search import (  # noqa: F401
    PairResult,
    evaluate_pairs,
    max_pair_magnitude,
    read_numbers,
)
