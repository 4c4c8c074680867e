from snailfish.reduction.rules import EXPLODE_LEVEL, SPLIT_THRESHOLD, explode, split  # noqa: F401
from snailfish.reduction.reducer import (  # noqa: F401
    TraceResult,
    TraceStep,
    is_reduced,
    reduce,
    trace_reduce,
)
