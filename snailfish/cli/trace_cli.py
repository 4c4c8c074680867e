"""
Snailfish trace CLI

Shows every explode/split rewrite applied while reducing one expression.
An expression is a number, or numbers joined with "+": all terms but the
last are added normally, the final addition is traced.

Examples:
  python3 -m snailfish.cli.trace_cli "[[[[[9,8],1],2],3],4]"
  python3 -m snailfish.cli.trace_cli "[[[[4,3],4],4],[7,[[8,4],9]]] + [1,1]"
  echo "[[[[4,3],4],4],[7,[[8,4],9]]] + [1,1]" | python3 -m snailfish.cli.trace_cli --stdin
  python3 -m snailfish.cli.trace_cli --json --file expr.txt

Key rule: per-step stats are derived from the step text, re-parsed, so the
JSON contract does not depend on TraceStep internals.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from snailfish.cli._common import configure_logging, emit, fail, finalize_payload
from snailfish.core.number import Pair, SnailNumber
from snailfish.core.parser import parse_number
from snailfish.engine.analyze import NumberStats, analyze_number
from snailfish.engine.arith import combine, magnitude
from snailfish.errors import ParseError
from snailfish.reduction.reducer import trace_reduce

SCHEMA_TAG = "snailfish-trace.v1"
SCHEMA_JSON = "docs/schemas/trace_result_schema.json"


def parse_expression(expr: str) -> SnailNumber:
    """
    Parse "n0 + n1 + ... + nk" into the unreduced Pair(n0 + ... + nk-1, nk).
    A single term is returned as parsed.
    """
    terms = expr.split("+")
    if any(not t.strip() for t in terms):
        raise ParseError("Empty term in expression", expr)

    numbers = [parse_number(t) for t in terms]
    if len(numbers) == 1:
        return numbers[0]

    acc = numbers[0]
    for n in numbers[1:-1]:
        acc = combine(acc, n)
    return Pair(acc, numbers[-1])


def _stats_obj(s: NumberStats) -> Dict[str, int]:
    return {"nodes": s.nodes, "depth": s.depth, "leaves": s.leaves, "max_leaf": s.max_leaf}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Trace the reduction of a snailfish expression.")
    parser.add_argument("expr", nargs="?", help="Number or 'a + b + ...' expression")
    parser.add_argument("--json", action="store_true", help="Emit JSON only")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--max-steps", type=int, default=None, help="Cap on rewrites")
    parser.add_argument("--stdin", action="store_true", help="Read expression from stdin")
    parser.add_argument("--file", type=str, default=None, help="Read expression from file")
    parser.add_argument("--schema", action="store_true", help="Print schema tag + schema file and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = parser.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_JSON}")
        return 0

    if args.stdin and args.file:
        return fail("--stdin and --file are mutually exclusive")

    try:
        configure_logging(args.verbose)
    except ValueError as e:
        return fail(str(e))

    if args.stdin:
        raw = sys.stdin.read().strip()
    elif args.file is not None:
        try:
            raw = Path(args.file).read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return fail(f"input file not found: {args.file}")
    else:
        if args.expr is None:
            parser.error("the following arguments are required: expr")
        raw = args.expr

    try:
        x = parse_expression(raw)
    except ParseError as e:
        return fail(f"invalid expression: {e}")

    input_text = str(x)
    tr = trace_reduce(x, max_steps=args.max_steps)
    rewrites = len(tr.steps) - 1

    if not args.json:
        for s in tr.steps:
            print(f"{s.i:03d}: {s.action:<7} {s.value}")
        print(f"result: {tr.result}")
        print(f"magnitude: {magnitude(tr.result)}")
        print(f"steps: {rewrites}")
        if not tr.converged:
            print("converged: no")
        return 0

    derived_steps = []
    prev: Optional[NumberStats] = None
    for s in tr.steps:
        st = analyze_number(parse_number(s.value))
        derived_steps.append(
            {
                "i": s.i,
                "action": s.action,
                "value": s.value,
                "nodes": st.nodes,
                "depth": st.depth,
                "delta_nodes": 0 if prev is None else st.nodes - prev.nodes,
                "delta_depth": 0 if prev is None else st.depth - prev.depth,
            }
        )
        prev = st

    payload: Dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_json": SCHEMA_JSON,
        "input": input_text,
        "result": str(tr.result),
        "magnitude": magnitude(tr.result),
        "converged": tr.converged,
        "stats": {
            "input": _stats_obj(analyze_number(parse_number(input_text))),
            "result": _stats_obj(analyze_number(tr.result)),
        },
        "steps": derived_steps,
    }
    emit(finalize_payload(payload, kind="trace"), pretty=bool(args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
