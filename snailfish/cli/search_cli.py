"""
Snailfish search CLI

Reads one snailfish number per line and prints the largest magnitude of
a + b over all ordered pairs of distinct lines:

  python3 -m snailfish.cli.search_cli input.txt
  res 3993

The input path defaults to $SNAILFISH_INPUT, then input.txt.

  --sum     also print the magnitude of the sum of all lines ("sum <n>")
  --json    emit a JSON payload instead (schema snailfish-search.v1)
  --schema  print schema tag + schema file and exit

Malformed input or a missing file exits with status 2.
"""

from __future__ import annotations

import argparse
from typing import Any, List, Optional

from snailfish import config
from snailfish.cli._common import (
    configure_logging,
    emit,
    fail,
    finalize_payload,
    inputs_hash,
    utc_now_z,
)
from snailfish.engine.arith import magnitude, sum_numbers
from snailfish.engine.search import max_pair_magnitude, read_numbers
from snailfish.errors import ParseError
from snailfish.logging_utils import get_logger

SCHEMA_TAG = "snailfish-search.v1"
SCHEMA_JSON = "docs/schemas/search_result_schema.json"

# named explicitly: under `python -m` __name__ is "__main__"
logger = get_logger("snailfish.cli.search_cli")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="snailfish",
        description="Largest magnitude of a + b over all ordered pairs of input numbers.",
    )
    ap.add_argument("input", nargs="?", default=None, help="Input file, one number per line.")
    ap.add_argument("--sum", action="store_true", help="Also report the magnitude of the full sum.")
    ap.add_argument("--json", action="store_true", help="Emit JSON only.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema file and exit.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_JSON}")
        return 0

    try:
        configure_logging(args.verbose)
    except ValueError as e:
        return fail(str(e))
    path = args.input if args.input is not None else config.input_path()

    try:
        numbers = read_numbers(path)
    except FileNotFoundError:
        return fail(f"input file not found: {path}")
    except ParseError as e:
        return fail(f"invalid input in {path}: {e}")

    if len(numbers) < 2:
        return fail(f"need at least two numbers in {path}, got {len(numbers)}")

    texts = [str(n) for n in numbers]
    total = magnitude(sum_numbers(numbers)) if args.sum else None
    best = max_pair_magnitude(numbers)
    logger.info("best pair %d + %d -> %d", best.left, best.right, best.magnitude)

    if not args.json:
        if total is not None:
            print(f"sum {total}")
        print(f"res {best.magnitude}")
        return 0

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_json": SCHEMA_JSON,
        "input": str(path),
        "count": len(numbers),
        "max_magnitude": best.magnitude,
        "best_pair": {
            "left": best.left,
            "right": best.right,
            "left_number": texts[best.left],
            "right_number": texts[best.right],
        },
        "meta": {
            "tool": "search_cli",
            "generated_at": utc_now_z(),
            "determinism": {"inputs_hash": inputs_hash(texts)},
        },
    }
    if total is not None:
        payload["sum_magnitude"] = total

    emit(finalize_payload(payload, kind="search"), pretty=bool(args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
