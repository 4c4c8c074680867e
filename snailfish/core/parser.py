"""
Snailfish number parser.

Parses the canonical bracket notation:

  Number := Leaf | "[" Number "," Number "]"
  Leaf   := [0-9]+

Examples:
  7
  [1,2]
  [[1,9],[8,5]]

Surrounding whitespace (e.g. a line's newline) is ignored; whitespace
inside a number is not.

The parser makes one left-to-right pass with an explicit stack of open
groups, so nesting depth is bounded by MAX_NESTING rather than by the
host recursion limit.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from snailfish.core.number import Leaf, Pair, SnailNumber
from snailfish.errors import ParseError

MAX_NESTING = 256

_LEAF_RE = re.compile(r"[0-9]+")


class _Group:
    """An open '[' waiting for its two members."""

    __slots__ = ("pos", "left", "right", "comma")

    def __init__(self, pos: int) -> None:
        self.pos = pos
        self.left: Optional[SnailNumber] = None
        self.right: Optional[SnailNumber] = None
        self.comma = False

    def expects_number(self) -> bool:
        return self.right is None if self.comma else self.left is None

    def put(self, n: SnailNumber) -> None:
        if self.comma:
            self.right = n
        else:
            self.left = n


def parse_number(text: str) -> SnailNumber:
    """
    Parse a snailfish number literal into a fresh tree.
    Raises ParseError on invalid syntax or nesting deeper than MAX_NESTING.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_number expects str, got {type(text).__name__}")
    s = text.strip()
    if not s:
        raise ParseError("Empty snailfish number", text)

    stack: List[_Group] = []
    root: Optional[SnailNumber] = None

    def expects_number() -> bool:
        return stack[-1].expects_number() if stack else root is None

    def put(n: SnailNumber) -> None:
        nonlocal root
        if stack:
            stack[-1].put(n)
        else:
            root = n

    i = 0
    while i < len(s):
        ch = s[i]

        if ch == "[" or ch.isdigit():
            if not expects_number():
                if not stack:
                    raise ParseError(f"Trailing junk {s[i:]!r}", s, i)
                g = stack[-1]
                raise ParseError("Expected ']'" if g.comma else "Expected ','", s, i)

            if ch == "[":
                if len(stack) >= MAX_NESTING:
                    raise ParseError(f"Nesting deeper than {MAX_NESTING}", s, i)
                stack.append(_Group(i))
                i += 1
                continue

            m = _LEAF_RE.match(s, i)
            if m is None:
                raise ParseError(f"Invalid regular number {ch!r}", s, i)
            put(Leaf(int(m.group())))
            i = m.end()
            continue

        if ch == ",":
            if not stack:
                raise ParseError("Unexpected ',' outside a pair", s, i)
            g = stack[-1]
            if g.comma:
                raise ParseError("Expected exactly one top-level ',' in pair", s, i)
            if g.left is None:
                raise ParseError("Expected number", s, i)
            g.comma = True
            i += 1
            continue

        if ch == "]":
            if not stack:
                raise ParseError("Unbalanced ']'", s, i)
            g = stack.pop()
            if g.left is None:
                raise ParseError("Expected number", s, i)
            if not g.comma:
                raise ParseError("Expected ','", s, i)
            if g.right is None:
                raise ParseError("Expected number", s, i)
            put(Pair(g.left, g.right))
            i += 1
            continue

        raise ParseError(f"Invalid regular number {ch!r}", s, i)

    if stack:
        raise ParseError("Unbalanced '['", s, stack[-1].pos)
    if root is None:
        raise ParseError("Expected number", s, 0)
    return root


def format_number(n: SnailNumber) -> str:
    """Canonical text: leaves as digits, pairs as [left,right], no spaces."""
    return str(n)


def parse_lines(lines: Iterable[str]) -> List[SnailNumber]:
    """
    Parse one number per line. Every line must hold a number: a blank
    line is a ParseError like any other malformed line.
    ParseError messages are prefixed with the 1-based line number.
    """
    out: List[SnailNumber] = []
    for lineno, line in enumerate(lines, start=1):
        try:
            out.append(parse_number(line))
        except ParseError as e:
            raise ParseError(f"line {lineno}: {e}", line) from e
    return out
