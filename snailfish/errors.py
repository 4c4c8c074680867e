"""
Error taxonomy for snailfish.

- ParseError         : malformed number text (user input). Fatal for a run.
- InvariantViolation : the reducer met a tree it can never produce
                       (a deep pair holding a pair, a root leaf that would
                       need rewriting in place). Signals a logic defect.

Neither is retried or swallowed anywhere in the library.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Malformed snailfish-number text."""

    def __init__(self, message: str, text: str = "", position: Optional[int] = None) -> None:
        self.text = text
        self.position = position
        if position is not None:
            message = f"{message} at pos {position}"
        super().__init__(message)


class InvariantViolation(RuntimeError):
    """Tree shape the reduction rules never produce."""
    pass
