"""Hypothesis strategies for snailfish numbers."""

from hypothesis import strategies as st

from snailfish import Leaf, Pair


@st.composite
def snail_numbers(draw, max_depth=4, max_value=9):
    """
    Trees no deeper than max_depth (a leaf has depth 0).

    With the defaults every generated tree is already reduced.
    """
    if max_depth == 0 or draw(st.booleans()):
        return Leaf(draw(st.integers(min_value=0, max_value=max_value)))
    left = draw(snail_numbers(max_depth=max_depth - 1, max_value=max_value))
    right = draw(snail_numbers(max_depth=max_depth - 1, max_value=max_value))
    return Pair(left, right)


@st.composite
def snail_pairs(draw, max_depth=4, max_value=9):
    """Like snail_numbers, but the root is always a Pair."""
    left = draw(snail_numbers(max_depth=max_depth - 1, max_value=max_value))
    right = draw(snail_numbers(max_depth=max_depth - 1, max_value=max_value))
    return Pair(left, right)
