"""
Explode and split rewrite rules, one rewrite per call.
"""

import pytest

from snailfish import InvariantViolation, Leaf, explode, pair_of, parse_number, split


def _explode_once(text: str) -> str:
    n = parse_number(text)
    assert explode(n) is True
    return str(n)


@pytest.mark.parametrize(
    "before, after",
    [
        ("[[[[[9,8],1],2],3],4]", "[[[[0,9],2],3],4]"),
        ("[7,[6,[5,[4,[3,2]]]]]", "[7,[6,[5,[7,0]]]]"),
        ("[[6,[5,[4,[3,2]]]],1]", "[[6,[5,[7,0]]],3]"),
        ("[[3,[2,[1,[7,3]]]],[6,[5,[4,[3,2]]]]]", "[[3,[2,[8,0]]],[9,[5,[4,[3,2]]]]]"),
        ("[[3,[2,[8,0]]],[9,[5,[4,[3,2]]]]]", "[[3,[2,[8,0]]],[9,[5,[7,0]]]]"),
    ],
)
def test_explode_examples(before, after):
    assert _explode_once(before) == after


def test_explode_only_leftmost_pair():
    # two explodable pairs; only the first one goes
    assert _explode_once("[[[[[1,1],[2,2]],0],0],0]") == "[[[[0,[3,2]],0],0],0]"


def test_explode_right_value_skips_zero_carry():
    assert _explode_once("[[[[[1,0],2],3],4],5]") == "[[[[0,2],3],4],5]"


def test_explode_right_neighbour_across_branches():
    # nearest right leaf lives in a different subtree of the root
    assert _explode_once("[[1,[2,[3,[4,5]]]],[6,7]]") == "[[1,[2,[7,0]]],[11,7]]"


def test_explode_no_candidate_returns_false_without_mutation():
    n = parse_number("[[[[1,2],3],4],5]")
    before = n.copy()
    assert explode(n) is False
    assert n == before


def test_explode_on_leaf_returns_false():
    n = Leaf(3)
    assert explode(n) is False
    assert n == Leaf(3)


def test_explode_deep_pair_of_pairs_is_invariant_violation():
    n = parse_number("[[[[[[1,2],3],4],5],6],7]")
    with pytest.raises(InvariantViolation):
        explode(n)


def test_explode_pair_with_pair_right_child_is_invariant_violation():
    n = parse_number("[[[[[1,[2,3]],4],5],6],7]")
    with pytest.raises(InvariantViolation):
        explode(n)


@pytest.mark.parametrize(
    "value, halves",
    [(10, (5, 5)), (11, (5, 6)), (12, (6, 6)), (15, (7, 8))],
)
def test_split_halves(value, halves):
    n = pair_of(value, 0)
    assert split(n) is True
    assert n.left == pair_of(*halves)
    assert n.right == Leaf(0)


def test_split_only_leftmost_large_leaf():
    n = parse_number("[[1,13],[11,2]]")
    assert split(n) is True
    assert str(n) == "[[1,[6,7]],[11,2]]"
    assert split(n) is True
    assert str(n) == "[[1,[6,7]],[[5,6],2]]"
    assert split(n) is False


def test_split_nothing_to_do():
    n = parse_number("[[9,9],[0,1]]")
    before = n.copy()
    assert split(n) is False
    assert n == before


def test_split_small_root_leaf_is_noop():
    assert split(Leaf(9)) is False


def test_split_large_root_leaf_is_invariant_violation():
    with pytest.raises(InvariantViolation):
        split(Leaf(10))


def test_split_does_not_explode():
    # a split that creates a pair at level 4 leaves it for the next explode
    n = parse_number("[[[[10,1],1],1],1]")
    assert split(n) is True
    assert str(n) == "[[[[[5,5],1],1],1],1]"
