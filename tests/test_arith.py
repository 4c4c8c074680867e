import pytest

from conftest import HOMEWORK, HOMEWORK_SUM, HOMEWORK_SUM_MAGNITUDE
from snailfish import combine, is_reduced, magnitude, pair_of, parse_number, sum_numbers


def _sum_texts(texts):
    return sum_numbers([parse_number(t) for t in texts])


def test_combine_builds_pair_and_reduces():
    a = parse_number("[[[[4,3],4],4],[7,[[8,4],9]]]")
    b = parse_number("[1,1]")
    res = combine(a, b)
    assert str(res) == "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"
    assert is_reduced(res)


def test_combine_consumes_inputs():
    a = parse_number("[[[[4,3],4],4],[7,[[8,4],9]]]")
    b = parse_number("[1,1]")
    res = combine(a, b)
    # the result adopted the operands and rewrote them in place
    assert res.left is a
    assert res.right is b
    assert str(b) == "[8,1]"


def test_combine_is_not_commutative():
    x, y = "[[1,1],[2,2]]", "[[3,3],[4,4]]"
    ab = combine(parse_number(x), parse_number(y))
    ba = combine(parse_number(y), parse_number(x))
    assert ab != ba
    assert str(ab) == "[[[1,1],[2,2]],[[3,3],[4,4]]]"


def test_combine_symmetric_inputs_commute():
    x = "[[1,2],[2,1]]"
    assert combine(parse_number(x), parse_number(x)) == combine(parse_number(x), parse_number(x))


@pytest.mark.parametrize(
    "count, expected",
    [
        (4, "[[[[1,1],[2,2]],[3,3]],[4,4]]"),
        (5, "[[[[3,0],[5,3]],[4,4]],[5,5]]"),
        (6, "[[[[5,0],[7,4]],[5,5]],[6,6]]"),
    ],
)
def test_sum_of_small_pairs(count, expected):
    texts = [f"[{k},{k}]" for k in range(1, count + 1)]
    assert str(_sum_texts(texts)) == expected


def test_sum_homework():
    res = _sum_texts(HOMEWORK)
    assert str(res) == HOMEWORK_SUM
    assert magnitude(res) == HOMEWORK_SUM_MAGNITUDE


def test_sum_numbers_leaves_inputs_untouched():
    numbers = [parse_number(t) for t in HOMEWORK]
    before = [n.copy() for n in numbers]
    sum_numbers(numbers)
    assert numbers == before


def test_sum_numbers_single_and_empty():
    assert sum_numbers([pair_of(1, 2)]) == pair_of(1, 2)
    with pytest.raises(ValueError):
        sum_numbers([])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("9", 9),
        ("[9,1]", 29),
        ("[[9,1],[1,9]]", 129),
        ("[[1,2],[[3,4],5]]", 143),
        ("[[[[0,7],4],[[7,8],[6,0]]],[8,1]]", 1384),
        ("[[[[1,1],[2,2]],[3,3]],[4,4]]", 445),
        ("[[[[3,0],[5,3]],[4,4]],[5,5]]", 791),
        ("[[[[5,0],[7,4]],[5,5]],[6,6]]", 1137),
        ("[[[[8,7],[7,7]],[[8,6],[7,7]]],[[[0,7],[6,6]],[8,7]]]", 3488),
    ],
)
def test_magnitude(text, expected):
    assert magnitude(parse_number(text)) == expected


def test_magnitude_is_read_only():
    n = parse_number("[[1,2],[[3,4],5]]")
    before = n.copy()
    magnitude(n)
    assert n == before
