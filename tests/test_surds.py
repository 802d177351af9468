import math

import pytest

from surdnest.integers import Integers
from surdnest.naturals import NestInvalid
from surdnest.surds import SurdSum


@pytest.fixture(scope="module")
def factory():
    return Integers()


def build(factory, *inside):
    s = SurdSum(factory)
    for value in inside:
        s.add(value)
    return s


def test_add_reduces_and_merges(factory):
    s = build(factory, 2, 12, 8)
    assert str(s) == "3√2+2√3"


def test_pow2_and_sqrt_round_trip(factory):
    s = build(factory, 2, 3)
    squared = s.pow2()
    assert str(squared) == "5+2√6"
    assert str(squared.sqrt()) == "√2+√3"


def test_pow2_growing_sums(factory):
    s = build(factory, 2, 3, 5)
    assert str(s.pow2()) == "10+2√6+2√10+2√15"
    s.add(7)
    assert str(s.pow2()) == "17+2√6+2√10+2√14+2√15+2√21+2√35"


@pytest.mark.parametrize(
    "base, pow2, surds",
    [
        ("1-√5", "6-2√5", [1, -5]),
        ("4+7√11", "555+56√11", [16, 7 * 7 * 11]),
        ("4-7√11", "555-56√11", [16, -7 * 7 * 11]),
    ],
)
def test_signed_round_trip(factory, base, pow2, surds):
    s = SurdSum(factory)
    s.add_signed(surds)
    assert str(s) == base
    squared = s.pow2()
    assert str(squared) == pow2
    assert str(squared.sqrt()) == base


@pytest.mark.parametrize(
    "a, b, c, pow2",
    [
        (2, 3, 5, "10+2√6+2√10+2√15"),
        (6, 10, 15, "31+10√6+6√10+4√15"),
        (4 * 3, 9 * 5, 16 * 7, "169+12√15+16√21+24√35"),
    ],
)
def test_triple_sums_pow2(factory, a, b, c, pow2):
    assert str(build(factory, a, b, c).pow2()) == pow2


@pytest.mark.parametrize(
    "surds, floor, ceil",
    [
        ([2, 3], 2, 4),
        ([3, 8], 3, 5),
        ([5, 7], 4, 6),
        ([3, 5, 7], 5, 8),
        ([4 * 3, 9 * 5, 16 * 7], 19, 22),
        ([3, 5, 7, 11], 8, 12),
    ],
)
def test_floor_ceil(factory, surds, floor, ceil):
    s = SurdSum(factory)
    s.add_signed(surds)
    assert s.floor_ceil() == (floor, ceil)
    assert floor <= float(s) <= ceil


@pytest.mark.parametrize(
    "surds, floor, ceil",
    [
        ([2, 3], 3, 4),
        ([3, 8], 4, 5),
        ([5, 7], 4, 5),
        ([3, 5, 7], 6, 7),
        ([4 * 3, 9 * 5, 16 * 7], 20, 21),
        ([3, 5, 7, 11], 9, 11),
    ],
)
def test_floor_ceil2(factory, surds, floor, ceil):
    s = SurdSum(factory)
    s.add_signed(surds)
    assert s.floor_ceil2() == (floor, ceil)
    assert floor <= float(s) <= ceil


def test_float_value(factory):
    s = build(factory, 2, 3)
    assert float(s) == pytest.approx(math.sqrt(2) + math.sqrt(3))


def test_keys_sorted(factory):
    s = build(factory, 7, 3, 5)
    assert s.keys() == [3, 5, 7]


def test_sub_removes_surd(factory):
    s = build(factory, 2, 3)
    s.sub(8)
    assert s.surds[2] == -1
    assert str(s) == "-√2+√3"


def test_add_sqrt_and_divide(factory):
    s = SurdSum(factory)
    s.add_sqrt(4, 1)
    s.add_sqrt(2, 3)
    s.divide(6)
    assert s.den == 3
    assert str(s) == "(2+√3)/3"
    assert s.tex() == "\\frac{2+\\sqrt{3}}{3}"


def test_tex_without_denominator(factory):
    assert build(factory, 2, 12, 8).tex() == "3\\sqrt{2}+2\\sqrt{3}"


def test_empty_sum_is_zero(factory):
    assert str(SurdSum(factory)) == "0"


def test_sqrt_rejects_other_shapes(factory):
    with pytest.raises(NestInvalid):
        build(factory, 2, 3).sqrt()


def test_sqrt_rejects_non_denestable(factory):
    s = SurdSum(factory)
    s.add_signed([1, 2])
    with pytest.raises(NestInvalid):
        s.sqrt()


def test_sqrt_needing_denominator_returns_none(factory):
    s = SurdSum(factory)
    s.add_signed([9, 5])
    assert str(s) == "3+√5"
    assert s.sqrt() is None