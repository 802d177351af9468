import pytest

from surdnest.algebraic import Algebraic, format_surd_sum
from surdnest.naturals import NestInvalid, NestOverflow


@pytest.mark.parametrize(
    "x, y, z, expected",
    [
        (0, 0, 0, "0"),
        (0, 0, 1, "0"),
        (0, 1, 1, "1"),
        (0, 1, 4, "√4"),
        (0, 2, 4, "2√4"),
        (1, 2, 4, "1+2√4"),
        (2, 2, -4, "2+2i√4"),
        (3, -2, -4, "3-2i√4"),
        (-4, -2, -4, "-4-2i√4"),
        (-5, -2, -1, "-5-2i"),
        (-5, -1, -1, "-5-i"),
        (-6, -2, 0, "-6"),
        (-7, 0, 0, "-7"),
        (-8, 2, 1, "-8+2"),
    ],
)
def test_format_surd_sum(x, y, z, expected):
    assert format_surd_sum(x, y, z) == expected


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((0,), "NaN"),
        ((1,), "Invalid"),
        ((1, 2, 3), "Invalid"),
        ((1, 2, 3, 4, 5), "Invalid"),
        ((1, 2, 3, 4, 5, 6, 7), "Invalid"),
        ((0, 1), "NaN"),
        ((7, 0), "0"),
        ((7, 7), "7/7"),
        ((7, 1), "1/7"),
        ((1, 7), "7"),
        ((1, 2, 3, 4), "2+3√4"),
        ((2, 3, 4, 5), "(3+4√5)/2"),
        ((2, 0, 1, 1), "1/2"),
        ((1, 0, 1, 1), "1"),
        ((1, 0, 0, 0), "0"),
        ((1, 2, 3, 0), "2"),
        ((1, 2, 3, 4, 5, 6), "2+3√4+5√6"),
        ((2, 3, 4, 5, 6, 7), "(3+4√5+6√7)/2"),
        ((2, 0, 4, 5, 6, 7), "(4√5+6√7)/2"),
        ((2, 3, 4, 0, 6, 7), "(3+6√7)/2"),
        ((2, 3, 0, 5, 6, 7), "(3+6√7)/2"),
        ((2, 3, 4, 5, 0, 7), "(3+4√5)/2"),
        ((2, 3, 4, 5, 6, 0), "(3+4√5)/2"),
        ((2, 0, 4, 0, 6, 7), "6√7/2"),
        ((2, 0, 4, 5, 0, 7), "4√5/2"),
        ((2, 3, 0, 5, 0, 7), "3/2"),
        ((2, 0, 0, 5, 0, 7), "0"),
        ((2, 3, 4, 1, 6, 7), "(3+4+6√7)/2"),
        ((2, 3, 4, -1, 6, 7), "(3+4i+6√7)/2"),
        ((2, 0, 4, 5, 6, 1), "(4√5+6)/2"),
        ((2, 0, 4, 5, 6, -1), "(4√5+6i)/2"),
        ((2, 2, 2, 2, 2, 2), "(2+2√2+2√2)/2"),
        ((1, -1, -1, -1, -1, -1), "-1-i-i"),
        ((1, -1, -1, 1, -1, 1), "-1-1-1"),
        ((2, 3, 4, 5, 6, 7, 8, 9), "(3+4√5+6√(7+8√9))/2"),
        ((2, 3, 4, 5, 1, 7, 8, 9), "(3+4√5+√(7+8√9))/2"),
        ((2, 3, 4, 5, -1, 7, 8, 9), "(3+4√5-√(7+8√9))/2"),
        ((2, 3, 4, 5, 6, 7, 8, 0), "(3+4√5+6√(7))/2"),
        ((2, 3, 4, 5, 6, 7, 0, 9), "(3+4√5+6√(7))/2"),
        ((2, 3, 4, 5, 6, 7, 8, 1), "(3+4√5+6√(7+8))/2"),
        ((2, 3, 4, 5, 6, 7, 1, 9), "(3+4√5+6√(7+√9))/2"),
        ((2, 3, 4, 5, 6, 0, 8, 9), "(3+4√5+6√(8√9))/2"),
        ((2, 3, 4, 5, 6, 0, 0, 9), "(3+4√5)/2"),
        ((2, 3, 4, 5, 6, 0, 8, 0), "(3+4√5)/2"),
    ],
)
def test_str(parts, expected):
    assert str(Algebraic(*parts)) == expected


def test_constructors():
    assert str(Algebraic.from_int(3)) == "3"
    assert str(Algebraic.from_rational(7, 5)) == "7/5"
    assert str(Algebraic.from_surd(5)) == "√5"
    assert Algebraic.from_surd(2).equals(1, 0, 1, 2)


def test_num_at():
    q = Algebraic(1, 7)
    assert q.num_at(0) == 7
    assert q.num_at(1) is None


def test_equals_and_eq():
    q = Algebraic(2, 3, 4, 5)
    assert q.equals(2, 3, 4, 5)
    assert not q.equals(2, 3, 4)
    assert not q.equals(3, 3, 4, 5)
    assert q == Algebraic(2, 3, 4, 5)
    assert not (q == Algebraic(2, 3, 4, 6))
    assert not (q == Algebraic(2, 3))


def test_add_int():
    q = Algebraic(2, 1, 1, 5)
    assert q.add_int(1) is q
    assert str(q) == "(3+√5)/2"


def test_add_int_empty_and_overflow():
    assert Algebraic(1).add_int(1) is None
    with pytest.raises(NestOverflow):
        Algebraic(1, 0x7FFFFFFF).add_int(1)


def test_predicates():
    assert Algebraic(1, 7).is_integer() == 7
    assert Algebraic(2, 7).is_integer() is None
    assert Algebraic(3, 1).is_rational()
    assert not Algebraic(2, 1).is_rational()
    assert Algebraic(2, 0, 1, 3).is_rational_surd(3)
    assert not Algebraic(1, 0, 1, 3).is_rational_surd(3)
    assert Algebraic(1, 0, 0, 1, 1, 5, 4, 3).is_nest(5, 4)
    assert not Algebraic(1, 0, 1, 3).is_nest(5, 4)


def test_neg():
    q = Algebraic(2, 3, 4, 5, 6, 7, 8, 9).neg()
    assert q.num == [-3, -4, 5, -6, 7, 8, 9]
    assert str(q) == "(-3-4√5-6√(7+8√9))/2"


def test_deeper():
    q = Algebraic(1, 2)
    r = Algebraic(1, 0, 1, 3)
    assert q.deeper(r) == (False, r, q)
    this, big, small = r.deeper(q)
    assert this is True and big is r and small is q


def test_lcm():
    assert Algebraic(6, 1).lcm(Algebraic(4, 3)) == (12, 2, 3, 1, 3)


def test_greater_than_z():
    assert Algebraic(2, 5).greater_than_z(2) is True
    assert Algebraic(2, 4).greater_than_z(2) is False
    with pytest.raises(NestInvalid):
        Algebraic(1, 0, 1, 2).greater_than_z(1)


def test_key():
    assert Algebraic(2, 3, 4, 5).key() == "2,3,4,5"


def test_is_zero():
    assert Algebraic(1).is_zero()
    assert Algebraic(1, 0, 5).is_zero()
    assert not Algebraic(1, 3).is_zero()


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((1,), "0"),
        ((1, 7), "7"),
        ((2, 1), "\\frac{1}{2}"),
        ((8, -1), "-\\frac{1}{8}"),
        ((7, 0), "0"),
        ((2, 0, 1, 3), "\\frac{\\sqrt{3}}{2}"),
        ((8, 0, 3, 7), "\\frac{3\\sqrt{7}}{8}"),
        ((4, -1, 1, 5), "-\\frac{1-\\sqrt{5}}{4}"),
        ((2, 3, 2, 5), "\\frac{3+2\\sqrt{5}}{2}"),
        ((1, 0, 1, 2), "\\sqrt{2}"),
        ((1, 2, -3, 5), "2-3\\sqrt{5}"),
        ((2, 0, 0, 1, 3, 5, 4, 3), "\\frac{3\\sqrt{5+4\\sqrt{3}}}{2}"),
        ((1, 0, 0, 1, -1, 5, -4, 3), "-\\sqrt{5-4\\sqrt{3}}"),
        ((1, 1, 2, 3, 4, 5), "Cannot print A32 den=1 num=[1 2 3 4 5]"),
    ],
)
def test_tex(parts, expected):
    assert Algebraic(*parts).tex() == expected