import pytest

from surdnest.algebraic import Algebraic
from surdnest.naturals import NestInvalid
from surdnest.tri import Tri, TriFactory
from surdnest.tri2 import Tri2Factory, new_tri2


def _factory(max_side):
    tf = TriFactory(max_side)
    tf.compute_sin_cos()
    return Tri2Factory(tf)


def test_single_equilateral_pair():
    factory = _factory(1)
    factory.new_all()
    assert len(factory.tri2s) == 1
    assert str(factory.tri2s[0]) == "[1 1 1]'0 [1 1 1]'0 sin=√3/2 cos=-1/2"


def test_pairs_order_for_max_two():
    factory = _factory(2)
    got = [(p.ta.abc, p.va, p.tb.abc, p.vb) for p in factory.pairs()]
    assert got == [
        ([1, 1, 1], 0, [1, 1, 1], 0),
        ([1, 1, 1], 0, [2, 2, 1], 0),
        ([1, 1, 1], 0, [2, 2, 1], 2),
        ([2, 2, 1], 0, [2, 2, 1], 0),
        ([2, 2, 1], 2, [2, 2, 1], 0),
        ([2, 2, 1], 2, [2, 2, 1], 2),
    ]


@pytest.mark.parametrize("max_side, count", [(1, 1), (2, 6), (3, 45)])
def test_pair_counts(max_side, count):
    factory = _factory(max_side)
    factory.new_all()
    assert len(factory.tri2s) == count


def test_right_angle_doubled_is_straight():
    factory = _factory(5)
    tri = next(t for t in factory.tri_factory.t1s if t.abc == [5, 4, 3])
    pair = factory.new_pair(tri, tri, 0, 0)
    assert str(pair.sin) == "0"
    assert str(pair.cos) == "-1"


def test_equal_and_not_equal_sin_partition():
    target = Algebraic(2, 0, 1, 3)
    equal = _factory(2)
    equal.new_equal_sin(target)
    other = _factory(2)
    other.new_not_equal_sin(target)
    assert len(equal.tri2s) + len(other.tri2s) == 6
    assert all(p.sin == target for p in equal.tri2s)
    assert all(p.sin != target for p in other.tri2s)
    assert equal.tri2s[0].ta.abc == [1, 1, 1]


def test_equal_sin_single():
    factory = _factory(1)
    factory.new_equal_sin(Algebraic(2, 0, 1, 3))
    assert len(factory.tri2s) == 1
    none = _factory(1)
    none.new_not_equal_sin(Algebraic(2, 0, 1, 3))
    assert none.tri2s == []


@pytest.mark.parametrize("va, vb", [(-1, 0), (0, 3), (3, 1)])
def test_new_tri2_invalid_vertex(va, vb):
    tri = Tri([1, 1, 1])
    with pytest.raises(NestInvalid):
        new_tri2(tri, tri, va, vb)


def test_new_tri2_missing_triangle():
    with pytest.raises(NestInvalid):
        new_tri2(None, Tri([1, 1, 1]), 0, 0)


def test_new_pair_without_sines():
    factory = Tri2Factory(TriFactory(1))
    tri = factory.tri_factory.t1s[0]
    with pytest.raises(NestInvalid):
        factory.new_pair(tri, tri, 0, 0)