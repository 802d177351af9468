"""Pairs of meccano triangles joined at a vertex, with the sine and cosine of the summed angle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .algebraic import Algebraic
from .naturals import NestInvalid
from .tri import Tri, TriFactory


def _go_list(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def _distinct_positions(sides: list[int]) -> list[int]:
    """Positions of the first occurrence of each side length."""
    seen: set[int] = set()
    positions = []
    for pos, side in enumerate(sides):
        if side not in seen:
            seen.add(side)
            positions.append(pos)
    return positions


@dataclass(eq=False)
class Tri2:
    """Two triangles joined at vertex ``va`` of ``ta`` and vertex ``vb`` of ``tb``."""

    ta: Tri
    tb: Tri
    va: int
    vb: int
    sin: Algebraic | None = None
    cos: Algebraic | None = None

    def __str__(self) -> str:
        sin = "" if self.sin is None else str(self.sin)
        cos = "" if self.cos is None else str(self.cos)
        return (f"{_go_list(self.ta.abc)}'{self.va} {_go_list(self.tb.abc)}'{self.vb} "
                f"sin={sin} cos={cos}")


def new_tri2(ta: Tri | None, tb: Tri | None, va: int, vb: int) -> Tri2:
    """Build a pair; raises NestInvalid for a missing triangle or a vertex outside 0..2."""
    if ta is None or tb is None or not 0 <= va <= 2 or not 0 <= vb <= 2:
        raise NestInvalid()
    return Tri2(ta, tb, va, vb)


class Tri2Factory:
    """Builds and collects unique pairs of the primitive triangles of a TriFactory."""

    def __init__(self, tri_factory: TriFactory) -> None:
        self.tri_factory = tri_factory
        self.tri2s: list[Tri2] = []

    def new_all(self) -> None:
        """Collect every unique pair."""
        self.tri2s.extend(self.pairs())

    def new_equal_sin(self, sin: Algebraic) -> None:
        """Collect the pairs whose summed angle has the given sine."""
        self.tri2s.extend(pair for pair in self.pairs() if pair.sin == sin)

    def new_not_equal_sin(self, sin: Algebraic) -> None:
        """Collect the pairs whose summed angle has a sine other than the given one."""
        self.tri2s.extend(pair for pair in self.pairs() if pair.sin != sin)

    def pairs(self) -> Iterator[Tri2]:
        """Yield each unique pair of vertices of primitive triangles.

        Vertices with equal opposite sides are taken once, and a triangle
        paired with itself takes each vertex pair in one order only.
        """
        tris = [t for t in self.tri_factory.t1s if t.pri is None]
        for p1, ta in enumerate(tris):
            for a1 in _distinct_positions(ta.abc):
                for p2 in range(p1, len(tris)):
                    tb = tris[p2]
                    for a2 in _distinct_positions(tb.abc):
                        if p1 == p2 and a1 < a2:
                            continue
                        yield self.new_pair(ta, tb, a1, a2)

    def new_pair(self, ta: Tri, tb: Tri, pa: int, pb: int) -> Tri2:
        """Join two triangles and compute ``sin(A+B)`` and ``cos(A+B)``."""
        pair = new_tri2(ta, tb, pa, pb)
        if not ta.sin or not ta.cos or not tb.sin or not tb.cos:
            raise NestInvalid("triangle without sines and cosines")
        numbers = self.tri_factory
        sin_a, cos_a = ta.sin[pa], ta.cos[pa]
        sin_b, cos_b = tb.sin[pb], tb.cos[pb]
        pair.sin = numbers.add(numbers.mul(sin_a, cos_b), numbers.mul(sin_b, cos_a))
        sin_sin = numbers.mul(sin_a, sin_b)
        pair.cos = numbers.add(numbers.mul(cos_a, cos_b),
                               None if sin_sin is None else sin_sin.neg())
        return pair