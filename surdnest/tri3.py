"""Triangles with two natural sides and a third algebraic side, built from joined pairs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .algebraic import Algebraic
from .naturals import NestError
from .tri2 import Tri2Factory


@dataclass(eq=False)
class Tri3:
    """A triangle from pair ``tri2`` with natural sides ``max_side``, ``min_side`` and ``√cc``."""

    tri2: int
    max_side: int
    min_side: int
    cc: Algebraic | None
    abc: list[Algebraic] = field(default_factory=list)

    def equal(self, other: Tri3 | None) -> bool:
        """True when the natural sides and the squared side match; a missing one matches."""
        if other is None:
            return True
        if self.max_side != other.max_side or self.min_side != other.min_side:
            return False
        if self.cc is None or other.cc is None:
            return False
        return self.cc == other.cc

    def __str__(self) -> str:
        return f"tri2={self.tri2} [{' '.join(str(side) for side in self.abc)}]"


def new_tri3(tri2: int, max_side: int, min_side: int,
             cc: Algebraic, c: Algebraic) -> Tri3:
    """Build a Tri3 with sides sorted from longest to shortest.

    Raises NestInvalid when ``cc`` is not rational and cannot be compared.
    """
    a = Algebraic(1, max_side)
    b = Algebraic(1, min_side)
    if cc.greater_than_z(max_side * max_side):
        abc = [c, a, b]
    elif cc.greater_than_z(min_side * min_side):
        abc = [a, c, b]
    else:
        abc = [a, b, c]
    return Tri3(tri2, max_side, min_side, cc, abc)


class Tri3Factory:
    """Builds unique Tri3 triangles from the pairs of a Tri2Factory."""

    def __init__(self, tri2_factory: Tri2Factory) -> None:
        self.tri2_factory = tri2_factory
        self.tri3s: list[Tri3] = []
        self.errs: list[NestError] = []

    def build_all(self) -> None:
        """Build the triangles of every pair, recording the pairs that fail."""
        for index in range(len(self.tri2_factory.tri2s)):
            try:
                found = self.new_for(index)
            except NestError as exc:
                self.errs.append(exc)
                continue
            for tri3 in found:
                self.append_unique(tri3)

    def append_unique(self, t: Tri3) -> None:
        """Append ``t`` unless an equal triangle is already collected."""
        if any(existing.equal(t) for existing in self.tri3s):
            return
        self.tri3s.append(t)

    def new_for(self, tri2: int) -> list[Tri3]:
        """Triangles from the free sides of pair number ``tri2``.

        Triangles whose third side is natural, and those whose squared side
        is not rational, are left out.
        """
        pair = self.tri2_factory.tri2s[tri2]
        numbers = self.tri2_factory.tri_factory
        found: list[Tri3] = []
        for a in pair.ta.other_sides(pair.va):
            for b in pair.tb.other_sides(pair.vb):
                big, small = max(a, b), min(a, b)
                if any(t.max_side == big and t.min_side == small for t in found):
                    continue
                cc = self.cos_law2(big, small, pair.cos)
                c = numbers.sqrt(cc)
                if c is None or cc is None:
                    continue
                if len(c.num) <= 1 and c.den == 1:
                    continue
                try:
                    found.append(new_tri3(tri2, big, small, cc, c))
                except NestError:
                    continue
        return found

    def cos_law2(self, a: int, b: int, cos_c: Algebraic) -> Algebraic | None:
        """The squared third side ``a² + b² - 2ab·cos_c``."""
        return self.tri2_factory.tri_factory.cos_law2(a, b, cos_c)