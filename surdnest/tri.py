"""Meccano triangles with natural sides and their sines and cosines."""

from __future__ import annotations

from dataclasses import dataclass

from .algebraic import Algebraic
from .algebraics import Algebraics
from .naturals import gcd


def _go_list(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


@dataclass(eq=False)
class Tri:
    """A triangle with sides ``a >= b >= c``; ``pri`` is the similar primitive triangle."""

    abc: list[int]
    cos: list[Algebraic] | None = None
    sin: list[Algebraic] | None = None
    pri: Tri | None = None

    def other_sides(self, pos: int) -> list[int]:
        """The two sides other than the one at ``pos`` (0, 1 or 2)."""
        if pos in (0, 1, 2):
            return [side for i, side in enumerate(self.abc) if i != pos]
        return []

    def __str__(self) -> str:
        if self.pri is not None:
            return f"{_go_list(self.abc)} pri:{_go_list(self.pri.abc)}"
        return (f"{_go_list(self.abc)} cos:{_go_list(self.cos or [])} "
                f"sin:{_go_list(self.sin or [])}")


class TriFactory(Algebraics):
    """Holds every triangle with ``max_side >= a >= b >= c`` and ``b + c > a``."""

    def __init__(self, max_side: int) -> None:
        super().__init__()
        self.t1s: list[Tri] = []
        for a in range(1, max_side + 1):
            for b in range(1, a + 1):
                for c in range(1, b + 1):
                    if b + c > a:
                        self._add(a, b, c)

    def _add(self, a: int, b: int, c: int) -> None:
        g = gcd(a, gcd(b, c))
        reduced = [a // g, b // g, c // g]
        for t1 in self.t1s:
            if t1.abc == reduced:
                self.t1s.append(Tri([a, b, c], pri=t1))
                return
        self.t1s.append(Tri([a, b, c]))

    def compute_sin_cos(self) -> None:
        """Store the cosines and sines of every primitive triangle."""
        for t1 in self.t1s:
            if t1.pri is not None:
                continue
            a, b, c = t1.abc
            t1.cos = [self.cos_c(b, c, a), self.cos_c(c, a, b), self.cos_c(a, b, c)]
            area2_4 = (a + (b + c)) * (c - (a - b)) * (c + (a - b)) * (a + (b - c))
            t1.sin = [
                self.new(2 * b * c, 0, 1, area2_4),
                self.new(2 * c * a, 0, 1, area2_4),
                self.new(2 * a * b, 0, 1, area2_4),
            ]

    def cos_c(self, a: int, b: int, c: int) -> Algebraic:
        """The rational cosine of the angle opposite side ``c``."""
        return self.new(2 * a * b, a * a + b * b - c * c)

    def cos_law2(self, a: int, b: int, cos_c: Algebraic) -> Algebraic | None:
        """The squared third side ``a² + b² - 2ab·cos_c``."""
        aa_bb = self.new(1, a * a + b * b)
        ab = self.new(1, -2 * a * b)
        return self.add(aa_bb, self.mul(ab, cos_c))