"""Diagonals of meccano pentagons as nested algebraic numbers."""

from __future__ import annotations

from typing import Iterator

from .algebraic import Algebraic
from .algebraics import Algebraics
from .naturals import NestError


class Diagonals(Algebraics):
    """Computes pentagon diagonals ``√(p + q√5) / 2`` for bars ``a >= b >= c``."""

    def get(self, min_side: int, max_side: int) -> Iterator[tuple[int, int, int, Algebraic]]:
        """Yield ``(a, b, c, diagonal)`` for ``min_side <= a <= max_side``, ``a >= b >= c >= 0``.

        Combinations whose diagonal cannot be built are skipped.
        """
        for a in range(min_side, max_side + 1):
            for b in range(1, a + 1):
                for c in range(0, b + 1):
                    try:
                        surd = self.get_one(a, b, c)
                    except NestError:
                        continue
                    yield a, b, c, surd

    def get_one(self, a: int, b: int, c: int) -> Algebraic:
        """The diagonal for bars ``a``, ``b`` and ``c``."""
        p = ((a - b) ** 2 + (a - c) ** 2 + (b - c) ** 2
             + 2 * a * a + 2 * b * b + 2 * c * c)
        q = 2 * (a * b + a * c - b * c)
        return self.new7(2, 0, 0, 1, 1, p, q, 5)