"""Sums of surds ``o1√i1 + o2√i2 + ...`` over a natural denominator."""

from __future__ import annotations

import math

from .integers import Integers
from .naturals import NestInvalid


class SurdSum:
    """A sum of reduced surds keyed by radicand, divided by ``den``."""

    def __init__(self, factory: Integers) -> None:
        self.factory = factory
        self.surds: dict[int, int] = {}
        self.den = 1

    def _with_surds(self, surds: dict[int, int]) -> SurdSum:
        result = SurdSum(self.factory)
        result.surds = surds
        return result

    @staticmethod
    def _accumulate(surds: dict[int, int], key: int, out: int) -> None:
        surds[key] = surds.get(key, 0) + out

    def add_signed(self, surds) -> None:
        """Add ``√s`` for positive values and subtract ``√-s`` for the others."""
        for surd in surds:
            if surd > 0:
                self.add(surd)
            else:
                self.sub(-surd)

    def add_sqrt(self, out: int, inside: int) -> None:
        """Add the surd ``out√inside``."""
        o, i = self.factory.surd(out, inside)
        self._accumulate(self.surds, i, o)

    def divide(self, den: int) -> None:
        """Divide the sum by ``den``, reducing common factors."""
        keys = list(self.surds)
        new_den, nums = self.factory.frac_n(den, *(self.surds[k] for k in keys))
        for key, num in zip(keys, nums):
            self.surds[key] = num
        self.den = new_den

    def add(self, inside: int) -> None:
        """Add the surd ``√inside``."""
        o, i = self.factory.surd(1, inside)
        self._accumulate(self.surds, i, o)

    def sub(self, inside: int) -> None:
        """Subtract the surd ``√inside``."""
        o, i = self.factory.surd(1, inside)
        self._accumulate(self.surds, i, -o)

    def pow2(self) -> SurdSum:
        """Return a new sum equal to this sum squared."""
        surds: dict[int, int] = {}
        keys = self.keys()
        for k1 in keys:
            for k2 in keys:
                x, y = self.surds[k1], self.surds[k2]
                if k1 == k2:
                    self._accumulate(surds, 1, self.factory.mul(x, y, k1))
                else:
                    o, i = self.factory.surd(x * y, k1 * k2)
                    self._accumulate(surds, i, o)
        return self._with_surds(surds)

    def sqrt(self) -> SurdSum | None:
        """Return a new sum equal to the square root of ``b + c√d``.

        Raises NestInvalid when the sum has another shape or cannot be
        denested; returns None when the result would need a denominator.
        """
        keys = self.keys()
        if len(keys) != 2 or keys[0] != 1:
            raise NestInvalid(f"Cant sqrt of keys {keys}")
        b = self.surds[keys[0]]
        c = self.surds[keys[1]]
        d = keys[1]
        x, r = self.factory.surd(1, b * b - c * c * d)
        if r != 1:
            raise NestInvalid(f"Can sqrt b*b - c*c*d x={x} r={r}")
        o1, i1 = self.factory.surd(1, 2 * (b + x))
        o2, i2 = self.factory.surd(1, 2 * (b - x))
        if o1 % 2 != 0 or o2 % 2 != 0:
            return None
        o1 //= 2
        o2 //= 2
        if c < 0:
            o1 = -o1
        if i1 == 1 and i2 != 1:
            surds = {1: o1, i2: o2}
        elif i1 != 1 and i2 == 1:
            surds = {1: o2, i1: o1}
        else:
            surds = {i1: o1}
            surds[i2] = o2
        return self._with_surds(surds)

    def keys(self) -> list[int]:
        """The radicands of the sum in ascending order."""
        return sorted(self.surds)

    def tex(self) -> str:
        """A LaTeX rendering of the sum."""
        return self._render(True)

    def __str__(self) -> str:
        return self._render(False)

    def _render(self, tex: bool) -> str:
        parts = []
        if self.den > 1:
            parts.append("\\frac{" if tex else "(")
        for pos, key in enumerate(self.keys()):
            out = self.surds[key]
            if pos == 0:
                if out == -1:
                    parts.append("-")
                elif out not in (0, 1):
                    parts.append(str(out))
            elif out == 1:
                parts.append("+")
            elif out == -1:
                parts.append("-")
            else:
                parts.append(f"{out:+d}")
            if key != 1:
                parts.append(f"\\sqrt{{{key}}}" if tex else f"√{key}")
            elif out in (1, -1):
                parts.append("1")
        if self.den > 1:
            parts.append(f"}}{{{self.den}}}" if tex else f")/{self.den}")
        return "".join(parts) or "0"

    def floor_ceil(self) -> tuple[int, int]:
        """Bound the sum by adding the floor and ceiling of each surd."""
        floor = ceil = 0
        for inside, out in self.surds.items():
            if inside == 1:
                floor += out
                ceil += out
            else:
                f, c = self.factory.sqrt_floor_ceil(out * out * inside)
                floor += f
                ceil += c
        return floor, ceil

    def floor_ceil2(self) -> tuple[int, int]:
        """Tighter bounds: bound the square of the sum, then take square roots."""
        floor1, ceil1 = self.pow2().floor_ceil()
        floor, _ = self.factory.sqrt_floor_ceil(floor1)
        _, ceil = self.factory.sqrt_floor_ceil(ceil1)
        return floor, ceil

    def __float__(self) -> float:
        total = 0.0
        for inside, out in self.surds.items():
            if inside == 1:
                total += out
            else:
                root = math.sqrt(inside) if inside >= 0 else math.nan
                total += out * root
        return total