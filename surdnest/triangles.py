"""Triangles with natural or single-surd sides, and their angle cosines and sines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .algebraic import Algebraic
from .algebraics import Algebraics
from .naturals import NestError, NestInvalid, gcd


class Angle(Enum):
    """The angle opposite side ``a``, ``b`` or ``c``."""

    A = "A"
    B = "B"
    C = "C"


@dataclass
class Triangle:
    """A triangle with sides ``a``, ``b``, ``c``; its area is ``√d / 4``."""

    a: int
    b: int
    c: int
    d: int = 0

    def __str__(self) -> str:
        return f"{self.a},{self.b},{self.c}"


def new_triangle(a: int, b: int, c: int) -> Triangle | None:
    """Build a triangle with ``a >= b >= c`` and ``b + c > a``, otherwise None."""
    if a >= b >= c and b + c > a:
        d = (a + (b + c)) * (c - (a - b)) * (c + (a - b)) * (a + (b - c))
        return Triangle(a, b, c, d)
    return None


def alphas(alpha: int) -> list[Triangle]:
    """All triangles with sides ``√alpha >= b >= c`` (side ``a`` holds ``alpha``)."""
    tris = []
    b = 1
    while b * b <= alpha:
        for c in range(1, b + 1):
            if alpha < (b + c) * (b + c):
                tris.append(Triangle(alpha, b, c))
        b += 1
    return tris


def betas(beta: int, max_side: int) -> list[Triangle]:
    """All triangles with sides ``a >= √beta >= c`` and ``a <= max_side``."""
    tris = []
    max_c = 1
    while True:
        min_a = max_c + 1
        if min_a * min_a > beta:
            break
        max_c = min_a
    for a in range(min_a, max_side + 1):
        for c in range(1, max_c + 1):
            if (a - c) * (a - c) < beta:
                tris.append(Triangle(a, beta, c))
    return tris


def gammas(gamma: int, max_side: int) -> list[Triangle]:
    """Triangles with sides ``a >= b > √gamma`` and ``a <= max_side``."""
    tris = []
    low = 1
    while low * low <= gamma:
        low += 1
    for a in range(low, max_side + 1):
        for b in range(low, a + 1):
            if (a - b) * (a - b) < gamma:
                tris.append(Triangle(a, b, gamma))
    return tris


@dataclass
class RationalCosine:
    """The rational cosine ``num / den`` of an angle."""

    angle: Angle | None
    num: int
    den: int

    def s(self) -> int:
        """Return ``den² - num²``."""
        return self.den * self.den - self.num * self.num

    def tex(self) -> str:
        """A LaTeX rendering of the fraction."""
        n, d = self.num, self.den
        if d < 0:
            n, d = -n, -d
        if n == 0:
            return "0"
        if d == 1:
            return str(n)
        if n > 0:
            return f"\\frac{{{n}}}{{{d}}}"
        return f"-\\frac{{{-n}}}{{{d}}}"


@dataclass
class RationalCosines:
    """Distinct rational cosines of a triangle."""

    rats: list[RationalCosine] = field(default_factory=list)

    def add(self, angle: Angle, num: int, den: int) -> None:
        """Append the cosine unless an equal fraction is already present."""
        if any(rat.num == num and rat.den == den for rat in self.rats):
            return
        self.rats.append(RationalCosine(angle, num, den))


@dataclass
class TriangleSet:
    """Triangles with natural sides, one per similarity class."""

    tris: list[Triangle] = field(default_factory=list)

    def add_triangles(self, max_side: int) -> None:
        """Replace the set with the primitive triangles of sides up to ``max_side``."""
        self.tris = []
        for a in range(1, max_side + 1):
            for b in range(1, a + 1):
                for c in range(1, b + 1):
                    if a < b + c:
                        self._add(a, b, c)

    def _add(self, a: int, b: int, c: int) -> None:
        g = gcd(a, gcd(b, c))
        ga, gb, gc = a // g, b // g, c // g
        if any(t.a == ga and t.b == gb and t.c == gc for t in self.tris):
            return
        self.tris.append(Triangle(a, b, c))


class TriangleFactory(Algebraics):
    """Computes cosines, sines and diagonals of triangles."""

    def cos_z(self, x: int, y: int, z: int) -> tuple[int, int]:
        """Return ``(num, den)`` of the cosine of the angle opposite ``z``; zeros on error."""
        try:
            den, num = self.frac(2 * x * y, x * x + y * y - z * z)
        except NestError:
            return 0, 0
        return num, den

    def cos(self, t: Triangle, angle: Angle) -> tuple[int, int]:
        """Return ``(num, den)`` of the cosine of the given angle."""
        if angle is Angle.A:
            return self.cos_z(t.b, t.c, t.a)
        if angle is Angle.B:
            return self.cos_z(t.c, t.a, t.b)
        if angle is Angle.C:
            return self.cos_z(t.a, t.b, t.c)
        raise NestInvalid("Invalid angle")

    def sin(self, t: Triangle, angle: Angle) -> tuple[int, int]:
        """Return ``(surd, den)`` with the sine equal to ``√surd / den``."""
        if angle is Angle.A:
            return t.d, 2 * t.b * t.c
        if angle is Angle.B:
            return t.d, 2 * t.c * t.a
        if angle is Angle.C:
            return t.d, 2 * t.a * t.b
        raise NestInvalid("Invalid angle")

    def rational_cosines_all(self, t: Triangle) -> tuple[RationalCosine, RationalCosine, RationalCosine]:
        """The three cosines of the triangle, repetitions included."""
        return tuple(RationalCosine(angle, *self.cos(t, angle)) for angle in Angle)

    def rational_sines_all(self, t: Triangle) -> tuple[Algebraic | None, ...]:
        """The three sines of the triangle; None where one cannot be built."""
        sines = []
        for angle in Angle:
            surd, den = self.sin(t, angle)
            try:
                sines.append(self.new3(den, 0, 1, surd))
            except NestError:
                sines.append(None)
        return tuple(sines)

    def diagonals_for_angle(self, t: Triangle, angle: Angle) -> tuple[list[list[int]], int]:
        """Diagonals between the two sides at ``angle``; empty where they would repeat."""
        if angle is Angle.C:
            num, den = self.cos(t, Angle.C)
            return self.diagonals(num, den, t.a, t.b)
        if angle is Angle.A:
            if t.a == t.c:
                return [], 0
            num, den = self.cos(t, Angle.A)
            return self.diagonals(num, den, t.b, t.c)
        if angle is Angle.B:
            if t.a == t.b or t.b == t.c:
                return [], 0
            num, den = self.cos(t, Angle.B)
            return self.diagonals(num, den, t.a, t.c)
        raise NestInvalid("Invalid angle")

    def diagonals(self, num: int, den: int, s1: int, s2: int) -> tuple[list[list[int]], int]:
        """Squared diagonals times ``den²``, grouped by ``x - y``, and ``den``.

        Each diagonal joins point ``x`` on a side of length ``s1`` to point ``y``
        on a side of length ``s2`` meeting at an angle of cosine ``num/den``.
        """
        diags: list[list[int]] = [[] for _ in range(s1)]
        for x in range(1, s1 + 1):
            for y in range(1, min(x, s2) + 1):
                z = (x * x + y * y) * den - 2 * x * y * num
                diags[x - y].append(z * den)
        return diags, den

    def cos_sum(self, ta: Triangle, aa: Angle, tb: Triangle, ab: Angle) -> Algebraic:
        """The cosine of the sum of angle ``aa`` of ``ta`` and angle ``ab`` of ``tb``."""
        na, da = self.cos(ta, aa)
        nb, db = self.cos(tb, ab)
        return self._cos_plus(na, da, nb, db)

    def _cos_plus(self, na: int, da: int, nb: int, db: int) -> Algebraic:
        d = (da + na) * (da - na) * (db + nb) * (db - nb)
        return self.new3(da * db, na * nb, -1, d)

    def law_of_cos(self, y: int, z: int, cos_x: Algebraic) -> Algebraic | None:
        """Return ``√(y² + z² - 2yz·cos_x)``."""
        y2_z2 = self.new1(1, y * y + z * z)
        minus_2yz = self.new1(1, -2 * y * z)
        product = self.mul(cos_x, minus_2yz)
        return self.sqrt(self.add(y2_z2, product))

    def alpha_cosines(self, t: Triangle) -> tuple[Algebraic, Algebraic, Algebraic]:
        """Cosines of a triangle whose side ``a`` is ``√t.a``."""
        alpha, b, c = t.a, t.b, t.c
        cos_a = self.new1(2 * b * c, b * b + c * c - alpha)
        cos_b = self.new3(2 * alpha * c, 0, alpha + c * c - b * b, alpha)
        cos_c = self.new3(2 * alpha * b, 0, alpha + b * b - c * c, alpha)
        return cos_a, cos_b, cos_c

    def beta_cosines(self, t: Triangle) -> tuple[Algebraic, Algebraic, Algebraic]:
        """Cosines of a triangle whose side ``b`` is ``√t.b``."""
        a, beta, c = t.a, t.b, t.c
        cos_a = self.new3(2 * beta * c, 0, beta + c * c - a * a, beta)
        cos_b = self.new1(2 * a * c, a * a + c * c - beta)
        cos_c = self.new3(2 * a * beta, 0, a * a + beta - c * c, beta)
        return cos_a, cos_b, cos_c

    def gamma_cosines(self, t: Triangle) -> tuple[Algebraic, Algebraic, Algebraic]:
        """Cosines of a triangle whose side ``c`` is ``√t.c``."""
        a, b, gamma = t.a, t.b, t.c
        cos_a = self.new3(2 * b * gamma, 0, b * b + gamma - a * a, gamma)
        cos_b = self.new3(2 * a * gamma, 0, a * a + gamma - b * b, gamma)
        cos_c = self.new1(2 * a * b, a * a + b * b - gamma)
        return cos_a, cos_b, cos_c

    def rational_cosines(self, t: Triangle) -> RationalCosines:
        """The distinct cosines of the triangle."""
        rats = RationalCosines()
        for angle in Angle:
            rats.add(angle, *self.cos(t, angle))
        return rats

    def cos_xy(self, x: RationalCosine, y: RationalCosine) -> Algebraic:
        """The cosine of the sum of two angles with rational cosines."""
        return self._cos_plus(x.num, x.den, y.num, y.den)

    def cos2_xy(self, a: RationalCosine, d: RationalCosine) -> Algebraic:
        """The cosine of twice angle ``a`` plus angle ``d``."""
        an2 = a.num * a.num
        ad2 = a.den * a.den
        return self.new3(ad2 * d.den, (2 * an2 - ad2) * d.num, -2 * a.num, a.s() * d.s())