"""Factory building, reducing and combining nested algebraic numbers."""

from __future__ import annotations

from .algebraic import Algebraic
from .integers import Integers
from .naturals import NestInvalid


class Algebraics(Integers):
    """Factory producing reduced :class:`Algebraic` numbers and their arithmetic."""

    def new(self, den: int, *args: int) -> Algebraic:
        """Build ``(n0 + n1√n2 + ...) / den`` from 1, 3, 5 or 7 numerator parts."""
        builders = {1: self.new1, 3: self.new3, 5: self.new5, 7: self.new7}
        builder = builders.get(len(args))
        if builder is None:
            raise NestInvalid()
        return builder(den, *args)

    def new1(self, a: int, b: int) -> Algebraic:
        """Build the reduced fraction ``b / a``."""
        den, num = self.frac(a, b)
        return Algebraic(den, num)

    def new3(self, a: int, b: int, c: int, d: int) -> Algebraic:
        """Build ``(b + c√d) / a``, falling back to a fraction when the surd vanishes."""
        if c == 0 or d == 0:
            return self.new1(a, b)
        if d == 1:
            return self.new1(a, b + c)
        out, inside = self.surd(c, d)
        if inside == 1:
            return self.new1(a, b + out)
        den, (num_b, num_c) = self.frac_n(a, b, out)
        return Algebraic(den, num_b, num_c, inside)

    def new5(self, a: int, b: int, c: int, d: int, e: int, f: int) -> Algebraic:
        """Build ``(b + c√d + e√f) / a`` with the smaller radicand first."""
        if e == 0 or f == 0:
            return self.new3(a, b, c, d)
        if f == 1:
            return self.new3(a, b + e, c, d)
        if d == f:
            return self.new3(a, b, c + e, d)
        out_c, in_d = self.surd(c, d)
        if in_d == 1:
            return self.new3(a, b + out_c, e, f)
        out_e, in_f = self.surd(e, f)
        if in_f == 1:
            return self.new3(a, b + out_e, out_c, in_d)
        if in_d == in_f:
            return self.new3(a, b, out_c + out_e, in_d)
        den, (num_b, num_c, num_e) = self.frac_n(a, b, out_c, out_e)
        if in_d < in_f:
            return Algebraic(den, num_b, num_c, in_d, num_e, in_f)
        return Algebraic(den, num_b, num_e, in_f, num_c, in_d)

    def new7(self, a: int, b: int, c: int, d: int,
             e: int, f: int, g: int, h: int) -> Algebraic:
        """Build ``(b + c√d + e√(f + g√h)) / a``, denesting the inner root when possible."""
        if g == 0:
            return self.new5(a, b, c, d, e, f)
        if h == 1:
            return self.new5(a, b, c, d, e, f + g)
        if e == 0:
            return self.new3(a, b, c, d)
        out_g, in_h = self.surd(g, h)
        if in_h == 1:
            return self.new5(a, b, c, d, e, f + out_g)
        if in_h == 0:
            return self.new5(a, b, c, d, e, f)
        out_e, (in_f, in_g) = self.surd_n(e, f, out_g)
        out_c, in_d = self.surd(c, d)
        den_a, (num_b, num_c, num_e) = self.frac_n(a, b, out_c, out_e)

        den, roots = self.denest(in_f, in_g, in_h)
        na = den_a * den
        nb = num_b * den
        nc = num_c * den
        ne = num_e * den
        if len(roots) == 1:
            (s,) = roots
            return self.new3(na, nb + ne * s, nc, in_d)
        if len(roots) == 3:
            s, t, u = roots
            if in_d == u:
                return self.new3(na, nb + ne * s, nc + ne * t, in_d)
            return self.new5(na, nb + ne * s, nc, in_d, ne * t, u)
        if len(roots) == 5:
            s, t, u, v, w = roots
            if in_d == u:
                return self.new5(na, nb + ne * s, nc + ne * t, in_d, ne * v, w)
            if in_d == w:
                return self.new5(na, nb + ne * s, nc + ne * v, in_d, ne * t, u)
        return Algebraic(den_a, num_b, num_c, in_d, num_e, in_f, in_g, in_h)

    def add(self, q: Algebraic | None, r: Algebraic | None) -> Algebraic | None:
        """Return ``q + r``; raises NestInvalid for unsupported size pairs."""
        if q is None or r is None:
            return None
        _, big, small = q.deeper(r)
        w, U, u, B, b = big.lcm(small)
        x = B * U + b * u
        big_size, small_size = len(big.num), len(small.num)
        if big_size == 1:
            return self.new1(w, x)
        if big_size == 3:
            C, D = big.num[1], big.num[2]
            if small_size == 1:
                return self.new3(w, x, C * U, D)
            if small_size == 3:
                c, d = small.num[1], small.num[2]
                if D == d:
                    return self.new3(w, x, C * U + c * u, D)
                return self.new5(w, x, C * U, D, c * u, d)
        elif big_size == 5:
            C, D, E, F = big.num[1], big.num[2], big.num[3], big.num[4]
            if small_size == 1:
                return self.new5(w, x, C * U, D, E * U, F)
            if small_size == 3:
                c, d = small.num[1], small.num[2]
                if D == d:
                    return self.new5(w, x, C * U + c * u, D, E * U, F)
                if F == d:
                    return self.new5(w, x, C * U, D, E * U + c * u, F)
        raise NestInvalid(f"Can't add pair {q} and {r}")

    def add_n(self, *args: Algebraic | None) -> Algebraic | None:
        """Add all arguments left to right."""
        return self._fold(self.add, args)

    def mul(self, q: Algebraic | None, r: Algebraic | None) -> Algebraic | None:
        """Return ``q * r`` for sizes 1×1, 3×1 and 3×3; raises NestInvalid otherwise."""
        if q is None or r is None:
            return None
        big, small = (r, q) if len(q.num) < len(r.num) else (q, r)
        big_size, small_size = len(big.num), len(small.num)
        if big_size == 1:
            return self.new(big.den * small.den, big.num[0] * small.num[0])
        if big_size == 3:
            A, B = big.den, big.num[0]
            C, D = big.num[1], big.num[2]
            if small_size == 1:
                a, b = small.den, small.num[0]
                return self.new3(A * a, B * b, C * b, D)
            if small_size == 3:
                a, b = small.den, small.num[0]
                c, d = small.num[1], small.num[2]
                if D < d:
                    A, B, C, D, a, b, c, d = a, b, c, d, A, B, C, D
                if B == 0:
                    if b == 0:
                        return self.new3(A * a, 0, C * c, D * d)
                    return self.new5(A * a, 0, C * c, D * d, b * C, D)
                if b == 0:
                    return self.new5(A * a, 0, B * c, d, C * c, D * d)
                if D == d:
                    return self.new3(A * a, B * b + C * c * D, B * c + b * C, D)
                return self.new7(A * a, B * b, B * c, d, C,
                                 b * D * D + c * c * D * d, 2 * b * c * D, d)
        raise NestInvalid(f"Can't mul pair {q} and {r}")

    def mul_n(self, *args: Algebraic | None) -> Algebraic | None:
        """Multiply all arguments left to right."""
        return self._fold(self.mul, args)

    @staticmethod
    def _fold(operation, values) -> Algebraic | None:
        if not values:
            raise NestInvalid()
        result = values[0]
        for value in values[1:]:
            if result is None or value is None:
                return None
            result = operation(result, value)
        return result

    def sqrt(self, q: Algebraic | None) -> Algebraic | None:
        """Return the square root of a number of size 1 or 3, denested when possible."""
        if q is None:
            return None
        size = len(q.num)
        if size == 1:
            a, b = q.den, q.num[0]
            return self.new3(a, 0, 1, a * b)
        if size == 3:
            a, b = q.den, q.num[0]
            c, d = q.num[1], q.num[2]
            if b == 0:
                return self.new7(a, 0, 0, 1, 1, 0, a * c, d)
            den, roots = self.denest(b, c, d)
            a *= den
            if len(roots) == 1:
                return self.new1(a, roots[0])
            if len(roots) == 3:
                return self.new3(a, *roots)
            if len(roots) == 5:
                return self.new5(a, *roots)
            return self.new7(a, 0, 0, 1, 1, a * b, a * c, d)
        raise NestInvalid(f"Can't square root of {q}")

    def pow2(self, q: Algebraic | None) -> Algebraic | None:
        """Return ``q²`` for sizes 1, 3, 5 and the supported forms of size 7."""
        if q is None:
            return None
        size = len(q.num)
        a = q.den
        b = q.num[0] if q.num else 0
        if size == 1:
            return self.new(a * a, b * b)
        if size == 3:
            c, d = q.num[1], q.num[2]
            if b == 0:
                return self.new(a * a, c * c * d)
            return self.new(a * a, b * b + c * c * d, 2 * b * c, d)
        if size == 5:
            c, d, e, f = q.num[1:5]
            if b == 0:
                return self.new(a * a, c * c * d + e * e * f, 2 * c * e, d * f)
            return self.new(a * a, b * b + c * c * d + e * e * f,
                            2 * b * c, d, 2 * e, b * f, c * f, d)
        if size == 7:
            c, d, e, f, g, h = q.num[1:7]
            if b == 0:
                if c == 0:
                    return self.new(a * a, e * e * f, e * e * g, h)
                return self.new(a * a, c * c * d + e * e * f, e * e * g, h,
                                2 * c * e, d * f, d * g, h)
            if c == 0:
                return self.new(a * a, b * b + e * e * f, e * e * g, h,
                                2 * b * e, f, g, h)
        raise NestInvalid(f"Can't pow2 of {q}")