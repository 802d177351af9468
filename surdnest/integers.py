"""Integer helpers for 32-bit fractions and surds."""

from __future__ import annotations

from .naturals import N32_MAX, NestInfinite, NestOverflow, Naturals

Z32_MAX = 0x7FFFFFFF


class Integers(Naturals):
    """Factory reducing fractions and surds of 32-bit integers."""

    def frac(self, den: int, num: int) -> tuple[int, int]:
        """Reduce ``num / den``; ``frac(10, 5)`` returns ``(2, 1)``."""
        if den == 0:
            raise NestInfinite()
        if num == 0:
            return 1, 0
        dn = den
        nn = abs(num)
        smallest = min(dn, nn)
        for p in self.primes:
            if smallest < p:
                break
            while dn % p == 0 and nn % p == 0:
                dn //= p
                nn //= p
        if dn > Z32_MAX or nn > Z32_MAX:
            raise NestOverflow()
        return dn, nn if num > 0 else -nn

    def mul(self, *args: int) -> int:
        """Multiply the arguments, raising NestOverflow outside the 32-bit range."""
        if not args:
            return 0
        product = 1
        for n in args:
            product *= n
            if product > Z32_MAX or product < -Z32_MAX:
                raise NestOverflow()
        return product

    def frac_n(self, den: int, *args: int) -> tuple[int, list[int]]:
        """Reduce ``(n0 + n1 + ...) / den`` by primes common to all terms.

        ``frac_n(8, 4, 2)`` returns ``(4, [2, 1])``.
        """
        if den == 0:
            raise NestInfinite()
        if not args:
            return 0, []
        if all(n == 0 for n in args):
            return 1, [0] * len(args)
        min_pos = 0
        smallest = N32_MAX
        for pos, n in enumerate(args):
            if n != 0 and n < smallest:
                min_pos, smallest = pos, n
        ns = [abs(n) for n in args]
        for p in self.primes:
            if ns[min_pos] < p:
                break
            while den % p == 0 and all(n == 0 or n % p == 0 for n in ns):
                den //= p
                ns = [n // p for n in ns]
        if den > Z32_MAX:
            raise NestOverflow()
        if any(n > Z32_MAX for n in ns):
            raise NestOverflow()
        return den, [n if num > 0 else -n for n, num in zip(ns, args)]

    def triangle_cosine_c(self, a: int, b: int, c: int) -> tuple[int, int]:
        """Return the reduced ``(den, num)`` of the cosine of the angle opposite side ``c``."""
        return self.frac(2 * a * b, a * a + b * b - c * c)

    def surd(self, o: int, i: int) -> tuple[int, int]:
        """Reduce ``o√i`` by moving square factors out; ``surd(3, 8)`` gives ``(6, 2)``."""
        if o == 0 or i == 0:
            return 0, 0
        on = abs(o)
        inside = abs(i)
        for p in self.primes:
            pp = p * p
            if inside < pp:
                break
            while inside % pp == 0:
                on *= p
                inside //= pp
        if on > Z32_MAX or inside > Z32_MAX:
            raise NestOverflow()
        return (-on if o < 0 else on), (-inside if i < 0 else inside)

    def surd_n(self, o: int, *args: int) -> tuple[int, list[int]]:
        """Reduce ``o√(i0 + i1 + ...)`` by square factors common to all inner terms."""
        if o == 0 or all(i == 0 for i in args):
            return 0, []
        on = abs(o)
        ins = [abs(i) for i in args]
        max_pos = 0
        greatest = 0
        for pos, i in enumerate(ins):
            if i > greatest:
                max_pos, greatest = pos, i
        for p in self.primes:
            pp = p * p
            if ins[max_pos] < pp:
                break
            while all(i % pp == 0 for i in ins):
                on *= p
                ins = [i // pp for i in ins]
        if on > Z32_MAX:
            raise NestOverflow()
        out = on if o > 0 else -on
        if any(i > Z32_MAX for i in ins):
            raise NestOverflow()
        return out, [i if orig > 0 else -i for i, orig in zip(ins, args)]

    def denest(self, b: int, c: int, d: int) -> tuple[int, list[int]]:
        """Try to denest ``√(b + c√d)``.

        Returns ``(den, n)``: an empty ``n`` means no denesting; one value means
        ``n[0]/den``; three mean ``(n[0] + n[1]√n[2])/den``; five mean
        ``(n[0] + n[1]√n[2] + n[3]√n[4])/den`` with ``n[0] == 0``.
        """
        den = 1
        if b == 0:
            if c == 0 or d == 0:
                return den, [0]
            o, i = self.surd(c, d)
            if i != 1:
                return den, []
            o2, i2 = self.surd(1, o)
            if i2 == 1:
                return den, [o2]
            return den, [0, 1, o]
        if c == 0 or d == 0:
            o, i = self.surd(1, b)
            return den, ([o] if i == 1 else [0, o, i])
        if d == 1:
            o, i = self.surd(1, b + c)
            return den, ([o] if i == 1 else [0, o, i])
        x, r = self.surd(1, b * b - c * c * d)
        if r != 1:
            return den, []
        o1, i1 = self.surd(1, 2 * (b + x))
        o2, i2 = self.surd(1, 2 * (b - x))
        if o1 % 2 == 0 and o2 % 2 == 0:
            o1 //= 2
            o2 //= 2
        else:
            den = 2
        if c < 0:
            o2 = -o2
        if i1 == 1 and i2 != 1:
            return den, [o1, o2, i2]
        if i1 != 1 and i2 == 1:
            return den, [o2, o1, i1]
        if i1 < i2:
            return den, [0, o1, i1, o2, i2]
        return den, [0, o2, i2, o1, i1]