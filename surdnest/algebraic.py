"""Nested algebraic numbers with a natural denominator and integer numerator parts."""

from __future__ import annotations

from .integers import Z32_MAX
from .naturals import NestInvalid, NestOverflow, gcd


def _format_product(y: int, z: int) -> str:
    """Format ``y√z`` without needless ones; negative ``z`` gives imaginary parts."""
    if y == 0 or z == 0:
        return "0"
    if z == 1:
        return str(y)
    if z == -1:
        return ("-" if y == -1 else str(y)) + "i"
    coefficient = str(y) if y < -1 or y > 1 else ""
    if z >= 1:
        return f"{coefficient}√{z}"
    return f"{coefficient}i√{-z}"


def format_surd_sum(x: int, y: int, z: int) -> str:
    """Format ``x + y√z`` without needless plus signs, zeros and ones."""
    if x == 0:
        if y == 0 or z == 0:
            return "0"
        return _format_product(y, z)
    if y == 0 or z == 0:
        return str(x)
    sign = "+" if y > 0 else ""
    return f"{x}{sign}{_format_product(y, z)}"


def _go_slice(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


class Algebraic:
    """The number ``(b + c√d + e√(f + g√h) + ...) / a``.

    ``den`` holds the natural denominator ``a`` and ``num`` the numerator parts
    ``b, c, d, e, f, g, h`` in that order. Valid sizes are 1, 3, 5 and 7.
    """

    __hash__ = None  # mutable: neg() and add_int() change the value in place

    def __init__(self, den: int, *args: int) -> None:
        self.den = den
        self.num = list(args)

    @classmethod
    def from_int(cls, z: int) -> Algebraic:
        """The integer ``z``."""
        return cls(1, z)

    @classmethod
    def from_rational(cls, num: int, den: int) -> Algebraic:
        """The fraction ``num / den`` as given, unreduced."""
        return cls(den, num)

    @classmethod
    def from_surd(cls, z: int) -> Algebraic:
        """The surd ``√z``."""
        return cls(1, 0, 1, z)

    def __repr__(self) -> str:
        return f"Algebraic({', '.join(str(v) for v in (self.den, *self.num))})"

    def num_at(self, pos: int) -> int | None:
        """The numerator part at ``pos``, or None when the number is shorter."""
        if len(self.num) > pos:
            return self.num[pos]
        return None

    def equals(self, den: int, *args: int) -> bool:
        """True when this number has exactly the given denominator and parts."""
        return len(args) == len(self.num) and den == self.den and list(args) == self.num

    def add_int(self, z: int) -> Algebraic | None:
        """Add the integer ``z`` in place and return this number.

        Returns None for a number without parts; raises NestOverflow when the
        new ``b`` leaves the 32-bit range.
        """
        if not self.num:
            return None
        total = self.num[0] + z * self.den
        if total > Z32_MAX or total < -Z32_MAX:
            raise NestOverflow()
        self.num[0] = total
        return self

    def is_integer(self) -> int | None:
        """The integer ``b`` when the denominator is one, otherwise None."""
        if self.den == 1:
            return self.num[0]
        return None

    def is_rational(self) -> bool:
        """True when the denominator is greater than two."""
        return self.den > 2

    def is_rational_surd(self, surd: int) -> bool:
        """True for ``c√surd / a`` with ``a`` other than one and ``b`` zero."""
        if self.den == 1:
            return False
        return self.num[0] == 0 and self.num[2] == surd

    def is_nest(self, f: int, g: int) -> bool:
        """True when the nested part has the given ``f`` and ``g``."""
        if len(self.num) < 7:
            return False
        return self.num[4] == f and self.num[5] == g

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Algebraic):
            return NotImplemented
        return self.den == other.den and self.num == other.num

    def neg(self) -> Algebraic:
        """Change the signs of parts ``b``, ``c``, ``e`` and ``i`` in place."""
        for pos in (7, 3, 1, 0):
            if len(self.num) > pos:
                self.num[pos] = -self.num[pos]
        return self

    def deeper(self, other: Algebraic) -> tuple[bool, Algebraic, Algebraic]:
        """Return ``(self_is_deeper, deeper, shallower)`` by numerator length."""
        if len(self.num) < len(other.num):
            return False, other, self
        return True, self, other

    def lcm(self, other: Algebraic) -> tuple[int, int, int, int, int]:
        """Return ``(w, U, u, B, b)``.

        ``w`` is the common denominator, ``U`` and ``u`` the factors lifting
        this number and ``other`` onto it, ``B`` and ``b`` their first parts.
        """
        big, small = self.den, other.den
        w = (big // gcd(big, small)) * small
        return w, w // big, w // small, self.num[0], other.num[0]

    def _ab(self) -> tuple[int, int]:
        return self.den, self.num[0]

    def _cd(self) -> tuple[int, int]:
        return self.num[1], self.num[2]

    def _cdef(self) -> tuple[int, int, int, int]:
        return self.num[1], self.num[2], self.num[3], self.num[4]

    def _cdefgh(self) -> tuple[int, int, int, int, int, int]:
        return (self.num[1], self.num[2], self.num[3],
                self.num[4], self.num[5], self.num[6])

    def greater_than_z(self, num: int) -> bool:
        """True when this rational number exceeds the integer ``num``.

        Raises NestInvalid for numbers other than size 1.
        """
        if len(self.num) == 1:
            return self.num[0] > num * self.den
        raise NestInvalid(f"Can't compare {self} and {num}")

    def key(self) -> str:
        """A compact identifier: denominator and parts separated by commas."""
        return ",".join(str(v) for v in (self.den, *self.num))

    def __str__(self) -> str:
        if self.den == 0:
            return "NaN"
        size = len(self.num)
        if size == 1:
            b = self.num[0]
            if b == 0:
                return "0"
            body = str(b)
        elif size == 3:
            a, b = self._ab()
            c, d = self._cd()
            if b == 0:
                body = format_surd_sum(0, c, d)
            else:
                body = self._paren(a > 1, format_surd_sum(b, c, d))
        elif size == 5:
            a, b = self._ab()
            c, d, e, f = self._cdef()
            x = b != 0
            y = c != 0 and d != 0
            z = e != 0 and f != 0
            if not (x or y or z):
                return "0"
            parts = []
            if x:
                parts.append(str(b))
            if y:
                if x and c > 0:
                    parts.append("+")
                parts.append(_format_product(c, d))
            if z:
                if (x or y) and e > 0:
                    parts.append("+")
                parts.append(_format_product(e, f))
            body = self._paren(a > 1 and self._pairs(x, y, z), "".join(parts))
        elif size == 7:
            a, b = self._ab()
            c, d, e, f, g, h = self._cdefgh()
            x = b != 0
            y = c != 0 and d != 0
            z = e != 0 and (f != 0 or (g != 0 and h != 0))
            if not (x or y or z):
                return "0"
            parts = []
            if x:
                parts.append(str(b))
            if y:
                if x and c > 0:
                    parts.append("+")
                parts.append(_format_product(c, d))
            if z:
                if (x or y) and e > 0:
                    parts.append("+")
                if e == -1:
                    parts.append("-")
                elif e < -1 or e > 1:
                    parts.append(str(e))
                parts.append(f"√({format_surd_sum(f, g, h)})")
            body = self._paren(a > 1 and self._pairs(x, y, z), "".join(parts))
        else:
            return str(NestInvalid())
        if self.den > 1:
            body += f"/{self.den}"
        return body

    @staticmethod
    def _pairs(x: bool, y: bool, z: bool) -> bool:
        return (x and y) or (y and z) or (z and x)

    @staticmethod
    def _paren(wrap: bool, text: str) -> str:
        return f"({text})" if wrap else text

    def is_zero(self) -> bool:
        """True for a number without parts or of size 2 with ``b`` zero."""
        size = len(self.num)
        if size == 0:
            return True
        return size == 2 and self.num[0] == 0

    def tex(self) -> str:
        """A LaTeX rendering of the number."""
        if not self.num:
            return "0"
        b = self.num[0]
        den = self.den
        size = len(self.num)
        out = []
        if den == 1:
            if size == 1:
                return str(b)
            if size != 3:
                return self._tex_nested()
            if b != 0:
                out.append(str(b))
            c, d = self.num[1], self.num[2]
            if c == -1:
                out.append("-")
            elif c != 1:
                out.append(f"{c:+d}" if b != 0 else str(c))
            if c != 0 and d != 1:
                out.append(f"\\sqrt{{{d}}}")
            return "".join(out)
        if size == 1:
            if b == 0:
                return "0"
            out.append(f"\\frac{{{b}" if b > 0 else f"-\\frac{{{-b}")
        elif size == 3:
            c, d = self.num[1], self.num[2]
            if b < 0:
                out.append(f"-\\frac{{{-b}")
                c = -c
                if c == -1:
                    out.append("-")
                elif c != 1:
                    out.append(f"{c:+d}")
            elif b == 0:
                out.append("\\frac{")
                if c == -1:
                    out.append("-")
                elif c != 1:
                    out.append(str(c))
            else:
                out.append(f"\\frac{{{b}")
                if c == -1:
                    out.append("-")
                elif c != 1:
                    out.append(f"{c:+d}")
            if c != 0 and d != 1:
                out.append(f"\\sqrt{{{d}}}")
        else:
            return self._tex_nested()
        out.append(f"}}{{{den}}}")
        return "".join(out)

    def _tex_nested(self) -> str:
        if len(self.num) < 7:
            return f"Cannot print A32 den={self.den} num={_go_slice(self.num)}"
        out = []
        if self.den > 1:
            out.append("\\frac{")
        e = self.num[3]
        if e == 0:
            out.append("0")
        elif e == -1:
            out.append("-")
        elif e != 1:
            out.append(str(e))
        f, g, h = self.num[4], self.num[5], self.num[6]
        out.append(f"\\sqrt{{{f}{g:+d}\\sqrt{{{h}}}}}")
        if self.den > 1:
            out.append(f"}}{{{self.den}}}")
        return "".join(out)