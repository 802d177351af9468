"""Natural-number helpers: errors, gcd reductions, primes and square tables."""

from __future__ import annotations

import math
from bisect import bisect_right
from functools import lru_cache

N32_MAX = 0xFFFFFFFF

_SIEVE_LIMIT = 0xFFFF
_TABLE_COUNT = 8
_FIRST_TABLE_SIZE = 16


class NestError(ArithmeticError):
    """Base error for nested algebraic number arithmetic."""

    default_message = "Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NestOverflow(NestError):
    """A result does not fit in the 32-bit range."""

    default_message = "Overflow"


class NestInfinite(NestError):
    """A denominator is zero."""

    default_message = "Infinite"


class NestInvalid(NestError):
    """An argument has an unsupported shape."""

    default_message = "Invalid"


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two naturals."""
    return math.gcd(a, b)


def reduce(den: int, *args: int) -> tuple[int, tuple[int, ...], int]:
    """Divide a natural denominator and integer numerators by their common divisor.

    Returns ``(den, nums, g)`` where ``g`` is the divisor found. Nothing is
    divided unless ``g`` is greater than one.
    """
    g = den
    for num in args:
        g = math.gcd(g, abs(num))
    if g > 1:
        return den // g, tuple(num // g for num in args), g
    return den, tuple(args), g


@lru_cache(maxsize=None)
def _primes() -> tuple[int, ...]:
    sieve = bytearray([1]) * _SIEVE_LIMIT
    sieve[0:2] = b"\x00\x00"
    for i in range(2, math.isqrt(_SIEVE_LIMIT) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, _SIEVE_LIMIT, i)))
    return tuple(i for i, flag in enumerate(sieve) if flag)


@lru_cache(maxsize=None)
def _pow2s() -> tuple[tuple[int, ...], ...]:
    tables = []
    last = 0
    count = _FIRST_TABLE_SIZE
    for _ in range(_TABLE_COUNT):
        tables.append(tuple((last + i) * (last + i) for i in range(count)))
        last += count
        count *= 2
    return tuple(tables)


class Naturals:
    """Factory holding the primes below 0xffff and tables of consecutive squares."""

    def __init__(self) -> None:
        self.primes: tuple[int, ...] = _primes()
        self.pow2s: tuple[tuple[int, ...], ...] = _pow2s()

    def reduce_fraction(self, den: int, nums) -> tuple[int, list[list[int]]]:
        """Reduce the naturals ``nums`` (rows of values) over ``den`` by common primes.

        Example: ``reduce_fraction(8, [[4, 2]])`` returns ``(4, [[2, 1]])``.
        """
        if den == 0:
            raise NestInfinite()
        rows = [list(row) for row in nums]
        flat = [n for row in rows for n in row]
        if not any(n > 0 for n in flat):
            return den, rows
        smallest = min([N32_MAX, *flat])
        for p in self.primes:
            if smallest < p:
                break
            while den % p == 0 and all(n % p == 0 for n in flat):
                den //= p
                rows = [[n // p for n in row] for row in rows]
                flat = [n for row in rows for n in row]
        return den, rows

    def sqrt_floor(self, num: int) -> tuple[int, int, int]:
        """Return ``(root, floor, ceil)``: the floor square root and the squares around ``num``.

        Example: 133 gives ``(11, 121, 144)``. Raises NestOverflow beyond the tables.
        """
        if num == 0:
            return 0, 0, 0
        base = 0
        floor = 0
        for table in self.pow2s:
            if num <= table[-1]:
                pos = bisect_right(table, num) - 1
                if pos < 0:
                    return base - 1, floor, table[0]
                square = table[pos]
                if square == num:
                    return base + pos, square, square
                return base + pos, square, table[pos + 1]
            base += len(table)
            floor = table[-1]
        raise NestOverflow()

    def sqrt_floor_ceil(self, num: int) -> tuple[int, int]:
        """Return the floor and ceiling of the square root of ``num``."""
        root, floor, ceil = self.sqrt_floor(num)
        if floor == ceil:
            return root, root
        return root, root + 1