"""Ordering of nested algebraic numbers by their numeric value."""

from __future__ import annotations

from .algebraic import Algebraic
from .naturals import NestInvalid


def compare(q: Algebraic | None, r: Algebraic | None) -> int:
    """Return 0 when ``q`` equals ``r``, +1 when ``q > r`` and -1 when ``q < r``.

    A missing number on either side compares as equal. Only numbers of
    size 1, and numbers of size 3 against size 1 or against size 3 with the
    same radicand or with both ``b`` zero, are supported; other pairs raise
    NestInvalid.
    """
    if q is None or r is None:
        return 0
    q_is_deeper, big, small = q.deeper(r)

    def order(mx: int, mn: int) -> int:
        if mx == mn:
            return 0
        sign = 1 if mx > mn else -1
        return sign if q_is_deeper else -sign

    _, U, u, B, b = big.lcm(small)
    BU = B * U
    bu = b * u
    diff = BU - bu
    big_size, small_size = len(big.num), len(small.num)
    if big_size == 1:
        return order(BU, bu)
    if big_size == 3:
        C, D = big.num[1], big.num[2]
        CU = C * U
        if small_size == 1:
            if B == 0:
                return order(CU * CU * D, bu * bu)
            return order(CU * CU * D, diff * diff)
        if small_size == 3:
            c, d = small.num[1], small.num[2]
            cu = c * u
            if d == D:
                gap = cu - CU
                return order(diff * diff, gap * gap * D)
            if B == 0 and b == 0:
                return order(CU * CU * D, cu * cu * d)
    raise NestInvalid(f"Can't comp pair {q} and {r}")