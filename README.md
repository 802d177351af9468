# surdnest

Exact arithmetic on numbers of the form

    (b + c√d + e√(f + g√h)) / a

where `a` is a natural denominator and the numerator parts are integers in
the 32-bit range. Results are reduced, and a nested root is denested when
that is possible. Built on these numbers, the package gives the exact sines
and cosines of integer-sided triangles and of the angles formed by joining
two triangles, and the diagonals of pentagons with integer sides.

The package has no dependencies beyond the standard library.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Numbers

`Algebraics` (in `surdnest.algebraics`) builds reduced `Algebraic` numbers
and does arithmetic on them:

```python
from surdnest.algebraics import Algebraics

qs = Algebraics()
x = qs.new(1, 1, 1, 5)                    # 1+√5
print(x)                                  # 1+√5
print(qs.pow2(x))                         # 6+2√5
print(qs.sqrt(qs.new(1, 6, 2, 5)))        # 1+√5, denested
print(qs.new(2, 9, 8, 7, 6, 5, 4, 3))     # (9+8√7+6√(5+4√3))/2
```

`new(den, *parts)` takes the denominator followed by 1, 3, 5 or 7 numerator
parts; `new1`, `new3`, `new5` and `new7` take each size directly.
`add`, `mul`, `sqrt` and `pow2` return new numbers; `add_n` and `mul_n`
fold over several. They cover only some combinations of sizes:

- `add`: any sizes 1 and 3 together, and size 5 with size 1, or with size 3
  sharing a radicand.
- `mul`: sizes 1×1, 3×1 and 3×3.
- `sqrt`: sizes 1 and 3.
- `pow2`: sizes 1, 3 and 5, and size 7 when `b` or `c` is zero.

Anything else raises `NestInvalid`. Results outside the 32-bit range raise
`NestOverflow`, a zero denominator raises `NestInfinite`; all three derive
from `NestError` and live in `surdnest.naturals`.

An `Algebraic` keeps its denominator in `den` and its parts in `num`. It
prints as shown above, `tex()` gives a LaTeX form and `key()` a compact
comma-separated identifier. `neg()` and `add_int()` change the number in
place.

`compare(q, r)` in `surdnest.compare` returns -1, 0 or +1. It handles two
numbers of size 1, a size-3 number against a size-1 number, and two size-3
numbers with the same radicand or both without an integer part; other pairs
raise `NestInvalid`.

## Integer helpers

`Integers` in `surdnest.integers` reduces fractions (`frac`, `frac_n`),
multiplies with an overflow check (`mul`), pulls square factors out of a
root (`surd(3, 8)` gives `(6, 2)`, `surd_n` for several inner terms) and
tries to denest `√(b + c√d)` with `denest(b, c, d)`.

`Naturals` in `surdnest.naturals` keeps the primes below 65535 and tables
of squares used by `sqrt_floor` (for 133 it gives `(11, 121, 144)`) and
`sqrt_floor_ceil`. `gcd` and `reduce` are plain helpers in the same module.

## Sums of surds

`SurdSum` in `surdnest.surds` holds a sum such as `3√2+2√3`, built with
`add`, `sub`, `add_signed` and `add_sqrt`, and divided with `divide`. It
can be squared (`pow2`), square-rooted when it has the form `b + c√d` and
denests without a denominator (`sqrt`), bounded by integers (`floor_ceil`,
and the tighter `floor_ceil2`), printed with `str()` or `tex()` and turned
into a `float`.

## Triangles

- `surdnest.triangles`: `new_triangle(a, b, c)`, the `alphas`, `betas` and
  `gammas` listings of triangles with one surd side, `TriangleSet` of
  primitive triangles, and `TriangleFactory` for cosines, sines, diagonals,
  the cosine of a sum of angles and the law of cosines.
- `surdnest.tri`: `TriFactory(max_side)` lists every triangle with sides up
  to `max_side`, pointing scaled copies at their primitive triangle, and
  `compute_sin_cos()` fills in the exact sines and cosines.
- `surdnest.tri2`: `Tri2Factory` joins two primitive triangles at a vertex
  and works out the sine and cosine of the summed angle (`new_all`,
  `new_equal_sin`, `new_not_equal_sin`, or iterate `pairs()`).
- `surdnest.tri3`: `Tri3Factory` closes each joined pair into triangles with
  two natural sides and one algebraic side (`build_all`); pairs that fail
  are recorded in `errs`.

```python
from surdnest.tri import TriFactory

tris = TriFactory(5)
tris.compute_sin_cos()
print(tris.t1s[0])   # [1 1 1] cos:[1/2 1/2 1/2] sin:[√3/2 √3/2 √3/2]
```

## Pentagons

`Diagonals` in `surdnest.pentagon` gives pentagon diagonals `√(p + q√5)/2`
for bars `a >= b >= c`: `get_one(a, b, c)` for one, and `get(min_side,
max_side)` yields `(a, b, c, diagonal)` for a range of `a`.

## What it does not do

There is no command-line program; everything is used from Python. The
package does not search for integer bar lengths that close pentagons or
octagons; it only computes the diagonals described above.