"""
Exact power-of-two helpers.

These work on the float's binary representation (via `math.frexp` and
`math.ldexp`), so there are no rounding artefacts at octave boundaries.
"""

from __future__ import annotations

from math import floor, frexp, isfinite, ldexp

__all__ = ["ilogb", "scalbn", "round_half_away"]


def ilogb(x: float) -> int:
    """
    Returns the integral part of the base-2 logarithm of @x,
    i.e. ``floor(log2(x))``.

    >>> ilogb(8)
    3
    >>> ilogb(7.999)
    2

    @x must be positive and finite.
    """
    if not (x > 0 and isfinite(x)):
        raise ValueError(x)
    # frexp returns m in [0.5, 1), but we need [1, 2)
    return frexp(x)[1] - 1


def scalbn(value: float, exp: int) -> float:
    """
    Scales @value by ``2**exp``. @exp may be negative.

    The result is exact as long as it doesn't under- or overflow.
    """
    return ldexp(value, exp)


def round_half_away(x: float) -> int:
    """
    Round to the nearest integer; ties go away from zero.

    Python's `round` rounds ties to even, which is not what we want here.
    """
    if x < 0:
        return -round_half_away(-x)
    res = floor(x)
    if x - res >= 0.5:
        res += 1
    return res
