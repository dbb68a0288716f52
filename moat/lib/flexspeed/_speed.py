"""
The actual 10-bit speed encoding.

A code consists of a 3-bit exponent (bits 9…7) and a 7-bit mantissa
(bits 6…0). Exponent zero is special: codes 0…128 map linearly to
0…2 in steps of 1/64. Every other exponent covers one octave with 128
steps.
"""

from __future__ import annotations

from ._math import ilogb, round_half_away, scalbn

__all__ = [
    "EXP_BITS",
    "MANT_BITS",
    "MAX_CODE",
    "MAX_SPEED",
    "LINEAR_MAX",
    "encode",
    "decode",
    "step_size",
]

EXP_BITS = 3
MANT_BITS = 7
MAX_CODE = (1 << (EXP_BITS + MANT_BITS)) - 1  # 1023

MAX_SPEED = 255
LINEAR_MAX = 2  # upper end of the linear range

_MANT_MASK = (1 << MANT_BITS) - 1
_EXP_MASK = (1 << EXP_BITS) - 1
_HIDDEN = 1 << MANT_BITS  # 128


def encode(speed: float) -> int:
    """
    Encode @speed as a 10-bit value.

    Speeds at or below zero (and NaN) result in zero; speeds above
    `MAX_SPEED` are capped.
    """
    if not speed > 0:
        # also catches NaN
        return 0
    if speed <= LINEAR_MAX:
        # exponent 0: plain fixed point, up to and including 2.0 (=128)
        return round_half_away(scalbn(speed, 6))

    if speed >= MAX_SPEED:
        speed = MAX_SPEED
    exponent = ilogb(speed)
    mantissa = round_half_away(scalbn(speed, MANT_BITS - exponent) - _HIDDEN)

    # a mantissa that rounds up to 128 carries into the exponent
    return (exponent << MANT_BITS) + mantissa


def decode(code: int) -> float:
    """
    Decode a 10-bit value. Higher bits are ignored.
    """
    if code == 0:
        return 0.0
    mantissa = code & _MANT_MASK
    exponent = (code >> MANT_BITS) & _EXP_MASK
    if exponent == 0:
        return scalbn(mantissa, -6)
    return scalbn(mantissa + float(_HIDDEN), exponent - MANT_BITS)


def step_size(speed: float) -> float:
    """
    Returns the distance between adjacent codes at @speed.

        speed < 4: 1/64
        4 ≤ speed < 8: 1/32
        …
        128 ≤ speed: 1
    """
    if not speed >= 2 * LINEAR_MAX:
        return scalbn(1, -6)
    if speed > MAX_SPEED:
        speed = MAX_SPEED
    return scalbn(1, ilogb(speed) - MANT_BITS)
