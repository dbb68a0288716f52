"""
Known values of the 10-bit speed encoding
"""

# ruff:noqa:D103 pylint: disable=missing-function-docstring
from __future__ import annotations

import math

from moat.lib.flexspeed import MAX_CODE, decode, encode

import pytest

enc_values = (
    (0.0, 0),
    (0.5, 32),
    (1.0, 64),
    (1 / 64, 1),
    (1 / 128, 1),  # tie, rounds up
    (3 / 128, 2),
    (2.0, 128),  # still linear
    (2.5, 160),
    (3.999, 256),  # carries into exponent 2
    (4.0, 256),
    (10.0, 416),
    (100.0, 840),
    (128.0, 896),
    (128.5, 897),  # tie, rounds up
    (130.5, 899),  # tie, rounds up, not to even
    (200.0, 968),
    (254.9, 1023),
    (255, 1023),
)


@pytest.mark.parametrize("speed,code", enc_values)
def test_encode(speed, code):
    assert encode(speed) == code


dec_values = (
    (0, 0.0),
    (1, 1 / 64),
    (32, 0.5),
    (64, 1.0),
    (127, 127 / 64),
    (128, 2.0),
    (129, 2 + 1 / 64),
    (256, 4.0),
    (416, 10.0),
    (840, 100.0),
    (896, 128.0),
    (968, 200.0),
    (1023, 255.0),
)


@pytest.mark.parametrize("code,speed", dec_values)
def test_decode(code, speed):
    res = decode(code)
    assert isinstance(res, float)
    assert res == speed


@pytest.mark.parametrize(
    "speed", [0, -0.0, -1e-9, -1, -300, -(10**400), -math.inf, math.nan]
)
def test_clamp_low(speed):
    assert encode(speed) == 0


@pytest.mark.parametrize("speed", [255, 255.0001, 256, 300, 1e30, 10**400, math.inf])
def test_clamp_high(speed):
    assert encode(speed) == MAX_CODE == (7 << 7) + 127


def test_linear_boundary():
    "2.0 is the last value of the linear range"
    assert encode(2.0) == 128
    assert decode(128) == 2.0
    assert encode(2.0 + 1 / 64) == 129
    assert encode(2.0 - 1 / 64) == 127


def test_int_input():
    assert encode(1) == 64
    assert encode(10) == encode(10.0)
    assert encode(200) == 968


@pytest.mark.parametrize(
    "code,speed",
    [
        (1024, 0.0),
        (1024 + 64, 1.0),
        (0x7FFF, 255.0),
        (-1, 255.0),
        (0x10000 + 416, 10.0),
    ],
)
def test_decode_high_bits(code, speed):
    "only the low ten bits count"
    assert decode(code) == speed
