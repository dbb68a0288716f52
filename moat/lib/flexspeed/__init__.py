"""
10-bit speed encoding.

Speeds from 0 to 255 are packed into ten bits, as a tiny float with a
3-bit exponent and a 7-bit mantissa. Precision is relative, not
absolute:

    ===== ======= =========
    Exp   Range   Step
    ===== ======= =========
    0     0…2     1/64
    1     2…4     1/64
    2     4…8     1/32
    3     8…16    1/16
    4     16…32   1/8
    5     32…64   1/4
    6     64…128  1/2
    7     128…255 1
    ===== ======= =========

Both directions are pure functions; out-of-range input is clamped.
"""

from __future__ import annotations

from ._base import Codec as BaseCodec
from ._speed import (
    EXP_BITS,
    LINEAR_MAX,
    MANT_BITS,
    MAX_CODE,
    MAX_SPEED,
    decode,
    encode,
    step_size,
)
from .codec import Codec

__all__ = [
    "BaseCodec",
    "Codec",
    "EXP_BITS",
    "LINEAR_MAX",
    "MANT_BITS",
    "MAX_CODE",
    "MAX_SPEED",
    "decode",
    "encode",
    "step_size",
]
