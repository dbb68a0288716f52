"""
Codec object for 10-bit speed values
"""

from __future__ import annotations

import logging
from math import isnan

from ._base import Codec as _Codec
from ._speed import MAX_CODE, MAX_SPEED, decode, encode, step_size

logger = logging.getLogger(__name__)


class Codec(_Codec):
    """
    A codec that packs a speed (0…255) into ten bits.

    Out-of-range speeds are clamped, not rejected. Non-numbers are.
    """

    name = "flexspeed"

    def encode(self, obj) -> int:
        "speed > 10-bit code"
        if isinstance(obj, bool) or not isinstance(obj, (int, float)):
            raise ValueError(self, obj)  # noqa:TRY004
        if isinstance(obj, float) and isnan(obj):
            logger.debug("NaN speed, encoded as zero")
        elif obj < 0:
            logger.debug("Speed %r clamped to 0", obj)
        elif obj > MAX_SPEED:
            logger.debug("Speed %r clamped to %d", obj, MAX_SPEED)
        return encode(obj)

    def decode(self, data: int) -> float:
        "10-bit code > speed"
        if isinstance(data, bool) or not isinstance(data, int):
            raise ValueError(self, data)  # noqa:TRY004
        if not 0 <= data <= MAX_CODE:
            logger.debug("Code %#x: using the low ten bits", data)
        return decode(data)

    def step(self, obj) -> float:
        "precision at this speed"
        if isinstance(obj, bool) or not isinstance(obj, (int, float)):
            raise ValueError(self, obj)  # noqa:TRY004
        return step_size(obj)

    def __repr__(self):
        return f"<{self.__class__.__name__}:{self.name}>"
