from __future__ import annotations  # noqa: D100

import logging

import pytest

from moat.lib.flexspeed import MAX_CODE, Codec


@pytest.fixture
def codec():
    "a fresh speed codec"
    return Codec()


@pytest.fixture(scope="session")
def all_codes():
    "every valid 10-bit code"
    return range(MAX_CODE + 1)


@pytest.fixture(scope="session")
def speeds():
    "speeds from 0.01 to 255, in steps of 0.01"
    return [i / 100 for i in range(1, 25501)]


@pytest.fixture
def debug_log(caplog):
    "capture the codec's debug messages"
    caplog.set_level(logging.DEBUG, logger="moat.lib.flexspeed")
    return caplog
