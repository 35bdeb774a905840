"""
Pytest configuration and shared fixtures for personnummer tests.
"""

import json
from datetime import datetime
from pathlib import Path

import pytest

from halo_personnummer import FixedClock

DATA_DIR = Path(__file__).parent / "data"

# All encodings of the same identity in the test data
AVAILABLE_FORMATS = [
    "integer",
    "long_format",
    "short_format",
    "separated_format",
    "separated_long",
]


@pytest.fixture(scope="session")
def testdata_list() -> list[dict]:
    """Cross-format test vectors, ages computed at the fixture clock."""
    with open(DATA_DIR / "personnummer_list.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def valid_testdata(testdata_list) -> list[dict]:
    return [t for t in testdata_list if t["valid"]]


@pytest.fixture
def clock() -> FixedClock:
    """Clock used for every vector in personnummer_list.json."""
    return FixedClock(datetime(2024, 6, 1, 12, 0))


@pytest.fixture
def options(clock) -> dict:
    return {"clock": clock}


@pytest.fixture
def formats() -> list[str]:
    return list(AVAILABLE_FORMATS)
