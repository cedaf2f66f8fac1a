"""Shared test configuration and reference-time fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest
from dateutil import tz

from chronal import english


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests that run the full parse pipeline")


@pytest.fixture
def utc_reference() -> datetime:
    """Friday 2024-01-05 10:30:00 UTC."""
    return datetime(2024, 1, 5, 10, 30, 0, tzinfo=tz.tzutc())


@pytest.fixture
def month_end_reference() -> datetime:
    """Wednesday 2024-01-31 09:15:00 UTC, for month-length clamping."""
    return datetime(2024, 1, 31, 9, 15, 0, tzinfo=tz.tzutc())


@pytest.fixture
def mid_year_reference() -> datetime:
    """Saturday 2024-06-15 10:30:00 UTC."""
    return datetime(2024, 6, 15, 10, 30, 0, tzinfo=tz.tzutc())


@pytest.fixture
def parser():
    """Fresh English parser with default options."""
    return english()
