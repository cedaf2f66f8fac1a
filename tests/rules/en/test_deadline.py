"""Tests for forward offsets."""

from __future__ import annotations

from datetime import datetime

import pytest
from dateutil import tz


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=tz.tzutc())


@pytest.mark.integration
@pytest.mark.parametrize(
    "text,expected",
    [
        ("in 5 minutes", _utc(2024, 1, 5, 10, 35)),
        ("in 5min", _utc(2024, 1, 5, 10, 35)),
        ("in 2 hours", _utc(2024, 1, 5, 12, 30)),
        ("in half an hour", _utc(2024, 1, 5, 11, 0)),
        ("within a week", _utc(2024, 1, 12, 10, 30)),
        ("in a few days", _utc(2024, 1, 8, 10, 30)),
        ("in three months", _utc(2024, 4, 5, 10, 30)),
        ("in an hour", _utc(2024, 1, 5, 11, 30)),
        ("in 30 seconds", _utc(2024, 1, 5, 10, 30, 30)),
        ("in half a day", _utc(2024, 1, 5, 22, 30)),
    ],
)
def test_deadlines(parser, utc_reference, text, expected):
    assert parser.parse(text, utc_reference).time == expected


@pytest.mark.integration
def test_month_offset_clamps_to_month_end(parser, month_end_reference):
    assert parser.parse("in 1 month", month_end_reference).time == _utc(2024, 2, 29, 9, 15)


@pytest.mark.integration
def test_half_a_second_cannot_be_expressed(parser, utc_reference):
    assert parser.parse("in half a second", utc_reference) is None


@pytest.mark.integration
def test_in_inside_a_word_is_not_a_deadline(parser, utc_reference):
    assert parser.parse("nothing 5 minutes", utc_reference) is None
