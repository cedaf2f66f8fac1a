"""Tests for numeric day/month/year dates."""

from __future__ import annotations

from datetime import date

import pytest

from chronal.errors import MalformedFieldError
from chronal.rules import Context, Strategy
from chronal.rules.base import DEFAULT_OPTIONS
from chronal.rules.common import SlashDMYRule


@pytest.mark.integration
@pytest.mark.parametrize(
    "text,expected",
    [
        ("due 23/02/2019", date(2019, 2, 23)),
        ("due 23/2/19", date(2019, 2, 23)),
        ("due 23.02.2019", date(2019, 2, 23)),
        ("due 23-02-2019", date(2019, 2, 23)),
        ("due 23/02", date(2024, 2, 23)),
        ("due 1/3.", date(2024, 3, 1)),
        ("due 29/02/2024", date(2024, 2, 29)),
    ],
)
def test_day_month_year_dates(parser, utc_reference, text, expected):
    result = parser.parse(text, utc_reference)

    assert result.time.date() == expected
    assert (result.time.hour, result.time.minute) == (10, 30)


@pytest.mark.integration
@pytest.mark.parametrize("text", ["due 15/13", "due 0/5", "took 1.5 hours", "5-10 people"])
def test_numbers_that_are_not_dates(parser, utc_reference, text):
    assert parser.parse(text, utc_reference) is None


@pytest.mark.integration
@pytest.mark.parametrize("text", ["due 31/02/2024", "due 31/04/2024", "due 29.02.2023"])
def test_day_missing_from_its_month_is_malformed(parser, utc_reference, text):
    with pytest.raises(MalformedFieldError, match="does not exist"):
        parser.parse(text, utc_reference)


@pytest.mark.unit
def test_skip_strategy_leaves_existing_date_alone(utc_reference):
    rule = SlashDMYRule(Strategy.SKIP)
    context = Context(text="23/02", month=5)

    applied = rule.find("23/02").apply(context, DEFAULT_OPTIONS, utc_reference)

    assert applied is False
    assert (context.month, context.day) == (5, None)


@pytest.mark.unit
def test_day_checked_against_the_year_in_context(utc_reference):
    rule = SlashDMYRule(Strategy.SKIP)
    context = Context(text="29/02", year=2023)

    assert rule.find("29/02").apply(context, DEFAULT_OPTIONS, utc_reference) is True
    assert (context.month, context.day) == (2, 29)
    with pytest.raises(MalformedFieldError):
        context.time(utc_reference)
