"""Tests for weekday expressions."""

from __future__ import annotations

from datetime import date

import pytest

from chronal import english
from chronal.rules import Options
from chronal.rules.en import WeekdayRule

# utc_reference is Friday 2024-01-05 10:30 UTC


@pytest.mark.integration
@pytest.mark.parametrize(
    "text,expected",
    [
        ("last monday", date(2024, 1, 1)),
        ("next monday", date(2024, 1, 8)),
        ("monday", date(2024, 1, 8)),
        ("on tuesday", date(2024, 1, 9)),
        ("friday", date(2024, 1, 12)),
        ("last friday", date(2023, 12, 29)),
        ("this friday", date(2024, 1, 5)),
        ("this monday", date(2024, 1, 1)),
        ("past sunday", date(2023, 12, 31)),
        ("next Wed", date(2024, 1, 10)),
        ("monday next week", date(2024, 1, 8)),
        ("friday next week", date(2024, 1, 12)),
        ("thursday last week", date(2023, 12, 28)),
        ("sunday this week", date(2024, 1, 7)),
    ],
)
def test_weekday_resolution(parser, utc_reference, text, expected):
    result = parser.parse(text, utc_reference)

    assert result.time.date() == expected
    assert (result.time.hour, result.time.minute) == (10, 30)
    assert result.text == text


@pytest.mark.integration
def test_weekday_with_time(parser, utc_reference):
    result = parser.parse("call me next wednesday at 2:25pm", utc_reference)

    assert result.time.date() == date(2024, 1, 10)
    assert (result.time.hour, result.time.minute, result.time.second) == (14, 25, 0)
    assert result.index == 8
    assert result.text == "next wednesday at 2:25pm"


@pytest.mark.unit
def test_weekday_names_need_word_boundaries():
    rule = WeekdayRule()

    assert rule.find("it was sunny") is None
    assert rule.find("monday's meeting").text == "monday"


@pytest.mark.integration
@pytest.mark.parametrize(
    "text,expected",
    [
        ("next week tuesday", date(2024, 1, 9)),
        ("last week friday", date(2023, 12, 29)),
        ("friday  next week", date(2024, 1, 12)),
        ("monday\tnext week", date(2024, 1, 8)),
    ],
)
def test_weekday_with_a_separate_week_phrase(parser, utc_reference, text, expected):
    result = parser.parse(text, utc_reference)

    assert result.time.date() == expected
    assert (result.time.hour, result.time.minute) == (10, 30)
    assert result.text == text


@pytest.mark.integration
def test_weekday_and_week_phrase_in_text_order(utc_reference):
    result = english(Options(match_by_order=False)).parse("next week tuesday", utc_reference)

    assert result.time.date() == date(2024, 1, 9)
