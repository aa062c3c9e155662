"""
Tests for duration parsing into whole minutes.
"""

import pytest

from recipebox.parsers.duration_parser import parse_duration


@pytest.mark.parametrize("value, expected", [
    ("PT1H30M", 90),
    ("PT45M", 45),
    ("pt20m", 20),
    ("P1DT2H", 1560),
    ("PT30S", 1),
    ("PT1.5H", 90),
])
def test_iso_durations(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("20 mins", 20),
    ("~20 min", 20),
    ("about 1 hour", 60),
    ("1 hour 30 minutes", 90),
    ("1.5 hours", 90),
    ("2 hrs", 120),
])
def test_natural_durations(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("50-55 minutes", 53),
    ("10 to 15 minutes", 13),
    ("20–30 min", 25),
    ("1-2 hours", 90),
])
def test_ranges_use_rounded_mean(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "overnight", "PT0M", "P", 45])
def test_no_duration(value):
    assert parse_duration(value) is None


@pytest.mark.parametrize("value, expected", [
    ("2 1/2 hours", 150),
    ("1/2 hour", 30),
    ("1 1/2 hrs", 90),
    ("1 hour 30 minutes", 90),
])
def test_fractional_hours(value, expected):
    assert parse_duration(value) == expected
