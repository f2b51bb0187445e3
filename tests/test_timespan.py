from datetime import timedelta

import pytest

from cachepolicy import ParseError, ValidationError, parse_duration, private, to_timespan


@pytest.mark.parametrize(
    "value, expected",
    [
        (3600, 3600),
        (3600.9, 3600),
        (-1.5, -1),
        (0, 0),
        ("3600", 3600),
        (" 60 ", 60),
        ("1.9", 1),
        ("1500", 1500),
    ],
)
def test_numbers_are_seconds(value, expected):
    assert to_timespan(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1h", 3600),
        ("30m", 1800),
        ("45s", 45),
        ("1d", 86400),
        ("1w", 604800),
        ("1y", 31557600),
        ("2.5 hrs", 9000),
        ("10 Minutes", 600),
        ("2 days", 172800),
        ("-3 days", -259200),
        ("500ms", 0),
        ("1500 msecs", 1),
    ],
)
def test_human_readable_durations(value, expected):
    assert to_timespan(value) == expected


def test_timedelta():
    assert to_timespan(timedelta(minutes=5)) == 300
    assert to_timespan(timedelta(milliseconds=1500)) == 1


def test_parse_duration_returns_milliseconds():
    assert parse_duration("1h") == 3600000
    assert parse_duration(".5s") == 500
    assert parse_duration("100") == 100


@pytest.mark.parametrize("value", ["soon", "1 fortnight", "", "h1", "1..5h"])
def test_unparseable_duration(value):
    with pytest.raises(ParseError, match="Unable to parse the duration"):
        to_timespan(value)


def test_too_long_duration():
    with pytest.raises(ParseError, match="must not be longer than 100 characters"):
        parse_duration("1" * 101)


@pytest.mark.parametrize("value", [True, None, [1], object()])
def test_unsupported_type(value):
    with pytest.raises(ValidationError, match="The duration should be a number, a string or a timedelta"):
        to_timespan(value)


@pytest.mark.parametrize(
    "value",
    [float("nan"), float("inf"), 10**400, "9" * 400],
    ids=["nan", "inf", "huge-int", "huge-string"],
)
def test_non_finite_number(value):
    with pytest.raises(ValidationError, match="The duration should be finite"):
        to_timespan(value)


def test_oversized_ttl_fails_at_construction():
    with pytest.raises(ValidationError, match="The duration should be finite"):
        private("9" * 400)
