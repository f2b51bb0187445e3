from __future__ import annotations

import math
import re
import typing as tp
from datetime import timedelta

from ._exceptions import ParseError, ValidationError

__all__ = ("Duration", "parse_duration", "to_timespan")

Duration = tp.Union[int, float, str, timedelta]

## Grammar

SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
YEAR = DAY * 365.25

MAX_DURATION_LENGTH = 100

UNITS: tp.Dict[str, float] = {
    "years": YEAR,
    "year": YEAR,
    "yrs": YEAR,
    "yr": YEAR,
    "y": YEAR,
    "weeks": WEEK,
    "week": WEEK,
    "w": WEEK,
    "days": DAY,
    "day": DAY,
    "d": DAY,
    "hours": HOUR,
    "hour": HOUR,
    "hrs": HOUR,
    "hr": HOUR,
    "h": HOUR,
    "minutes": MINUTE,
    "minute": MINUTE,
    "mins": MINUTE,
    "min": MINUTE,
    "m": MINUTE,
    "seconds": SECOND,
    "second": SECOND,
    "secs": SECOND,
    "sec": SECOND,
    "s": SECOND,
    "milliseconds": 1,
    "millisecond": 1,
    "msecs": 1,
    "msec": 1,
    "ms": 1,
}

NUMBER = r"-?(?:\d+)?\.?\d+"

_plain_number = re.compile(rf"^{NUMBER}$")
_duration = re.compile(
    rf"^(?P<amount>{NUMBER}) *(?P<unit>{'|'.join(UNITS)})?$",
    re.IGNORECASE,
)


def parse_duration(text: str) -> float:
    """
    Parse a human-readable duration into milliseconds.

    A bare number is read as milliseconds, matching the convention of the
    ``ms`` package used by Express-style middlewares.

    Examples:
        >>> parse_duration("1h")
        3600000.0
        >>> parse_duration("2.5 hrs")
        9000000.0
        >>> parse_duration("-3 days")
        -259200000.0
    """
    if len(text) > MAX_DURATION_LENGTH:
        raise ParseError(f"The duration must not be longer than {MAX_DURATION_LENGTH} characters.")

    match = _duration.match(text)
    if match is None:
        raise ParseError(f"Unable to parse the duration {text!r}.")

    unit = (match.group("unit") or "ms").lower()
    return float(match.group("amount")) * UNITS[unit]


def to_timespan(value: Duration) -> int:
    """
    Normalize a duration into whole seconds, truncated toward zero.

    Numbers and numeric strings are already seconds, anything else
    goes through `parse_duration`.

    Examples:
        >>> to_timespan(3600)
        3600
        >>> to_timespan("3600")
        3600
        >>> to_timespan("30m")
        1800
        >>> to_timespan(timedelta(days=1))
        86400
    """

    # bool is an int subclass, but `True` seconds is never meant
    if isinstance(value, bool):
        raise ValidationError(f"The duration should be a number, a string or a timedelta, but got {value!r}.")

    if isinstance(value, timedelta):
        return int(value.total_seconds())

    if isinstance(value, (int, float)):
        return _truncate(value)

    if isinstance(value, str):
        text = value.strip()
        if _plain_number.match(text):
            return _truncate(float(text))
        return _truncate(parse_duration(text) / 1000)

    raise ValidationError(f"The duration should be a number, a string or a timedelta, but got {type(value).__name__!r}.")


def _truncate(seconds: tp.Union[int, float]) -> int:
    try:
        finite = math.isfinite(seconds)
    except OverflowError:
        # ints beyond the float range
        finite = False

    if not finite:
        raise ValidationError(f"The duration should be finite, but got {seconds!r:.40}.")
    return int(seconds)
