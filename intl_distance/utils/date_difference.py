"""
Date difference utilities.
Resolves instants and counts the units between two of them, either as elapsed
time (seconds, minutes, hours) or as calendar boundaries crossed (days, weeks,
months, quarters, years).
"""

import math
from datetime import date, datetime, time, timedelta
from typing import Tuple, Union

from intl_distance.exceptions import InvalidInstantError, InvalidOptionError

Instant = Union[datetime, date, int, float]

# Durations in seconds. Month, quarter and year use the average Gregorian
# year of 365.2425 days.
SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400
SECONDS_IN_WEEK = 604800
SECONDS_IN_YEAR = 31556952
SECONDS_IN_MONTH = 2629746
SECONDS_IN_QUARTER = 7889238

_MICROSECONDS_IN_MILLISECOND = 1000
_MICROSECONDS_IN_SECOND = 1_000_000


def to_datetime(value: Instant) -> datetime:
    """
    Resolve an instant to a datetime.

    Args:
        value: datetime, date (midnight of that day) or epoch offset in
            milliseconds (resolved to local wall-clock time)

    Returns:
        datetime for the instant

    Raises:
        InvalidInstantError: If the value is not a resolvable instant
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime.combine(value, time())

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInstantError(f"Cannot resolve {value!r} to an instant")

    if not math.isfinite(value):
        raise InvalidInstantError(f"Epoch offset must be finite, got {value}")

    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInstantError(f"Epoch offset {value} is out of range") from e


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def resolve_pair(left: Instant, right: Instant) -> Tuple[datetime, datetime]:
    """
    Resolve two instants so they can be compared field by field.

    Aware pairs are expressed in the timezone of the left instant. Mixing an
    aware and a naive instant is rejected.
    """
    left = to_datetime(left)
    right = to_datetime(right)

    if _is_aware(left) != _is_aware(right):
        raise InvalidInstantError(
            "Cannot compare a timezone-aware instant with a naive one"
        )

    if _is_aware(left):
        right = right.astimezone(left.tzinfo)

    return left, right


def _truncate(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero"""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _absolute(value: datetime) -> datetime:
    """
    Pin a datetime to its absolute point in time.

    Naive values are read as local wall-clock time, honouring fold for the
    repeated hour when clocks go back.
    """
    if _is_aware(value):
        return value
    try:
        return value.astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInstantError(f"Cannot place {value} in local time") from e


def _elapsed_microseconds(left: Instant, right: Instant) -> int:
    left, right = resolve_pair(left, right)
    # Elapsed time ignores wall-clock jumps such as DST changes
    delta = _absolute(left) - _absolute(right)
    return (delta.days * SECONDS_IN_DAY + delta.seconds) * _MICROSECONDS_IN_SECOND + delta.microseconds


# ===== Elapsed-time differences =====


def difference_in_milliseconds(left: Instant, right: Instant) -> int:
    return _truncate(_elapsed_microseconds(left, right), _MICROSECONDS_IN_MILLISECOND)


def difference_in_seconds(left: Instant, right: Instant) -> int:
    """Whole seconds between two instants, truncated toward zero"""
    return _truncate(_elapsed_microseconds(left, right), _MICROSECONDS_IN_SECOND)


def difference_in_minutes(left: Instant, right: Instant) -> int:
    """Whole minutes between two instants, truncated toward zero"""
    return _truncate(
        _elapsed_microseconds(left, right), SECONDS_IN_MINUTE * _MICROSECONDS_IN_SECOND
    )


def difference_in_hours(left: Instant, right: Instant) -> int:
    """Whole hours between two instants, truncated toward zero"""
    return _truncate(
        _elapsed_microseconds(left, right), SECONDS_IN_HOUR * _MICROSECONDS_IN_SECOND
    )


# ===== Calendar-aware differences =====


def start_of_week(value: Instant, week_starts_on: int = 0) -> datetime:
    """
    Get the start of the week containing an instant.

    Args:
        value: Instant inside the week
        week_starts_on: First day of the week, 0 (Sunday) to 6 (Saturday)

    Returns:
        Midnight of the first day of the week, keeping the instant's tzinfo
    """
    if week_starts_on not in range(7):
        raise InvalidOptionError(
            f"week_starts_on must be between 0 and 6, got {week_starts_on!r}"
        )

    value = to_datetime(value)

    # isoweekday() counts Monday=1 .. Sunday=7, shift to Sunday=0 .. Saturday=6
    day = value.isoweekday() % 7
    offset = (day - week_starts_on) % 7

    return datetime.combine(
        value.date() - timedelta(days=offset), time(), tzinfo=value.tzinfo
    )


def get_quarter(value: Instant) -> int:
    """Quarter of the year (1-4) an instant falls in"""
    return (to_datetime(value).month - 1) // 3 + 1


def difference_in_calendar_days(left: Instant, right: Instant) -> int:
    """Number of day boundaries between two instants, ignoring time of day"""
    left, right = resolve_pair(left, right)
    return (left.date() - right.date()).days


def difference_in_calendar_weeks(
    left: Instant, right: Instant, week_starts_on: int = 0
) -> int:
    """Number of week boundaries between two instants"""
    left, right = resolve_pair(left, right)
    days = (
        start_of_week(left, week_starts_on).date()
        - start_of_week(right, week_starts_on).date()
    ).days
    return days // 7


def difference_in_calendar_months(left: Instant, right: Instant) -> int:
    left, right = resolve_pair(left, right)
    return (left.year - right.year) * 12 + (left.month - right.month)


def difference_in_calendar_quarters(left: Instant, right: Instant) -> int:
    left, right = resolve_pair(left, right)
    return (left.year - right.year) * 4 + (get_quarter(left) - get_quarter(right))


def difference_in_calendar_years(left: Instant, right: Instant) -> int:
    left, right = resolve_pair(left, right)
    return left.year - right.year
