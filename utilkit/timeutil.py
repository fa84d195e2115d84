"""Interval and derived-timestamp helpers.

Functions:
    now: Current time, aware in the process-local zone.
    now_timestamp: Current Unix seconds.
    day_interval: Whole calendar days between two instants (unsigned).
    second_interval: Seconds from one instant to another (signed).
    days_from_now_timestamp: Unix seconds a number of days from now.
    night_timestamp: Unix seconds of midnight, a number of days from today.
    time_sub: Deprecated alias of day_interval.
    get_time_interval_day: Deprecated, always 30 days before now.

Examples:
    >>> from datetime import datetime, timezone
    >>> a = datetime(2021, 3, 5, 23, 0, tzinfo=timezone.utc)
    >>> b = datetime(2021, 3, 7, 1, 0, tzinfo=timezone.utc)
    >>> day_interval(a, b)
    2
    >>> second_interval(a, b)
    93600
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from utilkit._internal.constants import LEGACY_INTERVAL_DAYS, SECONDS_PER_DAY
from utilkit._internal.decorators import deprecated
from utilkit.format.fixed import format8, parse8_to_timestamp
from utilkit.units.location import ReferenceLocation, default_location


def now() -> datetime:
    """Return the current time, aware in the process-local zone."""
    return datetime.now().astimezone()


def now_timestamp() -> int:
    """Return the current Unix seconds."""
    return int(datetime.now(timezone.utc).timestamp())


def _utc_date(dt: datetime) -> date:
    # Naive datetimes are taken at face value
    if dt.tzinfo is None:
        return dt.date()
    return dt.astimezone(timezone.utc).date()


def day_interval(a: datetime, b: datetime) -> int:
    """Return the number of days between two instants.

    Both instants are truncated to midnight UTC before subtracting, so
    the result counts day boundaries crossed, not 24-hour periods. The
    result is never negative and the argument order does not matter.

    Examples:
        >>> day_interval(datetime(2021, 3, 5, 23, 59), datetime(2021, 3, 6, 0, 1))
        1
    """
    return abs((_utc_date(a) - _utc_date(b)).days)


def second_interval(a: datetime, b: datetime) -> int:
    """Return the signed number of whole seconds from ``a`` to ``b``.

    Positive when ``b`` is later than ``a``. Fractions are truncated
    toward zero.

    Raises:
        TypeError: If one datetime is naive and the other aware.
    """
    return int((b - a).total_seconds())


def days_from_now_timestamp(days: int, *, now: datetime | None = None) -> int:
    """Return Unix seconds ``days`` days after now (before, if negative).

    Args:
        days: Day offset; 1 is one day later.
        now: Reference instant. Defaults to the current time.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return int(now.timestamp()) + days * SECONDS_PER_DAY


def night_timestamp(
    day: int,
    *,
    location: ReferenceLocation | None = None,
    now: datetime | None = None,
) -> int:
    """Return Unix seconds of midnight ``day`` days from today.

    ``-1`` is the start of yesterday, ``0`` the start of today and ``1``
    the start of tomorrow. "Today" and midnight are both taken in the
    reference location.

    Args:
        day: Signed day offset.
        location: Reference location. None means the default location.
        now: Reference instant. Defaults to the current time. A naive
            value is read as wall-clock time in the location.

    Raises:
        LocationError: If the default location cannot be loaded.
    """
    if location is None:
        location = default_location()
    if now is None:
        now = location.now()
    elif now.tzinfo is None:
        now = location.localize(now)
    else:
        now = now.astimezone(location.tzinfo)

    target = now + timedelta(days=day)
    return parse8_to_timestamp(format8(target), location=location)


@deprecated("use day_interval() instead")
def time_sub(a: datetime, b: datetime) -> int:
    """Return the number of days between two instants."""
    return day_interval(a, b)


@deprecated(
    "the day argument is ignored and the result is always 30 days before now; "
    "use days_from_now_timestamp() instead"
)
def get_time_interval_day(day: int) -> int:
    """Return Unix seconds 30 days before now.

    Kept for callers that rely on the historical result. ``day`` is
    accepted and ignored.
    """
    return days_from_now_timestamp(-LEGACY_INTERVAL_DAYS)


__all__ = [
    "now",
    "now_timestamp",
    "day_interval",
    "second_interval",
    "days_from_now_timestamp",
    "night_timestamp",
    "time_sub",
    "get_time_interval_day",
]
