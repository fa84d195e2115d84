"""Token-substitution formatting.

This module formats a point in time with a small token language. Any
character run that is not a token is copied through unchanged.

Supported Tokens:
    YYYY - 4-digit year (2006)
    YY   - 2-digit year (06)
    MM   - 2-digit month (01-12)
    M    - month without padding (1-12)
    DD   - 2-digit day (01-31)
    D    - day without padding (1-31)
    HH   - 2-digit hour, 24-hour (00-23)
    H    - hour, 24-hour, without padding (0-23)
    hh   - 2-digit hour, 12-hour (01-12)
    h    - hour, 12-hour, without padding (1-12)
    mm   - 2-digit minute (00-59)
    m    - minute without padding (0-59)
    ss   - 2-digit second (00-59)
    s    - second without padding (0-59)

No AM/PM marker is ever emitted. A lone "Y" or a run of three is not a
token; "YYY" formats as the 2-digit year followed by a literal "Y".

Functions:
    format_time: Format a datetime with a token layout.
    format_timestamp: Format Unix seconds with a token layout.
    format_timestamp_string: Format a decimal Unix-seconds string.

Examples:
    >>> from datetime import datetime
    >>> dt = datetime(2021, 3, 5, 9, 7, 3)
    >>> format_time(dt, "YYYY-MM-DD HH:mm:ss")
    '2021-03-05 09:07:03'
    >>> format_time(dt, "YY/M/D H:m:s")
    '21/3/5 9:7:3'
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Callable

from utilkit._internal.scanner import scan
from utilkit._internal.validation import parse_decimal
from utilkit.errors import ParseError


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


_FIELDS: dict[str, Callable[[datetime], str]] = {
    "YYYY": lambda dt: f"{dt.year:04d}",
    "YY": lambda dt: f"{dt.year % 100:02d}",
    "MM": lambda dt: f"{dt.month:02d}",
    "M": lambda dt: str(dt.month),
    "DD": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: str(dt.day),
    "HH": lambda dt: f"{dt.hour:02d}",
    "H": lambda dt: str(dt.hour),
    "hh": lambda dt: f"{_hour12(dt):02d}",
    "h": lambda dt: str(_hour12(dt)),
    "mm": lambda dt: f"{dt.minute:02d}",
    "m": lambda dt: str(dt.minute),
    "ss": lambda dt: f"{dt.second:02d}",
    "s": lambda dt: str(dt.second),
}


def format_time(dt: datetime, layout: str) -> str:
    """Format a datetime using the token layout.

    Args:
        dt: The point in time. Fields are read as-is, in the datetime's own
            zone (naive datetimes are taken at face value).
        layout: Format string with tokens and literal text.

    Returns:
        Formatted string.

    Examples:
        >>> format_time(datetime(2021, 3, 5, 21, 7, 3), "hh:mm h")
        '09:07 9'
    """
    return "".join(
        _FIELDS[piece.text](dt) if piece.is_token else piece.text
        for piece in scan(layout, _FIELDS)
    )


def format_timestamp(unix_seconds: int, layout: str, *, tz: tzinfo | None = None) -> str:
    """Format Unix seconds using the token layout.

    Args:
        unix_seconds: Seconds since 1970-01-01 00:00:00 UTC.
        layout: Format string with tokens.
        tz: Zone to render in. Defaults to the process-local zone.

    Returns:
        Formatted string.
    """
    if tz is None:
        dt = datetime.fromtimestamp(unix_seconds).astimezone()
    else:
        dt = datetime.fromtimestamp(unix_seconds, tz)
    return format_time(dt, layout)


def format_timestamp_string(text: str, layout: str, *, tz: tzinfo | None = None) -> str:
    """Format a decimal Unix-seconds string using the token layout.

    Args:
        text: Decimal integer string, e.g. "1614906423". Whitespace,
            underscores and non-ASCII digits are rejected.
        layout: Format string with tokens.
        tz: Zone to render in. Defaults to the process-local zone.

    Returns:
        Formatted string.

    Raises:
        ParseError: If text is not a decimal integer.
    """
    try:
        unix_seconds = parse_decimal(text)
    except (TypeError, ValueError) as e:
        raise ParseError(f"invalid unix timestamp {text!r}") from e
    return format_timestamp(unix_seconds, layout, tz=tz)


__all__ = ["format_time", "format_timestamp", "format_timestamp_string"]
