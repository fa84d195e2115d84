"""Fixed-width layouts.

Five layouts have dedicated shortcuts. Each is named after the length of
the text it produces, and that length is checked exactly before parsing.

    19 - YYYY-MM-DD HH:mm:ss
    17 - YYYYMMDD HH:mm:ss
    14 - YYYYMMDDHHmmss
    10 - YYYY-MM-DD
    8  - YYYYMMDD

Formatting renders the datetime's own wall-clock fields. Parsing reads a
wall-clock time in a reference location (the default location unless one
is passed) and returns Unix seconds.

Examples:
    >>> from datetime import datetime
    >>> format19(datetime(2021, 3, 5, 9, 7, 3))
    '2021-03-05 09:07:03'

    >>> parse19_to_timestamp("2021-03-05 09:07:03", location=ReferenceLocation.utc())
    1614935223
"""

from __future__ import annotations

from datetime import datetime

from utilkit._internal.constants import (
    LAYOUT_FORMAT8,
    LAYOUT_FORMAT10,
    LAYOUT_FORMAT14,
    LAYOUT_FORMAT17,
    LAYOUT_FORMAT19,
)
from utilkit.errors import LengthError, ParseError
from utilkit.units.location import ReferenceLocation, default_location


def _format(dt: datetime, layout: str) -> str:
    # strftime leaves years below 1000 unpadded on some platforms
    return f"{dt.year:04d}" + dt.strftime(layout.replace("%Y", "", 1))


def format19(dt: datetime) -> str:
    """Format as YYYY-MM-DD HH:mm:ss."""
    return _format(dt, LAYOUT_FORMAT19)


def format17(dt: datetime) -> str:
    """Format as YYYYMMDD HH:mm:ss."""
    return _format(dt, LAYOUT_FORMAT17)


def format14(dt: datetime) -> str:
    """Format as YYYYMMDDHHmmss."""
    return _format(dt, LAYOUT_FORMAT14)


def format10(dt: datetime) -> str:
    """Format as YYYY-MM-DD."""
    return _format(dt, LAYOUT_FORMAT10)


def format8(dt: datetime) -> str:
    """Format as YYYYMMDD."""
    return _format(dt, LAYOUT_FORMAT8)


def _parse_to_timestamp(
    text: str,
    layout: str,
    width: int,
    location: ReferenceLocation | None,
) -> int:
    """Parse fixed-width text in a reference location.

    Args:
        text: The string to parse.
        layout: strptime layout for this width.
        width: The exact length the text must have.
        location: Zone to read the wall-clock time in. None means the
            default location.

    Returns:
        Unix seconds.

    Raises:
        LengthError: If len(text) != width.
        ParseError: If strptime rejects the text, or a field is not written
            with its full fixed width.
        LocationError: If the default location cannot be loaded.
    """
    if len(text) != width:
        raise LengthError(width, len(text))

    try:
        naive = datetime.strptime(text, layout)
    except ValueError as e:
        raise ParseError(str(e)) from e

    # strptime also takes unpadded fields and runs of spaces
    if _format(naive, layout) != text:
        raise ParseError(f"time data {text!r} does not match fixed layout {layout!r}")

    if location is None:
        location = default_location()
    return int(location.localize(naive).timestamp())


def parse19_to_timestamp(text: str, *, location: ReferenceLocation | None = None) -> int:
    """Parse YYYY-MM-DD HH:mm:ss to Unix seconds."""
    return _parse_to_timestamp(text, LAYOUT_FORMAT19, 19, location)


def parse17_to_timestamp(text: str, *, location: ReferenceLocation | None = None) -> int:
    """Parse YYYYMMDD HH:mm:ss to Unix seconds."""
    return _parse_to_timestamp(text, LAYOUT_FORMAT17, 17, location)


def parse14_to_timestamp(text: str, *, location: ReferenceLocation | None = None) -> int:
    """Parse YYYYMMDDHHmmss to Unix seconds."""
    return _parse_to_timestamp(text, LAYOUT_FORMAT14, 14, location)


def parse10_to_timestamp(text: str, *, location: ReferenceLocation | None = None) -> int:
    """Parse YYYY-MM-DD to Unix seconds."""
    return _parse_to_timestamp(text, LAYOUT_FORMAT10, 10, location)


def parse8_to_timestamp(text: str, *, location: ReferenceLocation | None = None) -> int:
    """Parse YYYYMMDD to Unix seconds."""
    return _parse_to_timestamp(text, LAYOUT_FORMAT8, 8, location)


__all__ = [
    "format19",
    "format17",
    "format14",
    "format10",
    "format8",
    "parse19_to_timestamp",
    "parse17_to_timestamp",
    "parse14_to_timestamp",
    "parse10_to_timestamp",
    "parse8_to_timestamp",
]
