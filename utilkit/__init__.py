"""Utilkit: small helpers for everyday scripting.

Utilkit collects stateless helpers for date/time formatting and parsing,
float comparison with tolerance, list membership and deduplication, and
string templating and case conversion.

Date/Time:
    format_time: Format with token layouts (YYYY-MM-DD HH:mm:ss)
    parse_php: Parse with PHP-style layouts (Y-m-d H:i:s)
    format19 ... format8: Fixed-width formatting
    parse19_to_timestamp ... parse8_to_timestamp: Fixed-width parsing
    day_interval, second_interval, night_timestamp: Interval helpers
    ReferenceLocation: Zone used to anchor fixed-width parsing

Other Helpers:
    utilkit.mathutil: Tolerance comparisons and rounding
    utilkit.sliceutil: List helpers
    utilkit.strutil: String helpers

Exceptions:
    UtilkitError: Base exception
    ParseError: Failed to parse string
    LengthError: Fixed-width input has the wrong length
    LocationError: Reference location could not be loaded
    ConversionError: Failed string/int conversion

Example:
    >>> from datetime import datetime
    >>> from utilkit import format_time, parse19_to_timestamp, ReferenceLocation
    >>> format_time(datetime(2021, 3, 5, 9, 7, 3), "YYYY-MM-DD HH:mm:ss")
    '2021-03-05 09:07:03'
    >>> parse19_to_timestamp("1970-01-01 00:00:00", location=ReferenceLocation.utc())
    0
"""

from __future__ import annotations

__version__ = "0.1.0"

# Exceptions
from utilkit.errors import (
    ConversionError,
    LengthError,
    LocationError,
    ParseError,
    UtilkitError,
)

# Format functions
from utilkit.format import (
    format8,
    format10,
    format14,
    format17,
    format19,
    format_time,
    format_timestamp,
    format_timestamp_string,
    parse8_to_timestamp,
    parse10_to_timestamp,
    parse14_to_timestamp,
    parse17_to_timestamp,
    parse19_to_timestamp,
    parse_php,
    php_to_strptime,
)

# Interval helpers
from utilkit.timeutil import (
    day_interval,
    days_from_now_timestamp,
    get_time_interval_day,
    night_timestamp,
    now,
    now_timestamp,
    second_interval,
    time_sub,
)

# Units
from utilkit.units.location import ReferenceLocation, default_location

__all__: list[str] = [
    "__version__",
    # Exceptions
    "UtilkitError",
    "ParseError",
    "LengthError",
    "LocationError",
    "ConversionError",
    # Format functions
    "format_time",
    "format_timestamp",
    "format_timestamp_string",
    "parse_php",
    "php_to_strptime",
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
    # Interval helpers
    "now",
    "now_timestamp",
    "day_interval",
    "second_interval",
    "days_from_now_timestamp",
    "night_timestamp",
    "time_sub",
    "get_time_interval_day",
    # Units
    "ReferenceLocation",
    "default_location",
]
