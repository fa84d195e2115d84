"""Date/time formatting and parsing.

This module provides three ways of converting between points in time and
strings:
    - Token layouts (YYYY, MM, DD, HH, hh, mm, ss and unpadded forms)
    - PHP-style layouts for parsing (Y, m, d, H, i, s, ...)
    - Fixed-width layouts of 19, 17, 14, 10 and 8 characters

The token and PHP-style languages share letters with different meanings
("h", "s", "m", "D", "M"). They are kept in separate modules with
separate token tables.

Examples:
    >>> from datetime import datetime
    >>> from utilkit.format import format_time, format19, parse_php

    >>> format_time(datetime(2021, 3, 5, 9, 7, 3), "YY/M/D H:m:s")
    '21/3/5 9:7:3'

    >>> format19(datetime(2021, 3, 5, 9, 7, 3))
    '2021-03-05 09:07:03'
"""

from __future__ import annotations

from utilkit.format.fixed import (
    format8,
    format10,
    format14,
    format17,
    format19,
    parse8_to_timestamp,
    parse10_to_timestamp,
    parse14_to_timestamp,
    parse17_to_timestamp,
    parse19_to_timestamp,
)
from utilkit.format.php import parse_php, php_to_strptime
from utilkit.format.tokens import format_time, format_timestamp, format_timestamp_string

__all__: list[str] = [
    # Token layouts
    "format_time",
    "format_timestamp",
    "format_timestamp_string",
    # PHP-style layouts
    "parse_php",
    "php_to_strptime",
    # Fixed-width layouts
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
