"""PHP-style date parsing.

This module parses date strings described with PHP ``date()`` format
characters. The PHP layout is first translated into a ``strptime``
layout, then handed to ``datetime.strptime``.

Supported Tokens:
    Y - 4-digit year (1999, 2003)
    y - 2-digit year (99, 03)
    m - month with leading zero (01-12)
    n - month without leading zero (1-12)
    M - short month name (Jan-Dec)
    F - full month name (January-December)
    d - day with leading zero (01-31)
    j - day without leading zero (1-31)
    D - short weekday name (Mon-Sun)
    l - full weekday name (Monday-Sunday)
    g - hour, 12-hour, without leading zero (1-12)
    G - hour, 24-hour, without leading zero (0-23)
    h - hour, 12-hour, with leading zero (01-12)
    H - hour, 24-hour, with leading zero (00-23)
    a - am/pm
    A - AM/PM
    i - minutes with leading zero (00-59)
    s - seconds with leading zero (00-59)
    T - zone abbreviation (UTC, GMT, CST, ...)
    P - offset with colon (+08:00)
    O - offset without colon (+0800)
    r - RFC 2822 date (Thu, 21 Dec 2000 16:01:07 +0200)

A backslash makes the next character literal ("\\T" matches a literal T).

Padded tokens require exactly two digits; unpadded tokens take one or
two. Literal text, spaces included, must match exactly. Month and weekday
names follow the C locale.

A T abbreviation of UTC or GMT places the result in UTC. An abbreviation
that names the anchor zone at that time keeps the anchor zone. Any other
abbreviation gives a zero offset carrying that name.

Functions:
    php_to_strptime: Translate a PHP layout into a strptime layout.
    parse_php: Parse a string against a PHP layout.

Examples:
    >>> php_to_strptime("Y-m-d H:i:s")
    '%Y-%m-%d %H:%M:%S'

    >>> parse_php("2021-03-05", "Y-m-d").day
    5
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from utilkit._internal.scanner import scan
from utilkit.errors import ParseError

if TYPE_CHECKING:
    from utilkit.units.location import ReferenceLocation


# PHP format character -> strptime directive
_PHP_DIRECTIVES: dict[str, str] = {
    # year
    "Y": "%Y",
    "y": "%y",
    # month
    "m": "%m",
    "n": "%m",
    "M": "%b",
    "F": "%B",
    # day
    "d": "%d",
    "j": "%d",
    # weekday
    "D": "%a",
    "l": "%A",
    # hour
    "g": "%I",
    "G": "%H",
    "h": "%I",
    "H": "%H",
    # meridiem
    "a": "%p",
    "A": "%p",
    # minute, second
    "i": "%M",
    "s": "%S",
    # zone
    "T": "%Z",
    "P": "%z",
    "O": "%z",
    # RFC 2822
    "r": "%a, %d %b %Y %H:%M:%S %z",
}

# PHP format character -> shape the matching text must have
_PHP_SHAPES: dict[str, str] = {
    "Y": r"\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "n": r"\d{1,2}",
    "M": r"[A-Za-z]{3}",
    "F": r"[A-Za-z]+",
    "d": r"\d{2}",
    "j": r"\d{1,2}",
    "D": r"[A-Za-z]{3}",
    "l": r"[A-Za-z]+",
    "g": r"\d{1,2}",
    "G": r"\d{1,2}",
    "h": r"\d{2}",
    "H": r"\d{2}",
    "a": r"[ap]m",
    "A": r"[AP]M",
    "i": r"\d{2}",
    "s": r"\d{2}",
    "T": r"[A-Z][A-Za-z]{2,4}",
    "P": r"[+-]\d{2}:\d{2}",
    "O": r"[+-]\d{4}",
    "r": r"[A-Za-z]{3}, \d{2} [A-Za-z]{3} \d{4} \d{2}:\d{2}:\d{2} [+-]\d{4}",
}

_UTC_NAMES = frozenset({"UTC", "GMT"})


def php_to_strptime(layout: str) -> str:
    """Translate a PHP date layout into a strptime layout.

    Every format character is replaced in a single pass, so a directive
    produced for one token is never re-read as another token. Literal
    percent signs are doubled.

    Args:
        layout: PHP-style layout, e.g. "D, d M Y".

    Returns:
        The equivalent strptime layout.

    Examples:
        >>> php_to_strptime("j/n/y g:i A")
        '%d/%m/%y %I:%M %p'

        >>> php_to_strptime("100% \\Y")
        '100%% Y'
    """
    result = []
    for piece in scan(layout, _PHP_DIRECTIVES, escape="\\"):
        if piece.is_token:
            result.append(_PHP_DIRECTIVES[piece.text])
        else:
            result.append(piece.text.replace("%", "%%"))
    return "".join(result)


def _compile(layout: str) -> tuple[re.Pattern[str], str]:
    """Build the shape check and the strptime layout for a PHP layout.

    Zone abbreviations are captured by the shape check and left out of the
    strptime layout, since %Z only knows UTC, GMT and the local names.
    """
    shape = []
    fmt = []
    zones = 0
    for piece in scan(layout, _PHP_DIRECTIVES, escape="\\"):
        if not piece.is_token:
            shape.append(re.escape(piece.text))
            fmt.append(piece.text.replace("%", "%%"))
        elif piece.text == "T":
            shape.append(f"(?P<zone{zones}>{_PHP_SHAPES['T']})")
            zones += 1
        else:
            shape.append(_PHP_SHAPES[piece.text])
            fmt.append(_PHP_DIRECTIVES[piece.text])
    return re.compile("".join(shape), re.ASCII), "".join(fmt)


def _anchor(naive: datetime, location: "ReferenceLocation | None") -> datetime:
    if location is not None:
        return location.localize(naive)
    # astimezone() on a naive datetime reads it as process-local time
    return naive.astimezone()


def _resolve_zone(
    naive: datetime,
    name: str,
    location: "ReferenceLocation | None",
) -> datetime:
    if name in _UTC_NAMES:
        return naive.replace(tzinfo=timezone.utc)
    anchored = _anchor(naive, location)
    if anchored.tzname() == name:
        return anchored
    return naive.replace(tzinfo=timezone(timedelta(0), name))


def parse_php(
    text: str,
    layout: str,
    *,
    location: "ReferenceLocation | None" = None,
) -> datetime:
    """Parse a string using a PHP-style layout.

    Fields missing from the layout default as strptime defaults them
    (1900-01-01 00:00:00). If the text carries an offset (O, P or r) the
    result keeps that offset. A T abbreviation is resolved as described
    in the module notes. Otherwise the wall-clock time is anchored to the
    process-local zone, or to ``location`` when given.

    Args:
        text: The string to parse.
        layout: PHP-style layout.
        location: Optional zone to anchor offset-less times to.

    Returns:
        An aware datetime.

    Raises:
        ParseError: If the text does not have the shape of the layout, or
            strptime rejects a field. strptime messages are kept verbatim.

    Examples:
        >>> parse_php("2021-03-05", "Y-m-d").hour
        0

        >>> parse_php("Fri, 05 Mar 2021 09:07:03 +0800", "r").utcoffset()
        datetime.timedelta(seconds=28800)
    """
    shape, fmt = _compile(layout)
    match = shape.fullmatch(text)
    if match is None:
        raise ParseError(f"time data {text!r} does not match format {layout!r}")

    # Cut the zone abbreviations out; strptime only sees the other fields
    names = []
    rest = text
    for key in sorted(match.groupdict(), key=lambda k: match.start(k), reverse=True):
        start, end = match.span(key)
        names.append(match[key])
        rest = rest[:start] + rest[end:]

    try:
        parsed = datetime.strptime(rest, fmt)
    except ValueError as e:
        raise ParseError(str(e)) from e

    if parsed.tzinfo is not None:
        return parsed
    if names:
        # The last abbreviation in the text wins
        return _resolve_zone(parsed, names[0], location)
    return _anchor(parsed, location)


__all__ = ["php_to_strptime", "parse_php"]
