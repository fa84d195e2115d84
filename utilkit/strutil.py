"""String helpers: letter test, templating, reversal and case conversion.

Examples:
    >>> expand("http://{domain}/{0}", {"domain": "example.org"}, "docs")
    'http://example.org/docs'
    >>> camel_to_underline("CameCase")
    'came_case'
    >>> underline_to_camel("came_case")
    'CameCase'
"""

from __future__ import annotations

import re
import string
from typing import Mapping

_UPPER_RE = re.compile(r"(?<!^)(?=[A-Z])")


def is_letter(ch: str) -> bool:
    """Return True if ``ch`` is a single ASCII letter."""
    return len(ch) == 1 and ch in string.ascii_letters


def expand(
    template: str,
    match: Mapping[str, str],
    *subs: str,
    missing: str = "Missing",
) -> str:
    """Fill ``{name}`` and ``{N}`` placeholders in a template.

    A placeholder is looked up in ``match`` first. Otherwise, if it is a
    decimal index into ``subs``, that positional value is used. Anything
    else becomes ``missing``. An unclosed ``{`` leaves the rest of the
    template as it is.

    Examples:
        >>> expand("{a}-{1}-{0}-{x}", {"a": "A"}, "zero", "one")
        'A-one-zero-Missing'
    """
    out = []
    rest = template
    while True:
        start = rest.find("{")
        if start < 0:
            break
        end = rest.find("}", start + 1)
        if end < 0:
            break

        out.append(rest[:start])
        key = rest[start + 1 : end]
        if key in match:
            out.append(match[key])
        elif key.isascii() and key.isdigit() and int(key) < len(subs):
            out.append(subs[int(key)])
        else:
            out.append(missing)
        rest = rest[end + 1 :]

    out.append(rest)
    return "".join(out)


def reverse(s: str) -> str:
    """Reverse a string by code point."""
    return s[::-1]


def camel_to_underline(s: str) -> str:
    """Convert CamelCase or camelCase to snake_case."""
    return _UPPER_RE.sub("_", s).lower()


def underline_to_camel(s: str) -> str:
    """Convert snake_case to CamelCase.

    Only the first letter of each part is changed; the rest is kept.
    """
    return "".join(part[:1].upper() + part[1:] for part in s.split("_"))


__all__ = [
    "is_letter",
    "expand",
    "reverse",
    "camel_to_underline",
    "underline_to_camel",
]
