"""Input validation helpers for Utilkit.

This module is not part of the public API.
"""

from __future__ import annotations

import re

_DECIMAL_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_decimal(text: str) -> int:
    """Convert an optionally signed run of ASCII digits to int.

    Unlike ``int()``, surrounding whitespace, underscores and non-ASCII
    digits are rejected.

    Raises:
        ValueError: If text is not a plain decimal integer.
        TypeError: If text is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if _DECIMAL_RE.fullmatch(text) is None:
        raise ValueError(f"invalid decimal integer: {text!r}")
    return int(text)


__all__ = ["parse_decimal"]
