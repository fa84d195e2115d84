"""Internal utilities for Utilkit.

This module contains private implementation details:
    - Constants (layouts, tolerance, default location)
    - Custom decorators (@deprecated, @memoize)
    - The format-string scanner
    - Strict decimal parsing

Note: This module is not part of the public API.
"""

from __future__ import annotations

from utilkit._internal.decorators import deprecated, memoize
from utilkit._internal.scanner import Piece, scan
from utilkit._internal.validation import parse_decimal

__all__: list[str] = [
    "deprecated",
    "memoize",
    "Piece",
    "scan",
    "parse_decimal",
]
