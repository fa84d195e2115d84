"""Utilkit exception hierarchy.

All Utilkit-specific exceptions inherit from UtilkitError.
"""

from __future__ import annotations


class UtilkitError(Exception):
    """Base exception for all Utilkit errors."""

    pass


class ParseError(UtilkitError, ValueError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed as a point in time. The message
    of the underlying parser is kept as-is and the original exception is
    chained as ``__cause__``.

    Examples:
        - Malformed numeric field ("2021-0a-01")
        - Calendar-impossible date ("2021-02-30")
        - Literal text that does not match the layout
    """

    pass


class LengthError(ParseError):
    """Fixed-width input has the wrong number of characters.

    Raised before any parsing is attempted.

    Attributes:
        expected: The required length.
        actual: The length that was given.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"formatted time length error: expected {expected} characters, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class LocationError(UtilkitError):
    """Reference location could not be loaded.

    Examples:
        - Unknown zone name ("Mars/Olympus_Mons")
        - Missing timezone database on the host
    """

    pass


class ConversionError(UtilkitError, ValueError):
    """Failed to convert between string and integer sequences."""

    pass


__all__ = [
    "UtilkitError",
    "ParseError",
    "LengthError",
    "LocationError",
    "ConversionError",
]
