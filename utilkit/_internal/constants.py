"""Internal constants for Utilkit.

These constants define the layouts, limits and default settings used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Fixed-width layouts, keyed by the length of the text they produce
LAYOUT_FORMAT19: str = "%Y-%m-%d %H:%M:%S"  # 2006-01-02 15:04:05
LAYOUT_FORMAT17: str = "%Y%m%d %H:%M:%S"  # 20060102 15:04:05
LAYOUT_FORMAT14: str = "%Y%m%d%H%M%S"  # 20060102150405
LAYOUT_FORMAT10: str = "%Y-%m-%d"  # 2006-01-02
LAYOUT_FORMAT8: str = "%Y%m%d"  # 20060102

FIXED_LAYOUTS: dict[int, str] = {
    19: LAYOUT_FORMAT19,
    17: LAYOUT_FORMAT17,
    14: LAYOUT_FORMAT14,
    10: LAYOUT_FORMAT10,
    8: LAYOUT_FORMAT8,
}

# Reference location used by the fixed-width parsers
DEFAULT_LOCATION_NAME: str = "Asia/Chongqing"
LOCATION_ENV_VAR: str = "UTILKIT_REFERENCE_TZ"

# Tolerance for float comparisons
ACCURACY: float = 0.00001

# Offset applied by the legacy day-offset helper, regardless of its argument
LEGACY_INTERVAL_DAYS: int = 30


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "LAYOUT_FORMAT19",
    "LAYOUT_FORMAT17",
    "LAYOUT_FORMAT14",
    "LAYOUT_FORMAT10",
    "LAYOUT_FORMAT8",
    "FIXED_LAYOUTS",
    "DEFAULT_LOCATION_NAME",
    "LOCATION_ENV_VAR",
    "ACCURACY",
    "LEGACY_INTERVAL_DAYS",
]
