"""Float comparison with tolerance, truncation and rounding.

The comparisons treat two floats closer than ``ACCURACY`` (1e-5) as the
same value. ``be_big`` and ``be_small`` therefore also hold for nearly
equal inputs; they read as "not meaningfully smaller" and "not
meaningfully bigger".

Examples:
    >>> be_equal(0.1 + 0.2, 0.3)
    True
    >>> to_fixed_10k(3.14159265)
    3.1415
    >>> round_half_up(1.25, 1)
    1.3
"""

from __future__ import annotations

import math
from typing import TypeVar

from utilkit._internal.constants import ACCURACY

T = TypeVar("T")


def pow_int(x: int, y: int) -> int:
    """Return x raised to y by repeated multiplication (1 when y <= 0)."""
    num = 1
    for _ in range(y):
        num *= x
    return num


def to_fixed_10k(f: float) -> float:
    """Truncate toward zero to 4 decimal places."""
    return to_fixed(f, 10000)


def to_fixed(f: float, n: float) -> float:
    """Truncate toward zero to the precision of multiplier ``n``.

    ``n`` is a power of ten: 100 keeps two decimals, 1000 keeps three.
    """
    return int(f * n) / n


def if_(condition: bool, true_val: T, false_val: T) -> T:
    """Return ``true_val`` if condition holds, else ``false_val``."""
    return true_val if condition else false_val


def be_big(source: float, compare: float, *, accuracy: float = ACCURACY) -> bool:
    """Return True if source is bigger than compare or within tolerance below it."""
    return source > compare or compare - source < accuracy


def be_big_or_equal(source: float, compare: float, *, accuracy: float = ACCURACY) -> bool:
    """Return True if source is bigger than or equal to compare, within tolerance."""
    return source > compare or abs(compare - source) <= accuracy


def be_small(source: float, compare: float, *, accuracy: float = ACCURACY) -> bool:
    """Return True if source is smaller than compare or within tolerance above it."""
    return source < compare or source - compare < accuracy


def be_small_or_equal(source: float, compare: float, *, accuracy: float = ACCURACY) -> bool:
    """Return True if source is smaller than or equal to compare, within tolerance."""
    return source < compare or abs(source - compare) < accuracy


def be_equal(source: float, compare: float, *, accuracy: float = ACCURACY) -> bool:
    """Return True if the two values differ by less than the tolerance."""
    return abs(source - compare) < accuracy


def round_half_up(f: float, n: int) -> float:
    """Round to ``n`` decimals, halves away from zero for positive values.

    The half is added before truncating, unlike the banker's rounding of
    ``round()``.
    """
    n10 = 10.0**n
    return math.trunc((f + 0.5 / n10) * n10) / n10


__all__ = [
    "pow_int",
    "to_fixed_10k",
    "to_fixed",
    "if_",
    "be_big",
    "be_big_or_equal",
    "be_small",
    "be_small_or_equal",
    "be_equal",
    "round_half_up",
]
