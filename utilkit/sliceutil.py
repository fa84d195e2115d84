"""List helpers for strings and integers.

Functions:
    append_str: Append a string unless already present.
    compare_slice_str: Same elements in the same order.
    compare_slice_str_unordered: Same elements in any order.
    slice_contains_str: Case-insensitive membership.
    slice_contains_int: Integer membership.
    int_slice_dedup: Remove duplicate integers.
    strings_to_ints: Convert strings to integers.
    ints_to_strings: Convert integers to strings.
    strings_to_ints_asc: Convert strings to integers, sorted ascending.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from utilkit._internal.validation import parse_decimal
from utilkit.errors import ConversionError


def append_str(items: list[str], s: str) -> list[str]:
    """Append ``s`` to ``items`` if it is not already there.

    The list is modified in place and returned.
    """
    if s not in items:
        items.append(s)
    return items


def compare_slice_str(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return True if both sequences hold the same strings in the same order."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def compare_slice_str_unordered(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return True if both sequences hold the same strings, ignoring order.

    Duplicates are counted: ["a", "a", "b"] differs from ["a", "b", "b"].
    """
    return len(a) == len(b) and Counter(a) == Counter(b)


def slice_contains_str(items: Iterable[str], s: str) -> bool:
    """Return True if ``s`` is in ``items``, ignoring case."""
    s = s.lower()
    return any(item.lower() == s for item in items)


def slice_contains_int(items: Iterable[int], i: int) -> bool:
    """Return True if ``i`` is in ``items``."""
    return any(item == i for item in items)


def int_slice_dedup(items: Iterable[int]) -> list[int]:
    """Return the distinct integers of ``items`` in first-seen order."""
    return list(dict.fromkeys(items))


def strings_to_ints(src: Sequence[str]) -> list[int]:
    """Convert decimal strings to integers.

    Each item must be an optionally signed run of ASCII digits.

    Raises:
        ConversionError: If ``src`` is empty or any item is not an integer.
    """
    if not src:
        raise ConversionError("string convert to int error: empty source")

    dst = []
    for v in src:
        try:
            dst.append(parse_decimal(v))
        except (TypeError, ValueError) as e:
            raise ConversionError(f"string convert to int error: {v!r}") from e
    return dst


def ints_to_strings(src: Iterable[int]) -> list[str]:
    """Convert integers to decimal strings."""
    return [str(v) for v in src]


def strings_to_ints_asc(src: Sequence[str]) -> list[int]:
    """Convert decimal strings to integers sorted from smallest to largest.

    Raises:
        ConversionError: As ``strings_to_ints``.
    """
    return sorted(strings_to_ints(src))


__all__ = [
    "append_str",
    "compare_slice_str",
    "compare_slice_str_unordered",
    "slice_contains_str",
    "slice_contains_int",
    "int_slice_dedup",
    "strings_to_ints",
    "ints_to_strings",
    "strings_to_ints_asc",
]
