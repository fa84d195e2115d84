"""Utilkit units: reference locations."""

from __future__ import annotations

from utilkit.units.location import ReferenceLocation, default_location

__all__: list[str] = [
    "ReferenceLocation",
    "default_location",
]
