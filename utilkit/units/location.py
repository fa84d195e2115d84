"""Reference location for the fixed-width parsers.

This module provides the ReferenceLocation class, a named IANA timezone
that anchors wall-clock strings without an offset ("2021-03-05 09:07:03")
to an absolute instant.

A location is constructed explicitly and handed to the functions that need
it. If the zone cannot be loaded, construction fails with LocationError;
there is no fallback zone.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone, tzinfo
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from utilkit._internal.constants import DEFAULT_LOCATION_NAME, LOCATION_ENV_VAR
from utilkit._internal.decorators import memoize
from utilkit.errors import LocationError

logger = logging.getLogger(__name__)


class ReferenceLocation:
    """A named timezone used to anchor parsed wall-clock times.

    Attributes:
        name: The zone name the location was loaded from.
        tzinfo: The tzinfo object attached to parsed datetimes.

    Examples:
        >>> loc = ReferenceLocation.load("Asia/Chongqing")
        >>> loc.name
        'Asia/Chongqing'

        >>> ReferenceLocation.utc().name
        'UTC'
    """

    __slots__ = ("_name", "_tzinfo")

    _utc_instance: ClassVar[ReferenceLocation | None] = None

    def __init__(self, name: str, tz: tzinfo) -> None:
        """Create a location from an already loaded tzinfo.

        Prefer ``ReferenceLocation.load`` for named zones.

        Args:
            name: Display name for the location.
            tz: The tzinfo implementation.

        Raises:
            LocationError: If tz is not a tzinfo instance.
        """
        if not isinstance(tz, tzinfo):
            raise LocationError(f"tz must be a tzinfo, got {type(tz).__name__}")
        self._name: str = name
        self._tzinfo: tzinfo = tz

    @classmethod
    def load(cls, name: str) -> ReferenceLocation:
        """Load a location from the timezone database.

        Args:
            name: IANA zone name, e.g. "Asia/Chongqing".

        Returns:
            A new ReferenceLocation.

        Raises:
            LocationError: If the name is empty, malformed, or unknown.

        Examples:
            >>> ReferenceLocation.load("Europe/Berlin").name
            'Europe/Berlin'

            >>> ReferenceLocation.load("Nowhere/Special")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            LocationError: unknown timezone 'Nowhere/Special'
        """
        if not isinstance(name, str) or not name.strip():
            raise LocationError(f"timezone name must be a non-empty string, got {name!r}")

        try:
            tz = ZoneInfo(name)
        except ZoneInfoNotFoundError as e:
            raise LocationError(f"unknown timezone {name!r}") from e
        except (ValueError, OSError) as e:
            # ZoneInfo rejects absolute paths and unreadable zone files this way
            raise LocationError(f"cannot load timezone {name!r}: {e}") from e

        logger.debug("loaded reference location %s", name)
        return cls(name, tz)

    @classmethod
    def utc(cls) -> ReferenceLocation:
        """Return the UTC location.

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls("UTC", timezone.utc)
        return cls._utc_instance

    @property
    def name(self) -> str:
        """Return the zone name."""
        return self._name

    @property
    def tzinfo(self) -> tzinfo:
        """Return the tzinfo attached to anchored datetimes."""
        return self._tzinfo

    def localize(self, naive: datetime) -> datetime:
        """Attach this location to a naive wall-clock datetime.

        Args:
            naive: A datetime without tzinfo.

        Returns:
            The same wall-clock time, aware in this location.

        Raises:
            ValueError: If the datetime already carries a tzinfo.
        """
        if naive.tzinfo is not None:
            raise ValueError("localize() expects a naive datetime")
        return naive.replace(tzinfo=self._tzinfo)

    def now(self) -> datetime:
        """Return the current time in this location."""
        return datetime.now(self._tzinfo)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceLocation):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"ReferenceLocation({self._name!r})"

    def __str__(self) -> str:
        return self._name


@memoize
def default_location() -> ReferenceLocation:
    """Return the process-wide default reference location.

    The zone name comes from the ``UTILKIT_REFERENCE_TZ`` environment
    variable, falling back to "Asia/Chongqing". The location is loaded on
    first use and reused afterwards. A failed load is not cached.

    Raises:
        LocationError: If the configured zone cannot be loaded.
    """
    name = os.environ.get(LOCATION_ENV_VAR) or DEFAULT_LOCATION_NAME
    return ReferenceLocation.load(name)


__all__ = ["ReferenceLocation", "default_location"]
