"""Pytest configuration and fixtures for Utilkit tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import pytest

# Add the parent directory to sys.path so utilkit can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utilkit._internal.constants import LOCATION_ENV_VAR  # noqa: E402
from utilkit.units.location import default_location  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_default_location(monkeypatch: pytest.MonkeyPatch):
    """Start every test with an unloaded default location and no override."""
    monkeypatch.delenv(LOCATION_ENV_VAR, raising=False)
    default_location._clear_cache()
    yield
    default_location._clear_cache()


@pytest.fixture
def local_tz():
    """Switch the process-local zone for the duration of a test.

    Takes a POSIX TZ string, e.g. "UTC0" or "CST-8" (UTC+8).
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    saved = os.environ.get("TZ")

    def _set(tz: str) -> None:
        os.environ["TZ"] = tz
        time.tzset()

    yield _set

    if saved is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = saved
    time.tzset()
