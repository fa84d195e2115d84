"""Decorators behind the legacy helpers and the default location.

    - @deprecated(message): warn on every call of a kept-for-compatibility helper
    - @memoize: load once per argument set, retry after a failed load

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import threading
import warnings
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def deprecated(message: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Flag a legacy helper whose result callers should stop relying on.

    Each call warns with DeprecationWarning, pointing at the caller's
    line. The message is also appended to the docstring so it shows up
    in help().

    Args:
        message: What is wrong with the function and what to use instead.

    Returns:
        A decorator function.

    Examples:
        >>> @deprecated("use day_interval() instead")
        ... def time_sub(a, b):
        ...     return day_interval(a, b)

        >>> time_sub(a, b)  # Emits DeprecationWarning
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(
                f"{func.__name__} is deprecated: {message}",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        note = f"Deprecated: {message}"
        wrapper.__doc__ = f"{func.__doc__.rstrip()}\n\n{note}" if func.__doc__ else note
        wrapper._deprecated = True  # type: ignore[attr-defined]
        wrapper._deprecation_message = message  # type: ignore[attr-defined]
        return wrapper

    return decorator


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Run a loader once per hashable argument set and reuse its result.

    The first call for a key runs under a lock, so concurrent first
    callers share a single evaluation. Only successful results are
    stored; if the call raises, the exception propagates and the next
    call tries again.

    Args:
        func: The loader.

    Returns:
        The caching wrapper, with _clear_cache() for tests.

    Examples:
        >>> @memoize
        ... def load_default() -> ReferenceLocation:
        ...     return ReferenceLocation.load("Asia/Chongqing")
    """
    cache: dict[tuple, T] = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        try:
            return cache[key]
        except KeyError:
            pass
        with lock:
            if key not in cache:
                cache[key] = func(*args, **kwargs)
            return cache[key]

    def clear() -> None:
        with lock:
            cache.clear()

    # Test hooks
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "deprecated",
    "memoize",
]
