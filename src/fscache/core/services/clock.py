"""Clock strategies used to stamp and check entry expiry."""

import time
from collections.abc import Callable

Clock = Callable[[], float]


def high_resolution_now() -> float:
    """Return a monotonic high-resolution reading in seconds."""
    return time.monotonic_ns() * 1e-9


def wall_clock_now() -> float:
    """Return wall-clock time in seconds since the epoch."""
    return time.time()


def select_clock(high_resolution: bool = True) -> Clock:
    """Pick the clock a cache uses for its whole lifetime.

    Args:
        high_resolution: Prefer the monotonic high-resolution clock.

    Returns:
        A zero-argument callable returning fractional seconds.
    """
    if high_resolution and hasattr(time, "monotonic_ns"):
        return high_resolution_now
    return wall_clock_now
