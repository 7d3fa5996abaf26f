"""Domain services for fscache."""

from fscache.core.services.clock import (
    Clock,
    high_resolution_now,
    select_clock,
    wall_clock_now,
)
from fscache.core.services.file_cache import FileCache

__all__ = [
    "FileCache",
    "Clock",
    "select_clock",
    "high_resolution_now",
    "wall_clock_now",
]
