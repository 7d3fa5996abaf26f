"""Cache configuration entity."""

import os
from dataclasses import dataclass

SERIALIZERS = ("pickle", "json")


@dataclass
class FileCacheConfig:
    """File cache configuration.

    Provides the options needed to build a FileCache: where entries
    are stored, how they are encoded and which clock stamps expiry.

    Clock:
        With high_resolution_clock=True, expiry uses a monotonic
        high-resolution clock. Such readings are only comparable on the
        same host between reboots; switch it off to stamp entries with
        wall-clock time instead.
    """

    base_path: str
    serializer: str = "pickle"
    encoding: str = "utf-8"
    high_resolution_clock: bool = True

    # Used by the decorators when no ttl is given; None never expires
    default_ttl: float | None = None

    def __post_init__(self) -> None:
        """Validate options and normalize the base path."""
        if not self.base_path:
            raise ValueError("base_path must not be empty")
        if not self.base_path.endswith(os.sep):
            self.base_path = self.base_path + os.sep

        if self.serializer not in SERIALIZERS:
            raise ValueError(
                f"Unknown serializer {self.serializer!r}, "
                f"expected one of {', '.join(SERIALIZERS)}"
            )

        if self.default_ttl is not None and self.default_ttl < 0:
            raise ValueError("default_ttl must be non-negative")
