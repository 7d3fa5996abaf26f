"""Cache key value object."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Maps a cache key onto its storage path. The path is the base path
    followed by the key, with no escaping or hashing, so keys must
    already be valid relative paths. A key containing the path
    separator is hierarchical and lives in a subdirectory.
    """

    base_path: str
    key: str
    separator: str = os.sep

    def __post_init__(self) -> None:
        """Reject empty keys."""
        if not self.key:
            raise ValueError("Cache key must be a non-empty string")

    def __str__(self) -> str:
        return self.key

    @property
    def path(self) -> str:
        """Return the file path holding this key's entry."""
        return self.base_path + self.key

    @property
    def is_hierarchical(self) -> bool:
        """Return True if the key contains a separator."""
        return self.separator in self.key

    @property
    def parent(self) -> str | None:
        """Return every key segment but the last, or None for flat keys."""
        if not self.is_hierarchical:
            return None
        return self.key.rsplit(self.separator, 1)[0]

    @property
    def directory(self) -> str | None:
        """Return the directory that must exist before the entry is written."""
        parent = self.parent
        if parent is None:
            return None
        return self.base_path + parent
