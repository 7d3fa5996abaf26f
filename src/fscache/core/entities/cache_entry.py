"""Cache entry entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fscache.core.exceptions import SerializationError


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds a cached payload and an optional absolute expiry timestamp,
    expressed in the same clock the cache compares against.
    """

    data: Any
    expires_at: float | None = None

    def has_expired(self, now: float) -> bool:
        """Check if entry has expired at the given clock reading.

        The entry stays valid through the exact expiry instant.

        Args:
            now: Current clock reading in seconds.

        Returns:
            True if an expiry is set and ``now`` is past it.
        """
        if self.expires_at is None:
            return False
        return now > self.expires_at

    @classmethod
    def create(cls, data: Any, ttl: float | None, now: float) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            data: The value to cache.
            ttl: Optional time-to-live in seconds.
            now: Current clock reading in seconds.

        Returns:
            A new CacheEntry instance.
        """
        return cls(data=data, expires_at=None if ttl is None else now + ttl)

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted record for this entry."""
        return {"data": self.data, "expires_at": self.expires_at}

    @classmethod
    def from_dict(cls, record: Any) -> "CacheEntry":
        """Rebuild an entry from a persisted record.

        Args:
            record: The deserialized record.

        Returns:
            The CacheEntry the record describes.

        Raises:
            SerializationError: If the record is not a cache entry.
        """
        if not isinstance(record, Mapping) or set(record) != {"data", "expires_at"}:
            raise SerializationError("Stored content is not a cache entry")

        expires_at = record["expires_at"]
        if expires_at is not None:
            if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
                raise SerializationError(
                    f"Invalid expiry in cache entry: {expires_at!r}"
                )
            expires_at = float(expires_at)

        return cls(data=record["data"], expires_at=expires_at)
