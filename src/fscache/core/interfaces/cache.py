"""Cache interface."""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol


class ICache(Protocol):
    """Contract for asynchronous key/value caches.

    Ordinary misses and transient storage failures are reported as
    ``False`` or the caller's default, never raised.
    """

    async def get(self, key: str, default: Any = None) -> Any:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.
            default: Value returned when the key is missing or expired.

        Returns:
            The cached value, or ``default``.
        """
        ...

    async def set(self, key: str, value: Any, ttl: float | None = None) -> bool:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live in seconds. None never expires.

        Returns:
            True if the value was stored, False otherwise.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the entry was removed, False otherwise.
        """
        ...

    async def has(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        ...

    async def get_multiple(
        self, keys: Iterable[str], default: Any = None
    ) -> dict[str, Any]:
        """Retrieve several values at once.

        Args:
            keys: The cache keys to retrieve.
            default: Value used for each missing or expired key.

        Returns:
            A mapping of each key to its value or ``default``.
        """
        ...

    async def set_multiple(
        self, values: Mapping[str, Any], ttl: float | None = None
    ) -> bool:
        """Store several values with the same TTL.

        Args:
            values: Mapping of cache keys to values.
            ttl: Optional time-to-live in seconds applied to every value.

        Returns:
            True if every value was stored, False otherwise.
        """
        ...

    async def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several values.

        Args:
            keys: The cache keys to delete.

        Returns:
            True if every entry was removed, False otherwise.
        """
        ...

    async def clear(self) -> bool:
        """Clear all cached values."""
        ...
