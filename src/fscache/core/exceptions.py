"""Exceptions raised by fscache."""


class CacheError(Exception):
    """Base class for cache faults that are not ordinary misses."""

    pass


class SerializationError(CacheError):
    """Raised when serialization or deserialization fails."""

    pass


class CacheClearError(CacheError):
    """Raised when clearing the cache directory fails."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
