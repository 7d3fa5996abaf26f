"""Core domain layer for fscache."""

from fscache.core.entities import (
    CacheEntry,
    CacheKey,
    FileCacheConfig,
    Node,
    NodeKind,
)
from fscache.core.exceptions import CacheClearError, CacheError, SerializationError
from fscache.core.interfaces import ICache, IFilesystem, ISerializer
from fscache.core.services import FileCache

__all__ = [
    # Entities
    "CacheEntry",
    "CacheKey",
    "FileCacheConfig",
    "Node",
    "NodeKind",
    # Exceptions
    "CacheError",
    "CacheClearError",
    "SerializationError",
    # Interfaces
    "ICache",
    "IFilesystem",
    "ISerializer",
    # Services
    "FileCache",
]
