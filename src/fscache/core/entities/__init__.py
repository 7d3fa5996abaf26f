"""Domain entities for fscache."""

from fscache.core.entities.cache_config import FileCacheConfig
from fscache.core.entities.cache_entry import CacheEntry
from fscache.core.entities.cache_key import CacheKey
from fscache.core.entities.node import Node, NodeKind

__all__ = [
    "CacheEntry",
    "CacheKey",
    "FileCacheConfig",
    "Node",
    "NodeKind",
]
