"""fscache - Durable file-backed async cache with per-entry TTL.

Each entry lives in its own file below a base directory. Entries
carry an optional expiry and are evicted lazily when read. Keys
containing the path separator are stored in subdirectories that
are created on demand.

Example:
    import asyncio

    from fscache import FileCache, FileCacheConfig

    async def main() -> None:
        cache = FileCache.from_config(FileCacheConfig(base_path="/tmp/cache/"))

        await cache.set("users/42", {"name": "Alice"}, ttl=300)
        user = await cache.get("users/42")

        await cache.set_multiple({"a": 1, "b": 2})
        values = await cache.get_multiple(["a", "b", "c"], default=0)

        await cache.clear()

    asyncio.run(main())

Memoizing coroutines:
    from fscache.decorators import cached, configure

    configure(cache, default_ttl=60)

    @cached(key="users/{id}")
    async def get_user(id: str) -> dict:
        return await db.get_user(id)
"""

from fscache.core.entities import (
    CacheEntry,
    CacheKey,
    FileCacheConfig,
    Node,
    NodeKind,
)
from fscache.core.exceptions import CacheClearError, CacheError, SerializationError
from fscache.core.interfaces import ICache, IFilesystem, ISerializer
from fscache.core.services import FileCache, select_clock
from fscache.decorators import cached, configure, invalidates
from fscache.infrastructure import (
    InMemoryFilesystem,
    JsonSerializer,
    LocalFilesystem,
    PickleSerializer,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheEntry",
    "CacheKey",
    "FileCacheConfig",
    "Node",
    "NodeKind",
    # Exceptions
    "CacheError",
    "CacheClearError",
    "SerializationError",
    # Core interfaces
    "ICache",
    "IFilesystem",
    "ISerializer",
    # Core services
    "FileCache",
    "select_clock",
    # Infrastructure implementations
    "InMemoryFilesystem",
    "LocalFilesystem",
    "JsonSerializer",
    "PickleSerializer",
    # Decorators
    "cached",
    "invalidates",
    "configure",
]
