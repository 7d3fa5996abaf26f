"""File cache - key/value cache persisted as one file per key."""

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fscache.core.entities.cache_config import FileCacheConfig
from fscache.core.entities.cache_entry import CacheEntry
from fscache.core.entities.cache_key import CacheKey
from fscache.core.exceptions import CacheClearError
from fscache.core.interfaces.filesystem import IFilesystem
from fscache.core.interfaces.serializer import ISerializer
from fscache.core.services.clock import Clock, select_clock

logger = logging.getLogger(__name__)


class FileCache:
    """Cache that stores every entry in its own file below a base path.

    Entries carry their own expiry and are evicted lazily: an expired
    entry is removed the next time it is read. No state is kept in
    memory between calls, the filesystem is the only source of truth.

    Transient I/O failures are reported as ``False`` or the caller's
    default. Corrupt entries and failures while clearing are raised.
    """

    def __init__(
        self,
        filesystem: IFilesystem,
        base_path: str,
        serializer: ISerializer | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the file cache.

        Args:
            filesystem: The filesystem entries are stored in.
            base_path: Directory holding the entries, ending with a separator.
            serializer: Serializer for entry records. Defaults to pickle.
            clock: Clock used for expiry. Defaults to the high-resolution clock.
        """
        if serializer is None:
            from fscache.infrastructure.serializers.pickle import PickleSerializer

            serializer = PickleSerializer()

        self._filesystem = filesystem
        self._base_path = base_path
        self._serializer = serializer
        self._now = clock or select_clock()

    @classmethod
    def from_config(
        cls,
        config: FileCacheConfig,
        filesystem: IFilesystem | None = None,
    ) -> "FileCache":
        """Create a FileCache from configuration.

        Args:
            config: The cache configuration.
            filesystem: Optional filesystem. Defaults to the local disk.

        Returns:
            A new FileCache instance.
        """
        from fscache.infrastructure.filesystems.local import LocalFilesystem
        from fscache.infrastructure.serializers.json import JsonSerializer
        from fscache.infrastructure.serializers.pickle import PickleSerializer

        serializer: ISerializer
        if config.serializer == "json":
            serializer = JsonSerializer(encoding=config.encoding)
        else:
            serializer = PickleSerializer()

        if filesystem is None:
            filesystem = LocalFilesystem()

        return cls(
            filesystem=filesystem,
            base_path=config.base_path,
            serializer=serializer,
            clock=select_clock(config.high_resolution_clock),
        )

    @property
    def base_path(self) -> str:
        """Get the directory holding the entries."""
        return self._base_path

    def now(self) -> float:
        """Return the current reading of the expiry clock."""
        return self._now()

    async def get(self, key: str, default: Any = None) -> Any:
        """Retrieve cached value by key.

        Reading an expired entry removes its file.

        Args:
            key: The cache key to retrieve.
            default: Value returned when the key is missing or expired.

        Returns:
            The cached value, or ``default``.

        Raises:
            SerializationError: If the stored entry is corrupt.
        """
        if not await self.has(key):
            return default

        path = self._key(key).path
        try:
            contents = await self._filesystem.read_file(path)
        except OSError as e:
            logger.debug("Failed to read cache file %s: %s", path, e)
            return default

        entry = CacheEntry.from_dict(self._serializer.deserialize(contents))

        if entry.has_expired(self.now()):
            logger.debug("Evicting expired cache entry %s", key)
            try:
                await self._filesystem.remove_file(path)
            except OSError as e:
                logger.warning("Failed to evict expired cache file %s: %s", path, e)
            return default

        return entry.data

    async def set(self, key: str, value: Any, ttl: float | None = None) -> bool:
        """Store value with optional TTL.

        Parent directories of hierarchical keys are created on demand.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live in seconds. None never expires.

        Returns:
            True if the value was written, False if the write failed.

        Raises:
            ValueError: If ttl is negative.
            OSError: If a parent directory cannot be created.
        """
        if ttl is not None and ttl < 0:
            raise ValueError("ttl must be non-negative")

        cache_key = self._key(key)
        directory = cache_key.directory
        if directory is not None:
            try:
                await self._filesystem.create_directory_recursive(directory)
            except FileExistsError:
                pass

        return await self._put_contents(cache_key.path, value, ttl)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the file was removed, False otherwise, including
            when it did not exist.
        """
        await self.has(key)

        path = self._key(key).path
        try:
            await self._filesystem.remove_file(path)
        except OSError as e:
            logger.debug("Failed to remove cache file %s: %s", path, e)
            return False
        return True

    async def has(self, key: str) -> bool:
        """Check if key exists in cache.

        Expiry is not checked; an expired entry exists until it is read.

        Args:
            key: The cache key to check.

        Returns:
            True if the entry file exists, False otherwise.
        """
        path = self._key(key).path
        try:
            return await self._filesystem.file_exists(path)
        except OSError as e:
            logger.debug("Failed to check cache file %s: %s", path, e)
            return False

    async def get_multiple(
        self, keys: Iterable[str], default: Any = None
    ) -> dict[str, Any]:
        """Retrieve several values concurrently.

        Args:
            keys: The cache keys to retrieve.
            default: Value used for each missing or expired key.

        Returns:
            A mapping of each key to its value or ``default``.
        """
        keys = list(keys)
        values = await asyncio.gather(*(self.get(key, default) for key in keys))
        return dict(zip(keys, values))

    async def set_multiple(
        self, values: Mapping[str, Any], ttl: float | None = None
    ) -> bool:
        """Store several values concurrently with the same TTL.

        Every write runs to completion even when another one fails.

        Args:
            values: Mapping of cache keys to values.
            ttl: Optional time-to-live in seconds applied to every value.

        Returns:
            True if every value was written, False otherwise.
        """
        results = await asyncio.gather(
            *(self.set(key, value, ttl) for key, value in values.items())
        )
        return all(results)

    async def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several values concurrently.

        Args:
            keys: The cache keys to delete.

        Returns:
            True if every file was removed, False otherwise.
        """
        results = await asyncio.gather(*(self.delete(key) for key in keys))
        return all(results)

    async def clear(self) -> bool:
        """Remove every cached file below the base path.

        Files are removed while the tree is still being listed.
        Directories are left in place.

        Returns:
            True once every file has been removed.

        Raises:
            CacheClearError: If listing or any removal fails.
        """
        removals: list[asyncio.Task[None]] = []
        try:
            async for node in self._filesystem.list_recursive(self._base_path):
                if node.is_file:
                    removals.append(
                        asyncio.create_task(self._filesystem.remove_file(node.path))
                    )
        except OSError as e:
            logger.error("Failed to list cache directory %s: %s", self._base_path, e)
            raise CacheClearError(
                f"Failed to list cache directory {self._base_path}: {e}",
                path=self._base_path,
            ) from e
        finally:
            # Issued removals always run to completion
            results = await asyncio.gather(*removals, return_exceptions=True)

        for result in results:
            if isinstance(result, Exception):
                logger.error("Failed to clear cache file: %s", result)
                raise CacheClearError(
                    f"Failed to clear cache directory {self._base_path}: {result}",
                    path=self._base_path,
                ) from result

        return True

    async def _put_contents(self, path: str, value: Any, ttl: float | None) -> bool:
        """Serialize a new entry and write it to path.

        Args:
            path: The file path to write.
            value: The value to store.
            ttl: Optional time-to-live in seconds.

        Returns:
            True if the file was written, False otherwise.
        """
        entry = CacheEntry.create(value, ttl, self.now())
        contents = self._serializer.serialize(entry.to_dict())

        try:
            await self._filesystem.write_file(path, contents)
        except OSError as e:
            logger.debug("Failed to write cache file %s: %s", path, e)
            return False
        return True

    def _key(self, key: str) -> CacheKey:
        return CacheKey(base_path=self._base_path, key=key)
