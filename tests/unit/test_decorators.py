"""Tests for cache decorators."""

import pytest

from fscache import FileCache, InMemoryFilesystem
from fscache.decorators import cached, configure, get_cache, invalidates


@pytest.fixture
def filesystem() -> InMemoryFilesystem:
    """Create a filesystem for testing."""
    return InMemoryFilesystem()


@pytest.fixture
def cache(filesystem: InMemoryFilesystem, clock) -> FileCache:
    """Create and configure a file cache for testing."""
    cache = FileCache(filesystem, "/cache/", clock=clock)
    configure(cache, default_ttl=300)
    return cache


class TestCachedDecorator:
    """Tests for @cached decorator."""

    @pytest.mark.asyncio
    async def test_cached_function(self, cache: FileCache) -> None:
        """Test that @cached caches function results."""
        call_count = 0

        @cached()
        async def get_data(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id, "value": "data"}

        # First call - should execute function
        result1 = await get_data(id="123")
        assert result1 == {"id": "123", "value": "data"}
        assert call_count == 1

        # Second call - should return cached result
        result2 = await get_data(id="123")
        assert result2 == {"id": "123", "value": "data"}
        assert call_count == 1  # Not incremented

    @pytest.mark.asyncio
    async def test_cached_different_args(self, cache: FileCache) -> None:
        """Test that different args create different cache entries."""
        call_count = 0

        @cached()
        async def get_user(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        await get_user(id="1")
        await get_user(id="2")
        await get_user(id="1")  # Should be cached

        assert call_count == 2  # Only 2 unique calls

    @pytest.mark.asyncio
    async def test_positional_and_keyword_share_key(self, cache: FileCache) -> None:
        """Test that the same argument passed two ways hits the same entry."""
        call_count = 0

        @cached()
        async def get_user(id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": id}

        await get_user("1")
        await get_user(id="1")

        assert call_count == 1

    @pytest.mark.asyncio
    async def test_default_key_is_hierarchical(
        self, cache: FileCache, filesystem: InMemoryFilesystem
    ) -> None:
        """Test that each function gets its own directory."""

        @cached()
        async def get_data() -> str:
            return "value"

        await get_data()

        assert filesystem.directory_exists("/cache/test_decorators/get_data")

    @pytest.mark.asyncio
    async def test_cached_none_result(self, cache: FileCache) -> None:
        """Test that a None result is cached like any other value."""
        call_count = 0

        @cached()
        async def find() -> None:
            nonlocal call_count
            call_count += 1
            return None

        assert await find() is None
        assert await find() is None
        assert call_count == 1

    @pytest.mark.asyncio
    async def test_cached_expires(self, cache: FileCache, clock) -> None:
        """Test @cached with custom TTL."""
        call_count = 0

        @cached(ttl=10)
        async def get_data() -> str:
            nonlocal call_count
            call_count += 1
            return "value"

        await get_data()
        clock.advance(11)
        await get_data()

        assert call_count == 2

    @pytest.mark.asyncio
    async def test_cached_uses_default_ttl(self, cache: FileCache, clock) -> None:
        """Test that the configured default TTL applies."""
        call_count = 0

        @cached()
        async def get_data() -> str:
            nonlocal call_count
            call_count += 1
            return "value"

        await get_data()
        clock.advance(299)
        await get_data()
        assert call_count == 1

        clock.advance(2)
        await get_data()
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_cached_with_custom_key(self, cache: FileCache) -> None:
        """Test @cached with custom key function."""

        @cached(key=lambda id: f"custom/user/{id}")
        async def get_user(id: str) -> dict:
            return {"id": id}

        result = await get_user(id="123")
        assert result == {"id": "123"}
        assert await cache.get("custom/user/123") == {"id": "123"}

    @pytest.mark.asyncio
    async def test_cached_with_string_key(self, cache: FileCache) -> None:
        """Test @cached with string key template."""

        @cached(key="users/{id}")
        async def get_user(id: str) -> dict:
            return {"id": id}

        result = await get_user("123")
        assert result == {"id": "123"}
        assert await cache.has("users/123") is True

    @pytest.mark.asyncio
    async def test_default_key_digest_is_stable(
        self, cache: FileCache, filesystem: InMemoryFilesystem
    ) -> None:
        """Test that argument order does not change the default key."""

        @cached()
        async def search(term: str, page: int = 1, options: dict | None = None) -> str:
            return term

        await search("x", options={"b": 2, "a": 1})
        await search(options={"a": 1, "b": 2}, term="x")

        files = [
            node.path async for node in filesystem.list_recursive("/cache/") if node.is_file
        ]
        assert len(files) == 1
        digest = files[0].rsplit("/", 1)[1]
        assert len(digest) == 20
        int(digest, 16)


class TestInvalidatesDecorator:
    """Tests for @invalidates decorator."""

    @pytest.mark.asyncio
    async def test_invalidates_keys(self, cache: FileCache) -> None:
        """Test that @invalidates clears cache entries."""
        version = 1

        @cached(key="users/{id}")
        async def get_user(id: str) -> dict:
            return {"id": id, "version": version}

        @invalidates(keys=["users/{id}"])
        async def update_user(id: str, data: dict) -> dict:
            nonlocal version
            version += 1
            return {"id": id, **data}

        assert (await get_user(id="123"))["version"] == 1

        await update_user(id="123", data={"name": "Alice"})

        assert await cache.has("users/123") is False
        assert (await get_user(id="123"))["version"] == 2

    @pytest.mark.asyncio
    async def test_invalidates_returns_result(self, cache: FileCache) -> None:
        """Test that @invalidates returns the function result."""

        @invalidates(keys=["items/{name}"])
        async def create_item(name: str) -> dict:
            return {"id": "new", "name": name}

        result = await create_item(name="Test Item")
        assert result == {"id": "new", "name": "Test Item"}


class TestDecoratorWithoutConfiguration:
    """Tests for decorators when cache is not configured."""

    @pytest.mark.asyncio
    async def test_cached_without_config(self) -> None:
        """Test @cached works without configuration (no caching)."""
        # Reset configuration
        import fscache.decorators

        fscache.decorators._cache = None

        call_count = 0

        @cached()
        async def get_data() -> str:
            nonlocal call_count
            call_count += 1
            return "value"

        await get_data()
        await get_data()

        # Without cache configured, function is called every time
        assert call_count == 2
        assert get_cache() is None

    @pytest.mark.asyncio
    async def test_invalidates_without_config(self) -> None:
        """Test @invalidates works without configuration (no-op)."""
        import fscache.decorators

        fscache.decorators._cache = None

        @invalidates(keys=["test"])
        async def update_data() -> str:
            return "updated"

        result = await update_data()
        assert result == "updated"
