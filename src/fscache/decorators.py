"""Cache decorators for async functions.

These decorators memoize coroutine results in a configured FileCache.
"""

import functools
import hashlib
import inspect
import json
import os
import re
from collections.abc import Callable
from typing import Any, TypeVar

from fscache.core.services.file_cache import FileCache

F = TypeVar("F", bound=Callable[..., Any])

# Module-level cache reference
_cache: FileCache | None = None
_default_ttl: float | None = None

_MISSING = object()


def configure(cache: FileCache, default_ttl: float | None = None) -> None:
    """Configure the cache for decorators.

    Must be called before @cached or @invalidates have any effect.

    Args:
        cache: The file cache instance to use.
        default_ttl: TTL in seconds applied when @cached has none.

    Example:
        config = FileCacheConfig(base_path="/var/cache/app/", default_ttl=300)
        configure(FileCache.from_config(config), default_ttl=config.default_ttl)
    """
    global _cache, _default_ttl
    _cache = cache
    _default_ttl = default_ttl


def get_cache() -> FileCache | None:
    """Get the configured cache.

    Returns:
        The configured cache, or None if not configured.
    """
    return _cache


def cached(
    ttl: float | None = None,
    key: str | Callable[..., str] | None = None,
) -> Callable[[F], F]:
    """Decorator for caching async function results.

    Results are stored under a hierarchical key so that every cached
    function gets its own directory.

    Args:
        ttl: Time-to-live in seconds. Uses the configured default if None.
        key: Custom cache key or function to generate key.
            If string, supports {arg_name} interpolation.
            If callable, receives (*args, **kwargs) and returns key string.

    Returns:
        Decorated function.

    Example:
        @cached(ttl=600, key="users/{id}")
        async def get_user(id: str) -> dict:
            return await db.get_user(id)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            if _cache is None:
                # Cache not configured, execute directly
                return await func(*args, **kwargs)

            cache_key = _build_cache_key(func, args, kwargs, key)

            result = await _cache.get(cache_key, _MISSING)
            if result is not _MISSING:
                return result

            result = await func(*args, **kwargs)

            effective_ttl = ttl if ttl is not None else _default_ttl
            await _cache.set(cache_key, result, effective_ttl)

            return result

        return wrapper  # type: ignore

    return decorator


def invalidates(keys: list[str]) -> Callable[[F], F]:
    """Decorator for deleting cache entries after a write.

    Executes the decorated function and then deletes the given keys.

    Args:
        keys: Keys to delete. Supports {arg_name} interpolation.

    Returns:
        Decorated function.

    Example:
        @invalidates(keys=["users/{id}"])
        async def update_user(id: str, data: dict) -> dict:
            return await db.update_user(id, data)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            # Execute function first
            result = await func(*args, **kwargs)

            if _cache is not None:
                arguments = _bind_arguments(func, args, kwargs)
                await _cache.delete_multiple(
                    [_interpolate_string(k, arguments) for k in keys]
                )

            return result

        return wrapper  # type: ignore

    return decorator


def _build_cache_key(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    custom_key: str | Callable[..., str] | None,
) -> str:
    """Build cache key for a function call.

    Args:
        func: The function being cached.
        args: Positional arguments.
        kwargs: Keyword arguments.
        custom_key: Custom key or key builder function.

    Returns:
        The cache key string.
    """
    if custom_key is not None:
        if callable(custom_key):
            return custom_key(*args, **kwargs)
        return _interpolate_string(custom_key, _bind_arguments(func, args, kwargs))

    # Default key: module/function/arguments-hash
    module = (func.__module__ or "default").split(".")[-1]
    arguments = _bind_arguments(func, args, kwargs)

    return os.sep.join([module, func.__name__, _digest(arguments)])


def _digest(arguments: dict[str, Any]) -> str:
    """Return a short stable digest of bound call arguments."""
    canonical = json.dumps(
        arguments, sort_keys=True, separators=(",", ":"), default=repr
    )
    return hashlib.blake2b(canonical.encode(), digest_size=10).hexdigest()


def _bind_arguments(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Map positional and keyword arguments onto parameter names."""
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except (TypeError, ValueError):
        return dict(kwargs)
    return dict(bound.arguments)


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Args:
        template: String with {arg_name} placeholders.
        arguments: Bound arguments for interpolation.

    Returns:
        Interpolated string.
    """
    pattern = r"\{(\w+)\}"

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)  # Keep original if not found

    return re.sub(pattern, replacer, template)
