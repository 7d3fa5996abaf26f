"""Pytest configuration for fscache tests."""

import pytest


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock for testing."""
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_decorator_config():
    """Reset decorator configuration before each test."""
    import fscache.decorators

    # Store original values
    original_cache = fscache.decorators._cache
    original_ttl = fscache.decorators._default_ttl

    yield

    # Restore original values after test
    fscache.decorators._cache = original_cache
    fscache.decorators._default_ttl = original_ttl
