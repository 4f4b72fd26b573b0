"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Async tests are always marked for pytest-asyncio
2. Custom markers are registered
3. Stores under test get a fresh in-memory cache and a manual clock
4. Redis fixtures bypass the container singleton and skip when Redis
   is unreachable
"""

import inspect
import os
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from redis.asyncio import Redis
from redis.exceptions import RedisError

from tests.utils.utils import TEST_PREFIX, ManualClock
from ticketstore.infrastructure.cache.memory_adapter import InMemoryCacheAdapter
from ticketstore.infrastructure.cache.redis_adapter import RedisAdapter
from ticketstore.infrastructure.cache.ticket_keys import TicketKeys
from ticketstore.infrastructure.ticket_store import CacheTicketStore


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real Redis"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def manual_clock():
    """Clock shared by the store (wall time) and the cache (monotonic)."""
    return ManualClock()


@pytest.fixture
def memory_cache(manual_clock):
    """Fresh in-memory cache driven by the manual clock."""
    return InMemoryCacheAdapter(clock=manual_clock.monotonic)


@pytest.fixture
def mock_logger():
    """Logger double; bind() returns the same mock so calls are easy to assert."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def ticket_keys():
    return TicketKeys(prefix=TEST_PREFIX)


@pytest.fixture
def ticket_store(memory_cache, ticket_keys, mock_logger, manual_clock):
    """CacheTicketStore over the in-memory cache with a manual clock."""
    return CacheTicketStore(
        memory_cache,
        keys=ticket_keys,
        logger=mock_logger,
        clock=manual_clock.now,
    )


@pytest_asyncio.fixture
async def redis_test_client():
    """Fresh Redis client per test (bypasses the container singleton).

    Uses REDIS_TEST_URL, falling back to database 15 on localhost. Skips
    the test when Redis is unreachable. Keys under the test prefix are
    removed afterwards.
    """
    url = os.getenv("REDIS_TEST_URL", "redis://localhost:6379/15")
    client = Redis.from_url(url, socket_connect_timeout=1, socket_timeout=2)
    try:
        await client.ping()
    except (RedisError, OSError):
        await client.aclose()
        pytest.skip(f"Redis not reachable at {url}")

    yield client

    async for key in client.scan_iter(match=f"{TEST_PREFIX}*"):
        await client.delete(key)
    await client.aclose()


@pytest_asyncio.fixture
async def cache_adapter(redis_test_client):
    """RedisAdapter over the per-test Redis client."""
    return RedisAdapter(redis_client=redis_test_client)
