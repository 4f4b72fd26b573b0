"""Unit tests for the composition root.

Tests cover:
- Cache backend selection from CACHE_BACKEND
- Redis connection pool options
- Singleton behavior and wiring of the ticket store
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from tests.utils.utils import create_test_ticket
from ticketstore.core.config import get_settings
from ticketstore.core.container import get_cache, get_logger, get_ticket_store
from ticketstore.infrastructure.cache.memory_adapter import InMemoryCacheAdapter
from ticketstore.infrastructure.cache.redis_adapter import RedisAdapter
from ticketstore.infrastructure.logging.console_adapter import ConsoleAdapter
from ticketstore.infrastructure.ticket_store import CacheTicketStore


def _clear_caches():
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_cache.cache_clear()
    get_ticket_store.cache_clear()


@pytest.fixture(autouse=True)
def clear_container():
    _clear_caches()
    yield
    _clear_caches()


@pytest.mark.unit
class TestGetCache:
    """Test cache backend selection."""

    def test_memory_backend(self):
        with patch.dict(os.environ, {"CACHE_BACKEND": "memory"}, clear=True):
            cache = get_cache()

        assert isinstance(cache, InMemoryCacheAdapter)

    def test_redis_backend_uses_connection_pool(self):
        env_values = {
            "CACHE_BACKEND": "redis",
            "REDIS_URL": "redis://cache:6379/3",
            "REDIS_PASSWORD": "s3cret",
            "REDIS_MAX_CONNECTIONS": "7",
            "REDIS_SOCKET_TIMEOUT": "2.5",
        }
        with (
            patch.dict(os.environ, env_values, clear=True),
            patch("redis.asyncio.ConnectionPool") as mock_pool_cls,
            patch("redis.asyncio.Redis") as mock_redis_cls,
        ):
            pool = MagicMock()
            mock_pool_cls.from_url.return_value = pool

            cache = get_cache()

        assert isinstance(cache, RedisAdapter)
        mock_pool_cls.from_url.assert_called_once_with(
            "redis://cache:6379/3",
            max_connections=7,
            decode_responses=False,
            socket_connect_timeout=2.5,
            socket_timeout=2.5,
            socket_keepalive=True,
            password="s3cret",
        )
        mock_redis_cls.assert_called_once_with(connection_pool=pool)

    def test_redis_backend_without_password(self):
        with (
            patch.dict(os.environ, {}, clear=True),
            patch("redis.asyncio.ConnectionPool") as mock_pool_cls,
            patch("redis.asyncio.Redis"),
        ):
            get_cache()

        assert "password" not in mock_pool_cls.from_url.call_args.kwargs

    def test_cache_is_singleton(self):
        with patch.dict(os.environ, {"CACHE_BACKEND": "memory"}, clear=True):
            assert get_cache() is get_cache()


@pytest.mark.unit
class TestGetLogger:
    """Test logger construction."""

    def test_returns_console_adapter(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "testing"}, clear=True):
            logger = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        assert get_logger() is logger


@pytest.mark.unit
class TestGetTicketStore:
    """Test ticket store wiring."""

    def test_store_uses_configured_prefix(self):
        env_values = {
            "CACHE_BACKEND": "memory",
            "ENVIRONMENT": "testing",
            "TICKET_KEY_PREFIX": "myapp:session:",
        }
        with patch.dict(os.environ, env_values, clear=True):
            store = get_ticket_store()

        assert isinstance(store, CacheTicketStore)
        assert store.keys.prefix == "myapp:session:"
        assert get_ticket_store() is store

    async def test_store_round_trip_through_container(self):
        env_values = {"CACHE_BACKEND": "memory", "ENVIRONMENT": "testing"}
        with patch.dict(os.environ, env_values, clear=True):
            store = get_ticket_store()

        ticket = create_test_ticket(expires_at=None)
        key = (await store.store(ticket)).value

        assert (await store.retrieve(key)).value == ticket
