"""Composition root - Centralized dependency injection.

Application-scoped singletons built from Settings:
- Logger (structlog console adapter)
- Cache (Redis with connection pooling, or in-memory)
- Ticket store

Each factory is wrapped in lru_cache so one instance is shared per
process. Tests call ``<factory>.cache_clear()`` to reset.

Components built here receive their configuration explicitly; to run
several independently namespaced stores in one process, construct
CacheTicketStore directly with a different TicketKeys prefix.

Usage:
    from ticketstore.core.container import get_ticket_store

    store = get_ticket_store()
    result = await store.store(ticket)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from ticketstore.core.config import get_settings

if TYPE_CHECKING:
    from ticketstore.domain.protocols.cache_protocol import CacheProtocol
    from ticketstore.domain.protocols.logger_protocol import LoggerProtocol
    from ticketstore.infrastructure.ticket_store import CacheTicketStore


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from ticketstore.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level_number,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling when CACHE_BACKEND=redis,
    InMemoryCacheAdapter when CACHE_BACKEND=memory.

    Returns:
        Cache client implementing CacheProtocol.
    """
    settings = get_settings()

    if settings.cache_backend == "memory":
        from ticketstore.infrastructure.cache.memory_adapter import (
            InMemoryCacheAdapter,
        )

        return InMemoryCacheAdapter()

    from redis.asyncio import ConnectionPool, Redis

    from ticketstore.infrastructure.cache.redis_adapter import RedisAdapter

    pool_options: dict[str, object] = {
        "max_connections": settings.redis_max_connections,
        "decode_responses": False,
        "socket_connect_timeout": settings.redis_socket_timeout,
        "socket_timeout": settings.redis_socket_timeout,
        "socket_keepalive": True,
    }
    if settings.redis_password is not None:
        pool_options["password"] = settings.redis_password

    pool = ConnectionPool.from_url(settings.redis_url, **pool_options)
    redis_client = Redis(connection_pool=pool)
    return RedisAdapter(redis_client=redis_client)


@lru_cache()
def get_ticket_store() -> "CacheTicketStore":
    """Get the ticket store singleton (app-scoped).

    Uses TICKET_KEY_PREFIX from settings as the key namespace.

    Returns:
        CacheTicketStore wired to get_cache() and get_logger().
    """
    from ticketstore.infrastructure.cache.ticket_keys import TicketKeys
    from ticketstore.infrastructure.ticket_store import CacheTicketStore

    settings = get_settings()
    return CacheTicketStore(
        get_cache(),
        keys=TicketKeys(prefix=settings.ticket_key_prefix),
        logger=get_logger(),
    )
