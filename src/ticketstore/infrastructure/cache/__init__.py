"""Cache infrastructure package.

Architecture:
- RedisAdapter: Redis implementation of CacheProtocol
- InMemoryCacheAdapter: Process-local implementation of CacheProtocol
- TicketKeys: Namespaced session key generation
- Use ticketstore.core.container.get_cache() for dependency injection
"""

from ticketstore.infrastructure.cache.memory_adapter import InMemoryCacheAdapter
from ticketstore.infrastructure.cache.redis_adapter import RedisAdapter
from ticketstore.infrastructure.cache.ticket_keys import TicketKeys

__all__ = [
    "InMemoryCacheAdapter",
    "RedisAdapter",
    "TicketKeys",
]
