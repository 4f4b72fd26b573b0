"""Ticketstore - server-side session ticket store.

Keeps the full authentication session payload in an expiring key-value
cache and gives the client only an opaque reference key.

Usage:
    from ticketstore import CacheTicketStore, InMemoryCacheAdapter, TicketKeys
    from ticketstore.infrastructure.logging import ConsoleAdapter

    store = CacheTicketStore(
        InMemoryCacheAdapter(),
        keys=TicketKeys(prefix="myapp:session:"),
        logger=ConsoleAdapter(),
    )
    result = await store.store(ticket)
"""

from ticketstore.core.result import Failure, Result, Success
from ticketstore.domain.entities import Claim, SessionTicket
from ticketstore.domain.errors import (
    BackendUnavailableError,
    DeserializationError,
    SerializationError,
    TicketStoreError,
)
from ticketstore.domain.protocols import (
    CacheProtocol,
    LoggerProtocol,
    TicketStoreProtocol,
)
from ticketstore.infrastructure.cache import (
    InMemoryCacheAdapter,
    RedisAdapter,
    TicketKeys,
)
from ticketstore.infrastructure.serialization import TicketSerializer
from ticketstore.infrastructure.ticket_store import CacheTicketStore

__version__ = "0.1.0"

__all__ = [
    "BackendUnavailableError",
    "CacheProtocol",
    "CacheTicketStore",
    "Claim",
    "DeserializationError",
    "Failure",
    "InMemoryCacheAdapter",
    "LoggerProtocol",
    "RedisAdapter",
    "Result",
    "SerializationError",
    "SessionTicket",
    "Success",
    "TicketKeys",
    "TicketSerializer",
    "TicketStoreError",
    "TicketStoreProtocol",
]
