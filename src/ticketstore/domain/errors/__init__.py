"""Domain errors package.

Usage:
    from ticketstore.domain.errors import TicketStoreError, DeserializationError
"""

from ticketstore.domain.errors.ticket_store_error import (
    BackendUnavailableError,
    DeserializationError,
    SerializationError,
    TicketStoreError,
)

__all__ = [
    "BackendUnavailableError",
    "DeserializationError",
    "SerializationError",
    "TicketStoreError",
]
