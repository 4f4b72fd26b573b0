"""Ticket store protocol (port) exposed to the identity layer.

The identity layer calls:
    - store() when a session is created, and hands the returned key to the
      client instead of the full ticket
    - renew() on sliding renewal
    - retrieve() when validating an incoming key
    - remove() on logout or invalidation

Retrieve reports "no session" as Success(value=None). Callers must treat
that, and any Failure, as "not authenticated".
"""

from typing import Protocol

from ticketstore.core.result import Result
from ticketstore.domain.entities import SessionTicket
from ticketstore.domain.errors import TicketStoreError


class TicketStoreProtocol(Protocol):
    """Server-side session ticket store."""

    async def store(self, ticket: SessionTicket) -> Result[str, TicketStoreError]:
        """Persist a new ticket under a freshly generated key.

        Args:
            ticket: Session payload.

        Returns:
            Result with the new session key, SerializationError (nothing
            written), or BackendUnavailableError.
        """
        ...

    async def renew(
        self, key: str, ticket: SessionTicket
    ) -> Result[None, TicketStoreError]:
        """Overwrite the ticket at key and reset its TTL from expires_at.

        Args:
            key: Session key (created if unknown).
            ticket: Replacement payload.

        Returns:
            Result with None, SerializationError, or BackendUnavailableError.
        """
        ...

    async def retrieve(
        self, key: str
    ) -> Result[SessionTicket | None, TicketStoreError]:
        """Load the ticket stored at key.

        Args:
            key: Session key.

        Returns:
            Result with the ticket, None if there is no session,
            DeserializationError, or BackendUnavailableError.
        """
        ...

    async def remove(self, key: str) -> Result[None, TicketStoreError]:
        """Delete the ticket at key. Absent keys are not an error.

        Args:
            key: Session key.

        Returns:
            Result with None, or BackendUnavailableError.
        """
        ...

    async def exists(self, key: str) -> Result[bool, TicketStoreError]:
        """Check whether a live ticket exists at key without decoding it."""
        ...

    async def ping(self) -> Result[bool, TicketStoreError]:
        """Check that the cache backend is reachable."""
        ...
