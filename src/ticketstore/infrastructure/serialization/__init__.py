"""Ticket serialization."""

from ticketstore.infrastructure.serialization.ticket_serializer import (
    FORMAT_NAME,
    FORMAT_VERSION,
    TicketSerializer,
)

__all__ = ["FORMAT_NAME", "FORMAT_VERSION", "TicketSerializer"]
