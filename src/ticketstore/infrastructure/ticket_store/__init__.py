"""Cache-backed ticket store."""

from ticketstore.infrastructure.ticket_store.cache_ticket_store import (
    CacheTicketStore,
    compute_ttl,
)

__all__ = ["CacheTicketStore", "compute_ttl"]
