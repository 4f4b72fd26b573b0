"""Domain entities."""

from ticketstore.domain.entities.session_ticket import Claim, SessionTicket, as_utc

__all__ = ["Claim", "SessionTicket", "as_utc"]
