"""Domain protocols (ports).

Implementations live in the infrastructure layer and satisfy these
protocols structurally, without inheriting from them.
"""

from ticketstore.domain.protocols.cache_protocol import CacheProtocol
from ticketstore.domain.protocols.logger_protocol import LoggerProtocol
from ticketstore.domain.protocols.ticket_store_protocol import TicketStoreProtocol

__all__ = ["CacheProtocol", "LoggerProtocol", "TicketStoreProtocol"]
