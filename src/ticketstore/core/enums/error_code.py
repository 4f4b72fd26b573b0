"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Ticket codec errors (TICKET_*)
- Backend errors (CACHE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Ticket codec errors
    TICKET_SERIALIZATION_FAILED = "ticket_serialization_failed"
    TICKET_DESERIALIZATION_FAILED = "ticket_deserialization_failed"

    # Backend errors
    CACHE_BACKEND_UNAVAILABLE = "cache_backend_unavailable"
