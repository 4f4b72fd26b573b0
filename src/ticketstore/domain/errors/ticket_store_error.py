"""Ticket store error types.

Returned inside Failure by every TicketStoreProtocol operation. A missing
session is NOT one of these: retrieve() reports it as Success(value=None).

Error Types:
- SerializationError: Ticket could not be encoded. Nothing was written.
- DeserializationError: Stored bytes exist but cannot be decoded
  (corruption or format-version mismatch). Treat the session as invalid.
- BackendUnavailableError: The cache client could not complete the call.

Usage:
    match await store.retrieve(key):
        case Failure(error=DeserializationError() as error):
            logger.error("Corrupt session ticket", error_code=error.code.value)
        case Failure(error=TicketStoreError()):
            ...  # fail closed
"""

from dataclasses import dataclass

from ticketstore.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TicketStoreError(DomainError):
    """Base class for ticket store failures.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class SerializationError(TicketStoreError):
    """Ticket payload could not be encoded.

    Attributes:
        code: ErrorCode.TICKET_SERIALIZATION_FAILED.
        message: Human-readable message.
        field: Ticket field that failed, if known.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DeserializationError(TicketStoreError):
    """Stored ticket bytes could not be decoded.

    Attributes:
        code: ErrorCode.TICKET_DESERIALIZATION_FAILED.
        message: Human-readable message.
        format_version: Version found in the envelope, if it could be read.
        details: Additional context.
    """

    format_version: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BackendUnavailableError(TicketStoreError):
    """Cache client failed (network or service failure).

    Attributes:
        code: ErrorCode.CACHE_BACKEND_UNAVAILABLE.
        message: Human-readable message.
        operation: Cache operation that failed (get, set, delete, ...).
        details: Underlying cache error context.
    """

    operation: str
