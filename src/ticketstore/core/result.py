"""Result types for railway-oriented programming.

Ticket store operations can fail in well-defined ways (bad payload, corrupt
bytes, unreachable backend). Instead of raising, they return a Result so the
caller decides whether to fail closed, retry, or log.

Usage:
    result = await ticket_store.retrieve(key)
    match result:
        case Success(value=None):
            # No session (expired, removed, unknown)
            ...
        case Success(value=ticket):
            ...
        case Failure(error=error):
            logger.warning("Ticket lookup failed", error_code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
