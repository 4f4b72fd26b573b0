"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (the cache).

Architecture:
- Adapters catch backend exceptions and map them to CacheError
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is for internal tracking only
- Used with Result types for error propagation
"""

from dataclasses import dataclass

from ticketstore.core.errors import DomainError
from ticketstore.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors.

    Wraps Redis/cache exceptions and provides consistent error handling.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Cache-specific error code.
        details: Additional context (key, operation, original error).
    """

    pass
