"""Infrastructure errors package.

Usage:
    from ticketstore.infrastructure.errors import CacheError
"""

from ticketstore.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
)

__all__ = ["CacheError", "InfrastructureError"]
