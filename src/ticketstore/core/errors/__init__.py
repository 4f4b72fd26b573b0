"""Core errors package.

Usage:
    from ticketstore.core.errors import DomainError
"""

from ticketstore.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
