"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class for domain-level error handling
- Settings loaded from the environment

The core module has NO dependencies on the domain or infrastructure layers.
"""

from ticketstore.core.enums import Environment, ErrorCode
from ticketstore.core.errors import DomainError
from ticketstore.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
