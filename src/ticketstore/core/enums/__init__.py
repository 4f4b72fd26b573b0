"""Core enums package.

Usage:
    from ticketstore.core.enums import ErrorCode, Environment
"""

from ticketstore.core.enums.environment import Environment
from ticketstore.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
