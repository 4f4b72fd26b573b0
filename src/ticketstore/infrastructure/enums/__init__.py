"""Infrastructure enums package.

Usage:
    from ticketstore.infrastructure.enums import InfrastructureErrorCode
"""

from ticketstore.infrastructure.enums.infrastructure_error_code import (
    InfrastructureErrorCode,
)

__all__ = ["InfrastructureErrorCode"]
