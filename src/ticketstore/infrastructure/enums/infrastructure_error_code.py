"""Infrastructure-specific error codes.

These are internal codes for tracking cache backend failures.
They travel in CacheError.infrastructure_code and are copied into the
details of BackendUnavailableError when they reach the ticket store.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_TIMEOUT = "cache_timeout"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
