"""Cache protocol for the domain layer.

This module defines the key-value contract the ticket store needs from a
cache backend, without knowing about any specific implementation.
Infrastructure adapters (Redis, in-memory) implement this protocol.

Contract:
- Values are opaque bytes.
- Each single-key set/get/delete is atomic.
- Entries with an elapsed TTL behave exactly like deleted entries.
- All operations return Result types; backend failures come back as
  Failure(CacheError), never as raised exceptions.
"""

from datetime import timedelta
from typing import Protocol

from ticketstore.core.errors import DomainError
from ticketstore.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the ticket store needs from a cache.

    Defines caching operations using Protocol (structural typing).
    Infrastructure adapters implement this without inheritance.
    """

    async def get(self, key: str) -> Result[bytes | None, DomainError]:
        """Get raw bytes from cache.

        Args:
            key: Cache key.

        Returns:
            Result with bytes if found, None if missing or expired, or CacheError.

        Example:
            result = await cache.get("ticketstore:session:abc")
            match result:
                case Success(value=None):
                    # Cache miss
                    pass
                case Success(value=raw):
                    ticket = serializer.decode(raw)
                case Failure(error=error):
                    logger.warning("Cache get failed", error=error.message)
        """
        ...

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> Result[None, DomainError]:
        """Write bytes to cache, replacing any existing value and TTL.

        Args:
            key: Cache key.
            value: Raw bytes to store.
            ttl: Time to live (None = no expiration). Zero or negative
                values are written with the backend's minimal TTL.

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key from cache.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check if key exists (and has not expired).

        Args:
            key: Cache key to check.

        Returns:
            Result with True if exists, False if not, or CacheError.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity (health check).

        Returns:
            Result with True if the backend is reachable, or CacheError.
        """
        ...
