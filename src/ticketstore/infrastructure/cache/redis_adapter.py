"""Redis adapter implementing CacheProtocol.

This adapter wraps an async Redis client and maps Redis exceptions to
CacheError with an InfrastructureErrorCode.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Returns Result types for all operations
- Timeouts are enforced by the client's connection pool, not here
- No retries: failures are returned to the caller immediately
"""

from datetime import timedelta

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ticketstore.core.enums import ErrorCode
from ticketstore.core.result import Failure, Result, Success
from ticketstore.infrastructure.enums import InfrastructureErrorCode
from ticketstore.infrastructure.errors import CacheError

# Smallest TTL Redis accepts (PX 1). Already-expired tickets get this.
MIN_TTL_MILLISECONDS = 1


def ttl_to_milliseconds(ttl: timedelta) -> int:
    """Convert a TTL to Redis PX milliseconds, clamped to the minimum.

    Args:
        ttl: Time to live. May be zero or negative.

    Returns:
        Milliseconds, never below MIN_TTL_MILLISECONDS.
    """
    return max(MIN_TTL_MILLISECONDS, int(ttl.total_seconds() * 1000))


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance (decode_responses=False).
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def get(self, key: str) -> Result[bytes | None, CacheError]:
        """Get raw bytes from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with bytes if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _redis_failure(
                e, InfrastructureErrorCode.CACHE_GET_ERROR, "get", key
            )
        except Exception as e:
            return _unexpected_failure(
                e, InfrastructureErrorCode.CACHE_GET_ERROR, "get", key
            )

        if value is None:
            return Success(value=None)
        # Clients built with decode_responses=True hand back str
        if isinstance(value, str):
            value = value.encode("utf-8")
        return Success(value=bytes(value))

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis, replacing any existing value and TTL.

        Args:
            key: Cache key.
            value: Raw bytes.
            ttl: Time to live (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        try:
            if ttl is not None:
                await self._redis.set(key, value, px=ttl_to_milliseconds(ttl))
            else:
                # Plain SET also clears any TTL left by a previous write
                await self._redis.set(key, value)
            return Success(value=None)
        except RedisError as e:
            return _redis_failure(
                e, InfrastructureErrorCode.CACHE_SET_ERROR, "set", key
            )
        except Exception as e:
            return _unexpected_failure(
                e, InfrastructureErrorCode.CACHE_SET_ERROR, "set", key
            )

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
            return Success(value=deleted_count > 0)
        except RedisError as e:
            return _redis_failure(
                e, InfrastructureErrorCode.CACHE_DELETE_ERROR, "delete", key
            )
        except Exception as e:
            return _unexpected_failure(
                e, InfrastructureErrorCode.CACHE_DELETE_ERROR, "delete", key
            )

    async def exists(self, key: str) -> Result[bool, CacheError]:
        """Check if key exists in Redis.

        Args:
            key: Cache key to check.

        Returns:
            Result with True if exists, False if not, or CacheError.
        """
        try:
            exists_count = await self._redis.exists(key)
            return Success(value=exists_count > 0)
        except RedisError as e:
            return _redis_failure(
                e, InfrastructureErrorCode.CACHE_GET_ERROR, "exists", key
            )
        except Exception as e:
            return _unexpected_failure(
                e, InfrastructureErrorCode.CACHE_GET_ERROR, "exists", key
            )

    async def ttl(self, key: str) -> Result[timedelta | None, CacheError]:
        """Get remaining time to live for key.

        Args:
            key: Cache key.

        Returns:
            Result with remaining TTL, None if no TTL or key doesn't exist,
            or CacheError.
        """
        try:
            ttl_ms = await self._redis.pttl(key)
        except RedisError as e:
            return _redis_failure(
                e, InfrastructureErrorCode.CACHE_GET_ERROR, "ttl", key
            )
        except Exception as e:
            return _unexpected_failure(
                e, InfrastructureErrorCode.CACHE_GET_ERROR, "ttl", key
            )

        # Redis returns -2 if key doesn't exist, -1 if no expiration
        if ttl_ms < 0:
            return Success(value=None)
        return Success(value=timedelta(milliseconds=ttl_ms))

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            await self._redis.ping()  # type: ignore[misc]
            return Success(value=True)
        except RedisError as e:
            return _redis_failure(
                e, InfrastructureErrorCode.CACHE_CONNECTION_ERROR, "ping", None
            )
        except Exception as e:
            return _unexpected_failure(
                e, InfrastructureErrorCode.CACHE_CONNECTION_ERROR, "ping", None
            )

    async def close(self) -> None:
        """Close the underlying client and its connection pool."""
        await self._redis.aclose()


def _redis_failure(
    error: RedisError,
    infrastructure_code: InfrastructureErrorCode,
    operation: str,
    key: str | None,
) -> Failure[CacheError]:
    """Map a Redis exception to a CacheError failure.

    Timeouts and connection errors get their own codes regardless of
    which operation hit them.
    """
    if isinstance(error, RedisTimeoutError):
        infrastructure_code = InfrastructureErrorCode.CACHE_TIMEOUT
    elif isinstance(error, RedisConnectionError):
        infrastructure_code = InfrastructureErrorCode.CACHE_CONNECTION_ERROR

    target = f"key '{key}'" if key is not None else "cache"
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_BACKEND_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=f"Redis {operation} failed for {target}",
            details={"key": key, "operation": operation, "error": str(error)},
        )
    )


def _unexpected_failure(
    error: Exception,
    infrastructure_code: InfrastructureErrorCode,
    operation: str,
    key: str | None,
) -> Failure[CacheError]:
    target = f"key '{key}'" if key is not None else "cache"
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_BACKEND_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=f"Unexpected error during {operation} for {target}",
            details={
                "key": key,
                "operation": operation,
                "error": str(error),
                "type": type(error).__name__,
            },
        )
    )
