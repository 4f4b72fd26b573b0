"""In-memory adapter implementing CacheProtocol.

Suitable for development, tests, and single-process deployments. Entries
live in a dict guarded by an asyncio.Lock so every single-key operation is
atomic with respect to other coroutines on the same event loop.

Expired entries are dropped on access, which is indistinguishable from an
explicit delete for callers. Writes also sweep every expired entry once the
earliest known deadline has passed, so abandoned sessions do not accumulate.
"""

import asyncio
import time
from collections.abc import Callable
from datetime import timedelta

from ticketstore.core.result import Result, Success
from ticketstore.infrastructure.errors import CacheError


class InMemoryCacheAdapter:
    """In-memory implementation of CacheProtocol with TTL support.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Args:
        clock: Monotonic clock in seconds. Tests inject a fake clock to
            expire entries without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[bytes, float | None]] = {}
        self._lock = asyncio.Lock()
        # Earliest deadline among stored entries; may be stale (too early)
        self._next_expiry: float | None = None

    def _purge_expired(self) -> None:
        """Drop every expired entry once the earliest deadline has passed.

        Must be called with the lock held.
        """
        now = self._clock()
        if self._next_expiry is None or now < self._next_expiry:
            return

        self._store = {
            key: entry
            for key, entry in self._store.items()
            if entry[1] is None or entry[1] > now
        }
        self._next_expiry = min(
            (
                expires_at
                for _, expires_at in self._store.values()
                if expires_at is not None
            ),
            default=None,
        )

    def _live_entry(self, key: str) -> bytes | None:
        """Return the value for key, evicting it first if it has expired.

        Must be called with the lock held.
        """
        entry = self._store.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    async def get(self, key: str) -> Result[bytes | None, CacheError]:
        async with self._lock:
            return Success(value=self._live_entry(key))

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> Result[None, CacheError]:
        """Store bytes, replacing any previous value and TTL.

        A zero or negative TTL stores an entry that is already expired.
        """
        expires_at = None
        if ttl is not None:
            expires_at = self._clock() + max(0.0, ttl.total_seconds())
        async with self._lock:
            self._purge_expired()
            self._store[key] = (bytes(value), expires_at)
            if expires_at is not None and (
                self._next_expiry is None or expires_at < self._next_expiry
            ):
                self._next_expiry = expires_at
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        async with self._lock:
            existed = self._live_entry(key) is not None
            self._store.pop(key, None)
        return Success(value=existed)

    async def exists(self, key: str) -> Result[bool, CacheError]:
        async with self._lock:
            return Success(value=self._live_entry(key) is not None)

    async def ttl(self, key: str) -> Result[timedelta | None, CacheError]:
        """Remaining TTL, or None if the key has no TTL or doesn't exist."""
        async with self._lock:
            if self._live_entry(key) is None:
                return Success(value=None)
            _, expires_at = self._store[key]
            if expires_at is None:
                return Success(value=None)
            return Success(value=timedelta(seconds=expires_at - self._clock()))

    async def ping(self) -> Result[bool, CacheError]:
        return Success(value=True)

    async def close(self) -> None:
        async with self._lock:
            self._store.clear()
            self._next_expiry = None

    def __len__(self) -> int:
        return len(self._store)
