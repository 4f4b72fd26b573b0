"""Cache-backed implementation of TicketStoreProtocol.

Persists the full SessionTicket in a CacheProtocol backend and hands the
identity layer an opaque key instead.

Key Pattern:
    - {prefix}{uuid4 hex} -> versioned JSON ticket bytes

Expiry:
    Every write (store, renew) sets TTL = max(0, expires_at - now). A
    ticket that is already expired is still written, with the backend's
    minimal TTL, and disappears on the backend's own sweep. A ticket with
    no expires_at is written without TTL, replacing any TTL a previous
    write set, and lives until remove().

Architecture:
    - Holds no mutable state; safe to share across concurrent callers
    - No retries and no timeouts of its own: cache failures come back
      as BackendUnavailableError on the same call
    - Cancellation propagates straight through to the pending cache call
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from ticketstore.core.enums import ErrorCode
from ticketstore.core.errors import DomainError
from ticketstore.core.result import Failure, Result, Success
from ticketstore.domain.entities import SessionTicket, as_utc
from ticketstore.domain.errors import BackendUnavailableError, TicketStoreError
from ticketstore.domain.protocols.cache_protocol import CacheProtocol
from ticketstore.domain.protocols.logger_protocol import LoggerProtocol
from ticketstore.infrastructure.cache.ticket_keys import TicketKeys
from ticketstore.infrastructure.serialization import TicketSerializer


def _utc_now() -> datetime:
    return datetime.now(UTC)


def compute_ttl(expires_at: datetime | None, now: datetime) -> timedelta | None:
    """Derive a cache TTL from a ticket's absolute expiry.

    Args:
        expires_at: Ticket expiry (naive values are read as UTC), or None.
        now: Current time.

    Returns:
        None if there is no expiry, otherwise the remaining time clamped
        at zero.
    """
    if expires_at is None:
        return None
    return max(timedelta(0), as_utc(expires_at) - as_utc(now))


class CacheTicketStore:
    """Ticket store on top of a key-value cache.

    Note: Does NOT inherit from TicketStoreProtocol (uses structural typing).

    Attributes:
        _cache: Cache client (Redis, in-memory, ...).
        _keys: Session key generator for this store's namespace.
        _serializer: Ticket codec.
        _logger: Structured logger bound to this component.
        _clock: Returns the current aware datetime.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        *,
        keys: TicketKeys,
        logger: LoggerProtocol,
        serializer: TicketSerializer | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the ticket store.

        Args:
            cache: Cache client implementing CacheProtocol.
            keys: Key generator carrying the namespace prefix.
            logger: Structured logger.
            serializer: Ticket codec (defaults to TicketSerializer()).
            clock: Current-time source used for TTL derivation.
        """
        self._cache = cache
        self._keys = keys
        self._serializer = serializer or TicketSerializer()
        self._logger = logger.bind(component="ticket_store", prefix=keys.prefix)
        self._clock = clock

    @property
    def keys(self) -> TicketKeys:
        return self._keys

    async def store(self, ticket: SessionTicket) -> Result[str, TicketStoreError]:
        """Persist a new ticket under a freshly generated key.

        Args:
            ticket: Session payload.

        Returns:
            Result with the new key, SerializationError (nothing written),
            or BackendUnavailableError.
        """
        key = self._keys.new_key()

        result = await self.renew(key, ticket)
        match result:
            case Success():
                return Success(value=key)
            case Failure(error=error):
                return Failure(error=error)

    async def renew(
        self, key: str, ticket: SessionTicket
    ) -> Result[None, TicketStoreError]:
        """Overwrite the ticket at key and reset its TTL.

        Unknown keys are created; the identity layer owns key provenance.

        Args:
            key: Session key.
            ticket: Replacement payload.

        Returns:
            Result with None, SerializationError, or BackendUnavailableError.
        """
        encoded = self._serializer.encode(ticket)
        if isinstance(encoded, Failure):
            self._logger.warning(
                "Ticket serialization failed",
                key_hint=TicketKeys.hint(key),
                field=encoded.error.field,
            )
            return Failure(error=encoded.error)

        ttl = compute_ttl(ticket.expires_at, self._clock())
        result = await self._cache.set(key, encoded.value, ttl)

        match result:
            case Success():
                self._logger.debug(
                    "Ticket written",
                    key_hint=TicketKeys.hint(key),
                    ttl_seconds=ttl.total_seconds() if ttl is not None else None,
                )
                return Success(value=None)
            case Failure(error=error):
                return self._backend_failure("set", key, error)

    async def retrieve(
        self, key: str
    ) -> Result[SessionTicket | None, TicketStoreError]:
        """Load the ticket at key.

        Args:
            key: Session key.

        Returns:
            Result with the ticket, None if there is no session (expired,
            removed or unknown), DeserializationError, or
            BackendUnavailableError.
        """
        result = await self._cache.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                pass
            case Failure(error=error):
                return self._backend_failure("get", key, error)

        decoded = self._serializer.decode(raw)
        if isinstance(decoded, Failure):
            self._logger.error(
                "Stored ticket could not be decoded",
                key_hint=TicketKeys.hint(key),
                reason=decoded.error.message,
                format_version=decoded.error.format_version,
            )
            return Failure(error=decoded.error)

        return Success(value=decoded.value)

    async def remove(self, key: str) -> Result[None, TicketStoreError]:
        """Delete the ticket at key. Removing an absent key is a no-op.

        Args:
            key: Session key.

        Returns:
            Result with None, or BackendUnavailableError.
        """
        result = await self._cache.delete(key)

        match result:
            case Success(value=deleted):
                self._logger.debug(
                    "Ticket removed", key_hint=TicketKeys.hint(key), existed=deleted
                )
                return Success(value=None)
            case Failure(error=error):
                return self._backend_failure("delete", key, error)

    async def exists(self, key: str) -> Result[bool, TicketStoreError]:
        """Check whether a live ticket exists at key without decoding it."""
        result = await self._cache.exists(key)

        match result:
            case Success(value=found):
                return Success(value=found)
            case Failure(error=error):
                return self._backend_failure("exists", key, error)

    async def ping(self) -> Result[bool, TicketStoreError]:
        """Check that the cache backend is reachable."""
        result = await self._cache.ping()

        match result:
            case Success(value=alive):
                return Success(value=alive)
            case Failure(error=error):
                return self._backend_failure("ping", None, error)

    def _backend_failure(
        self, operation: str, key: str | None, error: DomainError
    ) -> Failure[TicketStoreError]:
        """Wrap a cache error as BackendUnavailableError and log it.

        The cache error's message is not copied because it embeds the
        full key.
        """
        infrastructure_code = getattr(error, "infrastructure_code", None)
        code_value = infrastructure_code.value if infrastructure_code else None
        cause = (error.details or {}).get("error")

        self._logger.warning(
            "Ticket cache backend unavailable",
            operation=operation,
            key_hint=TicketKeys.hint(key) if key is not None else None,
            infrastructure_code=code_value,
        )
        return Failure(
            error=BackendUnavailableError(
                code=ErrorCode.CACHE_BACKEND_UNAVAILABLE,
                message=f"Cache backend unavailable during {operation}",
                operation=operation,
                details={"infrastructure_code": code_value, "cause": cause},
            )
        )
