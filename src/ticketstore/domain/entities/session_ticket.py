"""Session ticket domain entity.

Pure data, no framework dependencies.

A session ticket is the full server-held record of an authenticated session:
who the principal is (claims), under which scheme they signed in, and the
session properties the identity layer attached. The ticket store treats it
as an opaque payload and only looks at ``expires_at`` to derive a cache TTL.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class Claim:
    """A single identity claim.

    Attributes:
        type: Claim type (e.g. "sub", "email", "role").
        value: Claim value.
        issuer: Who issued the claim, if known.
        value_type: Optional type hint for the value (e.g. "string", "int").
    """

    type: str
    value: str
    issuer: str | None = None
    value_type: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionTicket:
    """Authentication session payload held server-side.

    Equality is field-for-field, so a ticket read back from the store
    compares equal to the one that was written.

    Attributes:
        authentication_scheme: Scheme that issued the session ("Cookies").
        claims: Identity claims, in issue order.
        properties: Free-form string properties (redirect URI, etc.).
        issued_at: When the session was issued.
        expires_at: Absolute expiry. None means the session never expires
            on its own and lives until explicitly removed.
        allow_refresh: Sliding-expiration hint for the identity layer.

    Example:
        >>> from datetime import timedelta
        >>> ticket = SessionTicket(
        ...     authentication_scheme="Cookies",
        ...     claims=(Claim(type="sub", value="alice"),),
        ...     expires_at=datetime.now(UTC) + timedelta(minutes=30),
        ... )
        >>> ticket.find_claim("sub").value
        'alice'
    """

    authentication_scheme: str
    claims: tuple[Claim, ...] = ()
    properties: dict[str, str] = field(default_factory=dict, hash=False)
    issued_at: datetime | None = None
    expires_at: datetime | None = None
    allow_refresh: bool | None = None

    def find_claim(self, claim_type: str) -> Claim | None:
        """Return the first claim of the given type, or None."""
        for claim in self.claims:
            if claim.type == claim_type:
                return claim
        return None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the ticket's absolute expiry has passed.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if expires_at is set and not in the future.
        """
        if self.expires_at is None:
            return False
        current = now or datetime.now(UTC)
        return as_utc(self.expires_at) <= as_utc(current)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
