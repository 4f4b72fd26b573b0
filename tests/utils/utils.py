"""Utility functions for testing.

Provides ticket factories and a manually advanced clock so expiry can be
tested without sleeping.
"""

import random
import string
from datetime import UTC, datetime, timedelta

from ticketstore.domain.entities import Claim, SessionTicket

# Sentinel for "use default expiration"
_DEFAULT_EXPIRY = object()

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

TEST_PREFIX = "test:session:"


def random_lower_string(length: int = 32) -> str:
    """Generate a random lowercase string.

    Args:
        length: Length of the string to generate

    Returns:
        Random lowercase string
    """
    return "".join(random.choices(string.ascii_lowercase, k=length))


def create_test_ticket(
    subject: str | None = None,
    scheme: str = "Cookies",
    expires_at: datetime | None | object = _DEFAULT_EXPIRY,
    issued_at: datetime | None = FIXED_NOW,
    properties: dict[str, str] | None = None,
    allow_refresh: bool | None = True,
) -> SessionTicket:
    """Create a SessionTicket with sensible defaults.

    Args:
        subject: Value of the "sub" claim (random if omitted).
        scheme: Authentication scheme.
        expires_at: Expiration time.
            - Default: 30 minutes after FIXED_NOW
            - None: Never expires
            - datetime: Specific expiration time
        issued_at: Issue time.
        properties: Session properties.
        allow_refresh: Sliding-expiration hint.

    Returns:
        SessionTicket instance for testing.
    """
    if expires_at is _DEFAULT_EXPIRY:
        expires_at = FIXED_NOW + timedelta(minutes=30)

    return SessionTicket(
        authentication_scheme=scheme,
        claims=(
            Claim(type="sub", value=subject or random_lower_string(12)),
            Claim(type="email", value="alice@example.com", issuer="https://idp.example.com"),
            Claim(type="role", value="admin", value_type="string"),
        ),
        properties=properties if properties is not None else {".redirect": "/home"},
        issued_at=issued_at,
        expires_at=expires_at,  # type: ignore[arg-type]
        allow_refresh=allow_refresh,
    )


class ManualClock:
    """Clock that only moves when told to.

    Provides both a wall clock (for TTL derivation in the ticket store) and
    a monotonic clock (for expiry in the in-memory cache), advanced together.
    """

    def __init__(self, start: datetime = FIXED_NOW) -> None:
        self._now = start
        self._monotonic = 1000.0

    def now(self) -> datetime:
        return self._now

    def monotonic(self) -> float:
        return self._monotonic

    def advance(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)
        self._monotonic += seconds
