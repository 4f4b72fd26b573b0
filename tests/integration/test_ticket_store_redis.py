"""Integration tests for CacheTicketStore on a real Redis.

Verifies that tickets round-trip through Redis and that Redis itself
expires them at the ticket's expiry time.
"""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from tests.utils.utils import TEST_PREFIX, create_test_ticket
from ticketstore.core.result import Failure, Success
from ticketstore.domain.errors import DeserializationError
from ticketstore.infrastructure.cache.ticket_keys import TicketKeys
from ticketstore.infrastructure.ticket_store import CacheTicketStore


@pytest.fixture
def redis_ticket_store(cache_adapter, mock_logger):
    return CacheTicketStore(
        cache_adapter, keys=TicketKeys(prefix=TEST_PREFIX), logger=mock_logger
    )


def _expiring_in(seconds: float) -> datetime:
    return datetime.now(UTC) + timedelta(seconds=seconds)


@pytest.mark.integration
class TestTicketStoreRedis:
    """Ticket store operations against real Redis."""

    async def test_store_retrieve_round_trip(self, redis_ticket_store):
        ticket = create_test_ticket(subject="alice", expires_at=_expiring_in(300))

        key = (await redis_ticket_store.store(ticket)).value
        result = await redis_ticket_store.retrieve(key)

        assert result == Success(value=ticket)

    async def test_redis_ttl_matches_expiry(self, redis_ticket_store, cache_adapter):
        ticket = create_test_ticket(expires_at=_expiring_in(1800))

        key = (await redis_ticket_store.store(ticket)).value
        ttl = (await cache_adapter.ttl(key)).value

        assert timedelta(minutes=29) < ttl <= timedelta(minutes=30)

    async def test_ticket_expires_in_redis(self, redis_ticket_store):
        ticket = create_test_ticket(expires_at=_expiring_in(1))
        key = (await redis_ticket_store.store(ticket)).value

        await asyncio.sleep(1.5)

        assert (await redis_ticket_store.retrieve(key)) == Success(value=None)

    async def test_renew_without_expiry_persists(
        self, redis_ticket_store, cache_adapter
    ):
        key = (
            await redis_ticket_store.store(create_test_ticket(expires_at=_expiring_in(60)))
        ).value

        await redis_ticket_store.renew(key, create_test_ticket(expires_at=None))

        assert (await cache_adapter.ttl(key)).value is None
        assert (await redis_ticket_store.exists(key)).value is True

    async def test_remove_is_idempotent(self, redis_ticket_store):
        key = (await redis_ticket_store.store(create_test_ticket(expires_at=None))).value

        first = await redis_ticket_store.remove(key)
        second = await redis_ticket_store.remove(key)

        assert first == second == Success(value=None)
        assert (await redis_ticket_store.retrieve(key)).value is None

    async def test_corrupted_value_is_isolated(
        self, redis_ticket_store, redis_test_client
    ):
        good = create_test_ticket(expires_at=_expiring_in(300))
        good_key = (await redis_ticket_store.store(good)).value
        bad_key = f"{TEST_PREFIX}corrupted"
        await redis_test_client.set(bad_key, b"not json")

        bad = await redis_ticket_store.retrieve(bad_key)

        assert isinstance(bad, Failure)
        assert isinstance(bad.error, DeserializationError)
        assert (await redis_ticket_store.retrieve(good_key)).value == good

    async def test_concurrent_stores(self, redis_ticket_store):
        tickets = [create_test_ticket(expires_at=_expiring_in(300)) for _ in range(20)]

        keys = await asyncio.gather(*(redis_ticket_store.store(t) for t in tickets))

        assert len({result.value for result in keys}) == 20
        for result, ticket in zip(keys, tickets):
            assert (await redis_ticket_store.retrieve(result.value)).value == ticket
