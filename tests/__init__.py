"""Test suite for ticketstore.

Test structure:
- unit/: Unit tests - domain model, codec, adapters and store with
  in-memory or mocked dependencies
- integration/: Integration tests against a real Redis (REDIS_URL);
  skipped when Redis is unreachable
"""
