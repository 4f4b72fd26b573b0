"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- cache/: Cache client adapters (Redis, in-memory) and key naming
- serialization/: Versioned ticket codec
- ticket_store/: Cache-backed ticket store
- logging/: Structured logging adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
