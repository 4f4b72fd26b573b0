"""Domain layer - Pure session-ticket model.

Structure:
- entities/: SessionTicket and Claim
- errors/: Ticket store error types
- protocols/: Ports (cache client, logger, ticket store)

The domain layer has NO dependencies on any framework or infrastructure.
"""
