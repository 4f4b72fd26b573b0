"""Structured logging adapters."""

from ticketstore.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
