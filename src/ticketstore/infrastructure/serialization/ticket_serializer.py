"""Versioned JSON codec for session tickets.

Wire format (UTF-8 JSON):

    {
        "format": "ticketstore.session-ticket",
        "version": 1,
        "ticket": {
            "authentication_scheme": "Cookies",
            "claims": [{"type": "sub", "value": "alice", "issuer": null, "value_type": null}],
            "properties": {".redirect": "/home"},
            "issued_at": "2024-01-01T12:00:00+00:00",
            "expires_at": "2024-01-01T12:30:00+00:00",
            "allow_refresh": true
        }
    }

Any other format name or version is rejected as a DeserializationError,
so a future payload-shape change is detected instead of misread.
Datetimes keep their own offset (or lack of one), so a decoded ticket
compares equal to the encoded one.
"""

import json
from datetime import datetime
from typing import Any

from ticketstore.core.enums import ErrorCode
from ticketstore.core.result import Failure, Result, Success
from ticketstore.domain.entities import Claim, SessionTicket
from ticketstore.domain.errors import DeserializationError, SerializationError

FORMAT_NAME = "ticketstore.session-ticket"
FORMAT_VERSION = 1


class TicketSerializer:
    """Encodes SessionTicket to bytes and back.

    Stateless; one instance can be shared by any number of stores.
    """

    format_name = FORMAT_NAME
    format_version = FORMAT_VERSION

    def encode(self, ticket: SessionTicket) -> Result[bytes, SerializationError]:
        """Serialize a ticket into the versioned envelope.

        Args:
            ticket: Ticket to encode.

        Returns:
            Result with UTF-8 JSON bytes, or SerializationError.
        """
        if not isinstance(ticket, SessionTicket):
            return _serialization_failure(
                f"Expected SessionTicket, got {type(ticket).__name__}"
            )

        try:
            body = _ticket_to_dict(ticket)
        except _InvalidField as e:
            return _serialization_failure(e.reason, field=e.field)

        envelope = {
            "format": self.format_name,
            "version": self.format_version,
            "ticket": body,
        }
        try:
            raw = json.dumps(envelope, separators=(",", ":"), ensure_ascii=False)
            # Lone surrogates survive json.dumps but not UTF-8
            encoded = raw.encode("utf-8")
        except (TypeError, ValueError) as e:
            return _serialization_failure(f"Ticket is not JSON-encodable: {e}")
        return Success(value=encoded)

    def decode(self, raw: bytes) -> Result[SessionTicket, DeserializationError]:
        """Parse bytes produced by encode().

        Args:
            raw: Stored bytes.

        Returns:
            Result with the ticket, or DeserializationError. Never returns
            a partially decoded ticket.
        """
        try:
            envelope = json.loads(bytes(raw).decode("utf-8"))
        except UnicodeDecodeError:
            return _deserialization_failure("Stored ticket is not valid UTF-8")
        except json.JSONDecodeError as e:
            return _deserialization_failure(f"Stored ticket is not valid JSON: {e.msg}")
        except RecursionError:
            return _deserialization_failure("Stored ticket is nested too deeply")

        if not isinstance(envelope, dict):
            return _deserialization_failure("Stored ticket envelope is not an object")

        if envelope.get("format") != self.format_name:
            return _deserialization_failure("Unknown ticket format")

        version = envelope.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            return _deserialization_failure("Ticket format version is missing")
        if version != self.format_version:
            return _deserialization_failure(
                f"Unsupported ticket format version {version}",
                format_version=version,
            )

        try:
            ticket = _ticket_from_dict(envelope["ticket"])
        except (KeyError, TypeError, ValueError) as e:
            return _deserialization_failure(
                f"Malformed ticket body: {e}", format_version=version
            )
        return Success(value=ticket)


# =========================================================================
# Encoding helpers
# =========================================================================


class _InvalidField(Exception):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason


def _require_str(value: object, field: str, *, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise _InvalidField(field, f"{field} must be a string")


def _datetime_to_str(value: object, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, datetime):
        raise _InvalidField(field, f"{field} must be a datetime")
    return value.isoformat()


def _ticket_to_dict(ticket: SessionTicket) -> dict[str, Any]:
    _require_str(ticket.authentication_scheme, "authentication_scheme")
    if not ticket.authentication_scheme:
        raise _InvalidField("authentication_scheme", "authentication_scheme is empty")

    claims = []
    for index, claim in enumerate(ticket.claims):
        field = f"claims[{index}]"
        if not isinstance(claim, Claim):
            raise _InvalidField(field, f"{field} must be a Claim")
        _require_str(claim.type, f"{field}.type")
        _require_str(claim.value, f"{field}.value")
        _require_str(claim.issuer, f"{field}.issuer", optional=True)
        _require_str(claim.value_type, f"{field}.value_type", optional=True)
        claims.append(
            {
                "type": claim.type,
                "value": claim.value,
                "issuer": claim.issuer,
                "value_type": claim.value_type,
            }
        )

    if not isinstance(ticket.properties, dict):
        raise _InvalidField("properties", "properties must be a dict")
    for name, value in ticket.properties.items():
        _require_str(name, "properties")
        _require_str(value, f"properties[{name}]")

    if ticket.allow_refresh is not None and not isinstance(ticket.allow_refresh, bool):
        raise _InvalidField("allow_refresh", "allow_refresh must be a bool")

    return {
        "authentication_scheme": ticket.authentication_scheme,
        "claims": claims,
        "properties": dict(ticket.properties),
        "issued_at": _datetime_to_str(ticket.issued_at, "issued_at"),
        "expires_at": _datetime_to_str(ticket.expires_at, "expires_at"),
        "allow_refresh": ticket.allow_refresh,
    }


# =========================================================================
# Decoding helpers (raise KeyError/TypeError/ValueError on bad input)
# =========================================================================


def _expect_str(value: object, field: str, *, optional: bool = False) -> str | None:
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string")
    return value


def _str_to_datetime(value: object, field: str) -> datetime | None:
    text = _expect_str(value, field, optional=True)
    if text is None:
        return None
    return datetime.fromisoformat(text)


def _ticket_from_dict(data: object) -> SessionTicket:
    if not isinstance(data, dict):
        raise TypeError("ticket must be an object")

    scheme = _expect_str(data["authentication_scheme"], "authentication_scheme")
    if not scheme:
        raise ValueError("authentication_scheme is empty")

    raw_claims = data["claims"]
    if not isinstance(raw_claims, list):
        raise TypeError("claims must be a list")
    claims = []
    for raw_claim in raw_claims:
        if not isinstance(raw_claim, dict):
            raise TypeError("claim must be an object")
        claims.append(
            Claim(
                type=_expect_str(raw_claim["type"], "claim.type"),
                value=_expect_str(raw_claim["value"], "claim.value"),
                issuer=_expect_str(raw_claim.get("issuer"), "claim.issuer", optional=True),
                value_type=_expect_str(
                    raw_claim.get("value_type"), "claim.value_type", optional=True
                ),
            )
        )

    raw_properties = data["properties"]
    if not isinstance(raw_properties, dict):
        raise TypeError("properties must be an object")
    properties = {
        name: _expect_str(value, f"properties[{name}]")
        for name, value in raw_properties.items()
    }

    allow_refresh = data.get("allow_refresh")
    if allow_refresh is not None and not isinstance(allow_refresh, bool):
        raise TypeError("allow_refresh must be a bool")

    return SessionTicket(
        authentication_scheme=scheme,
        claims=tuple(claims),
        properties=properties,
        issued_at=_str_to_datetime(data.get("issued_at"), "issued_at"),
        expires_at=_str_to_datetime(data.get("expires_at"), "expires_at"),
        allow_refresh=allow_refresh,
    )


def _serialization_failure(
    message: str, *, field: str | None = None
) -> Failure[SerializationError]:
    return Failure(
        error=SerializationError(
            code=ErrorCode.TICKET_SERIALIZATION_FAILED,
            message=message,
            field=field,
        )
    )


def _deserialization_failure(
    message: str, *, format_version: int | None = None
) -> Failure[DeserializationError]:
    return Failure(
        error=DeserializationError(
            code=ErrorCode.TICKET_DESERIALIZATION_FAILED,
            message=message,
            format_version=format_version,
        )
    )
