"""Mapping of raw Graph API records to domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from ....domain.entities import Application, Owner, PasswordCredential
from ....domain.exceptions import InvalidRecordError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Parsed(Generic[T]):
    """Successfully mapped record."""

    value: T


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Record that could not be mapped, with enough context to log it."""

    record_id: str | None
    reason: str

    def __str__(self) -> str:
        return f"{self.record_id or 'unknown record'}: {self.reason}"


ParseResult = Parsed[T] | ParseFailure


def parse_application(raw: Any) -> ParseResult[Application]:
    """
    Map a raw application record.

    Every password credential must carry a valid ``endDateTime``; a single
    bad credential fails the whole record.
    """
    record_id = raw.get("id") if isinstance(raw, dict) else None
    try:
        return Parsed(_to_application(raw))
    except InvalidRecordError as e:
        return ParseFailure(record_id, str(e))


def parse_owners(raw_records: Any) -> ParseResult[list[Owner]]:
    """Map the raw owner records of one application."""
    try:
        if not isinstance(raw_records, list):
            msg = "owners response is not a list"
            raise InvalidRecordError(msg)
        return Parsed([_to_owner(raw) for raw in raw_records])
    except InvalidRecordError as e:
        return ParseFailure(None, str(e))


def parse_datetime(dt_string: str) -> datetime:
    """Parse an ISO datetime string into an aware UTC datetime."""
    try:
        # Handle the trailing Z emitted by Graph
        dt = datetime.fromisoformat(dt_string.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        msg = f"invalid datetime {dt_string!r}"
        raise InvalidRecordError(msg) from e
    return dt if dt.tzinfo else dt.replace(tzinfo=UTC)


def _to_application(raw: Any) -> Application:
    if not isinstance(raw, dict):
        msg = "application record is not an object"
        raise InvalidRecordError(msg)

    object_id = _required_str(raw, "id")
    raw_credentials = raw.get("passwordCredentials") or []
    if not isinstance(raw_credentials, list):
        msg = "passwordCredentials is not a list"
        raise InvalidRecordError(msg)

    return Application(
        id=object_id,
        app_id=_optional_str(raw, "appId"),
        display_name=_optional_str(raw, "displayName"),
        password_credentials=[_to_credential(cred) for cred in raw_credentials],
    )


def _to_credential(raw: Any) -> PasswordCredential:
    if not isinstance(raw, dict):
        msg = "password credential is not an object"
        raise InvalidRecordError(msg)

    expiry = raw.get("endDateTime")
    if not expiry:
        msg = f"credential {raw.get('keyId', 'unknown')} has no endDateTime"
        raise InvalidRecordError(msg)

    return PasswordCredential(
        end_date_time=parse_datetime(expiry),
        key_id=_optional_str(raw, "keyId"),
        hint=_optional_str(raw, "hint"),
        custom_key_identifier=_optional_str(raw, "customKeyIdentifier"),
        display_name=_optional_str(raw, "displayName"),
    )


def _to_owner(raw: Any) -> Owner:
    if not isinstance(raw, dict):
        msg = "owner record is not an object"
        raise InvalidRecordError(msg)

    return Owner(
        id=_required_str(raw, "id"),
        display_name=_optional_str(raw, "displayName"),
        mail=_optional_str(raw, "mail"),
        user_principal_name=_optional_str(raw, "userPrincipalName"),
    )


def _required_str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value:
        msg = f"missing required field {key}"
        raise InvalidRecordError(msg)
    return value


def _optional_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"field {key} is not a string"
        raise InvalidRecordError(msg)
    return value
