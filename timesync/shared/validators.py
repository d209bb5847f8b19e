"""Shared validation utilities"""

import uuid
from datetime import datetime, timezone
from typing import Iterable

import pytz

from ..errors import ValidationError


def validate_uuid(value: str) -> bool:
    """Validate UUID format"""
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError, TypeError):
        return False


def canonical_uuid(value: str, entity: str) -> str:
    """Lowercase hyphenated form of a UUID path id; ValidationError if malformed"""
    if not validate_uuid(value):
        raise ValidationError(f"Invalid {entity} ID format: {value!r}")
    return str(uuid.UUID(value))


def parse_id_list(raw: str) -> list[str]:
    """
    Split a comma-separated identifier list.

    Empty items are dropped; "a,,b" yields ["a", "b"] and "" yields [].
    """
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def validate_group_ids(group_ids: Iterable[str]) -> list[str]:
    """
    Validate a list of group identifiers.

    Args:
        group_ids: Group identifiers (UUID strings)

    Returns:
        The identifiers in canonical lowercase form, duplicates removed,
        first occurrence order preserved

    Raises:
        ValidationError: If the list is empty or contains a malformed identifier
    """
    if group_ids is None:
        raise ValidationError("At least one group ID must be provided")

    normalized = []
    seen = set()
    for group_id in group_ids:
        if not isinstance(group_id, str) or not validate_uuid(group_id):
            raise ValidationError(
                f"Invalid group ID format: {group_id!r}. Must be comma-separated UUIDs"
            )
        canonical = str(uuid.UUID(group_id))
        if canonical not in seen:
            seen.add(canonical)
            normalized.append(canonical)

    if not normalized:
        raise ValidationError("At least one group ID must be provided")
    return normalized


def validate_timezone(name: str) -> str:
    """
    Validate an IANA timezone name.

    Raises:
        ValueError: If the timezone is unknown
    """
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError as e:
        raise ValueError(f"Unknown timezone: {name}") from e
    return name


def ensure_aware_utc(value: datetime) -> datetime:
    """
    Return the instant as a UTC-aware datetime.

    Naive values read back from backends without timezone support are taken as UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
