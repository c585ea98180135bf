"""Domain layer utilities."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID

from structum.domain.errors import NonUtcTimestampError


def utc_now() -> datetime:
    """Return the current time as an aware ``datetime`` in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(field_name: str, value: datetime | None) -> datetime | None:
    """Validate that ``value`` is an aware UTC datetime.

    Args:
        field_name: Name of the field being validated, used in the error.
        value: The timestamp to check. ``None`` passes through unchanged.

    Returns:
        The timestamp with its ``tzinfo`` normalized to ``timezone.utc``, or
        ``None`` if ``value`` was ``None``.

    Raises:
        NonUtcTimestampError: If ``value`` is naive or carries a non-zero
            UTC offset.
    """
    if value is None:
        return None
    if value.tzinfo is None or value.utcoffset() != timedelta(0):
        raise NonUtcTimestampError(field_name, value)
    return value.astimezone(timezone.utc)


def is_default_identifier(value: Any) -> bool:
    """Tell whether ``value`` is an unset (default) identifier.

    Default identifiers are ``None``, the nil UUID, numeric zero (``bool`` is
    not an identifier and never counts) and empty ``str`` or ``bytes``. Other
    identifier types have no default and are never considered transient; their
    constructors are not invoked.
    """
    if value is None:
        return True
    if isinstance(value, UUID):
        return value.int == 0
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_zero()
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes)):
        return not value
    return False
