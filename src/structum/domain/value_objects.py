"""Module including value objects used across the domain layer.

Both value objects are immutable. Every change produces a new instance derived
from the previous one, so an old instance can be shared freely.
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime

from structum.domain.utils import ensure_utc, utc_now

# pylint: disable=too-many-instance-attributes


def _validate_timestamps(instance: object) -> None:
    """Check every datetime field of a frozen dataclass and normalize it to UTC."""
    for field in fields(instance):  # type: ignore[arg-type]
        if not field.name.endswith("_at"):
            continue
        value = ensure_utc(field.name, getattr(instance, field.name))
        object.__setattr__(instance, field.name, value)


@dataclass(frozen=True, slots=True)
class AuditInfo:
    """Value object recording who created, updated and deleted an entity, and when.

    Obtain instances through `create`, then derive new ones with
    `with_updated` and `with_deleted`. Creation fields are carried over
    unchanged by every derivation. Use the constructor directly only to
    rebuild a previously recorded value; `created_at` is always required.
    """

    created_at: datetime
    created_by: str | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None
    deleted_at: datetime | None = None
    deleted_by: str | None = None

    def __post_init__(self) -> None:
        _validate_timestamps(self)

    @property
    def is_deleted(self) -> bool:
        """Whether a deletion has been recorded."""
        return self.deleted_at is not None

    @classmethod
    def create(
        cls, created_by: str | None = None, *, at: datetime | None = None
    ) -> "AuditInfo":
        """Create audit info stamped as created now.

        Args:
            created_by: Actor responsible for the creation.
            at: Creation time. Defaults to the current UTC time.

        Returns:
            A new instance with only the creation fields set.

        Raises:
            NonUtcTimestampError: If `at` is not an aware UTC datetime.
        """
        return cls(created_at=at or utc_now(), created_by=created_by)

    def with_updated(
        self, updated_by: str | None = None, *, at: datetime | None = None
    ) -> "AuditInfo":
        """Return a copy recording an update by `updated_by`."""
        return replace(self, updated_at=at or utc_now(), updated_by=updated_by)

    def with_deleted(
        self, deleted_by: str | None = None, *, at: datetime | None = None
    ) -> "AuditInfo":
        """Return a copy recording a deletion by `deleted_by`.

        Meant for types that keep deletion inside their audit trail rather
        than in a separate `SoftDeleteInfo`.
        """
        return replace(self, deleted_at=at or utc_now(), deleted_by=deleted_by)


@dataclass(frozen=True, slots=True)
class SoftDeleteInfo:
    """Value object representing soft-deletion metadata of an entity.

    Obtain instances through `create` (not deleted unless a deletion is
    given) or `deleted` (always records a deletion). Use the constructor
    directly only to rebuild a previously recorded value.
    """

    deleted_at: datetime | None = None
    deleted_by: str | None = None

    def __post_init__(self) -> None:
        _validate_timestamps(self)

    @property
    def is_deleted(self) -> bool:
        """Whether the entity has been logically deleted."""
        return self.deleted_at is not None

    @classmethod
    def create(
        cls, deleted_by: str | None = None, *, at: datetime | None = None
    ) -> "SoftDeleteInfo":
        """Create soft-deletion metadata.

        With no arguments the entity is not deleted. Passing `deleted_by` or
        `at` records a deletion, as `deleted` does.

        Args:
            deleted_by: Actor responsible for the deletion, if one is recorded.
            at: Deletion time. Defaults to the current UTC time when a
                deletion is recorded.
        """
        if deleted_by is None and at is None:
            return cls()
        return cls.deleted(deleted_by, at=at)

    @classmethod
    def deleted(
        cls, deleted_by: str | None = None, *, at: datetime | None = None
    ) -> "SoftDeleteInfo":
        """Create metadata recording a deletion.

        Args:
            deleted_by: Actor responsible for the deletion.
            at: Deletion time. Defaults to the current UTC time.

        Returns:
            A new instance whose `is_deleted` is True.
        """
        return cls(deleted_at=at or utc_now(), deleted_by=deleted_by)
