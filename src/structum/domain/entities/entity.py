"""UUID-keyed entity with audit and soft-deletion support."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import ClassVar, TypeVar
from uuid import UUID

from structum.domain.capabilities import Auditable, SoftDeletable
from structum.domain.value_objects import AuditInfo, SoftDeleteInfo

from .base import EntityBase

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Entity")


class Entity(EntityBase[UUID], Auditable, SoftDeletable):
    """Base class for domain entities identified by a `UUID`.

    A new entity gets a freshly generated identifier unless one is passed in,
    a new `AuditInfo` stamped with the construction time, and a
    `SoftDeleteInfo` in the "not deleted" state. Both metadata values are owned
    by this entity alone and are replaced, never mutated, by the `mark_as_*`
    methods.
    """

    _abstract_base: ClassVar[bool] = True

    id_generator: ClassVar[Callable[[], UUID]] = uuid.uuid4
    """Source of identifiers for entities built without one.

    Shared by every subclass. `structum.bootstrap` swaps it for the configured
    strategy.
    """

    def __init__(self, id: UUID | None = None) -> None:  # pylint: disable=redefined-builtin
        super().__init__(id if id is not None else type(self).id_generator())
        self._audit_info: AuditInfo = AuditInfo.create()
        self._soft_delete_info: SoftDeleteInfo = SoftDeleteInfo.create()

    # --- Construction Paths ---

    @classmethod
    def rehydrate(
        cls: type[E],
        id: UUID,  # pylint: disable=redefined-builtin
        audit_info: AuditInfo,
        soft_delete_info: SoftDeleteInfo | None = None,
    ) -> E:
        """Rebuild an entity from previously recorded metadata.

        Args:
            id: The identifier the entity was stored under.
            audit_info: The audit metadata recorded for the entity.
            soft_delete_info: The soft-deletion metadata, if any was recorded.

        Returns:
            An instance carrying exactly the given identifier and metadata.

        Note: subclasses whose constructors require more arguments must
        override this method.
        """
        entity = cls(id)
        entity._audit_info = audit_info
        entity._soft_delete_info = soft_delete_info or SoftDeleteInfo.create()
        return entity

    # --- Auditing ---

    @property
    def audit_info(self) -> AuditInfo:
        return self._audit_info

    def mark_as_created(
        self, created_by: str | None, *, at: datetime | None = None
    ) -> None:
        """Reset the audit metadata as created now by `created_by`.

        Useful when the moment an entity is recorded differs from the moment it
        was built, e.g. deferred persistence.
        """
        self._audit_info = AuditInfo.create(created_by, at=at)
        logger.debug("%r marked as created by %s", self, created_by)

    def mark_as_updated(
        self, updated_by: str | None, *, at: datetime | None = None
    ) -> None:
        """Record an update by `updated_by`, keeping the creation metadata."""
        self._audit_info = self._audit_info.with_updated(updated_by, at=at)
        logger.debug("%r marked as updated by %s", self, updated_by)

    # --- Soft Deletion ---

    @property
    def soft_delete_info(self) -> SoftDeleteInfo:
        return self._soft_delete_info

    def mark_as_deleted(
        self, deleted_by: str | None, *, at: datetime | None = None
    ) -> None:
        """Record a soft deletion by `deleted_by`. Audit metadata is untouched."""
        self._soft_delete_info = SoftDeleteInfo.deleted(deleted_by, at=at)
        logger.debug("%r marked as deleted by %s", self, deleted_by)
