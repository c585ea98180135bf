"""Capability contracts for entities.

Infrastructure code (repositories, persistence mappers, query filters) checks
or constrains against these classes rather than against concrete entities.
Application types may implement them directly without inheriting from
`structum.domain.entities.Entity`.
"""

from __future__ import annotations

import abc
from datetime import datetime
from typing import TypeVar

from structum.domain.errors import NotAnAggregateRootError
from structum.domain.value_objects import AuditInfo, SoftDeleteInfo

# pylint: disable=too-few-public-methods


class Auditable(abc.ABC):
    """Contract for entities that track creation and update metadata."""

    @property
    @abc.abstractmethod
    def audit_info(self) -> AuditInfo:
        """The audit metadata currently attached to the entity."""

    @abc.abstractmethod
    def mark_as_created(
        self, created_by: str | None, *, at: datetime | None = None
    ) -> None:
        """Record the entity as created by `created_by`."""

    @abc.abstractmethod
    def mark_as_updated(
        self, updated_by: str | None, *, at: datetime | None = None
    ) -> None:
        """Record the entity as updated by `updated_by`."""


class SoftDeletable(abc.ABC):
    """Contract for entities that support soft deletion.

    Soft deletion keeps the entity's data while marking it as logically removed.
    """

    @property
    @abc.abstractmethod
    def soft_delete_info(self) -> SoftDeleteInfo:
        """The soft-deletion metadata currently attached to the entity."""

    @abc.abstractmethod
    def mark_as_deleted(
        self, deleted_by: str | None, *, at: datetime | None = None
    ) -> None:
        """Record the entity as soft-deleted by `deleted_by`."""

    @property
    def is_deleted(self) -> bool:
        """Whether the entity has been soft-deleted."""
        return self.soft_delete_info.is_deleted


class AggregateRootMarker(abc.ABC):
    """Marks an entity type as an aggregate root.

    An aggregate root is the only entry point for loading and modifying the
    objects inside its consistency boundary. The marker has no members.
    """


# Bound for repository-style generics that only accept aggregate roots.
AR = TypeVar("AR", bound=AggregateRootMarker)


def is_aggregate_root(obj: object) -> bool:
    """Tell whether an object, or a class, carries the aggregate-root capability."""
    if isinstance(obj, type):
        return issubclass(obj, AggregateRootMarker)
    return isinstance(obj, AggregateRootMarker)


def require_aggregate_root(obj: object) -> AggregateRootMarker:
    """Return `obj` unchanged if it is an aggregate root.

    Raises:
        NotAnAggregateRootError: If `obj` does not carry the capability.
    """
    if not isinstance(obj, AggregateRootMarker):
        raise NotAnAggregateRootError(type(obj))
    return obj
