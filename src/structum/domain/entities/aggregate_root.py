"""Aggregate root base classes.

Both classes only add the `AggregateRootMarker` capability on top of their
entity base. Repositories and unit-of-work implementations use the marker to
refuse loading or saving anything that is not an aggregate root.
"""

from typing import ClassVar

from structum.domain.capabilities import AggregateRootMarker

from .base import EntityBase, TId
from .entity import Entity


class AggregateRootBase(EntityBase[TId], AggregateRootMarker):
    """Aggregate root with a caller-chosen identifier type."""

    _abstract_base: ClassVar[bool] = True


class AggregateRoot(Entity, AggregateRootMarker):
    """Aggregate root identified by a `UUID`, with auditing and soft deletion."""

    _abstract_base: ClassVar[bool] = True
