"""Domain layer for STRUCTUM.

Contains the reusable building blocks: entity base classes, aggregate-root
marking, capability contracts and the audit/soft-delete value objects. This
package is deliberately technology-agnostic.

Dependency rule: do not import from `structum.adapters`, `structum.bootstrap`
or `structum.config`.
"""

from .capabilities import (
    AggregateRootMarker,
    Auditable,
    SoftDeletable,
    is_aggregate_root,
    require_aggregate_root,
)
from .entities import AggregateRoot, AggregateRootBase, Entity, EntityBase
from .value_objects import AuditInfo, SoftDeleteInfo

__all__ = [
    "AggregateRoot",
    "AggregateRootBase",
    "AggregateRootMarker",
    "AuditInfo",
    "Auditable",
    "Entity",
    "EntityBase",
    "SoftDeletable",
    "SoftDeleteInfo",
    "is_aggregate_root",
    "require_aggregate_root",
]
