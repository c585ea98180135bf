"""Entities package.

All entity base classes live in this package and are re-exported here to
provide a single, convenient import path.
"""

from .aggregate_root import AggregateRoot, AggregateRootBase
from .base import EntityBase
from .entity import Entity

__all__ = ["AggregateRoot", "AggregateRootBase", "Entity", "EntityBase"]
