"""Base class for all entities."""

from __future__ import annotations

import abc
from typing import Any, ClassVar, Generic, TypeVar

from structum.domain.utils import is_default_identifier

TId = TypeVar("TId")


class EntityBase(abc.ABC, Generic[TId]):
    """Generic base class giving entities identity-based equality.

    Two entities are equal when they are the same object, or when they share
    the same concrete class and carry equal, non-default identifiers. An entity
    whose identifier is still the default (``None``, ``0``, ``""``, the nil
    UUID) is transient and only ever equals itself.

    Comparison is a policy, not a check: entities of different classes or with
    different identifier types simply compare unequal.

    Note: the hash is derived from ``id``. Do not reassign the identifier once
    the entity sits in a set or is used as a dict key.
    """

    _abstract_base: ClassVar[bool] = True

    def __new__(cls, *args: Any, **kwargs: Any) -> EntityBase[Any]:
        # Only concrete subclasses may be built; each base sets the flag in its own body.
        if cls.__dict__.get("_abstract_base", False):
            raise TypeError(f"{cls.__name__} cannot be instantiated directly")
        return super().__new__(cls)

    def __init__(self, id: TId | None = None) -> None:  # pylint: disable=redefined-builtin
        self._id: TId | None = id

    @property
    def id(self) -> TId | None:
        """The identifier of the entity."""
        return self._id

    @property
    def is_transient(self) -> bool:
        """Whether the entity still carries a default identifier."""
        return is_default_identifier(self._id)

    # --- Identity ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityBase):
            return NotImplemented
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        if self.is_transient:
            return False
        return bool(self._id == other._id)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
