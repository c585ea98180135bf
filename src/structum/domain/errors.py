"""Domain-layer error definitions."""

from datetime import datetime

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class NonUtcTimestampError(DomainError, ValueError):
    """Raised when a value object receives a naive or non-UTC timestamp."""

    def __init__(self, field_name: str, value: datetime) -> None:
        super().__init__(
            f"Field '{field_name}' must be a timezone-aware UTC datetime, "
            f"got {value.isoformat()}."
        )
        self.field_name = field_name
        self.value = value


# ============================================================================
#                       Aggregate root related errors
# ============================================================================


class NotAnAggregateRootError(DomainError, TypeError):
    """Raised when an operation restricted to aggregate roots gets another type."""

    def __init__(self, obj_type: type) -> None:
        super().__init__(f"{obj_type.__name__} is not an aggregate root.")
        self.obj_type = obj_type
