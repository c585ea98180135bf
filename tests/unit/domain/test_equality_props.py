"""Hypothesis property tests for identity-based equality and audit derivation.

- **Equivalence**: equality over entities with non-default ids is reflexive,
  symmetric and transitive.
- **Hash coherence**: equal entities hash alike.
- **Transient isolation**: entities with a default id only equal themselves.
- **Creation stability**: no chain of updates changes the creation fields.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from structum.domain.value_objects import AuditInfo

from .fakes import Sku, Ticket

pytestmark = [pytest.mark.property]

# ============================================================================
#                               Strategies
# ============================================================================

ids = st.integers(min_value=-5, max_value=5).filter(lambda n: n != 0)
actors = st.none() | st.text(min_size=1, max_size=12)
utc_times = st.datetimes(
    min_value=datetime(2000, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(timezone.utc),
)

# ============================================================================
#                               Properties
# ============================================================================


@given(ids)
def test_reflexive_for_distinct_instances(value: int) -> None:
    """Two instances built from the same id equal each other both ways."""
    a, b = Ticket(value), Ticket(value)
    assert a == a  # pylint: disable=comparison-with-itself
    assert a == b
    assert b == a


@given(ids, ids)
def test_symmetric(x: int, y: int) -> None:
    """a == b exactly when b == a."""
    a, b = Ticket(x), Ticket(y)
    assert (a == b) == (b == a)


@given(ids, ids, ids)
def test_transitive(x: int, y: int, z: int) -> None:
    """a == b and b == c imply a == c."""
    a, b, c = Ticket(x), Ticket(y), Ticket(z)
    if a == b and b == c:
        assert a == c


@given(ids, ids)
def test_equal_implies_same_hash(x: int, y: int) -> None:
    """Equal entities hash alike."""
    a, b = Ticket(x), Ticket(y)
    if a == b:
        assert hash(a) == hash(b)


@given(st.sampled_from([None, 0]), ids)
def test_transient_never_equals_others(default: int | None, other: int) -> None:
    """A transient entity only equals itself."""
    transient = Ticket(default)
    assert transient == transient  # pylint: disable=comparison-with-itself
    assert transient != Ticket(default)
    assert transient != Ticket(other)
    assert Ticket(other) != transient


@given(st.text(min_size=1))
def test_string_ids_follow_the_same_rule(code: str) -> None:
    """Entities keyed by non-empty strings compare by id."""
    assert Sku(code, label="a") == Sku(code, label="b")


@given(actors, utc_times, st.lists(st.tuples(actors, utc_times), max_size=10))
def test_updates_never_touch_creation_fields(
    creator: str | None,
    created_at: datetime,
    updates: list[tuple[str | None, datetime]],
) -> None:
    """Any chain of with_updated keeps created_at and created_by."""
    info = AuditInfo.create(creator, at=created_at)
    for updated_by, updated_at in updates:
        info = info.with_updated(updated_by, at=updated_at)
        assert info.updated_by == updated_by
    assert info.created_at == created_at
    assert info.created_by == creator
