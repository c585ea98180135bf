"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from structum.adapters.id_generators import ULIDGenerator, UUIDv4Generator
from structum.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "uuid4"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"ulid"` → ULIDGenerator
      - `"uuid4"` → UUIDv4Generator
    """
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
