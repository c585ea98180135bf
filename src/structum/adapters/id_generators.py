"""ID generators for Structum."""

import threading
import uuid
from uuid import UUID

from ulid import monotonic

from structum.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component. This generator uses the `ulid-py`
    library and returns each ULID in its 128-bit `UUID` form, so the ids still
    sort by creation time.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> UUID:
        """Generate a new ULID-backed UUID (serialized across threads)."""
        with self._lock:
            return monotonic.new().uuid


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are randomly generated and carry no ordering. This generator uses
    Python's built-in `uuid` library.
    """

    def new_id(self) -> UUID:
        """Generate a new UUID."""
        return uuid.uuid4()
