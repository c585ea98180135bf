"""Global pytest fixtures and hooks for STRUCTUM."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from structum.bootstrap import reset_defaults

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> marker added to every test collected below it.
FOLDER_MARKERS = {
    "unit": "unit",
    "integration": "integration",
    "contract": "contract",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to items that do not carry it yet."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (marker_name := FOLDER_MARKERS.get(folder)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def restore_domain_defaults() -> Iterator[None]:
    """Undo any wiring a test installed through `structum.bootstrap`."""
    yield
    reset_defaults()
