"""Global pytest fixtures for CALENDART.

Tests are marked after the suite they live in: anything under `tests/unit/`
gets `unit`, anything under `tests/contract/` gets `contract`, so
`pytest -m contract` runs the repository contracts on their own.
"""

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.entities",
]

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = {"unit": pytest.mark.unit, "contract": pytest.mark.contract}


def suite_of(item: pytest.Item) -> str | None:
    """Name of the first directory below `tests/` holding `item`, if any."""
    try:
        parts = item.path.resolve().relative_to(TESTS_ROOT).parts
    except ValueError:
        return None
    return parts[0] if len(parts) > 1 else None


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        marker = SUITE_MARKERS.get(suite_of(item))
        if marker is not None and item.get_closest_marker(marker.name) is None:
            item.add_marker(marker)
