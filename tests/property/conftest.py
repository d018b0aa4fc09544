"""Default marks for tests under `tests/property/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

PROPERTY_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "property"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `property` marks to items in `tests/property/`."""
    for item in items:
        path = item.path.resolve()
        if PROPERTY_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.property)
