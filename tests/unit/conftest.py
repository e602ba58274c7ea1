"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "unit"
PROPERTY_MARKER_NAME = "property"
PROPERTY_MODULE_SUFFIX = "_props.py"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items in `tests/unit/` as `unit`, and `*_props.py` items as `property`."""
    for item in items:
        path = item.path.resolve()
        if UNIT_ROOT not in path.parents:
            continue
        existing = {marker.name for marker in item.iter_markers()}
        if MARKER_NAME not in existing:
            item.add_marker(pytest.mark.unit)
        if path.name.endswith(PROPERTY_MODULE_SUFFIX) and (
            PROPERTY_MARKER_NAME not in existing
        ):
            item.add_marker(pytest.mark.property)
