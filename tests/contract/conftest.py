"""Marker conftest: tests collected below `tests/contract/` get the `contract` mark."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

CONTRACT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "contract"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item under `tests/contract/` unless it already carries the mark."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if CONTRACT_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.contract)
