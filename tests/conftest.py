import pytest

_LAYER_MARKERS = {
    "domain": pytest.mark.domain,
    "application": pytest.mark.application,
    "integration": pytest.mark.integration,
}


def pytest_collection_modifyitems(config, items):
    """Tag each test with the layer named by its directory."""
    for item in items:
        for part in item.path.parts:
            marker = _LAYER_MARKERS.get(part)
            if marker is not None:
                item.add_marker(marker)
                break
