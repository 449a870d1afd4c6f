"""Shared fixtures for integration tests."""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless RUN_ARTGRID_NETWORK_TESTS=1."""
    if os.environ.get("RUN_ARTGRID_NETWORK_TESTS") == "1":
        return
    skip_network = pytest.mark.skip(
        reason="Requires network access. Set RUN_ARTGRID_NETWORK_TESTS=1 to run"
    )
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip_network)
