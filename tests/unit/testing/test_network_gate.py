"""Tests for the RUN_ARTGRID_NETWORK_TESTS collection gate."""

import importlib.util
from pathlib import Path

import pytest

CONFTEST = Path(__file__).resolve().parents[2] / "integration" / "conftest.py"


class FakeItem:
    def __init__(self, path: Path):
        self.path = path
        self.markers = []

    def add_marker(self, marker):
        self.markers.append(marker)


@pytest.fixture
def gate():
    spec = importlib.util.spec_from_file_location("integration_gate", CONFTEST)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.pytest_collection_modifyitems


@pytest.fixture
def items():
    root = CONFTEST.parent.parent
    return [
        FakeItem(root / "integration" / "test_artic_rest.py"),
        FakeItem(root / "unit" / "models" / "test_page_models.py"),
    ]


class TestNetworkGate:
    def test_skips_integration_items_by_default(self, gate, items, monkeypatch):
        monkeypatch.delenv("RUN_ARTGRID_NETWORK_TESTS", raising=False)
        gate(None, items)

        integration, unit = items
        assert [m.name for m in integration.markers] == ["skip"]
        assert unit.markers == []

    def test_runs_everything_when_enabled(self, gate, items, monkeypatch):
        monkeypatch.setenv("RUN_ARTGRID_NETWORK_TESTS", "1")
        gate(None, items)

        assert all(item.markers == [] for item in items)
