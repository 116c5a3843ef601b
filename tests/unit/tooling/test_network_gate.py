"""Unit tests for the integration-test skip gate."""

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock

import pytest

CONFTEST = Path(__file__).parents[2] / "integration" / "conftest.py"


@pytest.fixture
def gate():
    spec = importlib.util.spec_from_file_location("integration_conftest", CONFTEST)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.pytest_collection_modifyitems


def make_items():
    network = MagicMock(path=CONFTEST.parent / "test_rest_balance_transactions.py")
    unit = MagicMock(path=Path(__file__))
    return network, unit


def test_skips_network_tests_without_opt_in(gate, monkeypatch):
    monkeypatch.delenv("RUN_STRIPITY_NETWORK_TESTS", raising=False)
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test")
    network, unit = make_items()

    gate(MagicMock(), [network, unit])

    network.add_marker.assert_called_once()
    unit.add_marker.assert_not_called()


def test_skips_network_tests_without_key(gate, monkeypatch):
    monkeypatch.setenv("RUN_STRIPITY_NETWORK_TESTS", "1")
    monkeypatch.delenv("STRIPE_API_KEY", raising=False)
    network, _ = make_items()

    gate(MagicMock(), [network])

    network.add_marker.assert_called_once()


def test_runs_network_tests_when_enabled(gate, monkeypatch):
    monkeypatch.setenv("RUN_STRIPITY_NETWORK_TESTS", "1")
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test")
    network, _ = make_items()

    gate(MagicMock(), [network])

    network.add_marker.assert_not_called()
