"""
Pytest configuration and shared fixtures for receipt points tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_item = _common.make_item
make_receipt = _common.make_receipt
make_receipt_payload = _common.make_receipt_payload
make_corner_market_payload = _common.make_corner_market_payload


SAMPLE_RECEIPTS_DIR = _PROJECT_ROOT / "sample_receipts"


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def receipt():
    """Provide a default Receipt for tests."""
    return make_receipt()


@pytest.fixture
def receipt_payload():
    """Provide the five-item Target receipt as a JSON-ready dict."""
    return make_receipt_payload()


@pytest.fixture
def store():
    """Provide an empty ReceiptStore."""
    from core.store import ReceiptStore
    return ReceiptStore()


@pytest.fixture
def app(store):
    """Provide a fresh FastAPI app backed by the ``store`` fixture."""
    from api.app import create_app
    return create_app(store=store)


@pytest.fixture
def client(app):
    """Provide a TestClient for a fresh app."""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def sample_receipts_dir():
    """Directory holding the bundled sample receipt files."""
    return SAMPLE_RECEIPTS_DIR


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep RECEIPT_POINTS_* variables from the developer's shell out of tests."""
    import os
    for key in list(os.environ):
        if key.startswith("RECEIPT_POINTS_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
