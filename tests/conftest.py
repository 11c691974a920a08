# tests/conftest.py
import os

# No simulated carrier latency under test; must be set before settings load
os.environ["CARRIER_SIMULATED_LATENCY"] = "0"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from freightquote.core.config import clear_settings_cache
from freightquote.dependencies import get_quote_service
from freightquote.main import app
from freightquote.schemas.quote import to_metric, validate_quote_request


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around each test so monkeypatched env vars take effect"""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def guyana_payload():
    """Provide the basic Guyana quote request (camelCase, display units)"""
    return {
        "originZip": "07001",
        "destCountry": "Guyana",
        "pieces": [{"type": "box", "weight": 10}],
        "serviceLevel": "EXPRESS",
    }


@pytest.fixture
def make_payload(guyana_payload):
    """Build a quote payload from the Guyana default with overrides"""
    def _make(**overrides):
        payload = dict(guyana_payload)
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def metric_request(make_payload):
    """Validated, metric request ready for the rating engine"""
    def _make(**overrides):
        return to_metric(validate_quote_request(make_payload(**overrides)))
    return _make


@pytest.fixture
def test_client():
    """Provide a test client; dependency overrides are cleared afterwards"""
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def override_quote_service():
    """Swap the quote service used by the routes"""
    def _override(service):
        app.dependency_overrides[get_quote_service] = lambda: service
    return _override
