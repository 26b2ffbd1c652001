import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


@pytest.fixture(scope="function")
def client():
    """Create a test client for the API."""
    client = TestClient(app)
    yield client


@pytest.fixture(scope="function")
def lenient_ranges(monkeypatch):
    """Turn off latitude/longitude range validation for the duration of a test."""
    monkeypatch.setattr(settings, "validate_coordinate_ranges", False)
    yield


@pytest.fixture
def dms_angle():
    """Fixture that provides a function to build DMS request payloads."""
    def _create(degrees="0", minutes="0", seconds="0", hemisphere="N"):
        return {
            "degrees": degrees,
            "minutes": minutes,
            "seconds": seconds,
            "hemisphere": hemisphere,
        }
    return _create
