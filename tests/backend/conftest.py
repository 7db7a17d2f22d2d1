"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
store, the service and the FastAPI routes.
"""

import json
import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Store / Service Fixtures
# =============================================================================

@pytest.fixture
def store(data_file):
    """An empty, loaded ConfigStore backed by the temp data file."""
    from app.services.config_store import ConfigStore

    s = ConfigStore(data_file)
    s.load()
    return s


@pytest.fixture
def config_service(store):
    """AlgoConfigService over the temp store."""
    from app.services.config_service import AlgoConfigService

    return AlgoConfigService(store)


@pytest.fixture
def write_data_file(data_file):
    """
    Write raw content to the backing file before the store loads it.

    Accepts a Python object (dumped as JSON) or a raw string.
    """
    def _write(content):
        data_file.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            data_file.write_text(content, encoding="utf-8")
        else:
            data_file.write_text(json.dumps(content), encoding="utf-8")
        return data_file
    return _write


@pytest.fixture
def read_data_file(data_file):
    """Return the parsed JSON array currently on disk."""
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))
    return _read


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert single-message error response structure."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert


@pytest.fixture
def assert_field_errors():
    """Helper to assert a 422 response naming the given fields."""
    def _assert(response, *fields: str):
        assert response.status_code == 422
        data = response.json()
        assert "errors" in data
        for field in fields:
            assert field in data["errors"], f"expected an error for {field}, got {data['errors']}"
    return _assert
