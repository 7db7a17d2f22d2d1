"""
Frontend test fixtures and mocks.

Mocks Streamlit session_state and API client for isolated testing.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Repo root, so the frontend utilities import as ``frontend.utils.*``
sys.path.insert(0, str(Path(__file__).parent.parent.parent))


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def mock_session_state():
    """Provide an empty mock session state for testing."""
    return MockSessionState()


@pytest.fixture
def mock_streamlit(monkeypatch, mock_session_state):
    """Swap the ``st`` module used by the session helpers for a mock."""
    from frontend.utils import helper

    st_mock = MagicMock()
    st_mock.session_state = mock_session_state
    monkeypatch.setattr(helper, "st", st_mock)
    return st_mock


@pytest.fixture
def sample_config():
    """Sample configuration as served by the API."""
    return {
        "id": "abc-123",
        "name": "NIFTY Test",
        "instrument": "NIFTY",
        "timeframe": "5m",
        "entryThreshold": 0.85,
        "exitThreshold": 0.4,
        "maxLossPercent": 2.5,
        "maxTradesPerDay": 10,
        "enabled": True,
        "stopLossEnabled": False,
        "notes": "",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_form_values():
    """Raw widget values of a filled-in form."""
    return {
        "name": "  NIFTY Momentum ",
        "instrument": "NIFTY",
        "timeframe": "5m",
        "entryThreshold": "0.85",
        "exitThreshold": "0.4",
        "maxLossPercent": "2.5",
        "maxTradesPerDay": "10",
        "enabled": True,
        "stopLossEnabled": False,
        "notes": "",
    }


@pytest.fixture
def mock_api_responses(sample_config):
    """Common API response fixtures, in the APIClient return shape."""
    updated = {**sample_config, "name": "NIFTY Renamed", "updatedAt": "2024-01-02T00:00:00Z"}
    return {
        "health_ok": {"status": 200, "data": {"status": "ok", "timestamp": "2024-01-01T00:00:00Z"}},
        "list_ok": {"status": 200, "data": {"data": [sample_config], "count": 1}},
        "list_empty": {"status": 200, "data": {"data": [], "count": 0}},
        "get_ok": {"status": 200, "data": {"data": sample_config}},
        "created": {"status": 201, "data": {"data": {**sample_config, "id": "new-1"}}},
        "updated": {"status": 200, "data": {"data": updated}},
        "deleted": {"status": 204, "data": None},
        "field_errors": {
            "status": 422,
            "data": {"errors": {"maxLossPercent": "Max loss % must be greater than 0 and at most 100."}},
        },
        "not_found": {"status": 404, "data": {"error": "Config not found."}},
        "server_error": {"status": 500, "data": {"error": "Internal server error"}},
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }


@pytest.fixture
def mock_api(mock_api_responses):
    """APIClient stand-in returning the happy-path responses."""
    api = MagicMock()
    api.health.return_value = mock_api_responses["health_ok"]
    api.list_configs.return_value = mock_api_responses["list_ok"]
    api.get_config.return_value = mock_api_responses["get_ok"]
    api.create_config.return_value = mock_api_responses["created"]
    api.update_config.return_value = mock_api_responses["updated"]
    api.delete_config.return_value = mock_api_responses["deleted"]
    return api
