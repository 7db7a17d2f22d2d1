"""
Global test fixtures for AlgoConfig.

This module provides shared fixtures for all tests including:
- Sample configuration payloads and records
- A FastAPI app wired to a temporary data file
- Sync and async test clients
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend and repo root to path for imports
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR / "backend"))
sys.path.insert(0, str(ROOT_DIR))


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def valid_payload() -> dict:
    """A create/update payload that passes every field rule."""
    return {
        "name": "NIFTY Momentum",
        "instrument": "NIFTY",
        "timeframe": "5m",
        "entryThreshold": 0.85,
        "exitThreshold": 0.4,
        "maxLossPercent": 2.5,
        "maxTradesPerDay": 10,
        "enabled": True,
    }


@pytest.fixture
def sample_record() -> dict:
    """A stored configuration document as it appears in the data file."""
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


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def data_file(tmp_path) -> Path:
    """Path of a not-yet-existing backing file in a temp directory."""
    return tmp_path / "data" / "configs.json"


@pytest.fixture
def test_settings(data_file):
    """Settings pointing the store at the temp data file."""
    from app.config import Settings

    return Settings(data_file=data_file, log_level="WARNING")


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings):
    """
    Create FastAPI app for testing.

    Each test gets its own app and its own data file.
    """
    from app.main import create_app

    return create_app(test_settings)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, which creates and loads the store.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app, data_file):
    """
    Create an async test client.

    ASGITransport does not run the lifespan, so the store is attached here.
    """
    from httpx import AsyncClient, ASGITransport
    from app.services.config_store import ConfigStore

    store = ConfigStore(data_file)
    store.load()
    app.state.config_store = store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_datetime_recent():
    """
    Fixture providing a helper to assert a datetime is recent.

    Usage:
        def test_something(assert_datetime_recent):
            assert_datetime_recent(response["createdAt"], max_age_seconds=60)
    """
    def _assert_recent(datetime_str: str, max_age_seconds: int = 60):
        if datetime_str.endswith("Z"):
            datetime_str = datetime_str.replace("Z", "+00:00")

        dt = datetime.fromisoformat(datetime_str)
        now = datetime.now(timezone.utc)
        age = (now - dt).total_seconds()

        assert age < max_age_seconds, f"Datetime {datetime_str} is {age}s old, expected < {max_age_seconds}s"
        assert age >= 0, f"Datetime {datetime_str} is in the future"

    return _assert_recent
