"""
Integration test fixtures.

In-process tests wire the frontend API client to the FastAPI app through
TestClient. Live tests require a running backend; mark them with
@pytest.mark.integration to skip in normal test runs.
"""
import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def live_backend_url():
    """Get base URL for live backend tests (if running)."""
    return os.getenv("BACKEND_URL", "http://localhost:4000")


@pytest.fixture
def test_timeout():
    """Timeout for network requests in integration tests."""
    return 30


@pytest.fixture
def wired_api(app):
    """
    APIClient whose HTTP calls are served by the in-process app.

    ``requests.request`` is routed to TestClient, so the real client code
    (URL building, JSON parsing, status handling) is exercised end to end.
    """
    from frontend.utils.api import APIClient

    with TestClient(app) as test_client:
        def _route(method, url, headers=None, json=None, timeout=None):
            return test_client.request(method, url, headers=headers, json=json)

        with patch("frontend.utils.api.requests.request", side_effect=_route):
            yield APIClient("http://testserver", timeout=5)
