from typing import Any, Optional

import requests

CONNECTION_ERROR = "Cannot connect to backend"
TIMEOUT_ERROR = "Backend did not respond in time"


class APIClient:
    """Simple API client for backend requests.

    Every call returns ``{"status": <http status>, "data": <json body>}``.
    Transport failures return ``{"status": 0, "error": <message>}``.
    ``timeout`` is in seconds; callers pass ``config.REQUEST_TIMEOUT``.
    """

    def __init__(self, base_url: str, timeout: float):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _parse_json(self, resp) -> Optional[dict]:
        """Safely parse JSON, return None or text on failure."""
        if resp is None or not resp.text:
            return None
        try:
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _request(self, method: str, endpoint: str, data: Optional[dict] = None) -> dict:
        try:
            resp = requests.request(
                method,
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                json=data,
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.Timeout:
            return {"status": 0, "error": TIMEOUT_ERROR}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": CONNECTION_ERROR}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _get(self, endpoint: str) -> dict:
        """Make GET request."""
        return self._request("GET", endpoint)

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make POST request."""
        return self._request("POST", endpoint, data)

    def _put(self, endpoint: str, data: dict) -> dict:
        """Make PUT request."""
        return self._request("PUT", endpoint, data)

    def _delete(self, endpoint: str) -> dict:
        """Make DELETE request."""
        return self._request("DELETE", endpoint)

    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")

    # Config endpoints
    def list_configs(self) -> dict:
        """List all configurations."""
        return self._get("/configs")

    def get_config_stats(self) -> dict:
        """Get configuration statistics."""
        return self._get("/configs/stats")

    def get_config(self, config_id: str) -> dict:
        """Get configuration by id."""
        return self._get(f"/configs/{config_id}")

    def create_config(self, payload: dict[str, Any]) -> dict:
        """Create new configuration."""
        return self._post("/configs", payload)

    def update_config(self, config_id: str, payload: dict[str, Any]) -> dict:
        """Replace a configuration's fields."""
        return self._put(f"/configs/{config_id}", payload)

    def delete_config(self, config_id: str) -> dict:
        """Delete a configuration."""
        return self._delete(f"/configs/{config_id}")
