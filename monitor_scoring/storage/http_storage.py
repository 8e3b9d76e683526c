"""HTTP storage backend talking to the shared monitor-data API.

The server keeps a single JSON document for the whole deployment:
    GET  /api/monitor-data  -> document, or null if never written
    POST /api/monitor-data  -> upsert the whole document, {"success": true}
"""

import logging
from typing import Any

import httpx

from monitor_scoring.consts import HTTP_TIMEOUT_SECONDS, STATE_API_PATH, STATE_KEY
from monitor_scoring.storage.base import PermanentStorage

logger = logging.getLogger(__name__)


class HttpStorage(PermanentStorage):
    """Remote storage over the monitor-data route.

    Only the application document key is served by the route. Network and
    server errors are logged and reported as None (load) or False (save).
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ):
        """Initialize the backend.

        Args:
            base_url: Server root, e.g. "https://monitor.example.com".
            client: Optional preconfigured client (used by tests).
            timeout: Request timeout in seconds for the default client.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    def _check_key(self, key: str) -> bool:
        if key != STATE_KEY:
            logger.warning(f"Remote storage only serves '{STATE_KEY}', not '{key}'")
            return False
        return True

    def load(self, key: str) -> dict[str, Any] | None:
        """Fetch the stored document.

        Returns:
            The document, or None if never written or the request failed.
        """
        if not self._check_key(key):
            return None

        try:
            response = self._client.get(STATE_API_PATH)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.warning(f"Remote load failed: {e}")
            return None
        except ValueError as e:
            logger.warning(f"Remote load returned invalid JSON: {e}")
            return None

        if not isinstance(data, dict):
            logger.info("Remote store is empty")
            return None
        return data

    def save(self, key: str, data: dict[str, Any]) -> bool:
        """Replace the stored document.

        Returns:
            True if the server accepted the document, False otherwise.
        """
        if not self._check_key(key):
            return False

        try:
            response = self._client.post(STATE_API_PATH, json=data)
        except httpx.HTTPError as e:
            logger.error(f"Remote save failed: {e}")
            return False

        if not response.is_success:
            logger.error(f"Remote save rejected: HTTP {response.status_code}")
            return False
        return True

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
