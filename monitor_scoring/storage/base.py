"""Abstract base class for permanent storage backends.

Permanent storage holds whole JSON documents by key. Saving replaces the
document (last writer wins); there is no merge and no concurrency check.
Backends report failures as None/False and log them instead of raising.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from monitor_scoring.consts import STATE_KEY
from monitor_scoring.models.common import _epoch_ms
from monitor_scoring.models.model_storage import AppState

logger = logging.getLogger(__name__)


class PermanentStorage(ABC):
    """Abstract base class for permanent storage implementations.

    Provides a consistent interface for storing and retrieving JSON
    documents. Implementations may use files, a remote API, or other
    backends.
    """

    @abstractmethod
    def save(self, key: str, data: dict[str, Any]) -> bool:
        """Replace the document stored under key.

        Args:
            key: Logical document name.
            data: JSON-serializable document.

        Returns:
            True on success, False if the backend failed.
        """
        ...

    @abstractmethod
    def load(self, key: str) -> dict[str, Any] | None:
        """Load the document stored under key.

        Args:
            key: Logical document name.

        Returns:
            Stored document, or None if never written or unreadable.
        """
        ...

    def exists(self, key: str) -> bool:
        """Check if a document exists under key."""
        return self.load(key) is not None

    def close(self) -> None:
        """Release backend resources. No-op unless overridden."""

    def __enter__(self) -> "PermanentStorage":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # === APPLICATION STATE ===

    def load_state(self) -> AppState | None:
        """Load the application document.

        Returns:
            AppState if stored and valid, None otherwise.
        """
        data = self.load(STATE_KEY)
        if data is None:
            return None

        try:
            return AppState.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Stored state is invalid, ignoring it: {e}")
            return None

    def save_state(self, state: AppState) -> bool:
        """Replace the application document, stamping lastUpdated.

        Args:
            state: Application state to store (not modified).

        Returns:
            True on success, False otherwise.
        """
        stamped = state.model_copy(update={"last_updated": _epoch_ms()})
        ok = self.save(STATE_KEY, stamped.model_dump(mode="json", by_alias=True))
        if ok:
            logger.info(
                f"Saved state: {len(stamped.systems)} systems, {len(stamped.tools)} tools"
            )
        return ok
