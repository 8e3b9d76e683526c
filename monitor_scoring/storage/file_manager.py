"""File-based storage layer for application state persistence.

Each key is one JSON file in the data directory:
    data/
    └── global_store.json    # {"key", "saved_at", "data": {systems, tools, lastUpdated}}
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from monitor_scoring.consts import DEFAULT_DATA_DIR
from monitor_scoring.storage.base import PermanentStorage

logger = logging.getLogger(__name__)


class FileManager(PermanentStorage):
    """File-based storage manager."""

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR):
        """Initialize FileManager with data directory.

        Args:
            data_dir: Root directory for all data files.
        """
        self.data_dir = Path(data_dir)

    def _ensure_dirs(self, *dirs: Path) -> None:
        """Create directories if they don't exist."""
        for d in dirs:
            d.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def save(self, key: str, data: dict[str, Any]) -> bool:
        """Save a document, replacing any previous one.

        Args:
            key: Logical document name.
            data: Document to store (must be JSON-serializable).

        Returns:
            True if written, False on I/O failure.
        """
        path = self._path(key)
        content = {
            "key": key,
            "saved_at": datetime.now(UTC).isoformat(),
            "data": data,
        }
        try:
            self._ensure_dirs(self.data_dir)
            path.write_text(json.dumps(content, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save {key} to {path}: {e}")
            return False

        logger.debug(f"Saved {key}: {path}")
        return True

    def load(self, key: str) -> dict[str, Any] | None:
        """Load a document.

        Args:
            key: Logical document name.

        Returns:
            Stored document if found and readable, None otherwise.
        """
        path = self._path(key)
        if not path.exists():
            logger.debug(f"No stored document for {key}: {path}")
            return None

        try:
            content = json.loads(path.read_text(encoding="utf-8"))
            return content.get("data")
        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.warning(f"Failed to load {key} from {path}: {e}")
            return None

    def exists(self, key: str) -> bool:
        """Check if a document file exists."""
        return self._path(key).exists()
