"""Storage backends for persisting application state.

This module provides:
- PermanentStorage: Abstract base class for document storage
- FileManager: File-based implementation
- HttpStorage: Remote implementation over the monitor-data API
"""

from monitor_scoring.storage.base import PermanentStorage
from monitor_scoring.storage.file_manager import FileManager
from monitor_scoring.storage.http_storage import HttpStorage

__all__ = [
    "FileManager",
    "HttpStorage",
    "PermanentStorage",
]
