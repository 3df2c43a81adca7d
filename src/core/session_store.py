"""
Key/value storage for the persisted session flags.

The front desk only persists two strings across restarts: the current role and
whether someone is logged in. This module provides the storage backends for
them, an in-memory one for tests and single runs, and a JSON file one that
plays the role of browser local storage.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from core.config import SESSION_STORE_PATH

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal string key/value storage interface every backend implements."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Stored value for key, or None."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key; a missing key is not an error."""


class InMemoryKeyValueStore(KeyValueStore):
    """Key/value store that lives for the lifetime of the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Key/value store persisted as a flat JSON object on disk.

    The file is re-read on every access so that two processes pointed at the
    same path observe each other's writes. A missing or unreadable file is
    treated as empty.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring session file {self.path}: expected a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, indent=2, sort_keys=True), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._save(items)


def get_session_store(path: Optional[str] = None) -> KeyValueStore:
    """
    Build the session store selected by configuration.

    Args:
        path: Optional override of SESSION_STORE_PATH

    Returns:
        JsonFileKeyValueStore when a path is configured, otherwise an
        InMemoryKeyValueStore
    """
    store_path = SESSION_STORE_PATH if path is None else path
    if store_path:
        logger.info(f"Using session file {store_path}")
        return JsonFileKeyValueStore(Path(store_path))
    return InMemoryKeyValueStore()
