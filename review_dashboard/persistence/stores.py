"""Key-value stores backing the review status overlay."""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import logging

from ..utils.exceptions import PersistenceException


class KeyValueStore(ABC):
    """Minimal string key-value store interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every key."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Return all keys in insertion order."""


class MemoryStore(KeyValueStore):
    """Process-local store; contents are lost on restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> List[str]:
        return list(self._data.keys())


class JsonFileStore(KeyValueStore):
    """Store persisted as a single JSON object on disk.

    The file is re-read on every access so separate processes sharing
    the file see each other's writes. Writes go to a temporary file that
    is then renamed over the store, so readers never see a partial file.
    """

    def __init__(self, filename: str = 'approved_reviews.json'):
        """Initialize the file store.

        Args:
            filename: Path of the JSON file holding the key-value pairs
        """
        self.filename = filename
        self.logger = logging.getLogger(__name__)
        self.lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        """Load the mapping from disk.

        Raises:
            PersistenceException: If the file exists but cannot be read or parsed
        """
        if not os.path.exists(self.filename):
            return {}

        try:
            with open(self.filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceException(f"Failed to load store from {self.filename}: {e}") from e

        if not isinstance(data, dict):
            raise PersistenceException(f"Store file {self.filename} does not contain a JSON object")

        return {str(key): str(value) for key, value in data.items()}

    def _load_for_update(self) -> Dict[str, str]:
        """Load the mapping before a write, replacing corrupt content with an empty mapping."""
        try:
            return self._load()
        except PersistenceException as e:
            if not os.path.isfile(self.filename):
                raise
            self.logger.warning(f"Discarding unreadable store contents: {e}")
            return {}

    def _save(self, data: Dict[str, str]) -> None:
        """Write the mapping to disk atomically.

        Raises:
            PersistenceException: If writing fails
        """
        directory = os.path.dirname(self.filename)
        temp_path = None
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)

            fd, temp_path = tempfile.mkstemp(dir=directory or '.', prefix='.store-', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, self.filename)
            temp_path = None

            self.logger.debug(f"Saved {len(data)} entries to {self.filename}")

        except OSError as e:
            raise PersistenceException(f"Failed to save store to {self.filename}: {e}") from e

        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self.lock:
            data = self._load_for_update()
            data[key] = value
            self._save(data)

    def delete(self, key: str) -> None:
        with self.lock:
            data = self._load_for_update()
            if key in data:
                del data[key]
                self._save(data)

    def clear(self) -> None:
        with self.lock:
            self._save({})

    def keys(self) -> List[str]:
        return list(self._load().keys())
