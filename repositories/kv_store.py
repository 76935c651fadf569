# -*- coding: utf-8 -*-
"""
Key-value record store.

Hosts persist finalized drafts and booking summaries here as JSON text under
string keys. The wizard core only needs "read record by key" and "write
record by key"; key names belong to the hosts (see app.config.StorageKeys).
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from PyQt5.QtCore import QSettings

from services.exceptions import StorageException
from utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    """
    Base class for JSON record stores.

    Subclasses only move raw JSON text; encoding and decoding live here so
    every store hands out fresh copies and never shares mutable state.
    """

    def get_record(self, key: str, default: Any = None) -> Any:
        """
        Read a record.

        Args:
            key: Record key
            default: Returned when the key is absent

        Raises:
            StorageException: stored text is not valid JSON
        """
        raw = self._read_raw(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed record under '{key}': {e}")
            raise StorageException(f"Stored record '{key}' is not valid JSON",
                                   key=key, original_error=e) from e

    def set_record(self, key: str, value: Any):
        """Write a JSON-serializable record."""
        try:
            raw = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageException(f"Record '{key}' is not JSON serializable",
                                   key=key, original_error=e) from e
        self._write_raw(key, raw)
        logger.debug(f"Stored record '{key}' ({len(raw)} bytes)")

    def remove(self, key: str):
        self._delete_raw(key)

    def contains(self, key: str) -> bool:
        return self._read_raw(key) is not None

    @abstractmethod
    def _read_raw(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def _write_raw(self, key: str, raw: str):
        pass

    @abstractmethod
    def _delete_raw(self, key: str):
        pass


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, used by tests and previews."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set_record(key, value)

    def _read_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write_raw(self, key: str, raw: str):
        self._data[key] = raw

    def _delete_raw(self, key: str):
        self._data.pop(key, None)

    def keys(self):
        return sorted(self._data.keys())


class SettingsKeyValueStore(KeyValueStore):
    """
    QSettings-backed store (INI file), the desktop counterpart of a
    browser's local storage.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        if path is None:
            from app.config import Config
            path = Config.SETTINGS_PATH
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._settings = QSettings(str(self.path), QSettings.IniFormat)

    def _read_raw(self, key: str) -> Optional[str]:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def _write_raw(self, key: str, raw: str):
        self._settings.setValue(key, raw)
        self._settings.sync()

    def _delete_raw(self, key: str):
        self._settings.remove(key)
        self._settings.sync()

    def keys(self):
        return sorted(self._settings.allKeys())
