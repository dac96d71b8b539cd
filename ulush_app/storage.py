# ulush_app/storage.py
"""
Key-value persistence for the product and category snapshots.

Reads and writes never raise. Each call returns a ``StorageResult`` that
carries either the value or the exception that was swallowed, so the page
can decide whether to show it.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import ensure_dir

logger = logging.getLogger(__name__)


@dataclass
class StorageResult:
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


class KeyValueStorage:
    """Base class: subclasses implement ``_read`` and ``_write`` on raw text."""

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, text: str) -> None:
        raise NotImplementedError

    def load(self, key: str, fallback: Any) -> StorageResult:
        try:
            raw = self._read(key)
            if not raw:
                return StorageResult(fallback)
            return StorageResult(json.loads(raw))
        except Exception as e:
            logger.warning("Stored data for %r is unreadable, using fallback: %s", key, e)
            return StorageResult(fallback, e)

    def save(self, key: str, value: Any) -> StorageResult:
        try:
            self._write(key, _dumps(value))
            return StorageResult(value)
        except Exception as e:
            logger.warning("Could not persist %r: %s", key, e)
            return StorageResult(value, e)


class JsonFileStorage(KeyValueStorage):
    """One ``<key>.json`` file per key inside ``directory``."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def _read(self, key):
        p = self.path_for(key)
        if not p.exists():
            return None
        return p.read_text(encoding="utf-8")

    def _write(self, key, text):
        ensure_dir(self.directory)
        self.path_for(key).write_text(text, encoding="utf-8")


class MemoryStorage(KeyValueStorage):
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})
        self.writes = 0

    def _read(self, key):
        return self.data.get(key)

    def _write(self, key, text):
        self.data[key] = text
        self.writes += 1
