"""
Key-value settings stores.

Both stores hold plain strings under string keys, the way a browser's local
storage does. ``JsonFileSettingsStore`` keeps them in a single JSON object on
disk.
"""

import json
from pathlib import Path
from threading import RLock

from loguru import logger

from src.core.exceptions.calculator import StorageError


class InMemorySettingsStore:
    """Settings store backed by a dictionary."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self._lock = RLock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class JsonFileSettingsStore:
    """Settings store persisted as a JSON object in a single file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = RLock()

    def _read_all(self) -> dict[str, str]:
        """Read the whole store; a missing file is an empty store."""
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StorageError(f"Cannot read settings file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"Settings file {self.path} is corrupt: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Settings file {self.path} does not contain an object")
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, data: dict[str, str]) -> None:
        """Replace the file contents via a temporary file."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise StorageError(f"Cannot write settings file {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)
        logger.debug(f"Stored settings key '{key}' in {self.path}")

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read_all()
            if data.pop(key, None) is not None:
                self._write_all(data)
