"""Key-value stores backing the unlock gate."""

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

from property_insights.exceptions import ConfigurationError


class KeyValueStore(Protocol):
    """String-to-string store injected into the unlock gate."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Process-local store, mainly for tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore:
    """Store persisted as a single JSON object on disk.

    Every ``set`` rewrites the file through a temporary file and
    ``os.replace``, so a crash mid-write leaves the previous contents intact.
    A missing file reads as empty; an unreadable one raises
    ``ConfigurationError``.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file. Parent directories are created on demand.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: dict[str, str] = self._load()

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def keys(self) -> list[str]:
        return list(self._data)

    def reload(self) -> None:
        """Re-read the file, discarding in-memory state."""
        self._data = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"State file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigurationError(f"State file {self.path} must contain a JSON object")
        return {str(k): str(v) for k, v in raw.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
