"""
Local key-value store.

String values under string keys, kept in one JSON document on disk. The file
is read once on first access and rewritten on every change.

Dependencies: json, pathlib, tempfile
System role: Durable local storage for history and overrides
"""

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

from infogenius.core.exceptions import HistoryStoreError

logger = logging.getLogger(__name__)


class LocalKeyValueStore:
    """JSON-file backed string store."""

    def __init__(self, path: Path) -> None:
        """
        Initialize store.

        Args:
            path: Location of the JSON document (created on first write)
        """
        self._path = Path(path)
        self._items: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items
        self._items = {}
        if not self._path.exists():
            return self._items
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"{__name__}:_load - Unreadable store {self._path}: {e}")
            return self._items
        if isinstance(raw, dict):
            self._items = {str(k): v for k, v in raw.items() if isinstance(v, str)}
        return self._items

    def _commit(self, items: dict[str, str], key: str) -> None:
        """Write items to disk, then adopt them as the in-memory copy."""
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise HistoryStoreError(f"Failed to write local store: {e}", key=key) from e
        self._items = items

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = dict(self._load())
        items[key] = value
        self._commit(items, key)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            self._commit({k: v for k, v in items.items() if k != key}, key)
