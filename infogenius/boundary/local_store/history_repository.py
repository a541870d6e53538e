"""
History repository.

Persists the whole generated-image history as one serialized collection.
Read once at startup, fully rewritten on every change, removed on clear.

Dependencies: pydantic, key_value_store
System role: Load-at-start / save-on-change persistence port for the controller
"""

import logging

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from infogenius.boundary.local_store.key_value_store import LocalKeyValueStore
from infogenius.models.infographic import GeneratedImage

logger = logging.getLogger(__name__)

HISTORY_KEY = "infogenius_history_v1"

_history_adapter = TypeAdapter(list[GeneratedImage])


class HistoryRepository:
    """Serializes history under a fixed key of the local store."""

    def __init__(self, store: LocalKeyValueStore, key: str = HISTORY_KEY) -> None:
        self._store = store
        self._key = key

    def load(self) -> list[GeneratedImage]:
        """
        Read the persisted history.

        Returns:
            list[GeneratedImage]: Newest first; empty when missing or unparseable
        """
        saved = self._store.get_item(self._key)
        if not saved:
            return []
        try:
            history = _history_adapter.validate_json(saved)
        except PydanticValidationError as e:
            logger.error(f"{__name__}:load - Failed to parse saved history: {e}")
            return []
        logger.info(f"{__name__}:load - Loaded {len(history)} images")
        return history

    def save(self, history: list[GeneratedImage]) -> None:
        """Rewrite the whole collection."""
        self._store.set_item(self._key, _history_adapter.dump_json(history).decode("utf-8"))
        logger.debug(f"{__name__}:save - Saved {len(history)} images")

    def clear(self) -> None:
        self._store.remove_item(self._key)
        logger.info(f"{__name__}:clear - History removed")
