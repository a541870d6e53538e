"""Local JSON key-value store and the repositories built on it."""

from infogenius.boundary.local_store.history_repository import HISTORY_KEY, HistoryRepository
from infogenius.boundary.local_store.key_value_store import LocalKeyValueStore
from infogenius.boundary.local_store.override_store import OverrideStore

__all__ = ["HISTORY_KEY", "HistoryRepository", "LocalKeyValueStore", "OverrideStore"]
