"""Tests for the local key-value store and the repositories built on it."""

import json

import pytest

from infogenius.boundary.local_store import (
    HISTORY_KEY,
    HistoryRepository,
    LocalKeyValueStore,
    OverrideStore,
    key_value_store,
)
from infogenius.boundary.local_store.override_store import BUCKET_OVERRIDE_KEY, TOKEN_OVERRIDE_KEY
from infogenius.core.exceptions import HistoryStoreError


class TestLocalKeyValueStore:
    """Test LocalKeyValueStore persistence."""

    def test_values_survive_a_new_instance(self, tmp_path):
        path = tmp_path / "store.json"
        LocalKeyValueStore(path).set_item("k", "v")

        assert LocalKeyValueStore(path).get_item("k") == "v"

    def test_remove_item(self, local_store):
        local_store.set_item("k", "v")
        local_store.remove_item("k")

        assert local_store.get_item("k") is None
        assert json.loads(local_store.path.read_text()) == {}

    def test_remove_missing_key_does_not_create_file(self, local_store):
        local_store.remove_item("missing")
        assert not local_store.path.exists()

    def test_unreadable_file_starts_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json")

        assert LocalKeyValueStore(path).get_item("k") is None

    def test_failed_write_keeps_memory_and_disk_in_sync(self, tmp_path, monkeypatch):
        """A failed rewrite leaves the previous values and no temp file behind."""
        path = tmp_path / "store.json"
        store = LocalKeyValueStore(path)
        store.set_item("k", "old")

        def failing_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(key_value_store.os, "replace", failing_replace)

        with pytest.raises(HistoryStoreError, match="disk full"):
            store.set_item("k", "new")
        with pytest.raises(HistoryStoreError):
            store.remove_item("k")

        assert store.get_item("k") == "old"
        assert json.loads(path.read_text()) == {"k": "old"}
        assert list(tmp_path.glob("*.tmp")) == []


class TestHistoryRepository:
    """Test HistoryRepository serialization."""

    def test_save_then_load_preserves_order(self, history_repository, make_image):
        history = [make_image("3", prompt="c"), make_image("2", prompt="b"), make_image("1", prompt="a")]

        history_repository.save(history)

        assert [img.id for img in history_repository.load()] == ["3", "2", "1"]

    def test_missing_history_loads_empty(self, history_repository):
        assert history_repository.load() == []

    def test_corrupt_history_loads_empty(self, local_store):
        local_store.set_item(HISTORY_KEY, '[{"id": 1, "broken": true}]')

        assert HistoryRepository(local_store).load() == []

    def test_clear_removes_key(self, local_store, make_image):
        repository = HistoryRepository(local_store)
        repository.save([make_image()])

        repository.clear()

        assert local_store.get_item(HISTORY_KEY) is None


class TestOverrideStore:
    """Test manual GCS overrides."""

    def test_set_and_read(self, local_store):
        overrides = OverrideStore(local_store)

        overrides.set_overrides(bucket=" my-bucket ", token="tok")

        assert overrides.get_bucket() == "my-bucket"
        assert overrides.get_token() == "tok"

    def test_blank_value_removes_override(self, local_store):
        overrides = OverrideStore(local_store)
        overrides.set_overrides(bucket="my-bucket", token="tok")

        overrides.set_overrides(bucket="   ", token="tok")

        assert overrides.get_bucket() is None
        assert local_store.get_item(BUCKET_OVERRIDE_KEY) is None
        assert local_store.get_item(TOKEN_OVERRIDE_KEY) == "tok"

    def test_clear(self, local_store):
        overrides = OverrideStore(local_store)
        overrides.set_overrides(bucket="b", token="t")

        overrides.clear()

        assert (overrides.get_bucket(), overrides.get_token()) == (None, None)
