"""
Unit tests for key-value settings stores.
"""

import json
from pathlib import Path

import pytest

from src.core.exceptions.calculator import StorageError
from src.infrastructure.storage import InMemorySettingsStore, JsonFileSettingsStore


class TestInMemorySettingsStore:
    """Test suite for InMemorySettingsStore."""

    def test_should_get_set_and_remove(self) -> None:
        """Test basic key-value operations."""
        store = InMemorySettingsStore()

        assert store.get("key") is None
        store.set("key", "value")
        assert store.get("key") == "value"
        assert len(store) == 1

        store.remove("key")
        assert store.get("key") is None

    def test_should_ignore_removal_of_missing_key(self) -> None:
        """Test removing an absent key is a no-op."""
        store = InMemorySettingsStore({"a": "1"})
        store.remove("missing")
        assert store.get("a") == "1"


class TestJsonFileSettingsStore:
    """Test suite for JsonFileSettingsStore."""

    def test_should_treat_missing_file_as_empty(self, tmp_path: Path) -> None:
        """Test a store without a file returns None."""
        store = JsonFileSettingsStore(tmp_path / "settings.json")
        assert store.get("anything") is None

    def test_should_persist_values_across_instances(self, tmp_path: Path) -> None:
        """Test values survive a new store instance."""
        path = tmp_path / "nested" / "settings.json"
        JsonFileSettingsStore(path).set("key", '{"funds": "1000"}')

        assert JsonFileSettingsStore(path).get("key") == '{"funds": "1000"}'
        assert json.loads(path.read_text(encoding="utf-8")) == {"key": '{"funds": "1000"}'}

    def test_should_keep_other_keys_when_writing(self, tmp_path: Path) -> None:
        """Test set/remove only touch their own key."""
        store = JsonFileSettingsStore(tmp_path / "settings.json")
        store.set("a", "1")
        store.set("b", "2")
        store.remove("a")

        assert store.get("a") is None
        assert store.get("b") == "2"

    def test_should_raise_storage_error_for_corrupt_file(self, tmp_path: Path) -> None:
        """Test a corrupt file is reported as StorageError."""
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError, match="corrupt"):
            JsonFileSettingsStore(path).get("key")

    def test_should_raise_storage_error_for_non_object_file(self, tmp_path: Path) -> None:
        """Test a JSON file that is not an object is rejected."""
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(StorageError, match="does not contain an object"):
            JsonFileSettingsStore(path).get("key")

    def test_should_raise_storage_error_when_unwritable(self, tmp_path: Path) -> None:
        """Test write failures are wrapped."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileSettingsStore(blocker / "settings.json")

        with pytest.raises(StorageError, match="Cannot write"):
            store.set("key", "value")
