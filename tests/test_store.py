"""
Tests for the KVStore

These tests verify the in-memory KVStore operations:
- set(): Insert or overwrite entries
- get(): Retrieve values by key
- remove(): Erase entries
- exists(), clear(), list(), size()

Run with: python -m pytest tests/test_store.py -v
"""

import logging

import pytest
from kvshell.store.store import KVStore


class TestKVStoreSet:
    """Test set() method."""

    def test_set_new_key(self, store: KVStore):
        """Test inserting a new key-value pair."""
        assert store.set("key1", "value1") is None
        assert store.size() == 1

    def test_set_update_existing_key(self, store: KVStore):
        """Test last writer wins on an existing key."""
        store.set("key1", "value1")
        store.set("key1", "value2")

        assert store.get("key1") == "value2"
        assert store.size() == 1

    def test_set_multiple_keys(self, store: KVStore):
        """Test inserting multiple different keys."""
        store.set("key1", "value1")
        store.set("key2", "value2")
        store.set("key3", "value3")

        assert store.size() == 3
        assert store.get("key1") == "value1"
        assert store.get("key2") == "value2"
        assert store.get("key3") == "value3"

    def test_set_empty_value(self, store: KVStore):
        """Test empty string is a storable value at this layer."""
        store.set("key", "")
        assert store.get("key") == ""
        assert store.exists("key") is True

    def test_set_logs_entry(self, store: KVStore, caplog):
        """Test set emits one informational log record."""
        with caplog.at_level(logging.INFO, logger="kvshell.store.store"):
            store.set("name", "Abhishek")

        assert [r.getMessage() for r in caplog.records] == ["Set: {name: Abhishek}"]
        assert caplog.records[0].levelno == logging.INFO


class TestKVStoreGet:
    """Test get() method."""

    def test_get_existing_key(self, store: KVStore):
        """Test retrieving an existing key."""
        store.set("mykey", "myvalue")
        assert store.get("mykey") == "myvalue"

    def test_get_missing_key(self, store: KVStore):
        """Test missing key gives None rather than raising."""
        assert store.get("missing") is None

    def test_get_absent_differs_from_empty(self, store: KVStore):
        """Test absent-value result is distinct from an empty string."""
        store.set("empty", "")
        assert store.get("empty") == ""
        assert store.get("other") is None

    def test_get_is_case_sensitive(self, store: KVStore):
        """Test that keys are case-sensitive."""
        store.set("Key", "value1")
        store.set("KEY", "value2")

        assert store.get("Key") == "value1"
        assert store.get("KEY") == "value2"
        assert store.get("key") is None


class TestKVStoreRemove:
    """Test remove() method."""

    def test_remove_existing_key(self, store: KVStore):
        """Test removing an existing key."""
        store.set("key1", "value1")

        assert store.remove("key1") is True
        assert store.get("key1") is None
        assert store.exists("key1") is False

    def test_remove_missing_key_is_noop(self, store: KVStore):
        """Test removing a missing key does not raise."""
        store.set("other", "value")

        assert store.remove("missing") is False
        assert store.exists("missing") is False
        assert store.size() == 1

    def test_remove_one_of_many(self, store: KVStore):
        """Test removing one key doesn't affect others."""
        store.set("key1", "value1")
        store.set("key2", "value2")
        store.set("key3", "value3")

        store.remove("key2")

        assert store.list() == [("key1", "value1"), ("key3", "value3")]

    def test_remove_then_reinsert(self, store: KVStore):
        """Test that a removed key can be set again."""
        store.set("key", "value1")
        store.remove("key")
        store.set("key", "value2")
        assert store.get("key") == "value2"

    def test_remove_logs(self, store: KVStore, caplog):
        """Test remove emits an informational log record."""
        with caplog.at_level(logging.INFO, logger="kvshell.store.store"):
            store.remove("name")

        assert [r.getMessage() for r in caplog.records] == ["Removed key: name"]


class TestKVStoreClearAndList:
    """Test clear(), list() and size()."""

    def test_list_empty_store(self, store: KVStore):
        """Test list on an empty store gives no entries."""
        assert store.list() == []

    def test_list_returns_all_entries(self, store: KVStore):
        """Test list returns every (key, value) pair."""
        store.set("name", "Abhishek")
        store.set("lang", "C++")
        assert sorted(store.list()) == [("lang", "C++"), ("name", "Abhishek")]

    def test_list_is_a_snapshot(self, store: KVStore):
        """Test later mutations do not change an earlier snapshot."""
        store.set("a", "1")
        snapshot = store.list()
        store.set("b", "2")
        store.remove("a")

        assert snapshot == [("a", "1")]

    def test_clear(self, store: KVStore):
        """Test clear removes all keys."""
        for key in ("key1", "key2", "key3"):
            store.set(key, "value")

        store.clear()

        assert store.size() == 0
        for key in ("key1", "key2", "key3"):
            assert store.exists(key) is False

    def test_clear_twice(self, store: KVStore):
        """Test clear is idempotent."""
        store.set("key", "value")
        store.clear()
        store.clear()
        assert store.list() == []

    def test_clear_logs(self, store: KVStore, caplog):
        """Test clear emits an informational log record."""
        with caplog.at_level(logging.INFO, logger="kvshell.store.store"):
            store.clear()
        assert [r.getMessage() for r in caplog.records] == ["Store cleared"]


class TestKVStoreConfiguration:
    """Test constructor options."""

    def test_default_load_mode_is_merge(self):
        """Test the default load mode comes from settings."""
        assert KVStore().load_mode == "merge"

    def test_invalid_load_mode(self):
        """Test an unknown load mode is rejected."""
        with pytest.raises(ValueError, match="invalid load mode"):
            KVStore(load_mode="append")

    def test_injected_logger(self, caplog):
        """Test events go to an injected logger."""
        custom = logging.getLogger("tests.custom_sink")
        store = KVStore(logger=custom)

        with caplog.at_level(logging.INFO, logger="tests.custom_sink"):
            store.set("a", "1")
            store.clear()

        assert [r.name for r in caplog.records] == ["tests.custom_sink"] * 2


class TestKVStoreStress:
    """Stress tests."""

    def test_many_keys(self, store: KVStore):
        """Test inserting many keys."""
        for i in range(1000):
            store.set(f"key{i}", f"value{i}")

        assert store.size() == 1000
        assert store.get("key0") == "value0"
        assert store.get("key999") == "value999"

    def test_interleaved_operations(self, store: KVStore):
        """Test interleaved set/get/remove/exists."""
        for i in range(100):
            key = f"key{i}"
            store.set(key, f"value{i}")

            assert store.get(key) == f"value{i}"
            assert store.exists(key) is True

            if i % 3 == 0:
                store.remove(key)
                assert store.exists(key) is False

        assert store.size() == 66
