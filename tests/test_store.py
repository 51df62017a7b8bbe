"""
Tests for the Store

These tests verify the basic Store operations:
- set(): Insert or replace typed values
- get(): Retrieve values by key
- items() / size(): Enumerate the stored pairs

Run with: python -m pytest tests/test_store.py -v
"""

from typedkv.storage.store import Store
from typedkv.storage.value import TypedValue


class TestStoreSet:
    """Test set() method."""

    def test_set_new_key(self, store: Store):
        """Test inserting a new key-value pair."""
        store.set("key1", TypedValue.from_int(1))
        assert store.size() == 1

    def test_set_update_existing_key(self, store: Store):
        """Test replacing an existing key's value."""
        store.set("key1", TypedValue.from_int(1))
        store.set("key1", TypedValue.from_int(2))

        assert store.get("key1").as_int() == 2
        assert store.size() == 1  # Size should not increase

    def test_set_replaces_type(self, store: Store):
        """Test a replacement may carry a different tag."""
        store.set("key", TypedValue.from_int(7))
        store.set("key", TypedValue.from_string("seven"))

        value = store.get("key")
        assert value.as_string() == "seven"
        assert value.as_int() is None

    def test_set_multiple_keys(self, store: Store):
        """Test inserting multiple different keys."""
        store.set("a", TypedValue.from_string("1"))
        store.set("b", TypedValue.from_float(2.0))
        store.set("c", TypedValue.from_bool(True))

        assert store.size() == 3
        assert store.get("a").as_string() == "1"
        assert store.get("b").as_float() == 2.0
        assert store.get("c").as_bool() is True


class TestStoreGet:
    """Test get() method."""

    def test_get_existing_key(self, store: Store):
        """Test retrieving an existing key."""
        value = TypedValue.from_string("myvalue")
        store.set("mykey", value)
        assert store.get("mykey") == value

    def test_get_nonexistent_key(self, store: Store):
        """Test retrieving a key that doesn't exist returns None."""
        assert store.get("nonexistent") is None

    def test_get_is_case_sensitive(self, store: Store):
        """Test keys differing only in case are distinct."""
        store.set("Key", TypedValue.from_int(1))
        assert store.get("key") is None
        assert store.get("Key").as_int() == 1

    def test_get_does_not_modify(self, store: Store):
        """Test a miss leaves the store untouched."""
        store.get("missing")
        assert store.size() == 0


class TestStoreItems:
    """Test items() and size()."""

    def test_items_empty(self, store: Store):
        """Test an empty store yields no pairs."""
        assert list(store.items()) == []

    def test_items_lists_all_pairs(self, store: Store):
        """Test every stored pair is enumerated once."""
        store.set("x", TypedValue.from_int(1))
        store.set("y", TypedValue.from_int(2))

        pairs = dict(store.items())
        assert set(pairs) == {"x", "y"}
        assert pairs["y"].as_int() == 2

    def test_independent_instances(self, store: Store, other_store: Store):
        """Test two stores never share contents."""
        store.set("shared", TypedValue.from_int(1))
        assert other_store.get("shared") is None
        assert other_store.size() == 0
