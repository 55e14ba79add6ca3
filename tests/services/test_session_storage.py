"""Unit tests for InMemorySessionStorage."""

from sarvam_translator.services import InMemorySessionStorage


def test_get_missing_item_returns_none():
    assert InMemorySessionStorage().get_item("missing") is None


def test_set_get_and_remove():
    storage = InMemorySessionStorage()
    storage.set_item("key", "value")
    assert storage.get_item("key") == "value"

    storage.remove_item("key")
    assert storage.get_item("key") is None


def test_remove_missing_item_is_a_no_op():
    storage = InMemorySessionStorage()
    storage.remove_item("missing")
    assert storage.get_item("missing") is None


def test_initial_values_are_copied():
    """Mutating the seed dict should not change the storage."""
    seed = {"key": "value"}
    storage = InMemorySessionStorage(seed)
    seed["key"] = "changed"
    assert storage.get_item("key") == "value"
