"""Unit tests for CredentialStore."""

import pytest

from sarvam_translator.core import CredentialError, ErrorKind
from sarvam_translator.services import (
    CredentialStatus,
    CredentialStore,
    InMemorySessionStorage,
    mask_key,
)


@pytest.fixture
def storage():
    """Provide empty session storage."""
    return InMemorySessionStorage()


@pytest.fixture
def store(storage):
    return CredentialStore(storage)


class TestCredentialStoreSave:
    """Tests for saving API keys."""

    def test_empty_key_is_rejected(self, store):
        """Blank input should fail with EMPTY_CREDENTIAL."""
        with pytest.raises(CredentialError) as exc_info:
            store.save("")
        assert exc_info.value.kind == ErrorKind.EMPTY_CREDENTIAL

    def test_whitespace_key_is_rejected_as_empty(self, store):
        with pytest.raises(CredentialError) as exc_info:
            store.save("    ")
        assert exc_info.value.kind == ErrorKind.EMPTY_CREDENTIAL

    def test_short_key_is_rejected(self, store):
        """Keys under 10 characters should fail with TOO_SHORT."""
        with pytest.raises(CredentialError) as exc_info:
            store.save("short")
        assert exc_info.value.kind == ErrorKind.TOO_SHORT
        assert store.current() is None

    def test_valid_key_is_stored_and_loadable(self, store):
        """A valid key should be held and persisted for the session."""
        store.save("validkey123")
        assert store.current() == "validkey123"
        assert store.load() == "validkey123"

    def test_key_is_trimmed_before_length_check(self, store, storage):
        """Surrounding whitespace should not count toward the length."""
        with pytest.raises(CredentialError):
            store.save("   short   ")

        store.save("  validkey123  ")
        assert storage.get_item(CredentialStore.STORAGE_KEY) == "validkey123"

    def test_exactly_min_length_is_accepted(self, store):
        store.save("a" * CredentialStore.MIN_LENGTH)
        assert store.current() == "a" * CredentialStore.MIN_LENGTH

    def test_save_replaces_previous_key(self, store):
        """Only one key is held at a time."""
        store.save("first-key-123")
        store.save("second-key-456")
        assert store.current() == "second-key-456"
        assert store.load() == "second-key-456"

    def test_failed_save_keeps_previous_key(self, store):
        store.save("first-key-123")
        with pytest.raises(CredentialError):
            store.save("short")
        assert store.current() == "first-key-123"


class TestCredentialStoreLoad:
    """Tests for loading keys from session storage."""

    def test_load_returns_none_without_stored_key(self, store):
        assert store.load() is None
        assert store.current() is None

    def test_store_picks_up_existing_session_key(self):
        """A key already in session storage should be current at startup."""
        storage = InMemorySessionStorage({CredentialStore.STORAGE_KEY: "session-key-123"})
        store = CredentialStore(storage)
        assert store.current() == "session-key-123"

    @pytest.mark.parametrize("stored", ["  x ", "short", "   "])
    def test_invalid_session_key_is_discarded(self, stored):
        """A stored value that save() would reject is not accepted at startup."""
        storage = InMemorySessionStorage({CredentialStore.STORAGE_KEY: stored})
        store = CredentialStore(storage)

        assert store.current() is None
        assert storage.get_item(CredentialStore.STORAGE_KEY) is None

    def test_stored_key_is_trimmed_on_load(self):
        storage = InMemorySessionStorage({CredentialStore.STORAGE_KEY: "  session-key-123  "})
        assert CredentialStore(storage).current() == "session-key-123"

    def test_separate_sessions_are_independent(self):
        """Two stores on two storages should not share keys."""
        first = CredentialStore(InMemorySessionStorage())
        second = CredentialStore(InMemorySessionStorage())
        first.save("first-key-123")
        assert second.current() is None


class TestCredentialStatus:
    """Tests for live key feedback."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", CredentialStatus.EMPTY),
            (None, CredentialStatus.EMPTY),
            ("   ", CredentialStatus.EMPTY),
            ("abc", CredentialStatus.INCOMPLETE),
            ("validkey123", CredentialStatus.READY),
        ],
    )
    def test_check(self, raw, expected):
        assert CredentialStore.check(raw) == expected


def test_mask_key_hides_everything_after_four_characters():
    assert mask_key("validkey123") == "vali…"
    assert mask_key(None) == "<none>"
