"""Session storage abstraction - key/value storage that lives as long as the session."""

from abc import ABC, abstractmethod
from typing import Optional


class SessionStorage(ABC):
    """
    Abstract interface for session-scoped key/value storage.

    Values survive for the lifetime of the session only. Ending the session
    (not the application code) is what clears them.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store or overwrite a value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a value if present."""
        pass


class InMemorySessionStorage(SessionStorage):
    """
    Session storage backed by a dict.

    The session is the running process. No persistence.
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._store: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove_item(self, key: str) -> None:
        self._store.pop(key, None)
