"""Credential Store - holds the single API key for the session."""

import logging
from enum import Enum
from typing import Optional

from sarvam_translator.core import CredentialError, ErrorKind
from sarvam_translator.services.session_storage import SessionStorage

logger = logging.getLogger(__name__)


class CredentialStatus(Enum):
    """Live feedback while a key is being typed."""

    EMPTY = "empty"
    INCOMPLETE = "incomplete"
    READY = "ready"


def mask_key(key: Optional[str]) -> str:
    """Show only the first four characters of a key."""
    if not key:
        return "<none>"
    return f"{key[:4]}…"


class CredentialStore:
    """
    Holds at most one API key.

    The key is persisted to session storage on save and picked back up
    from it when the store is created.
    """

    STORAGE_KEY = "sarvam_api_key"
    MIN_LENGTH = 10

    def __init__(self, storage: SessionStorage):
        self._storage = storage
        self._key: Optional[str] = self.load()
        if self._key:
            logger.info("API key loaded from session (%s)", mask_key(self._key))

    @classmethod
    def check(cls, raw: Optional[str]) -> CredentialStatus:
        """Classify a candidate key without storing it."""
        key = (raw or "").strip()
        if not key:
            return CredentialStatus.EMPTY
        if len(key) < cls.MIN_LENGTH:
            return CredentialStatus.INCOMPLETE
        return CredentialStatus.READY

    @classmethod
    def _validated(cls, raw: Optional[str]) -> str:
        key = (raw or "").strip()
        if not key:
            raise CredentialError(ErrorKind.EMPTY_CREDENTIAL)
        if len(key) < cls.MIN_LENGTH:
            raise CredentialError(ErrorKind.TOO_SHORT, f"length {len(key)} < {cls.MIN_LENGTH}")
        return key

    def save(self, raw: Optional[str]) -> str:
        """
        Validate, store and persist a key.

        Args:
            raw: Key as typed by the user; surrounding whitespace is ignored.

        Returns:
            The stored (trimmed) key.

        Raises:
            CredentialError: EMPTY_CREDENTIAL if blank, TOO_SHORT if under MIN_LENGTH.
        """
        key = self._validated(raw)
        self._key = key
        self._storage.set_item(self.STORAGE_KEY, key)
        logger.info("API key saved (%s)", mask_key(key))
        return key

    def load(self) -> Optional[str]:
        """
        Return the key persisted in session storage, if any.

        A stored value that would be rejected by save() is dropped from storage.
        """
        value = self._storage.get_item(self.STORAGE_KEY)
        if not value:
            return None
        try:
            return self._validated(value)
        except CredentialError as e:
            logger.warning("Discarding stored API key: %s", e.message)
            self._storage.remove_item(self.STORAGE_KEY)
            return None

    def current(self) -> Optional[str]:
        return self._key
