"""Services layer - settings, session state and the translation pipeline."""

from sarvam_translator.services.settings_manager import SettingsManager
from sarvam_translator.services.session_storage import SessionStorage, InMemorySessionStorage
from sarvam_translator.services.credential_store import CredentialStore, CredentialStatus, mask_key
from sarvam_translator.services.history_cache import HistoryCache

# Translation pipeline
from sarvam_translator.services.translation import (
    Transport,
    SarvamTransport,
    MockTransport,
    RequestBuilder,
    ResponseNormalizer,
    classify_error,
)

__all__ = [
    "SettingsManager",
    "SessionStorage",
    "InMemorySessionStorage",
    "CredentialStore",
    "CredentialStatus",
    "mask_key",
    "HistoryCache",
    "Transport",
    "SarvamTransport",
    "MockTransport",
    "RequestBuilder",
    "ResponseNormalizer",
    "classify_error",
]
