"""Core domain values - languages, translation entities and the error taxonomy."""

from sarvam_translator.core.errors import (
    ERROR_MESSAGES,
    CredentialError,
    ErrorKind,
    SwapError,
    TransportError,
    TranslatorError,
    UnrecognizedResponseShape,
    ValidationError,
)
from sarvam_translator.core.languages import AUTO_DETECT, DEFAULT_SOURCE_LOCALE, LanguageCatalog
from sarvam_translator.core.translation_entities import (
    SwapResult,
    TranslationOutcome,
    TranslationRecord,
    TranslationRequest,
)

__all__ = [
    "AUTO_DETECT",
    "DEFAULT_SOURCE_LOCALE",
    "LanguageCatalog",
    "ErrorKind",
    "ERROR_MESSAGES",
    "TranslatorError",
    "ValidationError",
    "CredentialError",
    "SwapError",
    "TransportError",
    "UnrecognizedResponseShape",
    "TranslationRequest",
    "TranslationRecord",
    "TranslationOutcome",
    "SwapResult",
]
