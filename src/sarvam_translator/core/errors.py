"""Error taxonomy for translation, credential and language-swap failures."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Every failure the translator can surface to the user."""

    EMPTY_INPUT = "empty_input"
    TEXT_TOO_LONG = "text_too_long"
    MISSING_CREDENTIAL = "missing_credential"
    MISSING_TARGET = "missing_target"
    SAME_LANGUAGE = "same_language"
    EMPTY_CREDENTIAL = "empty_credential"
    TOO_SHORT = "too_short"
    TRANSLATION_IN_PROGRESS = "translation_in_progress"
    AUTO_DETECT_SWAP = "auto_detect_swap"
    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    BAD_REQUEST = "bad_request"
    NETWORK_UNAVAILABLE = "network_unavailable"
    UNRECOGNIZED_RESPONSE_SHAPE = "unrecognized_response_shape"
    SERVICE_UNAVAILABLE = "service_unavailable"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "Please enter some text to translate.",
    ErrorKind.TEXT_TOO_LONG: "Text is too long. Please shorten it and try again.",
    ErrorKind.MISSING_CREDENTIAL: "Please save your Sarvam AI API key first.",
    ErrorKind.MISSING_TARGET: "Please select a target language.",
    ErrorKind.SAME_LANGUAGE: "Source and target languages cannot be the same.",
    ErrorKind.EMPTY_CREDENTIAL: "Please enter an API key.",
    ErrorKind.TOO_SHORT: "API key seems too short. Please check and try again.",
    ErrorKind.TRANSLATION_IN_PROGRESS: "A translation is already in progress.",
    ErrorKind.AUTO_DETECT_SWAP: "Cannot swap languages when using auto-detect.",
    ErrorKind.INVALID_CREDENTIAL: "Invalid API key. Please check your Sarvam AI API key.",
    ErrorKind.RATE_LIMITED: "Rate limit exceeded. Please try again in a moment.",
    ErrorKind.BAD_REQUEST: "Invalid request. Please check your input text and selected languages.",
    ErrorKind.NETWORK_UNAVAILABLE: "Network error. Please check your internet connection.",
    ErrorKind.UNRECOGNIZED_RESPONSE_SHAPE: "Invalid response format from translation service.",
    ErrorKind.SERVICE_UNAVAILABLE: "Translation service is currently unavailable.",
}


class TranslatorError(Exception):
    """
    Base error carrying a taxonomy kind.

    `message` is what the user sees; `detail` keeps the original diagnostic
    text for logs.
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.message = ERROR_MESSAGES[kind]
        self.detail = detail
        super().__init__(self.message)


class ValidationError(TranslatorError):
    """Input rejected locally before any network call."""


class CredentialError(TranslatorError):
    """API key rejected by CredentialStore.save."""


class SwapError(TranslatorError):
    """Languages cannot be swapped."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorKind.AUTO_DETECT_SWAP, detail)


class TransportError(Exception):
    """
    Raw failure from a transport.

    status_code is None when no HTTP response was obtained. connection_failed
    marks failures where the provider was never reached at all.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        connection_failed: bool = False,
    ):
        self.status_code = status_code
        self.connection_failed = connection_failed
        super().__init__(message)


class UnrecognizedResponseShape(TranslatorError):
    """The provider answered with a body none of the known extractors accept."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorKind.UNRECOGNIZED_RESPONSE_SHAPE, detail)
