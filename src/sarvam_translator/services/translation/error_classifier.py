"""Error Classifier - maps raw transport/response failures onto the error taxonomy."""

import re

from sarvam_translator.core import ErrorKind, TransportError, TranslatorError

STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.INVALID_CREDENTIAL,
    429: ErrorKind.RATE_LIMITED,
}

# Only consulted when no HTTP status was obtained and the provider was reached.
MESSAGE_PATTERNS: list[tuple[re.Pattern, ErrorKind]] = [
    (re.compile(r"\b401\b|unauthori[sz]ed|authori[sz]ation|invalid api key|forbidden", re.I), ErrorKind.INVALID_CREDENTIAL),
    (re.compile(r"\b429\b|rate.?limit|too many requests|quota", re.I), ErrorKind.RATE_LIMITED),
    (re.compile(r"\b400\b|bad request|malformed|invalid request", re.I), ErrorKind.BAD_REQUEST),
]


def classify_error(error: BaseException) -> TranslatorError:
    """
    Classify a failure raised while talking to the provider.

    Status code wins when present. A connection failure is NETWORK_UNAVAILABLE
    whatever its text says. Otherwise the message is matched against known
    signals, and an unmatched message is NETWORK_UNAVAILABLE too.
    Anything else, including unrecognized response shapes, is SERVICE_UNAVAILABLE.
    """
    detail = str(error) or type(error).__name__

    if isinstance(error, TransportError):
        if error.status_code is not None:
            kind = STATUS_KINDS.get(error.status_code, ErrorKind.SERVICE_UNAVAILABLE)
            return TranslatorError(kind, f"HTTP {error.status_code}: {detail}")
        if error.connection_failed:
            return TranslatorError(ErrorKind.NETWORK_UNAVAILABLE, detail)

        for pattern, kind in MESSAGE_PATTERNS:
            if pattern.search(detail):
                return TranslatorError(kind, detail)
        return TranslatorError(ErrorKind.NETWORK_UNAVAILABLE, detail)

    if isinstance(error, TranslatorError):
        return TranslatorError(ErrorKind.SERVICE_UNAVAILABLE, error.detail or detail)

    return TranslatorError(ErrorKind.SERVICE_UNAVAILABLE, f"{type(error).__name__}: {detail}")
