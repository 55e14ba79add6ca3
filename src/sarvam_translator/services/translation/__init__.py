"""Translation pipeline - transports, request building, response normalization, error classification."""

from sarvam_translator.services.translation.transport import Transport
from sarvam_translator.services.translation.sarvam_transport import SarvamTransport
from sarvam_translator.services.translation.mock_transport import MockTransport
from sarvam_translator.services.translation.request_builder import RequestBuilder
from sarvam_translator.services.translation.response_normalizer import ResponseNormalizer
from sarvam_translator.services.translation.error_classifier import classify_error

__all__ = [
    "Transport",
    "SarvamTransport",
    "MockTransport",
    "RequestBuilder",
    "ResponseNormalizer",
    "classify_error",
]
