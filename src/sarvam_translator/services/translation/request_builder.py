"""Request Builder - validates user input and produces the provider payload."""

from typing import Any, Optional

from sarvam_translator.core import (
    AUTO_DETECT,
    DEFAULT_SOURCE_LOCALE,
    ErrorKind,
    TranslationRequest,
    ValidationError,
)


class RequestBuilder:
    """
    Turns (text, source, target) into a TranslationRequest and its JSON payload.

    The provider has no auto-detect field, so an `auto` source is sent as
    DEFAULT_SOURCE_LOCALE.
    """

    SPEAKER_GENDER = "Male"
    MODEL = "mayura:v1"

    def __init__(self, max_chars: int = 5000, default_source: str = DEFAULT_SOURCE_LOCALE):
        self.max_chars = max_chars
        self.default_source = default_source

    def validate(self, text: Optional[str], source_code: Optional[str], target_code: Optional[str]) -> TranslationRequest:
        """
        Check the inputs and return an immutable request.

        Raises:
            ValidationError: EMPTY_INPUT, TEXT_TOO_LONG, MISSING_TARGET or SAME_LANGUAGE.
        """
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValidationError(ErrorKind.EMPTY_INPUT)
        if len(cleaned) > self.max_chars:
            raise ValidationError(ErrorKind.TEXT_TOO_LONG, f"{len(cleaned)} > {self.max_chars} characters")
        if not target_code or target_code == AUTO_DETECT:
            raise ValidationError(ErrorKind.MISSING_TARGET, f"target={target_code!r}")
        source = source_code or AUTO_DETECT
        if source == target_code:
            raise ValidationError(ErrorKind.SAME_LANGUAGE, f"{source} -> {target_code}")
        return TranslationRequest(text=cleaned, source_code=source, target_code=target_code)

    def payload(self, request: TranslationRequest) -> dict[str, Any]:
        """Serialize a request into the body the translate endpoint expects."""
        source = self.default_source if request.source_code == AUTO_DETECT else request.source_code
        return {
            "input": request.text,
            "source_language_code": source,
            "target_language_code": request.target_code,
            "speaker_gender": self.SPEAKER_GENDER,
            "model": self.MODEL,
        }

    def build(self, text: Optional[str], source_code: Optional[str], target_code: Optional[str]) -> tuple[TranslationRequest, dict[str, Any]]:
        request = self.validate(text, source_code, target_code)
        return request, self.payload(request)
