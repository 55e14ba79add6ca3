"""Translation Orchestrator - validate, send, classify, record."""

import logging
import threading
import time
from enum import Enum
from typing import Callable, Optional

from sarvam_translator.core import (
    AUTO_DETECT,
    ErrorKind,
    SwapError,
    SwapResult,
    TranslationOutcome,
    TranslationRecord,
    TranslationRequest,
    TranslatorError,
    ValidationError,
)
from sarvam_translator.services.credential_store import CredentialStore
from sarvam_translator.services.history_cache import HistoryCache
from sarvam_translator.services.translation import (
    RequestBuilder,
    ResponseNormalizer,
    Transport,
    classify_error,
)

logger = logging.getLogger(__name__)


class TranslatorState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TranslationOrchestrator:
    """
    Coordinates one translation at a time.

    Flow: Idle -> Validating -> InFlight -> Succeeded | Failed -> Idle.
    Validation failures never reach the transport. Transport and response
    failures are always classified before being returned. A call made while
    another is in flight is rejected with TRANSLATION_IN_PROGRESS.

    Owns the current translation and the history; the credential store is
    shared and only referenced.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        transport: Transport,
        history: Optional[HistoryCache] = None,
        request_builder: Optional[RequestBuilder] = None,
        normalizer: Optional[ResponseNormalizer] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.credentials = credentials
        self.transport = transport
        self.history = history if history is not None else HistoryCache()
        self.request_builder = request_builder or RequestBuilder()
        self.normalizer = normalizer or ResponseNormalizer()
        self._clock = clock

        self._state = TranslatorState.IDLE
        self._state_lock = threading.Lock()
        self._current_translation: Optional[str] = None

    @property
    def state(self) -> TranslatorState:
        return self._state

    @property
    def current_translation(self) -> Optional[str]:
        return self._current_translation

    @property
    def max_chars(self) -> int:
        return self.request_builder.max_chars

    def save_credential(self, raw: Optional[str]) -> str:
        """Store a new API key. Raises CredentialError."""
        return self.credentials.save(raw)

    def can_translate(self, text: Optional[str], source_code: Optional[str], target_code: Optional[str]) -> bool:
        """Whether the translate action should be enabled."""
        return bool(
            self.credentials.current()
            and (text or "").strip()
            and source_code
            and target_code
            and self._state == TranslatorState.IDLE
        )

    def translate(self, text: Optional[str], source_code: Optional[str], target_code: Optional[str]) -> TranslationOutcome:
        """
        Translate text from source_code to target_code.

        Returns:
            TranslationOutcome with the translated text and duration (seconds,
            one decimal place), or with a classified error.
        """
        with self._state_lock:
            if self._state != TranslatorState.IDLE:
                logger.warning("Rejected translate() while %s", self._state.value)
                return TranslationOutcome(error=TranslatorError(ErrorKind.TRANSLATION_IN_PROGRESS))
            self._set_state(TranslatorState.VALIDATING)

        try:
            try:
                request = self._validate(text, source_code, target_code)
            except ValidationError as e:
                logger.info("Translation rejected: %s (%s)", e.kind.value, e.detail or "-")
                self._set_state(TranslatorState.FAILED)
                return TranslationOutcome(error=e)

            return self._send(request)
        finally:
            self._set_state(TranslatorState.IDLE)

    def swap_languages(self, source_code: str, target_code: str, input_text: Optional[str] = None) -> SwapResult:
        """
        Swap source and target.

        When a current translation exists and input_text is given, the texts
        are swapped as well: the translation becomes the new input and the
        old input becomes the current translation.

        Raises:
            SwapError: If the source is auto-detect.
        """
        if source_code == AUTO_DETECT:
            raise SwapError(f"{source_code} -> {target_code}")

        new_input = None
        if self._current_translation is not None and input_text is not None:
            new_input = self._current_translation
            self._current_translation = input_text

        return SwapResult(new_source=target_code, new_target=source_code, input_text=new_input)

    def clear_output(self) -> None:
        self._current_translation = None

    def _validate(self, text, source_code, target_code) -> TranslationRequest:
        if not (text or "").strip():
            raise ValidationError(ErrorKind.EMPTY_INPUT)
        if not self.credentials.current():
            raise ValidationError(ErrorKind.MISSING_CREDENTIAL)
        return self.request_builder.validate(text, source_code, target_code)

    def _send(self, request: TranslationRequest) -> TranslationOutcome:
        self._set_state(TranslatorState.IN_FLIGHT)
        start = self._clock()

        try:
            payload = self.request_builder.payload(request)
            raw = self.transport.send(payload, self.credentials.current())
            translated = self.normalizer.extract(raw)
        except Exception as e:
            error = classify_error(e)
            logger.warning(
                "Translation %s -> %s failed: %s (%s)",
                request.source_code,
                request.target_code,
                error.kind.value,
                error.detail,
            )
            self._set_state(TranslatorState.FAILED)
            return TranslationOutcome(error=error)

        duration = round(self._clock() - start, 1)
        record = TranslationRecord(
            original=request.text,
            translated=translated,
            source_code=request.source_code,
            target_code=request.target_code,
            duration=duration,
        )
        self._current_translation = translated
        self.history.push(record)
        self._set_state(TranslatorState.SUCCEEDED)
        logger.info(
            "Translated %d chars %s -> %s in %.1fs",
            len(request.text),
            request.source_code,
            request.target_code,
            duration,
        )
        return TranslationOutcome(text=translated, duration=duration, record=record)

    def _set_state(self, state: TranslatorState) -> None:
        if state != self._state:
            logger.debug("State %s -> %s", self._state.value, state.value)
        self._state = state
