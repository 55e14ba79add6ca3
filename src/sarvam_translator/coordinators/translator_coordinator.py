"""Translator Coordinator - Connects the main window to the translation orchestrator."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from sarvam_translator.coordinators.translation_orchestrator import TranslationOrchestrator
from sarvam_translator.core import (
    ERROR_MESSAGES,
    CredentialError,
    ErrorKind,
    SwapError,
    TranslationOutcome,
)
from sarvam_translator.services.api_workers import TranslationWorker
from sarvam_translator.services.credential_store import CredentialStatus
from sarvam_translator.ui import MainWindow

logger = logging.getLogger(__name__)


def char_count_level(count: int, max_chars: int) -> str:
    """Severity of the input counter: warning above 80% of max_chars, error above 90%."""
    if count > max_chars * 0.9:
        return "error"
    if count > max_chars * 0.8:
        return "warning"
    return "normal"


class TranslatorCoordinator(QObject):
    """
    Orchestrates the window's translate/credential/history workflow.

    Responsibilities:
    - Keep button and counter state in sync with the orchestrator.
    - Run translate() on the thread pool, one request at a time.
    - Render results, errors and history snapshots.
    """

    translation_started = Signal()
    translation_completed = Signal(str, float)
    translation_failed = Signal(str)
    history_changed = Signal()

    CREDENTIAL_STATUS_MESSAGES = {
        CredentialStatus.READY: ("Ready to save", "info"),
        CredentialStatus.INCOMPLETE: ("API key seems incomplete", "warning"),
    }

    def __init__(
        self,
        main_window: MainWindow,
        orchestrator: TranslationOrchestrator,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()
        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if orchestrator is None:
            raise ValueError("TranslationOrchestrator must not be None")

        self.main_window = main_window
        self.orchestrator = orchestrator
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self._busy = False
        # Keep a reference so the worker's signals outlive the call to start()
        self._active_worker: Optional[TranslationWorker] = None

    @property
    def busy(self) -> bool:
        return self._busy

    def initialize(self) -> None:
        """Push initial state into the window (stored key, counters, history)."""
        key = self.orchestrator.credentials.current()
        if key:
            self.main_window.set_api_key_text(key)
            self.main_window.show_api_key_status("API key loaded", "success")
        self.on_input_changed()
        self.main_window.render_history(self.orchestrator.history.list())

    def refresh_actions(self) -> None:
        window = self.main_window
        window.set_translate_enabled(
            not self._busy
            and self.orchestrator.can_translate(
                window.get_input_text(), window.source_code(), window.target_code()
            )
        )
        window.set_output_actions_enabled(self.orchestrator.current_translation is not None)

    # Credential

    def on_api_key_edited(self, raw: str) -> None:
        status = self.orchestrator.credentials.check(raw)
        if status == CredentialStatus.EMPTY:
            self.main_window.show_api_key_status("", "info")
            return
        message, level = self.CREDENTIAL_STATUS_MESSAGES[status]
        self.main_window.show_api_key_status(message, level)

    def on_save_api_key(self, raw: str) -> None:
        try:
            self.orchestrator.save_credential(raw)
        except CredentialError as e:
            level = "warning" if e.kind == ErrorKind.TOO_SHORT else "danger"
            self.main_window.show_alert(e.message, level)
            return
        self.main_window.show_api_key_status("API key saved successfully", "success")
        self.main_window.show_alert("API key saved successfully!", "success")
        self.refresh_actions()

    # Input

    def on_input_changed(self) -> None:
        count = len(self.main_window.get_input_text())
        self.main_window.update_char_count(count, char_count_level(count, self.orchestrator.max_chars))
        self.refresh_actions()

    def on_clear_input(self) -> None:
        self.main_window.set_input_text("")
        self.on_input_changed()
        self.main_window.focus_input()

    def on_swap_languages(self) -> None:
        window = self.main_window
        try:
            result = self.orchestrator.swap_languages(
                window.source_code(), window.target_code(), window.get_input_text()
            )
        except SwapError as e:
            window.show_alert(e.message, "warning")
            return

        window.set_languages(result.new_source, result.new_target)
        if result.input_text is not None:
            window.set_input_text(result.input_text)
            window.show_translation(self.orchestrator.current_translation or "")
        self.refresh_actions()

    # Translation

    def request_translation(self) -> None:
        """Start a translation of the current input on the thread pool."""
        if self._busy:
            self.main_window.show_alert(ERROR_MESSAGES[ErrorKind.TRANSLATION_IN_PROGRESS], "warning")
            return

        window = self.main_window
        self._busy = True
        window.show_translating(True)
        self.translation_started.emit()

        worker = TranslationWorker(
            orchestrator=self.orchestrator,
            text=window.get_input_text(),
            source_code=window.source_code(),
            target_code=window.target_code(),
        )
        worker.signals.translation_result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_translation_error)
        self._active_worker = worker

        self.thread_pool.start(worker)

    @Slot(object)
    def _handle_translation_result(self, outcome: TranslationOutcome) -> None:
        window = self.main_window
        self._finish()

        if outcome.is_error:
            window.show_translation_error(outcome.error.message)
            window.show_alert(f"Translation failed: {outcome.error.message}", "danger")
            self.translation_failed.emit(outcome.error.message)
            return

        window.show_translation(outcome.text)
        window.set_translation_time(outcome.duration)
        window.render_history(self.orchestrator.history.list())
        window.show_alert("Translation completed successfully!", "success")
        self.translation_completed.emit(outcome.text, outcome.duration)
        self.history_changed.emit()

    @Slot(str)
    def _handle_translation_error(self, error: str) -> None:
        logger.error(error)
        self._finish()
        message = ERROR_MESSAGES[ErrorKind.SERVICE_UNAVAILABLE]
        self.main_window.show_translation_error(message)
        self.translation_failed.emit(message)

    def _finish(self) -> None:
        self._busy = False
        self._active_worker = None
        self.main_window.show_translating(False)
        self.refresh_actions()

    # Output & history

    def on_clear_output(self) -> None:
        self.orchestrator.clear_output()
        self.main_window.clear_output_display()
        self.refresh_actions()

    def on_copy_translation(self) -> None:
        text = self.orchestrator.current_translation
        if not text:
            self.main_window.show_alert("No translation to copy", "warning")
            return
        self._copy(text)

    def on_copy_history_item(self, text: str) -> None:
        self._copy(text)

    def on_clear_history(self) -> None:
        self.orchestrator.history.clear()
        self.main_window.render_history([])
        self.history_changed.emit()

    def _copy(self, text: str) -> None:
        if self.main_window.copy_to_clipboard(text):
            self.main_window.show_alert("Translation copied to clipboard!", "success")
        else:
            self.main_window.show_alert("Failed to copy to clipboard", "danger")
