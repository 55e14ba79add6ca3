"""Async worker for non-blocking translation calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    error = Signal(str)
    translation_result = Signal(object)  # TranslationOutcome


class TranslationWorker(QRunnable):
    """
    Runs one TranslationOrchestrator.translate() call in the Qt thread pool.

    The orchestrator never raises for translation failures; the error signal
    only fires for bugs that escape it.
    """

    def __init__(self, orchestrator, text: str, source_code: str, target_code: str):
        super().__init__()
        self.orchestrator = orchestrator
        self.text = text
        self.source_code = source_code
        self.target_code = target_code
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation in a background thread."""
        try:
            outcome = self.orchestrator.translate(
                self.text,
                self.source_code,
                self.target_code,
            )
            self.signals.translation_result.emit(outcome)
        except Exception as e:
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
