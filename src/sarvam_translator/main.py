"""Main entry point for the Sarvam translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from sarvam_translator.coordinators import TranslationOrchestrator, TranslatorCoordinator
from sarvam_translator.core import CredentialError
from sarvam_translator.services import (
    CredentialStore,
    HistoryCache,
    InMemorySessionStorage,
    MockTransport,
    RequestBuilder,
    SarvamTransport,
    SettingsManager,
    Transport,
)
from sarvam_translator.ui import MainWindow

logger = logging.getLogger(__name__)


def build_transport(settings: SettingsManager) -> Transport:
    if settings.get_transport_name() == "mock":
        return MockTransport()
    return SarvamTransport(
        endpoint=settings.get_endpoint(),
        timeout=settings.get_request_timeout(),
    )


def build_orchestrator(settings: SettingsManager) -> TranslationOrchestrator:
    """Wire the Qt-free core from settings."""
    credentials = CredentialStore(InMemorySessionStorage())
    env_key = settings.get_api_key()
    if env_key:
        try:
            credentials.save(env_key)
        except CredentialError as e:
            logger.warning("Ignoring SARVAM_API_KEY from environment: %s", e.message)

    return TranslationOrchestrator(
        credentials=credentials,
        transport=build_transport(settings),
        history=HistoryCache(),
        request_builder=RequestBuilder(max_chars=settings.get_max_input_chars()),
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Settings and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Sarvam Translator")

    # 3. Core
    orchestrator = build_orchestrator(settings)

    # 4. UI and coordinator (Dependency Injection)
    main_window = MainWindow()
    coordinator = TranslatorCoordinator(main_window=main_window, orchestrator=orchestrator)

    # 5. Signal Wiring (Connect UI signals to Coordinator slots)
    main_window.save_api_key_clicked.connect(coordinator.on_save_api_key)
    main_window.api_key_edited.connect(coordinator.on_api_key_edited)
    main_window.translate_clicked.connect(coordinator.request_translation)
    main_window.swap_clicked.connect(coordinator.on_swap_languages)
    main_window.input_changed.connect(coordinator.on_input_changed)
    main_window.languages_changed.connect(coordinator.refresh_actions)
    main_window.clear_input_clicked.connect(coordinator.on_clear_input)
    main_window.clear_output_clicked.connect(coordinator.on_clear_output)
    main_window.copy_clicked.connect(coordinator.on_copy_translation)
    main_window.history_copy_requested.connect(coordinator.on_copy_history_item)
    main_window.clear_history_clicked.connect(coordinator.on_clear_history)

    coordinator.initialize()

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
