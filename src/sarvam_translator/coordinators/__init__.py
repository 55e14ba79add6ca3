"""Coordinators - translation state machine and window wiring."""

from sarvam_translator.coordinators.translation_orchestrator import (
    TranslationOrchestrator,
    TranslatorState,
)
from sarvam_translator.coordinators.translator_coordinator import (
    TranslatorCoordinator,
    char_count_level,
)

__all__ = [
    "TranslationOrchestrator",
    "TranslatorState",
    "TranslatorCoordinator",
    "char_count_level",
]
