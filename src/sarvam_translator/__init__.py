"""
Sarvam Translator - A desktop client for the Sarvam AI translation API.

This package provides:
- Translation between Indian languages via a single HTTPS endpoint
- Session-scoped API key handling
- A bounded, most-recent-first translation history
"""

__version__ = "0.1.0"

from sarvam_translator.core import LanguageCatalog, TranslationRecord, TranslationOutcome
from sarvam_translator.coordinators.translation_orchestrator import TranslationOrchestrator

__all__ = [
    "LanguageCatalog",
    "TranslationRecord",
    "TranslationOutcome",
    "TranslationOrchestrator",
]
