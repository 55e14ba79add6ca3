"""Mock Transport - canned translations with simulated latency, for demos and offline runs."""

import random
import time
from typing import Any, Callable, Optional

from sarvam_translator.core import LanguageCatalog
from sarvam_translator.services.translation.transport import Transport


class MockTransport(Transport):
    """
    Answers without touching the network.

    Known phrases get real translations; anything else is echoed back with a
    `[Translated to <Language>]` prefix.
    """

    CANNED_TRANSLATIONS: dict[str, dict[str, str]] = {
        "Hello, how are you?": {
            "hi-IN": "नमस्ते, आप कैसे हैं?",
            "ta-IN": "வணக்கம், நீங்கள் எப்படி இருக்கிறீர்கள்?",
            "te-IN": "నమస్కారం, మీరు ఎలా ఉన్నారు?",
            "bn-IN": "হ্যালো, আপনি কেমন আছেন?",
        },
        "Good morning": {
            "hi-IN": "शुभ प्रभात",
            "ta-IN": "காலை வணக்கம்",
            "te-IN": "శుభోదయం",
            "bn-IN": "সুপ্রভাত",
        },
    }

    def __init__(
        self,
        latency: Optional[Callable[[], float]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            latency: Returns the delay in seconds for one call. Defaults to 1-3 s.
            sleep: Blocking sleep function, swappable in tests.
        """
        self._latency = latency or (lambda: 1.0 + random.random() * 2.0)
        self._sleep = sleep
        self.calls: list[dict[str, Any]] = []

    def send(self, payload: dict[str, Any], api_key: str) -> Any:
        self.calls.append(payload)
        self._sleep(self._latency())

        text = payload.get("input", "")
        target = payload.get("target_language_code", "")
        canned = self.CANNED_TRANSLATIONS.get(text, {})
        if target in canned:
            return {"translated_text": canned[target]}
        return {
            "translated_text": f"[Translated to {LanguageCatalog.display_name(target)}] {text}"
        }
