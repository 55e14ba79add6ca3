"""Translation entities - immutable request and history record values."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import uuid

from sarvam_translator.core.errors import TranslatorError


@dataclass(frozen=True)
class TranslationRequest:
    """A validated request, as the user asked for it (source may still be `auto`)."""

    text: str
    source_code: str
    target_code: str


@dataclass(frozen=True)
class TranslationRecord:
    """One completed translation. Never mutated once created."""

    original: str
    translated: str
    source_code: str
    target_code: str
    duration: float
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class TranslationOutcome:
    """Result of TranslationOrchestrator.translate()."""

    text: str = ""
    duration: Optional[float] = None
    record: Optional[TranslationRecord] = None
    error: Optional[TranslatorError] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


@dataclass(frozen=True)
class SwapResult:
    """New language pair after a swap, plus the text to put back in the input box."""

    new_source: str
    new_target: str
    input_text: Optional[str] = None
