"""Response Normalizer - pulls the translated text out of any known response shape."""

from typing import Any, Callable, Optional

from sarvam_translator.core import UnrecognizedResponseShape


def _translated_text_field(raw: Any) -> Optional[str]:
    if isinstance(raw, dict):
        return _non_empty(raw.get("translated_text"))
    return None


def _chat_completion(raw: Any) -> Optional[str]:
    if not isinstance(raw, dict):
        return None
    choices = raw.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None
    return _non_empty(message.get("content"))


def _translation_field(raw: Any) -> Optional[str]:
    if isinstance(raw, dict):
        return _non_empty(raw.get("translation"))
    return None


def _plain_string(raw: Any) -> Optional[str]:
    return _non_empty(raw)


def _non_empty(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class ResponseNormalizer:
    """
    Tries each extractor in order and returns the first match.

    Different backend versions answer with different shapes; anything not
    covered here is rejected rather than guessed at.
    """

    EXTRACTORS: list[tuple[str, Callable[[Any], Optional[str]]]] = [
        ("translated_text", _translated_text_field),
        ("chat_completion", _chat_completion),
        ("translation", _translation_field),
        ("plain_string", _plain_string),
    ]

    def extract(self, raw: Any) -> str:
        """
        Raises:
            UnrecognizedResponseShape: If no extractor matches.
        """
        for _name, extractor in self.EXTRACTORS:
            text = extractor(raw)
            if text is not None:
                return text
        raise UnrecognizedResponseShape(f"Unrecognized response: {raw!r:.200}")
