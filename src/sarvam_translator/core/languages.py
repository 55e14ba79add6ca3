"""Language catalog - supported language codes and their display names."""

from typing import Optional

AUTO_DETECT = "auto"

DEFAULT_SOURCE_LOCALE = "en-IN"


class LanguageCatalog:
    """
    Static mapping of language codes to display names.

    The `auto` sentinel is only ever valid as a source language.
    """

    LANGUAGES: dict[str, str] = {
        "en-IN": "English",
        "hi-IN": "Hindi",
        "bn-IN": "Bengali",
        "ta-IN": "Tamil",
        "te-IN": "Telugu",
        "mr-IN": "Marathi",
        "gu-IN": "Gujarati",
        "kn-IN": "Kannada",
        "ml-IN": "Malayalam",
        "pa-IN": "Punjabi",
        "od-IN": "Odia",
        "as-IN": "Assamese",
        "ur-IN": "Urdu",
        "sa-IN": "Sanskrit",
        "ne-IN": "Nepali",
        "ks-IN": "Kashmiri",
        "kok-IN": "Konkani",
        "mni-IN": "Manipuri",
        "brx-IN": "Bodo",
        "doi-IN": "Dogri",
        "mai-IN": "Maithili",
        "sat-IN": "Santali",
        "sd-IN": "Sindhi",
    }

    AUTO_DETECT_NAME = "Auto-detect"

    @classmethod
    def display_name(cls, code: Optional[str]) -> str:
        """Return the human-readable name for a code, or the code itself if unknown."""
        if code == AUTO_DETECT:
            return cls.AUTO_DETECT_NAME
        if not code:
            return ""
        return cls.LANGUAGES.get(code, code)

    @classmethod
    def source_languages(cls) -> list[tuple[str, str]]:
        """(code, name) pairs selectable as a source, auto-detect first."""
        return [(AUTO_DETECT, cls.AUTO_DETECT_NAME)] + list(cls.LANGUAGES.items())

    @classmethod
    def target_languages(cls) -> list[tuple[str, str]]:
        """(code, name) pairs selectable as a target. Never includes auto-detect."""
        return list(cls.LANGUAGES.items())
