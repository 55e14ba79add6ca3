"""Settings Manager - Handles API key, endpoint and transport configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from a .env file in the project root, falling back to
    built-in defaults when a variable is missing or malformed.
    """

    DEFAULT_ENDPOINT = "https://api.sarvam.ai/translate"
    DEFAULT_MAX_INPUT_CHARS = 5000
    DEFAULT_REQUEST_TIMEOUT = 30.0
    TRANSPORTS = ("live", "mock")

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_api_key(self) -> Optional[str]:
        """Get the Sarvam API key from environment."""
        key = os.getenv("SARVAM_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_endpoint(self) -> str:
        endpoint = os.getenv("SARVAM_API_ENDPOINT", "").strip()
        return endpoint or self.DEFAULT_ENDPOINT

    def get_max_input_chars(self) -> int:
        """Maximum accepted input length; invalid values fall back to the default."""
        value = self._get_number("SARVAM_MAX_INPUT_CHARS", int)
        if value is None or value <= 0:
            return self.DEFAULT_MAX_INPUT_CHARS
        return value

    def get_request_timeout(self) -> float:
        value = self._get_number("SARVAM_REQUEST_TIMEOUT", float)
        if value is None or value <= 0:
            return self.DEFAULT_REQUEST_TIMEOUT
        return value

    def get_transport_name(self) -> str:
        """Either "live" or "mock"."""
        name = os.getenv("SARVAM_TRANSPORT", "live").strip().lower()
        if name not in self.TRANSPORTS:
            logger.warning("Unknown SARVAM_TRANSPORT %r, using live transport", name)
            return "live"
        return name

    def get_log_level(self) -> str:
        return os.getenv("SARVAM_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _get_number(self, name: str, cast):
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return None
        try:
            return cast(raw.strip())
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", name, raw)
            return None
