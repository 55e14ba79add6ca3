"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from sarvam_translator.services import SettingsManager

SETTINGS_VARS = (
    "SARVAM_API_KEY",
    "SARVAM_API_ENDPOINT",
    "SARVAM_MAX_INPUT_CHARS",
    "SARVAM_REQUEST_TIMEOUT",
    "SARVAM_TRANSPORT",
    "SARVAM_LOG_LEVEL",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove SARVAM_* variables from the environment before and after each test."""
    saved = {name: os.environ.pop(name, None) for name in SETTINGS_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def make_settings(temp_env_dir, clean_env):
    """Write a .env file and build a SettingsManager on it."""
    def _make(content: str = "") -> SettingsManager:
        (temp_env_dir / ".env").write_text(content)
        return SettingsManager(project_root=temp_env_dir)
    return _make


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, make_settings):
        """API key should be None when .env has empty value."""
        assert make_settings("SARVAM_API_KEY=\n").get_api_key() is None

    def test_get_api_key_returns_value_from_env_file(self, make_settings):
        """API key should be read from .env file."""
        settings = make_settings("SARVAM_API_KEY=test-key-123\n")
        assert settings.get_api_key() == "test-key-123"

    def test_get_api_key_strips_whitespace(self, make_settings):
        """API key should strip leading/trailing whitespace."""
        os.environ["SARVAM_API_KEY"] = "  test-key  "
        assert make_settings().get_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, make_settings):
        os.environ["SARVAM_API_KEY"] = "   "
        assert make_settings().get_api_key() is None

    def test_reload_env_updates_api_key(self, make_settings, temp_env_dir):
        """reload_env should pick up changes to .env file."""
        settings = make_settings("SARVAM_API_KEY=old-key-123\n")
        assert settings.get_api_key() == "old-key-123"

        (temp_env_dir / ".env").write_text("SARVAM_API_KEY=new-key-456\n")
        settings.reload_env()
        assert settings.get_api_key() == "new-key-456"

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_api_key() is None


class TestSettingsManagerDefaults:
    """Tests for defaults and fallbacks of the remaining settings."""

    def test_defaults(self, make_settings):
        settings = make_settings()
        assert settings.get_endpoint() == "https://api.sarvam.ai/translate"
        assert settings.get_max_input_chars() == 5000
        assert settings.get_request_timeout() == 30.0
        assert settings.get_transport_name() == "live"
        assert settings.get_log_level() == "INFO"

    def test_values_from_env_file(self, make_settings):
        settings = make_settings(
            "SARVAM_API_ENDPOINT=http://localhost:8080/translate\n"
            "SARVAM_MAX_INPUT_CHARS=1000\n"
            "SARVAM_REQUEST_TIMEOUT=5.5\n"
            "SARVAM_TRANSPORT=Mock\n"
            "SARVAM_LOG_LEVEL=debug\n"
        )
        assert settings.get_endpoint() == "http://localhost:8080/translate"
        assert settings.get_max_input_chars() == 1000
        assert settings.get_request_timeout() == 5.5
        assert settings.get_transport_name() == "mock"
        assert settings.get_log_level() == "DEBUG"

    @pytest.mark.parametrize("value", ["abc", "0", "-10"])
    def test_invalid_max_input_chars_falls_back(self, make_settings, value):
        """Non-numeric or non-positive limits should use the default."""
        settings = make_settings(f"SARVAM_MAX_INPUT_CHARS={value}\n")
        assert settings.get_max_input_chars() == 5000

    def test_unknown_transport_falls_back_to_live(self, make_settings):
        assert make_settings("SARVAM_TRANSPORT=carrier-pigeon\n").get_transport_name() == "live"
