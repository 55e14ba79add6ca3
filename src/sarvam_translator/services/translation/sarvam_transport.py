"""Sarvam Transport - live HTTPS transport for the Sarvam AI translate endpoint."""

import logging
from typing import Any, Optional

import requests

from sarvam_translator.core import TransportError
from sarvam_translator.services.translation.transport import Transport

logger = logging.getLogger(__name__)


class SarvamTransport(Transport):
    """POSTs JSON to the translate endpoint, authenticating with a subscription-key header."""

    AUTH_HEADER = "API-Subscription-Key"

    def __init__(
        self,
        endpoint: str = "https://api.sarvam.ai/translate",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._http = session or requests

    def send(self, payload: dict[str, Any], api_key: str) -> Any:
        headers = {
            "Content-Type": "application/json",
            self.AUTH_HEADER: api_key,
        }
        logger.debug("POST %s (%d chars)", self.endpoint, len(payload.get("input", "")))

        try:
            response = self._http.post(
                self.endpoint, json=payload, headers=headers, timeout=self.timeout
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise TransportError(
                f"Network Error: Unable to connect to translation service ({e})",
                connection_failed=True,
            ) from e

        if not response.ok:
            raise TransportError(self._error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError:
            # Some response modes answer with a bare string
            return response.text

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pull `message` or `error` from a JSON error body, else fall back to the status line."""
        fallback = f"HTTP {response.status_code}: {response.reason}"
        try:
            data = response.json()
        except ValueError:
            return fallback
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
            if isinstance(message, dict):
                message = message.get("message")
            if message:
                return str(message)
        return fallback
