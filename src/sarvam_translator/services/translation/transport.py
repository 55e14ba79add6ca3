"""Transport - abstract capability that delivers a payload to the provider."""

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """
    Sends one request to the translation provider.

    Implementations (SarvamTransport, MockTransport) make exactly one attempt
    per call. No retries.
    """

    @abstractmethod
    def send(self, payload: dict[str, Any], api_key: str) -> Any:
        """
        Deliver a payload.

        Args:
            payload: JSON-serializable request body.
            api_key: Credential sent in the authentication header.

        Returns:
            The parsed response body (usually a dict, possibly a plain string).

        Raises:
            TransportError: On a non-2xx status or a connection-level failure.
        """
        pass
