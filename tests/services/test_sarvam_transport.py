"""Unit tests for SarvamTransport (requests is mocked, no network)."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from sarvam_translator.core import TransportError
from sarvam_translator.services import SarvamTransport

PAYLOAD = {
    "input": "Hello",
    "source_language_code": "en-IN",
    "target_language_code": "hi-IN",
    "speaker_gender": "Male",
    "model": "mayura:v1",
}


def make_response(status_code=200, json_data=None, text="", reason="OK"):
    """Build a fake requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def transport():
    return SarvamTransport(endpoint="https://api.example.test/translate", timeout=7)


class TestSarvamTransportRequest:
    """Tests for the outgoing HTTP request."""

    def test_posts_json_with_subscription_key_header(self, transport):
        with patch("requests.post", return_value=make_response(json_data={"translated_text": "x"})) as post:
            transport.send(PAYLOAD, "validkey123")

        post.assert_called_once_with(
            "https://api.example.test/translate",
            json=PAYLOAD,
            headers={
                "Content-Type": "application/json",
                "API-Subscription-Key": "validkey123",
            },
            timeout=7,
        )

    def test_uses_injected_session(self):
        session = MagicMock()
        session.post.return_value = make_response(json_data={"translated_text": "x"})
        transport = SarvamTransport(session=session)

        assert transport.send(PAYLOAD, "validkey123") == {"translated_text": "x"}
        session.post.assert_called_once()


class TestSarvamTransportResponses:
    """Tests for success and failure responses."""

    def test_returns_parsed_json_body(self, transport):
        with patch("requests.post", return_value=make_response(json_data={"translated_text": "नमस्ते"})):
            assert transport.send(PAYLOAD, "validkey123") == {"translated_text": "नमस्ते"}

    def test_returns_plain_text_body(self, transport):
        """A non-JSON 2xx body is handed back as a string."""
        with patch("requests.post", return_value=make_response(text="नमस्ते")):
            assert transport.send(PAYLOAD, "validkey123") == "नमस्ते"

    def test_error_status_with_json_message(self, transport):
        response = make_response(401, json_data={"message": "Invalid subscription key"}, reason="Unauthorized")
        with patch("requests.post", return_value=response):
            with pytest.raises(TransportError) as exc_info:
                transport.send(PAYLOAD, "validkey123")

        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == "Invalid subscription key"

    def test_error_status_with_json_error_field(self, transport):
        response = make_response(429, json_data={"error": "Too many requests"}, reason="Too Many Requests")
        with patch("requests.post", return_value=response):
            with pytest.raises(TransportError) as exc_info:
                transport.send(PAYLOAD, "validkey123")

        assert exc_info.value.status_code == 429
        assert str(exc_info.value) == "Too many requests"

    def test_error_status_with_nested_error_object(self, transport):
        response = make_response(400, json_data={"error": {"message": "Bad language code"}})
        with patch("requests.post", return_value=response):
            with pytest.raises(TransportError) as exc_info:
                transport.send(PAYLOAD, "validkey123")

        assert str(exc_info.value) == "Bad language code"

    def test_error_status_with_plain_text_body(self, transport):
        response = make_response(503, text="upstream down", reason="Service Unavailable")
        with patch("requests.post", return_value=response):
            with pytest.raises(TransportError) as exc_info:
                transport.send(PAYLOAD, "validkey123")

        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "HTTP 503: Service Unavailable"

    @pytest.mark.parametrize("exc", [requests.ConnectionError("refused"), requests.Timeout("slow")])
    def test_connection_failure_has_no_status(self, transport, exc):
        with patch("requests.post", side_effect=exc):
            with pytest.raises(TransportError) as exc_info:
                transport.send(PAYLOAD, "validkey123")

        assert exc_info.value.status_code is None
        assert exc_info.value.connection_failed
        assert "Network Error" in str(exc_info.value)

    def test_http_error_is_not_a_connection_failure(self, transport):
        response = make_response(401, json_data={"message": "Unauthorized"}, reason="Unauthorized")
        with patch("requests.post", return_value=response):
            with pytest.raises(TransportError) as exc_info:
                transport.send(PAYLOAD, "validkey123")

        assert not exc_info.value.connection_failed
