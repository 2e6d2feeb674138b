"""
Pytest configuration and shared fixtures for journy.io SDK tests.

Provides:
- Mock transport and client fixtures
- Canned API responses
- Configuration
"""

import json
import pytest
from unittest.mock import MagicMock
from typing import Any, Dict, Optional

from journy_sdk import HttpResponse, JournyClient

STORED_BODY = json.dumps({
    "message": "The data is correctly stored.",
    "meta": {"status": 201, "requestId": "01ETG3HQ4JY4HNNZ84FBJM3CSC"}
})


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up mock environment variables."""
    monkeypatch.setenv("JOURNY_API_KEY", "test_api_key_12345")
    monkeypatch.setenv("JOURNY_ROOT_URL", "https://api.journy.test")
    monkeypatch.setenv("JOURNY_TIMEOUT", "10")
    monkeypatch.setenv("JOURNY_DEBUG", "false")


@pytest.fixture
def mock_transport():
    """Transport whose send() returns a 201 'stored' response by default."""
    transport = MagicMock()
    transport.send.return_value = HttpResponse(201, {}, STORED_BODY)
    return transport


@pytest.fixture
def journy_client(mock_transport):
    """Client wired to the mock transport."""
    return JournyClient(mock_transport, "test_api_key_12345", version="1.0.0")


@pytest.fixture
def respond(mock_transport):
    """Set the next response returned by the mock transport."""
    def _respond(status: int, body: Any = None, headers: Optional[Dict[str, str]] = None):
        if body is not None and not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        mock_transport.send.return_value = HttpResponse(status, headers or {}, body)
    return _respond


@pytest.fixture
def last_request(mock_transport):
    """Return the last HttpRequest handed to the transport."""
    def _last_request():
        assert mock_transport.send.called, "no request was sent"
        return mock_transport.send.call_args[0][0]
    return _last_request


@pytest.fixture
def sent_payload(last_request):
    """Return the decoded JSON body of the last request."""
    def _sent_payload():
        return json.loads(last_request().body)
    return _sent_payload


@pytest.fixture
def api_key_details_response() -> Dict[str, Any]:
    return {
        "data": {"permissions": ["TrackData", "GetTrackingSnippet"]},
        "meta": {"status": 200, "requestId": "01ETG0K4WP1X375JWK87X1RQE1"}
    }


@pytest.fixture
def tracking_snippet_response() -> Dict[str, Any]:
    return {
        "data": {"domain": "python-sdk.com", "snippet": "javascript"},
        "meta": {"status": 200, "requestId": "01ETG10BGDBA23FV9PE4Z1X5YF"}
    }


@pytest.fixture
def unauthorized_response() -> Dict[str, Any]:
    return {
        "message": (
            "You are not authorized to 'GET' the path '/tracking/snippet' with this API Key. "
            "You need the permission: GetTrackingSnippet."
        ),
        "meta": {"status": 401, "requestId": "01ETJQH0D1GTPJ75BFGTZX2HR1"}
    }
