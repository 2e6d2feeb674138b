"""
HTTP transport.

The client only needs send(request) -> response. RequestsTransport is the
default implementation on top of a requests.Session; tests and callers
with their own HTTP stack can pass anything with the same send() method.

Transport failures (connection errors, timeouts) are raised by the
transport and are not caught by the client.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol, Union

import requests


@dataclass(frozen=True)
class HttpRequest:
    """Outgoing request, body already JSON-encoded"""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(frozen=True)
class HttpResponse:
    """Incoming response as the client sees it"""
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Union[bytes, str, None] = None


class Transport(Protocol):
    """Anything that can send one request and return its response."""

    def send(self, request: HttpRequest) -> HttpResponse:
        ...


class RequestsTransport:
    """
    Transport backed by requests.Session.

    No retry adapter is mounted: the client issues exactly one request per
    call and leaves retry policy to the caller.

    Raises (from send):
        requests.exceptions.RequestException: On network failure or timeout
    """

    def __init__(self, timeout: float = 5, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or self._create_session()

    @staticmethod
    def _create_session() -> requests.Session:
        session = requests.Session()
        # Content-Type is set per request, only when there is a body
        session.headers.update({"Accept": "application/json"})
        return session

    def send(self, request: HttpRequest) -> HttpResponse:
        response = self.session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body.encode("utf-8") if request.body is not None else None,
            timeout=self.timeout
        )
        return HttpResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content
        )

    def close(self):
        if self.session:
            self.session.close()
