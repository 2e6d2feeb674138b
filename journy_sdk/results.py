"""Call results returned by every client operation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .exceptions import UnexpectedResponseError


@dataclass(frozen=True)
class ApiKeyDetails:
    """Permissions granted to the API key (GET /validate)"""
    permissions: List[str]

    @classmethod
    def from_json(cls, body: Dict[str, Any]) -> "ApiKeyDetails":
        try:
            permissions = body["data"]["permissions"]
        except (KeyError, TypeError):
            raise UnexpectedResponseError(
                "Validate API response has no permissions",
                details={"body": body}
            )
        if not isinstance(permissions, list):
            raise UnexpectedResponseError(
                "Validate API permissions must be a list",
                details={"body": body}
            )
        return cls(permissions=list(permissions))


@dataclass(frozen=True)
class TrackingSnippet:
    """Embeddable tracking script for a domain (GET /tracking/snippet)"""
    domain: str
    snippet: str

    @classmethod
    def from_json(cls, body: Dict[str, Any]) -> "TrackingSnippet":
        try:
            data = body["data"]
            return cls(domain=data["domain"], snippet=data["snippet"])
        except (KeyError, TypeError):
            raise UnexpectedResponseError(
                "Tracking snippet API response has no snippet",
                details={"body": body}
            )


OperationResult = Union[ApiKeyDetails, TrackingSnippet]


@dataclass(frozen=True)
class CallResult:
    """
    Outcome of one API call.

    Check succeeded and rate_limited before using payload. errors is
    always a list, empty on success. Rate-limit counters are 0 when the
    server did not report them.
    """
    succeeded: bool
    rate_limited: bool
    remaining_requests: int
    max_requests: int
    errors: List[str] = field(default_factory=list)
    payload: Optional[OperationResult] = None
