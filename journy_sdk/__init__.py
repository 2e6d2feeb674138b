"""
journy.io Python SDK

Client for the journy.io tracking API.

Example:
    Basic usage:

    >>> from journy_sdk import JournyClient, Event, UserIdentity, AccountIdentity
    >>>
    >>> # Create client from environment (JOURNY_API_KEY)
    >>> client = JournyClient.from_env()
    >>>
    >>> # Track an event
    >>> result = client.add_event(
    ...     Event.for_user_in_account(
    ...         "upgraded_plan",
    ...         UserIdentity.by_user_id("user123"),
    ...         AccountIdentity.by_domain("acme.com"),
    ...     ).with_metadata({"plan": "pro"})
    ... )
    >>> print(result.succeeded, result.remaining_requests)
    >>>
    >>> # Upsert a user with properties
    >>> client.upsert_user(
    ...     UserIdentity(user_id="user123", email="jane@acme.com"),
    ...     {"first_name": "Jane", "seats": 3},
    ... )
    >>>
    >>> client.close()

Supports:
    - API key validation and tracking snippet lookup
    - Event tracking (user, account, user in account)
    - User and account upserts and deletes
    - Account membership management
    - Linking web visitors to users

Authentication:
    Set environment variables:
    - JOURNY_API_KEY: Required
    - JOURNY_ROOT_URL: API root (default: "https://api.journy.io")
    - JOURNY_DEBUG: "true" or "false" (default: "false")
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .client import JournyClient, DEFAULT_ROOT_URL

from .identity import UserIdentity, AccountIdentity
from .event import Event
from .properties import PropertyValue, PropertyKind, format_properties, format_metadata
from .results import CallResult, ApiKeyDetails, TrackingSnippet, OperationResult
from .responses import interpret_response
from .transport import HttpRequest, HttpResponse, Transport, RequestsTransport

from .exceptions import (
    SDKError,
    InvalidInputError,
    AuthenticationError,
    UnexpectedResponseError,
)

__all__ = [
    # Client
    "JournyClient",
    "DEFAULT_ROOT_URL",
    # Values
    "UserIdentity",
    "AccountIdentity",
    "Event",
    "PropertyValue",
    "PropertyKind",
    "format_properties",
    "format_metadata",
    # Results
    "CallResult",
    "ApiKeyDetails",
    "TrackingSnippet",
    "OperationResult",
    "interpret_response",
    # Transport
    "HttpRequest",
    "HttpResponse",
    "Transport",
    "RequestsTransport",
    # Exceptions
    "SDKError",
    "InvalidInputError",
    "AuthenticationError",
    "UnexpectedResponseError",
]
