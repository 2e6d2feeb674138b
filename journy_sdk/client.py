"""
journy.io Client

Python client for the journy.io tracking API.

Supports:
- API key validation and tracking snippet lookup
- Event tracking for users, accounts, and users within accounts
- User and account upserts (with properties and account members)
- User and account deletion
- Adding users to / removing users from accounts
- Linking web visitors (device IDs) to users

Every operation returns a CallResult. Unauthorized, rate-limited, invalid
and server-error responses are reported in the result, never raised.
Missing local input raises InvalidInputError before any request is sent.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

from dotenv import load_dotenv

from . import __version__
from .event import Event
from .exceptions import AuthenticationError, InvalidInputError
from .identity import AccountIdentity, UserIdentity
from .operations import (
    ADD_USERS_TO_ACCOUNT,
    DELETE_ACCOUNT,
    DELETE_USER,
    LINK,
    REMOVE_USERS_FROM_ACCOUNT,
    TRACK_EVENT,
    TRACKING_SNIPPET,
    UPSERT_ACCOUNT,
    UPSERT_USER,
    VALIDATE_API_KEY,
    Operation,
)
from .payloads import (
    Members,
    delete_account_payload,
    delete_user_payload,
    event_payload,
    link_payload,
    membership_payload,
    upsert_account_payload,
    upsert_user_payload,
)
from .responses import interpret_response
from .results import CallResult
from .transport import HttpRequest, RequestsTransport, Transport

DEFAULT_ROOT_URL = "https://api.journy.io"
DEFAULT_TIMEOUT = 5


class JournyClient:
    """
    journy.io API client.

    The client owns static configuration (API key, root URL, version) and a
    transport. Configuration is read-only after construction, so one client
    can be shared between threads as long as its transport can.

    Every request carries:
    - x-api-key: the API key
    - user-agent: python-sdk/<version>
    - content-type: application/json (requests with a body)

    Example:
        client = JournyClient.with_defaults("my-api-key")
        result = client.add_event(
            Event.for_user("login", UserIdentity.by_user_id("1"))
        )
        if not result.succeeded:
            print(result.errors)
        client.close()
    """

    def __init__(
        self,
        transport: Transport,
        api_key: str,
        root_url: str = DEFAULT_ROOT_URL,
        version: str = __version__,
        debug: bool = False
    ):
        """
        Initialize the client.

        Args:
            transport: Object with send(HttpRequest) -> HttpResponse
            api_key: journy.io API key (required)
            root_url: API root URL (default: https://api.journy.io)
            version: SDK version sent in the user-agent header
            debug: Enable debug logging (default: False)

        Raises:
            AuthenticationError: If api_key is missing or empty
        """
        if not api_key:
            raise AuthenticationError(
                "API key cannot be empty",
                details={"suggestion": "Set JOURNY_API_KEY or pass api_key"}
            )

        self.transport = transport
        self.api_key = api_key
        self.root_url = (root_url or DEFAULT_ROOT_URL).rstrip("/")
        self.version = version
        self.debug = debug

        self.logger = logging.getLogger(__name__)
        if debug:
            self.logger.setLevel(logging.DEBUG)
        else:
            self.logger.setLevel(logging.WARNING)

    @classmethod
    def with_defaults(cls, api_key: str, **kwargs) -> "JournyClient":
        """
        Create a client backed by RequestsTransport (5 second timeout).

        Example:
            client = JournyClient.with_defaults("my-api-key")
        """
        timeout = kwargs.pop("timeout", DEFAULT_TIMEOUT)
        return cls(RequestsTransport(timeout=timeout), api_key, **kwargs)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs) -> "JournyClient":
        """
        Create a client from environment variables.

        Environment variables:
            JOURNY_API_KEY: API key (required)
            JOURNY_ROOT_URL: API root URL (default: https://api.journy.io)
            JOURNY_TIMEOUT: Request timeout in seconds (default: 5)
            JOURNY_DEBUG: Enable debug logging (default: False)

        Args:
            env_file: Optional .env file loaded before reading the environment
            **kwargs: Overrides passed to the constructor

        Raises:
            AuthenticationError: If JOURNY_API_KEY is not set

        Example:
            client = JournyClient.from_env(".env")
        """
        if env_file:
            load_dotenv(dotenv_path=env_file)

        api_key = os.getenv("JOURNY_API_KEY")
        root_url = os.getenv("JOURNY_ROOT_URL", DEFAULT_ROOT_URL)
        timeout = float(os.getenv("JOURNY_TIMEOUT", str(DEFAULT_TIMEOUT)))
        debug = os.getenv("JOURNY_DEBUG", "false").lower() == "true"

        if not api_key:
            raise AuthenticationError(
                "Missing journy.io credentials. Set JOURNY_API_KEY environment variable.",
                details={
                    "env_vars": ["JOURNY_API_KEY"],
                    "suggestion": "Set JOURNY_API_KEY in your .env file"
                }
            )

        if "debug" not in kwargs:
            kwargs["debug"] = debug
        if "root_url" not in kwargs:
            kwargs["root_url"] = root_url

        return cls(RequestsTransport(timeout=timeout), api_key, **kwargs)

    # ========================================================================
    # API Key Operations
    # ========================================================================

    def get_api_key_details(self) -> CallResult:
        """
        Fetch the permissions of the configured API key (GET /validate).

        Returns:
            CallResult with an ApiKeyDetails payload on success

        Example:
            result = client.get_api_key_details()
            if result.succeeded:
                print(result.payload.permissions)
        """
        return self._call(VALIDATE_API_KEY)

    def get_tracking_snippet(self, domain: str) -> CallResult:
        """
        Fetch the tracking snippet for a website (GET /tracking/snippet).

        Args:
            domain: Website domain, e.g. "journy.io"

        Returns:
            CallResult with a TrackingSnippet payload on success. Unknown
            domains give succeeded=False with the server message in errors.

        Raises:
            InvalidInputError: If domain is empty
        """
        if not domain:
            raise InvalidInputError(
                "Domain cannot be empty",
                details={"provided": domain}
            )
        return self._call(TRACKING_SNIPPET, query={"domain": domain})

    # ========================================================================
    # Tracking Operations
    # ========================================================================

    def add_event(self, event: Event) -> CallResult:
        """
        Track an event (POST /track).

        Args:
            event: Event built with Event.for_user / for_account /
                for_user_in_account

        Raises:
            InvalidInputError: If event is not an Event or its metadata
                contains arrays

        Example:
            client.add_event(
                Event.for_user("login", UserIdentity.by_email("hi@journy.io"))
                .with_metadata({"plan": "pro"})
            )
        """
        if not isinstance(event, Event):
            raise InvalidInputError(
                "Event cannot be empty",
                details={"provided": type(event).__name__}
            )
        return self._call(TRACK_EVENT, event_payload(event))

    def link(self, device_id: str, user: UserIdentity) -> CallResult:
        """
        Link a web visitor (device ID) to a known user (POST /link).

        Args:
            device_id: Device ID of the anonymous visitor
            user: User the visitor turned out to be

        Raises:
            InvalidInputError: If device_id is empty or user is missing
        """
        return self._call(LINK, link_payload(device_id, user))

    # ========================================================================
    # User Operations
    # ========================================================================

    def upsert_user(
        self,
        user: UserIdentity,
        properties: Optional[Mapping[str, Any]] = None
    ) -> CallResult:
        """
        Create or update a user (POST /users/upsert).

        Args:
            user: User identity
            properties: Optional user properties. Values may be scalars,
                datetimes, None, flat lists of scalars or PropertyValue.

        Raises:
            InvalidInputError: If user is missing or a property is nested

        Example:
            client.upsert_user(
                UserIdentity(user_id="1", email="hi@journy.io"),
                {"plan": "pro", "seats": 3, "signed_up": datetime.now(timezone.utc)}
            )
        """
        return self._call(UPSERT_USER, upsert_user_payload(user, properties))

    def delete_user(self, user: UserIdentity) -> CallResult:
        """Delete a user (DELETE /users)."""
        return self._call(DELETE_USER, delete_user_payload(user))

    # ========================================================================
    # Account Operations
    # ========================================================================

    def upsert_account(
        self,
        account: AccountIdentity,
        properties: Optional[Mapping[str, Any]] = None,
        members: Optional[Members] = None
    ) -> CallResult:
        """
        Create or update an account (POST /accounts/upsert).

        Args:
            account: Account identity
            properties: Optional account properties (same rules as users)
            members: Optional users of the account, as a sequence or a
                sparse index -> UserIdentity mapping. Order is kept and gaps
                are dropped.

        Raises:
            InvalidInputError: If account is missing or a member is not a
                UserIdentity
        """
        return self._call(UPSERT_ACCOUNT, upsert_account_payload(account, properties, members))

    def delete_account(self, account: AccountIdentity) -> CallResult:
        """Delete an account (DELETE /accounts)."""
        return self._call(DELETE_ACCOUNT, delete_account_payload(account))

    def add_users_to_account(self, account: AccountIdentity, users: Members) -> CallResult:
        """
        Add users to an account (POST /accounts/users/add).

        Raises:
            InvalidInputError: If account is missing or users is empty
        """
        return self._call(ADD_USERS_TO_ACCOUNT, membership_payload(account, users))

    def remove_users_from_account(self, account: AccountIdentity, users: Members) -> CallResult:
        """
        Remove users from an account (POST /accounts/users/remove).

        Raises:
            InvalidInputError: If account is missing or users is empty
        """
        return self._call(REMOVE_USERS_FROM_ACCOUNT, membership_payload(account, users))

    # ========================================================================
    # Utility Methods
    # ========================================================================

    def close(self):
        """
        Release the transport's resources (if it holds any).

        Example:
            client = JournyClient.from_env()
            try:
                client.add_event(event)
            finally:
                client.close()
        """
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()
            if self.debug:
                self.logger.debug("Transport closed")

    def __enter__(self) -> "JournyClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ========================================================================
    # Internal Methods
    # ========================================================================

    def _headers(self, with_body: bool) -> Dict[str, str]:
        headers = {
            "user-agent": f"python-sdk/{self.version}",
            "x-api-key": self.api_key,
        }
        if with_body:
            headers["content-type"] = "application/json"
        return headers

    def _build_request(
        self,
        operation: Operation,
        payload: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, str]] = None
    ) -> HttpRequest:
        url = f"{self.root_url}{operation.path}"
        if query:
            url = f"{url}?{urlencode(query)}"

        body = json.dumps(payload) if payload is not None else None
        return HttpRequest(
            method=operation.method,
            url=url,
            headers=self._headers(with_body=body is not None),
            body=body
        )

    def _call(
        self,
        operation: Operation,
        payload: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, str]] = None
    ) -> CallResult:
        """
        Send one request and interpret the response.

        Transport exceptions are not caught.
        """
        request = self._build_request(operation, payload, query)

        if self.debug:
            self.logger.debug(f"[{operation.label}] {request.method} {request.url}")

        response = self.transport.send(request)
        result = interpret_response(operation, response.status_code, response.headers, response.body)

        if self.debug:
            self.logger.debug(
                f"[{operation.label}] status={response.status_code} succeeded={result.succeeded} "
                f"remaining={result.remaining_requests}/{result.max_requests}"
            )
        if result.rate_limited:
            self.logger.warning(f"[{operation.label}] Rate limited by journy.io API")

        return result
