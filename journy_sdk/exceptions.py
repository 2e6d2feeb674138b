"""
journy.io SDK Exception Hierarchy

Structured exceptions for the failures that are raised instead of being
reported through a CallResult. Each exception carries a message and a
details dict for programmatic handling.

API-level outcomes (unauthorized, rate limited, validation failures,
server errors) are never raised; they come back as a CallResult.
Transport failures raised by the HTTP layer propagate unchanged.
"""

from typing import Dict, Any, Optional


class SDKError(Exception):
    """Base exception for all SDK errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class InvalidInputError(SDKError):
    """
    Required local input is missing or malformed.

    Raised before any request is sent, e.g.:
    - identity without any identifier
    - empty event name, domain or device ID
    - membership call without account or users
    - array value in event metadata
    """
    pass


class AuthenticationError(SDKError):
    """
    API key is missing or empty.

    Caller should:
    - Pass api_key to the client
    - Or set JOURNY_API_KEY in the environment / .env file
    """
    pass


class UnexpectedResponseError(SDKError):
    """
    A success response did not carry the data the operation returns.

    Only raised for operations with a payload (API key details,
    tracking snippet) when the body lacks the expected fields.
    """
    pass
