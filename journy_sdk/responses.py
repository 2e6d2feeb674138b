"""
Response interpretation.

Turns (status code, headers, body) into a CallResult. API-level failures
are reported, not raised:

    429        -> rate_limited, errors ["rate limited"]
    401 / 403  -> errors [body "message"]
    5xx        -> errors ["something unexpected happened"]
    success    -> succeeded, payload decoded for the operation
    404        -> errors [body "message"] (tracking snippet lookup)
    other      -> errors = body "errors" array

Rate-limit counters come from the x-ratelimit-* headers on every response.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Union

from .operations import Operation
from .results import CallResult

RATE_LIMITED_MESSAGE = "rate limited"
UNEXPECTED_ERROR_MESSAGE = "something unexpected happened"

REMAINING_HEADER = "x-ratelimit-remaining"
LIMIT_HEADER = "x-ratelimit-limit"


def _header(headers: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    # Case-insensitive; multi-valued headers use the first value
    if not headers:
        return None
    for key, value in headers.items():
        if key.lower() != name:
            continue
        if isinstance(value, (list, tuple)):
            return str(value[0]) if value else None
        return str(value)
    return None


def _int_header(headers: Optional[Mapping[str, Any]], name: str) -> int:
    value = _header(headers, name)
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        return 0


def decode_body(body: Union[bytes, str, None]) -> Optional[Dict[str, Any]]:
    """Decode a JSON object body; empty or malformed bodies give None."""
    if not body:
        return None
    try:
        decoded = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    return decoded if isinstance(decoded, dict) else None


def _message(body: Optional[Dict[str, Any]]) -> List[str]:
    message = body.get("message") if body else None
    return [str(message)] if message else []


def _errors(body: Optional[Dict[str, Any]]) -> List[str]:
    errors = body.get("errors") if body else None
    if not errors:
        return []
    if isinstance(errors, (list, tuple)):
        return [str(error) for error in errors]
    return [str(errors)]


def interpret_response(
    operation: Operation,
    status_code: int,
    headers: Optional[Mapping[str, Any]],
    body: Union[bytes, str, None]
) -> CallResult:
    """
    Map an HTTP response to a CallResult.

    Raises:
        UnexpectedResponseError: If a success body lacks the operation's data
    """
    remaining = _int_header(headers, REMAINING_HEADER)
    limit = _int_header(headers, LIMIT_HEADER)
    json_body = decode_body(body)

    def failure(errors, rate_limited=False):
        return CallResult(False, rate_limited, remaining, limit, errors)

    if status_code == 429:
        return failure([RATE_LIMITED_MESSAGE], rate_limited=True)

    if status_code in (401, 403):
        return failure(_message(json_body))

    if status_code >= 500:
        return failure([UNEXPECTED_ERROR_MESSAGE])

    if status_code == operation.success_status:
        payload = None
        if operation.decode is not None:
            payload = operation.decode(json_body or {})
        return CallResult(True, False, remaining, limit, [], payload)

    if status_code == 404 and operation.not_found_message:
        return failure(_message(json_body))

    return failure(_errors(json_body))
