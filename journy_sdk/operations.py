"""
Operation table.

One entry per API call: HTTP method, path, the status code that means
success, and how to decode the success body (if the call returns data).
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .results import ApiKeyDetails, OperationResult, TrackingSnippet


@dataclass(frozen=True)
class Operation:
    """An API call the client knows how to make"""
    label: str
    method: str
    path: str
    success_status: int
    decode: Optional[Callable[[Dict[str, Any]], OperationResult]] = None
    # 404 carries a "message" instead of an "errors" array
    not_found_message: bool = False


VALIDATE_API_KEY = Operation("Validate API", "GET", "/validate", 200, decode=ApiKeyDetails.from_json)
TRACKING_SNIPPET = Operation(
    "Tracking Snippet API", "GET", "/tracking/snippet", 200,
    decode=TrackingSnippet.from_json,
    not_found_message=True
)
TRACK_EVENT = Operation("Track API", "POST", "/track", 201)
UPSERT_USER = Operation("Upsert User API", "POST", "/users/upsert", 201)
DELETE_USER = Operation("Delete User API", "DELETE", "/users", 202)
UPSERT_ACCOUNT = Operation("Upsert Account API", "POST", "/accounts/upsert", 201)
DELETE_ACCOUNT = Operation("Delete Account API", "DELETE", "/accounts", 202)
ADD_USERS_TO_ACCOUNT = Operation("Add Users API", "POST", "/accounts/users/add", 201)
REMOVE_USERS_FROM_ACCOUNT = Operation("Remove Users API", "POST", "/accounts/users/remove", 204)
LINK = Operation("Link API", "POST", "/link", 201)
