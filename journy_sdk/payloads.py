"""
Request bodies, one builder per operation.

Optional keys are left out when their value is absent or empty; bodies
never contain null identifiers, {} or [].
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .event import Event
from .exceptions import InvalidInputError
from .identity import AccountIdentity, UserIdentity
from .properties import format_metadata, format_properties, format_timestamp

Members = Union[Iterable[Optional[UserIdentity]], Mapping[Any, Optional[UserIdentity]]]


def _members(users: Optional[Members]) -> List[Dict[str, Any]]:
    """Contiguous list of user identifications; gaps (None) are dropped."""
    if users is None:
        return []
    if isinstance(users, Mapping):
        users = users.values()

    members = []
    for user in users:
        if user is None:
            continue
        if not isinstance(user, UserIdentity):
            raise InvalidInputError(
                "Members must be UserIdentity values",
                details={"provided": type(user).__name__}
            )
        members.append({"identification": user.to_identification()})
    return members


def _require_user(user: Any) -> UserIdentity:
    if not isinstance(user, UserIdentity):
        raise InvalidInputError("User cannot be empty", details={"provided": type(user).__name__})
    return user


def _require_account(account: Any) -> AccountIdentity:
    if not isinstance(account, AccountIdentity):
        raise InvalidInputError("Account cannot be empty", details={"provided": type(account).__name__})
    return account


def event_payload(event: Event) -> Dict[str, Any]:
    identification = {}
    if event.user is not None:
        identification["user"] = event.user.to_identification()
    if event.account is not None:
        identification["account"] = event.account.to_identification()

    payload = {
        "name": event.name,
        "identification": identification,
    }

    if event.recorded_at is not None:
        payload["recordedAt"] = format_timestamp(event.recorded_at)

    if event.metadata:
        payload["metadata"] = format_metadata(event.metadata)

    return payload


def upsert_user_payload(
    user: UserIdentity,
    properties: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    payload = {"identification": _require_user(user).to_identification()}
    if properties:
        payload["properties"] = format_properties(properties)
    return payload


def upsert_account_payload(
    account: AccountIdentity,
    properties: Optional[Mapping[str, Any]] = None,
    members: Optional[Members] = None
) -> Dict[str, Any]:
    payload = {"identification": _require_account(account).to_identification()}
    if properties:
        payload["properties"] = format_properties(properties)

    member_list = _members(members)
    if member_list:
        payload["members"] = member_list

    return payload


def delete_user_payload(user: UserIdentity) -> Dict[str, Any]:
    return {"identification": _require_user(user).to_identification()}


def delete_account_payload(account: AccountIdentity) -> Dict[str, Any]:
    return {"identification": _require_account(account).to_identification()}


def link_payload(device_id: str, user: UserIdentity) -> Dict[str, Any]:
    if not device_id:
        raise InvalidInputError(
            "Device ID cannot be empty",
            details={"provided": device_id}
        )
    return {
        "deviceId": device_id,
        "identification": _require_user(user).to_identification(),
    }


def membership_payload(account: AccountIdentity, users: Members) -> Dict[str, Any]:
    """Body for adding users to / removing users from an account."""
    if account is None:
        raise InvalidInputError("Account can not be empty")

    users = _members(users)
    if not users:
        raise InvalidInputError(
            "Users can not be empty",
            details={"suggestion": "Pass at least one UserIdentity"}
        )

    return {
        "account": _require_account(account).to_identification(),
        "users": users,
    }
