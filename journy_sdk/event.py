"""Trackable events."""

import warnings
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .exceptions import InvalidInputError
from .identity import AccountIdentity, UserIdentity


def _user(user: Union[UserIdentity, str, None]) -> UserIdentity:
    if isinstance(user, str) and user:
        warnings.warn(
            "Passing a user ID string is deprecated, use UserIdentity.by_user_id()",
            DeprecationWarning,
            stacklevel=3
        )
        return UserIdentity.by_user_id(user)
    if not isinstance(user, UserIdentity):
        raise InvalidInputError(
            "User cannot be empty",
            details={"provided": type(user).__name__}
        )
    return user


def _account(account: Union[AccountIdentity, str, None]) -> AccountIdentity:
    if isinstance(account, str) and account:
        warnings.warn(
            "Passing an account ID string is deprecated, use AccountIdentity.by_account_id()",
            DeprecationWarning,
            stacklevel=3
        )
        return AccountIdentity.by_account_id(account)
    if not isinstance(account, AccountIdentity):
        raise InvalidInputError(
            "Account cannot be empty",
            details={"provided": type(account).__name__}
        )
    return account


def _check_name(name: str) -> str:
    if not name or not isinstance(name, str):
        raise InvalidInputError(
            "Event name cannot be empty",
            details={"provided": name}
        )
    return name


@dataclass(frozen=True)
class Event:
    """
    Immutable description of something a user or account did.

    Build events with the named constructors; happened_at() and
    with_metadata() return modified copies.

    Example:
        event = (
            Event.for_user("login", UserIdentity.by_user_id("1"))
            .happened_at(datetime.now(timezone.utc))
            .with_metadata({"plan": "pro"})
        )

    Validation order: the name is checked first, then the user, then the
    account.
    """

    name: str
    user: Optional[UserIdentity] = None
    account: Optional[AccountIdentity] = None
    recorded_at: Optional[datetime] = None
    # MappingProxyType is unhashable; events hash on their other fields
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        _check_name(self.name)
        if self.user is None and self.account is None:
            raise InvalidInputError(
                "Event needs a user, an account, or both",
                details={"name": self.name}
            )
        if self.user is not None and not isinstance(self.user, UserIdentity):
            raise InvalidInputError(
                "User must be a UserIdentity",
                details={"provided": type(self.user).__name__}
            )
        if self.account is not None and not isinstance(self.account, AccountIdentity):
            raise InvalidInputError(
                "Account must be an AccountIdentity",
                details={"provided": type(self.account).__name__}
            )
        if self.recorded_at is not None and not isinstance(self.recorded_at, datetime):
            raise InvalidInputError(
                "Event time must be a datetime",
                details={"provided": type(self.recorded_at).__name__}
            )
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def for_user(cls, name: str, user: UserIdentity) -> "Event":
        _check_name(name)
        return cls(name, user=_user(user))

    @classmethod
    def for_account(cls, name: str, account: AccountIdentity) -> "Event":
        _check_name(name)
        return cls(name, account=_account(account))

    @classmethod
    def for_user_in_account(
        cls,
        name: str,
        user: UserIdentity,
        account: AccountIdentity
    ) -> "Event":
        _check_name(name)
        return cls(name, user=_user(user), account=_account(account))

    def happened_at(self, recorded_at: datetime) -> "Event":
        if not isinstance(recorded_at, datetime):
            raise InvalidInputError(
                "Event time must be a datetime",
                details={"provided": type(recorded_at).__name__}
            )
        return replace(self, recorded_at=recorded_at)

    def with_metadata(self, metadata: Mapping[str, Any]) -> "Event":
        merged = dict(self.metadata)
        merged.update(metadata)
        return replace(self, metadata=merged)
