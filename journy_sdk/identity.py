"""Identity values: who a call is about."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import InvalidInputError


def _identifier(value: Any) -> Optional[str]:
    # Value types such as an Email wrapper are sent as their string form
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


@dataclass(frozen=True)
class UserIdentity:
    """A user, identified by user ID, email, or both."""

    user_id: Optional[str] = None
    email: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "user_id", _identifier(self.user_id))
        object.__setattr__(self, "email", _identifier(self.email))

        if self.user_id is None and self.email is None:
            raise InvalidInputError(
                "User ID or email needs to be set (or both)",
                details={"user_id": self.user_id, "email": self.email}
            )

    @classmethod
    def by_user_id(cls, user_id: str) -> "UserIdentity":
        return cls(user_id=user_id)

    @classmethod
    def by_email(cls, email: str) -> "UserIdentity":
        return cls(email=email)

    def to_identification(self) -> Dict[str, str]:
        """Wire form, absent identifiers omitted."""
        identification = {}
        if self.user_id:
            identification["userId"] = self.user_id
        if self.email:
            identification["email"] = self.email
        return identification


@dataclass(frozen=True)
class AccountIdentity:
    """An account, identified by account ID, domain, or both."""

    account_id: Optional[str] = None
    domain: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "account_id", _identifier(self.account_id))
        object.__setattr__(self, "domain", _identifier(self.domain))

        if self.account_id is None and self.domain is None:
            raise InvalidInputError(
                "Account ID or domain needs to be set (or both)",
                details={"account_id": self.account_id, "domain": self.domain}
            )

    @classmethod
    def by_account_id(cls, account_id: str) -> "AccountIdentity":
        return cls(account_id=account_id)

    @classmethod
    def by_domain(cls, domain: str) -> "AccountIdentity":
        return cls(domain=domain)

    def to_identification(self) -> Dict[str, str]:
        """Wire form, absent identifiers omitted."""
        identification = {}
        if self.account_id:
            identification["accountId"] = self.account_id
        if self.domain:
            identification["domain"] = self.domain
        return identification
