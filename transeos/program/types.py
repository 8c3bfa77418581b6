"""Type definitions for the TransEOS program module."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .constants import DEFAULT_PERMISSION


@dataclass(frozen=True)
class Authorization:
    """Permission level authorizing an action."""

    actor: str
    permission: str = DEFAULT_PERMISSION

    def to_dict(self) -> dict:
        return {"actor": self.actor, "permission": self.permission}


@dataclass
class ActionIntent:
    """A contract action that has not been submitted yet."""

    account: str  # Contract account executing the action
    name: str  # Action name on the contract
    authorization: List[Authorization]
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def actor(self) -> Optional[str]:
        """Primary authorizing account."""
        return self.authorization[0].actor if self.authorization else None

    def to_dict(self) -> dict:
        """Render the wire shape expected by the wallet's transact call."""
        return {
            "account": self.account,
            "name": self.name,
            "authorization": [auth.to_dict() for auth in self.authorization],
            "data": dict(self.data),
        }


@dataclass(frozen=True)
class WalletAuth:
    """Account and permission a wallet signs with."""

    account_name: str
    permission: str = DEFAULT_PERMISSION
