"""User profile data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class RegisteredUser:
    """Credentials captured at registration."""

    name: str
    email: str
    password: str  # Opaque secret, stored as entered

    def to_dict(self) -> dict:
        return {"name": self.name, "email": self.email, "password": self.password}

    @classmethod
    def from_dict(cls, data: dict) -> "RegisteredUser":
        return cls(
            name=data["name"],
            email=data["email"],
            password=data["password"],
        )


@dataclass
class Profile:
    """The local user's identity and lifetime counters.

    The currency balance is held by the session's BalanceAccount, not here.
    """

    login_name: str = ""
    registered_user: RegisteredUser | None = None
    is_authenticated: bool = False
    avatar_ref: str = ""
    last_login_change: datetime | None = None
    done_days: int = 0
    failed_days: int = 0
    in_progress_days: int = 0
    total_staked: int = 0
    stake_count: int = 0

    @property
    def average_stake(self) -> int:
        if self.stake_count == 0:
            return 0
        return int(self.total_staked / self.stake_count + 0.5)

    def record_stake(self, amount: int) -> None:
        """Add a committed stake to the lifetime counters."""
        self.total_staked += amount
        self.stake_count += 1

    def to_snapshot(self, balance: int) -> dict:
        """Build the persisted session snapshot."""
        return {
            "isAuthenticated": self.is_authenticated,
            "loginName": self.login_name,
            "registeredUser": (
                self.registered_user.to_dict() if self.registered_user else None
            ),
            "balance": balance,
            "avatarRef": self.avatar_ref,
        }

    @classmethod
    def from_snapshot(cls, data: dict) -> "Profile":
        """Create from a persisted snapshot (balance is read separately)."""
        registered_user = None
        if data.get("registeredUser"):
            registered_user = RegisteredUser.from_dict(data["registeredUser"])

        return cls(
            login_name=data.get("loginName") or "",
            registered_user=registered_user,
            is_authenticated=bool(data.get("isAuthenticated")),
            avatar_ref=data.get("avatarRef") or "",
        )

    def to_dict(self) -> dict:
        """Public view of the profile (never includes the password)."""
        return {
            "login_name": self.login_name,
            "name": self.registered_user.name if self.registered_user else None,
            "email": self.registered_user.email if self.registered_user else None,
            "is_authenticated": self.is_authenticated,
            "avatar_ref": self.avatar_ref,
            "done_days": self.done_days,
            "failed_days": self.failed_days,
            "in_progress_days": self.in_progress_days,
            "total_staked": self.total_staked,
            "average_stake": self.average_stake,
        }
