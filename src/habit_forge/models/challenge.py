"""Personal challenge data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ChallengeStatus(str, Enum):
    """Lifecycle status of a personal challenge."""

    ACTIVE = "active"
    SUCCESS = "success"
    FAIL = "fail"


class ChallengeFailMode(str, Enum):
    """Where the stake goes when a challenge fails."""

    CHARITY = "charity"
    POOL = "pool"  # Shared group prize pool


@dataclass
class PersonalChallenge:
    """A stake placed on completing an exercise routine."""

    id: str
    exercise: str
    target: str  # Reps or seconds per set, as entered
    sets: int
    per_week: int  # Workouts per week
    stake: int
    fail_mode: ChallengeFailMode
    created_at: datetime
    status: ChallengeStatus = ChallengeStatus.ACTIVE
    completed_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == ChallengeStatus.ACTIVE

    @property
    def allowed_misses(self) -> int:
        """Days per week that may be skipped without failing."""
        return max(0, 7 - self.per_week)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "exercise": self.exercise,
            "target": self.target,
            "sets": self.sets,
            "per_week": self.per_week,
            "stake": self.stake,
            "fail_mode": self.fail_mode.value,
            "created_at": self.created_at.isoformat(),
            "status": self.status.value,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "status_display": self.get_status_display(),
            "allowed_misses": self.allowed_misses,
        }

    def get_status_display(self) -> str:
        """Get a human-readable status string."""
        status_map = {
            ChallengeStatus.ACTIVE: "In Progress",
            ChallengeStatus.SUCCESS: "Completed",
            ChallengeStatus.FAIL: "Failed",
        }
        return status_map.get(self.status, self.status.value)
