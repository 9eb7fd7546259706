"""Weekly group challenge data models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum


class ParticipantStatus(str, Enum):
    """Progress of a participant through the group week."""

    IN_PROGRESS = "in_progress"
    SUCCESS = "success"
    FAIL = "fail"

    def next(self) -> "ParticipantStatus":
        """Return the status that follows this one when cycling."""
        return _NEXT_STATUS[self]


_NEXT_STATUS = {
    ParticipantStatus.IN_PROGRESS: ParticipantStatus.SUCCESS,
    ParticipantStatus.SUCCESS: ParticipantStatus.FAIL,
    ParticipantStatus.FAIL: ParticipantStatus.IN_PROGRESS,
}


class WeekOutcome(str, Enum):
    """Final result of a group week for the local user."""

    SUCCESS = "success"
    FAIL = "fail"


class GroupWeekState(str, Enum):
    """Lifecycle state of the group week."""

    OPEN = "open"
    READY_TO_FINALIZE = "ready_to_finalize"
    FINALIZED = "finalized"


@dataclass
class Participant:
    """A member of the weekly group roster."""

    id: str
    name: str
    joined_at: datetime
    status: ParticipantStatus = ParticipantStatus.IN_PROGRESS
    is_self: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "joined_at": self.joined_at.isoformat(),
            "status": self.status.value,
            "is_self": self.is_self,
        }


@dataclass
class GroupWeek:
    """One week of the shared group challenge.

    Participants belong to the week and are discarded with it on reset.
    """

    start: datetime  # Monday 00:00
    base_prize: int
    entry_fee: int
    capacity: int
    exercises: list[str] = field(default_factory=list)
    weekly_frequency: int = 4
    participants: list[Participant] = field(default_factory=list)
    self_participant_id: str | None = None
    outcome: WeekOutcome | None = None

    @property
    def end(self) -> datetime:
        return self.start + timedelta(days=6)

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "base_prize": self.base_prize,
            "entry_fee": self.entry_fee,
            "capacity": self.capacity,
            "exercises": list(self.exercises),
            "weekly_frequency": self.weekly_frequency,
            "participants": [p.to_dict() for p in self.participants],
            "self_participant_id": self.self_participant_id,
            "outcome": self.outcome.value if self.outcome else None,
        }
