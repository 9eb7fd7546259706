"""Data models for habit-forge."""

from .challenge import ChallengeFailMode, ChallengeStatus, PersonalChallenge
from .group import (
    GroupWeek,
    GroupWeekState,
    Participant,
    ParticipantStatus,
    WeekOutcome,
)
from .habit import Habit
from .profile import Profile, RegisteredUser

__all__ = [
    "ChallengeFailMode",
    "ChallengeStatus",
    "GroupWeek",
    "GroupWeekState",
    "Habit",
    "Participant",
    "ParticipantStatus",
    "PersonalChallenge",
    "Profile",
    "RegisteredUser",
    "WeekOutcome",
]
