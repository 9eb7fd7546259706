"""Engine services for habit-forge."""

from .accounts import AccountService
from .balance import BalanceAccount
from .challenges import ChallengeFilter, ChallengeLedger, ChallengePage
from .group_week import GroupWeekEngine
from .habits import HabitTracker
from .persistence import SnapshotWriter
from .session import HabitForgeSession, open_session
from .validation import ChallengeCandidate, validate_challenge

__all__ = [
    "AccountService",
    "BalanceAccount",
    "ChallengeCandidate",
    "ChallengeFilter",
    "ChallengeLedger",
    "ChallengePage",
    "GroupWeekEngine",
    "HabitForgeSession",
    "HabitTracker",
    "open_session",
    "SnapshotWriter",
    "validate_challenge",
]
