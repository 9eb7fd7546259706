"""Derived statistics for challenges and the profile.

Nothing here is cached; every call recomputes from the current state.
"""

from dataclasses import asdict, dataclass
from typing import Iterable

from ..models.challenge import ChallengeStatus, PersonalChallenge
from ..models.profile import Profile


def round_half_up(value: float) -> int:
    """Round a non-negative number, with .5 going up."""
    return int(value + 0.5)


@dataclass(frozen=True)
class ChallengeStatistics:
    total: int
    success: int
    fail: int
    active: int
    success_percent: int
    average_stake: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DayStatistics:
    done_days: int
    failed_days: int
    in_progress_days: int
    total_days: int
    success_percent: int
    total_staked: int
    average_stake: int

    def to_dict(self) -> dict:
        return asdict(self)


def challenge_statistics(challenges: Iterable[PersonalChallenge]) -> ChallengeStatistics:
    """Count personal challenges by status and average their stakes."""
    challenges = list(challenges)
    total = len(challenges)
    success = sum(1 for c in challenges if c.status == ChallengeStatus.SUCCESS)
    fail = sum(1 for c in challenges if c.status == ChallengeStatus.FAIL)
    active = sum(1 for c in challenges if c.status == ChallengeStatus.ACTIVE)

    if total == 0:
        return ChallengeStatistics(0, 0, 0, 0, 0, 0)

    return ChallengeStatistics(
        total=total,
        success=success,
        fail=fail,
        active=active,
        success_percent=round_half_up(success / total * 100),
        average_stake=round_half_up(sum(c.stake for c in challenges) / total),
    )


def day_statistics(profile: Profile) -> DayStatistics:
    """Summarize the profile's lifetime day counters."""
    total_days = profile.done_days + profile.failed_days + profile.in_progress_days
    success_percent = 0
    if total_days:
        success_percent = round_half_up(profile.done_days / total_days * 100)

    return DayStatistics(
        done_days=profile.done_days,
        failed_days=profile.failed_days,
        in_progress_days=profile.in_progress_days,
        total_days=total_days,
        success_percent=success_percent,
        total_staked=profile.total_staked,
        average_stake=profile.average_stake,
    )
