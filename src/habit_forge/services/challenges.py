"""Personal challenge ledger."""

import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from uuid import uuid4

from ..clock import Clock
from ..errors import (
    CapacityExceededError,
    ChallengeNotFoundError,
    ValidationError,
    WindowExpiredError,
)
from ..models.challenge import ChallengeStatus, PersonalChallenge
from .validation import ChallengeCandidate, validate_challenge

logger = logging.getLogger(__name__)

MAX_ACTIVE_CHALLENGES = 5
DELETE_WINDOW_HOURS = 12
PAGE_SIZE = 5


class ChallengeFilter(str, Enum):
    """Read views over the challenge list."""

    ALL = "all"
    ACTIVE = "active"
    SUCCESS = "success"  # Completed this calendar month
    FAIL = "fail"  # Failed this calendar month


@dataclass
class ChallengePage:
    """One page of a filtered challenge list."""

    items: list[PersonalChallenge]
    page: int
    total_pages: int
    total_count: int

    def to_dict(self) -> dict:
        return {
            "items": [c.to_dict() for c in self.items],
            "page": self.page,
            "total_pages": self.total_pages,
            "total_count": self.total_count,
        }


class ChallengeLedger:
    """Creates, transitions and removes personal challenges.

    Challenges are kept most recent first.
    """

    def __init__(self, clock: Clock, challenges: list[PersonalChallenge] | None = None):
        self.clock = clock
        self._challenges: list[PersonalChallenge] = list(challenges or [])

    @property
    def challenges(self) -> tuple[PersonalChallenge, ...]:
        return tuple(self._challenges)

    @property
    def active_count(self) -> int:
        return sum(1 for c in self._challenges if c.is_active)

    def get(self, challenge_id: str) -> PersonalChallenge:
        for challenge in self._challenges:
            if challenge.id == challenge_id:
                return challenge
        raise ChallengeNotFoundError(challenge_id)

    def create(self, candidate: ChallengeCandidate) -> PersonalChallenge:
        """Validate and add a new active challenge.

        Raises:
            CapacityExceededError: if the active limit is already reached
            ValidationError: if a field is missing or out of range
        """
        if self.active_count >= MAX_ACTIVE_CHALLENGES:
            logger.debug("Challenge creation rejected: active limit reached")
            raise CapacityExceededError(MAX_ACTIVE_CHALLENGES)

        fields = validate_challenge(candidate)
        challenge = PersonalChallenge(
            id=uuid4().hex[:8],
            exercise=fields.exercise,
            target=fields.target,
            sets=fields.sets,
            per_week=fields.per_week,
            stake=fields.stake,
            fail_mode=fields.fail_mode,
            created_at=self.clock.now(),
        )
        self._challenges.insert(0, challenge)
        logger.info(f"Created challenge {challenge.id}: {challenge.exercise} (stake {challenge.stake})")
        return challenge

    def set_status(self, challenge_id: str, status: ChallengeStatus | str) -> PersonalChallenge:
        """Move a challenge to any status, re-opening included."""
        try:
            status = ChallengeStatus(status)
        except ValueError:
            raise ValidationError("status", "Status must be active, success or fail.")
        challenge = self.get(challenge_id)
        challenge.status = status
        challenge.completed_at = None if status == ChallengeStatus.ACTIVE else self.clock.now()
        logger.info(f"Challenge {challenge_id} marked {status.value}")
        return challenge

    def remove(self, challenge_id: str) -> PersonalChallenge:
        """Delete a challenge still inside its deletion window.

        The window is half-open: an age of exactly 12 hours is already
        expired, not only ages beyond it.

        Raises:
            WindowExpiredError: if 12 hours or more have passed since creation
        """
        challenge = self.get(challenge_id)
        age = self.clock.now() - challenge.created_at
        if age >= timedelta(hours=DELETE_WINDOW_HOURS):
            logger.debug(f"Removal of {challenge_id} rejected, age {age}")
            raise WindowExpiredError(challenge_id, DELETE_WINDOW_HOURS)

        self._challenges.remove(challenge)
        logger.info(f"Removed challenge {challenge_id}")
        return challenge

    def filter(self, kind: ChallengeFilter | str = ChallengeFilter.ALL) -> list[PersonalChallenge]:
        """Return challenges matching a filter, in display order."""
        kind = ChallengeFilter(kind)
        if kind == ChallengeFilter.ALL:
            return list(self._challenges)
        if kind == ChallengeFilter.ACTIVE:
            return [c for c in self._challenges if c.is_active]

        now = self.clock.now()
        wanted = ChallengeStatus(kind.value)
        return [
            c for c in self._challenges
            if c.status == wanted
            and c.completed_at is not None
            and c.completed_at.month == now.month
            and c.completed_at.year == now.year
        ]

    def paginate(
        self,
        kind: ChallengeFilter | str = ChallengeFilter.ALL,
        page: int = 1,
        page_size: int = PAGE_SIZE,
    ) -> ChallengePage:
        """Slice a filtered view into pages, clamping the page index."""
        matches = self.filter(kind)
        total_pages = max(1, math.ceil(len(matches) / page_size))
        page = min(max(page, 1), total_pages)
        start = (page - 1) * page_size
        return ChallengePage(
            items=matches[start:start + page_size],
            page=page,
            total_pages=total_pages,
            total_count=len(matches),
        )
