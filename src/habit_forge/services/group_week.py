"""Weekly group challenge engine.

One group week is live per session. The local user joins once (paying the
entry fee); everyone else on the roster is simulated locally. The week can be
finalized from the following Monday on, and reset at any time.
"""

import logging
import random
from datetime import datetime, timedelta
from uuid import uuid4

from ..clock import Clock
from ..errors import (
    DuplicateNameError,
    GroupFullError,
    InsufficientFundsError,
    MissingNameError,
    NotJoinedError,
    ParticipantNotFoundError,
    WeekNotEndedError,
)
from ..models.group import (
    GroupWeek,
    GroupWeekState,
    Participant,
    ParticipantStatus,
    WeekOutcome,
)
from ..models.profile import Profile
from .balance import BalanceAccount

logger = logging.getLogger(__name__)

ENTRY_FEE = 500
BASE_PRIZE = 1500
MAX_PARTICIPANTS = 10
WEEK_LENGTH_DAYS = 7
WEEKLY_FREQUENCY = 4

EXERCISE_OPTIONS = [
    "Push-ups",
    "Plank",
    "Squats",
    "Burpees",
    "Jump rope",
    "Pull-ups",
]


def week_start_for(moment: datetime) -> datetime:
    """Return Monday 00:00 of the week containing a moment."""
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=moment.weekday())


def pick_weekly_exercises(rng: random.Random, options: list[str] = EXERCISE_OPTIONS) -> list[str]:
    """Draw one to three distinct exercises for the week."""
    count = rng.randint(1, 3)
    return rng.sample(options, count)


class GroupWeekEngine:
    """Roster, entry fees and settlement for the current group week."""

    def __init__(
        self,
        clock: Clock,
        balance: BalanceAccount,
        profile: Profile,
        rng: random.Random | None = None,
    ):
        self.clock = clock
        self.balance = balance
        self.profile = profile
        self.rng = rng or random.Random()
        self.week = self._new_week()

    def _new_week(self) -> GroupWeek:
        return GroupWeek(
            start=week_start_for(self.clock.now()),
            base_prize=BASE_PRIZE,
            entry_fee=ENTRY_FEE,
            capacity=MAX_PARTICIPANTS,
            exercises=pick_weekly_exercises(self.rng),
            weekly_frequency=WEEKLY_FREQUENCY,
        )

    # Derived values

    @property
    def participants(self) -> tuple[Participant, ...]:
        return tuple(self.week.participants)

    @property
    def self_participant(self) -> Participant | None:
        for participant in self.week.participants:
            if participant.id == self.week.self_participant_id:
                return participant
        return None

    @property
    def is_joined(self) -> bool:
        return self.week.self_participant_id is not None

    @property
    def elapsed_days(self) -> int:
        return (self.clock.now() - self.week.start) // timedelta(days=1)

    @property
    def week_ended(self) -> bool:
        return self.elapsed_days >= WEEK_LENGTH_DAYS

    @property
    def state(self) -> GroupWeekState:
        if self.week.outcome is not None:
            return GroupWeekState.FINALIZED
        if self.week_ended:
            return GroupWeekState.READY_TO_FINALIZE
        return GroupWeekState.OPEN

    @property
    def prize_pool(self) -> int:
        return self.week.base_prize + self.week.entry_fee * len(self.week.participants)

    @property
    def winners_count(self) -> int:
        return sum(
            1 for p in self.week.participants if p.status == ParticipantStatus.SUCCESS
        )

    @property
    def payout_per_winner(self) -> int:
        winners = self.winners_count
        if winners == 0:
            return 0
        return self.prize_pool // winners

    # Operations

    def join(self, nickname: str = "") -> Participant:
        """Add a participant to the roster.

        The first join is the local user's own entry and costs the entry fee.
        Later joins add simulated participants for free.

        Raises:
            GroupFullError: if the roster is at capacity
            MissingNameError: if no nickname or login name is available
            DuplicateNameError: if the name is taken (case-insensitive)
            InsufficientFundsError: if the user cannot pay the entry fee
        """
        if len(self.week.participants) >= self.week.capacity:
            raise GroupFullError(self.week.capacity)

        name = (nickname or "").strip() or (self.profile.login_name or "").strip()
        if not name:
            raise MissingNameError()

        if any(p.name.lower() == name.lower() for p in self.week.participants):
            raise DuplicateNameError(name)

        is_self = not self.is_joined
        if is_self and not self.balance.can_afford(self.week.entry_fee):
            raise InsufficientFundsError(self.week.entry_fee, self.balance.balance)

        participant = Participant(
            id=uuid4().hex[:8],
            name=name,
            joined_at=self.clock.now(),
            is_self=is_self,
        )

        if is_self:
            self.balance.debit(self.week.entry_fee)
            self.profile.record_stake(self.week.entry_fee)
            self.week.self_participant_id = participant.id

        self.week.participants.append(participant)
        logger.info(f"{name} joined the group week{' (self)' if is_self else ''}")
        return participant

    def cycle_status(self, participant_id: str) -> Participant:
        """Advance a simulated participant's status; self entries are left alone."""
        for participant in self.week.participants:
            if participant.id == participant_id:
                if not participant.is_self:
                    participant.status = participant.status.next()
                return participant
        raise ParticipantNotFoundError(participant_id)

    def finalize(self) -> WeekOutcome:
        """Settle the week for the local user.

        Calling again after settlement returns the stored outcome unchanged.

        Raises:
            NotJoinedError: if the user has no entry this week
            WeekNotEndedError: if the week is still running
        """
        if self.week.outcome is not None:
            return self.week.outcome

        if not self.is_joined:
            raise NotJoinedError()
        if not self.week_ended:
            raise WeekNotEndedError(self.elapsed_days)

        outcome = WeekOutcome.SUCCESS
        self.week.outcome = outcome
        self.self_participant.status = ParticipantStatus(outcome.value)
        if outcome == WeekOutcome.SUCCESS:
            self.balance.credit(self.week.entry_fee)

        logger.info(f"Group week starting {self.week.start.date()} finalized: {outcome.value}")
        return outcome

    def reset(self) -> GroupWeek:
        """Start a fresh week anchored on the current Monday."""
        self.week = self._new_week()
        logger.info(f"Group week reset, new start {self.week.start.date()}")
        return self.week

    def to_dict(self) -> dict:
        """Week state plus derived values."""
        data = self.week.to_dict()
        data.update({
            "state": self.state.value,
            "elapsed_days": self.elapsed_days,
            "week_ended": self.week_ended,
            "is_joined": self.is_joined,
            "prize_pool": self.prize_pool,
            "winners_count": self.winners_count,
            "payout_per_winner": self.payout_per_winner,
        })
        return data
