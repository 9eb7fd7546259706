"""Session aggregate tying one profile to its engines."""

import logging
import random
from pathlib import Path

from ..clock import Clock, SystemClock
from ..db.store import KeyValueStore
from ..models.profile import Profile
from .accounts import AccountService
from .balance import BalanceAccount
from .challenges import ChallengeLedger
from .group_week import GroupWeekEngine
from .habits import HabitTracker
from .persistence import SnapshotWriter
from .statistics import (
    ChallengeStatistics,
    DayStatistics,
    challenge_statistics,
    day_statistics,
)

logger = logging.getLogger(__name__)


class HabitForgeSession:
    """Everything one local user owns: profile, balance, challenges, group week.

    Pass a SnapshotWriter to persist the snapshot after changes; without
    one the session is purely in-memory.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        writer: SnapshotWriter | None = None,
        snapshot: dict | None = None,
        rng: random.Random | None = None,
    ):
        self.clock = clock or SystemClock()
        self.writer = writer

        snapshot = snapshot or {}
        self.profile = Profile.from_snapshot(snapshot)
        self.balance = BalanceAccount(_restored_balance(snapshot))
        self.balance.add_listener(lambda _balance: self.persist())

        self.challenges = ChallengeLedger(self.clock)
        self.group = GroupWeekEngine(self.clock, self.balance, self.profile, rng=rng)
        self.habits = HabitTracker(self.profile)
        self.accounts = AccountService(
            self.clock,
            self.profile,
            on_change=self.persist,
            on_logout=self.clear_persisted,
        )

    def snapshot(self) -> dict:
        return self.profile.to_snapshot(self.balance.balance)

    def persist(self) -> None:
        """Schedule a snapshot write if signed in and a writer is attached."""
        if self.writer is None or not self.profile.is_authenticated:
            return
        self.writer.schedule(self.snapshot())

    def clear_persisted(self) -> None:
        if self.writer is not None:
            self.writer.schedule_clear()

    def statistics(self) -> ChallengeStatistics:
        return challenge_statistics(self.challenges.challenges)

    def day_statistics(self) -> DayStatistics:
        return day_statistics(self.profile)

    def to_dict(self) -> dict:
        data = self.profile.to_dict()
        data["balance"] = self.balance.balance
        return data

    async def close(self) -> None:
        """Wait for outstanding snapshot writes."""
        if self.writer is not None:
            await self.writer.flush()


def _restored_balance(snapshot: dict) -> int:
    balance = snapshot.get("balance")
    if isinstance(balance, bool) or not isinstance(balance, int) or balance < 0:
        return 0
    return balance


async def open_session(
    db_path: Path | None = None,
    clock: Clock | None = None,
    rng: random.Random | None = None,
) -> HabitForgeSession:
    """Build a session seeded from the stored snapshot."""
    writer = SnapshotWriter(KeyValueStore(db_path))
    snapshot = await writer.load()
    try:
        session = HabitForgeSession(clock=clock, writer=writer, snapshot=snapshot, rng=rng)
    except (KeyError, TypeError) as e:
        logger.error(f"Stored session snapshot is malformed, starting fresh: {e!r}")
        return HabitForgeSession(clock=clock, writer=writer, rng=rng)

    if snapshot:
        logger.info("Restored session snapshot")
    return session
