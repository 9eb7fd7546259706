"""Pytest configuration and fixtures."""

import random
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from habit_forge.clock import ManualClock
from habit_forge.models.profile import Profile
from habit_forge.services.balance import BalanceAccount
from habit_forge.services.challenges import ChallengeLedger
from habit_forge.services.group_week import GroupWeekEngine
from habit_forge.services.session import HabitForgeSession
from habit_forge.services.validation import ChallengeCandidate

# Wednesday afternoon; the containing week starts Monday 2026-10-19.
WEDNESDAY = datetime(2026, 10, 21, 15, 30)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def clock():
    """A clock parked on a Wednesday afternoon."""
    return ManualClock(WEDNESDAY)


@pytest.fixture
def profile():
    return Profile(login_name="runner01", is_authenticated=True)


@pytest.fixture
def balance():
    return BalanceAccount(1000)


@pytest.fixture
def ledger(clock):
    return ChallengeLedger(clock)


@pytest.fixture
def engine(clock, balance, profile):
    return GroupWeekEngine(clock, balance, profile, rng=random.Random(3))


@pytest.fixture
def session(clock):
    """An in-memory session with no persistence."""
    return HabitForgeSession(clock=clock, rng=random.Random(7))


@pytest.fixture
def make_candidate():
    """Factory for valid challenge candidates with optional overrides."""

    def _make(**overrides) -> ChallengeCandidate:
        fields = {
            "exercise": "Push-ups",
            "target": "12",
            "sets": "10",
            "per_week": "4",
            "stake": "500",
            "fail_mode": "charity",
        }
        fields.update(overrides)
        return ChallengeCandidate(**fields)

    return _make
