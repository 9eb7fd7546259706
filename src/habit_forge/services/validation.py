"""Validation of proposed personal challenges.

All checks are pure. The first failing check raises a ValidationError naming
the field, so callers can show one message at a time.
"""

import math
from dataclasses import dataclass

from ..errors import ValidationError
from ..models.challenge import ChallengeFailMode

# Inclusive bounds
TARGET_RANGE = (1, 30)
SETS_RANGE = (1, 15)
PER_WEEK_RANGE = (3, 6)
STAKE_RANGE = (500, 1500)


@dataclass
class ChallengeCandidate:
    """Raw fields for a new challenge, as typed by the user."""

    exercise: str
    target: str | int | float
    sets: str | int
    per_week: str | int = 3
    stake: str | int = 500
    fail_mode: str | ChallengeFailMode = ChallengeFailMode.CHARITY


@dataclass(frozen=True)
class ValidatedChallenge:
    """Normalized challenge fields that passed every check."""

    exercise: str
    target: str
    sets: int
    per_week: int
    stake: int
    fail_mode: ChallengeFailMode


def parse_number(value) -> float | None:
    """Parse user input as a finite number, or return None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def _check_range(field: str, value, bounds: tuple[int, int], whole: bool, message: str):
    number = parse_number(value)
    low, high = bounds
    if number is None or number < low or number > high:
        raise ValidationError(field, message)
    if whole and not number.is_integer():
        raise ValidationError(field, message)
    return number


def validate_challenge(candidate: ChallengeCandidate) -> ValidatedChallenge:
    """Check a candidate challenge and return its normalized form.

    Order: exercise, target, sets, per_week, stake, fail_mode.

    Raises:
        ValidationError: on the first field that fails
    """
    exercise = str(candidate.exercise or "").strip()
    if not exercise:
        raise ValidationError("exercise", "Enter an exercise.")

    target = str(candidate.target if candidate.target is not None else "").strip()
    if not target:
        raise ValidationError("target", "Enter reps or time per set.")
    _check_range(
        "target", target, TARGET_RANGE, whole=False,
        message="Reps per set must be between 1 and 30.",
    )

    sets = _check_range(
        "sets", candidate.sets, SETS_RANGE, whole=True,
        message="Sets must be between 1 and 15.",
    )
    per_week = _check_range(
        "per_week", candidate.per_week, PER_WEEK_RANGE, whole=True,
        message="Workouts per week must be between 3 and 6.",
    )
    stake = _check_range(
        "stake", candidate.stake, STAKE_RANGE, whole=True,
        message="Stake must be between 500 and 1500.",
    )

    try:
        fail_mode = ChallengeFailMode(candidate.fail_mode or ChallengeFailMode.CHARITY)
    except ValueError:
        raise ValidationError("fail_mode", "Choose charity or pool.")

    return ValidatedChallenge(
        exercise=exercise,
        target=target,
        sets=int(sets),
        per_week=int(per_week),
        stake=int(stake),
        fail_mode=fail_mode,
    )
