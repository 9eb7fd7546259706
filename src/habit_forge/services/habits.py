"""Simple habit counters."""

import logging
from uuid import uuid4

from ..errors import ValidationError
from ..models.habit import Habit
from ..models.profile import Profile

logger = logging.getLogger(__name__)


class HabitTracker:
    """Habits listed most recent first; each increment counts as a done day."""

    def __init__(self, profile: Profile):
        self.profile = profile
        self._habits: list[Habit] = []

    @property
    def habits(self) -> tuple[Habit, ...]:
        return tuple(self._habits)

    def add(self, title: str, description: str = "") -> Habit:
        title = (title or "").strip()
        if not title:
            raise ValidationError("title", "Enter a habit name.")

        habit = Habit(
            id=uuid4().hex[:8],
            title=title,
            description=(description or "").strip(),
        )
        self._habits.insert(0, habit)
        return habit

    def increment(self, habit_id: str) -> Habit:
        for habit in self._habits:
            if habit.id == habit_id:
                habit.progress += 1
                self.profile.done_days += 1
                logger.info(f"Habit {habit.title} progress {habit.progress}")
                return habit
        raise ValidationError("habit_id", "Habit not found.")
