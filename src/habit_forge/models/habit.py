"""Habit counter model."""

from dataclasses import dataclass


@dataclass
class Habit:
    """A habit with a running completion count."""

    id: str
    title: str
    description: str = ""
    progress: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "progress": self.progress,
        }
