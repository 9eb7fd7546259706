"""Database layer for habit-forge."""

from .engine import get_db_path, init_db
from .store import KeyValueStore

__all__ = [
    "get_db_path",
    "init_db",
    "KeyValueStore",
]
