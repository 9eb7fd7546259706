"""CLI commands for habit-forge."""

from .account import account
from .init import init
from .serve import serve

__all__ = [
    "account",
    "init",
    "serve",
]
