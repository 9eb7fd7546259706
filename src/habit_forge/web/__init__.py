"""Web API for habit-forge."""

from .app import create_app

__all__ = ["create_app"]
