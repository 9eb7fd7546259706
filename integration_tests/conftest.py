"""Pytest configuration for integration tests."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from habit_forge.clock import ManualClock


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def db_path():
    """A database file that outlives a single app instance."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "habit_forge.db"


@pytest.fixture
def clock():
    return ManualClock(datetime(2026, 10, 20, 7, 45))
