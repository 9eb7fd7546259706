"""Runtime configuration for habit-forge."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Settings read from the environment (or a .env file)."""

    DATA_DIR = Path(os.getenv("HABIT_FORGE_DATA_DIR", "data"))
    LOG_LEVEL = os.getenv("HABIT_FORGE_LOG_LEVEL", "WARNING").upper()

    # Web server defaults
    HOST = os.getenv("HABIT_FORGE_HOST", "127.0.0.1")
    PORT = int(os.getenv("HABIT_FORGE_PORT", 8000))

    @classmethod
    def log_format(cls) -> str:
        if cls.LOG_LEVEL == "DEBUG":
            return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        return "%(levelname)s: %(message)s"
