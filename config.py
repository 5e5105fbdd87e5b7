# config.py

"""
Configuration settings for the virtual pet project.
"""

from pathlib import Path
import os


class Config:
    """
    Centralized configuration management.

    Gameplay numbers are fixed class constants. Only presentation and
    logging settings are read from the environment (or a .env file).
    """

    # Stat scale (inclusive)
    STAT_MIN = 1
    STAT_MAX = 10

    # Initial stats
    INITIAL_HUNGER = 5
    INITIAL_HAPPINESS = 6
    INITIAL_HEALTH = 8

    # Feed
    FEED_FULL_THRESHOLD = 1
    FEED_HUNGER_DELTA = -3
    FEED_HEALTH_DELTA = 1

    # Play
    PLAY_HUNGER_LIMIT = 8
    PLAY_HEALTH_LIMIT = 2
    PLAY_HAPPINESS_DELTA = 2
    PLAY_HUNGER_DELTA = 1

    # Rest
    REST_HEALTH_DELTA = 2
    REST_HAPPINESS_DELTA = -1

    # Passive tick (one hour)
    TICK_HUNGER_DELTA = 1
    TICK_HAPPINESS_DELTA = -1
    STARVING_THRESHOLD = 9
    STARVING_HEALTH_PENALTY = -2
    SADNESS_THRESHOLD = 2
    SADNESS_HEALTH_PENALTY = -1
    TREAT_ROLL_SIDES = 20  # 1 in 20
    TREAT_HAPPINESS_BONUS = 2

    # Critical thresholds, shared by the tick warnings and the status readout
    CRITICAL_HUNGER = 8
    CRITICAL_HAPPINESS = 2
    CRITICAL_HEALTH = 3

    PET_TYPES = ("cat", "dog", "rabbit")
    DEFAULT_PET_NAME = "Buddy"

    VERSION = "1.0"

    @classmethod
    def get_default_pet_name(cls) -> str:
        """Get the name used when the player leaves the name blank."""
        name = os.getenv("PET_DEFAULT_NAME", cls.DEFAULT_PET_NAME).strip()
        return name or cls.DEFAULT_PET_NAME

    @classmethod
    def get_log_dir(cls) -> Path:
        return Path(os.getenv("PET_LOG_DIR", "data/logs"))

    @classmethod
    def get_file_logging(cls) -> bool:
        return os.getenv("PET_FILE_LOGGING", "True").lower() in ("true", "1", "yes")
