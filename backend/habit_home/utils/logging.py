"""
Habit Home Logging

Usage:
    import logging
    logger = logging.getLogger(__name__)

Call setup_logging() once at application startup; every
``habit_home.*`` logger then shares the same handler and format.
"""

import logging
import sys

LOGGER_NAME = "habit_home"


class HabitHomeFormatter(logging.Formatter):
    def format(self, record):
        # habit_home.core.scoring.x -> habit_home.core.scoring
        if record.name.startswith(LOGGER_NAME + "."):
            parts = record.name.split(".")
            if len(parts) > 3:
                record.name = ".".join(parts[:3])
        return super().format(record)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Calling this more than once replaces the existing handler instead of
    stacking duplicates.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO")

    Returns:
        The configured ``habit_home`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(HabitHomeFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger
