from __future__ import annotations

import logging

from habit_home.config import Settings, get_settings
from habit_home.utils.logging import setup_logging


def test_defaults():
    settings = Settings()
    assert settings.eye_level_m == 1.524
    assert settings.surface_thickness_m == 0.02
    assert settings.default_bias == 7.0
    assert settings.api_prefix == "/api/v1"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HABIT_HOME_EYE_LEVEL_M", "1.2")
    monkeypatch.setenv("HABIT_HOME_DEFAULT_BIAS", "3")
    settings = Settings()
    assert settings.eye_level_m == 1.2
    assert settings.default_bias == 3.0


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG")
    logger = setup_logging("WARNING")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
