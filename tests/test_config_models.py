from __future__ import annotations

import pytest
from pydantic import ValidationError

from offset_timestamps.config.models import (
    CalendarConfig,
    CalendarProvider,
    DefaultsConfig,
    ExtensionsConfig,
    LogLevel,
    UnknownLocalePolicy,
)


def test_calendar_config_defaults() -> None:
    cfg = CalendarConfig()
    assert cfg.provider == CalendarProvider.locale
    assert cfg.weekend_days == [5, 6]
    assert cfg.unknown_locale_policy == UnknownLocalePolicy.fallback_default_weekend


def test_calendar_config_weekend_days_parses_names_and_deduplicates() -> None:
    cfg = CalendarConfig(weekend=["Sat", "friday", 4, "5"])
    assert cfg.weekend_days == [4, 5]


def test_calendar_config_rejects_unknown_weekday() -> None:
    with pytest.raises(ValidationError):
        CalendarConfig(weekend_days=["someday"])
    with pytest.raises(ValidationError):
        CalendarConfig(weekend_days=[9])


def test_calendar_config_provider_aliases() -> None:
    assert CalendarConfig(provider="babel").provider == CalendarProvider.locale
    assert CalendarConfig(provider="weekdays_only").provider == CalendarProvider.fixed


def test_defaults_config_blank_values_become_none() -> None:
    cfg = DefaultsConfig(zone="  ", culture="")
    assert cfg.zone is None
    assert cfg.locale is None


def test_defaults_config_rejects_unknown_zone() -> None:
    with pytest.raises(ValidationError):
        DefaultsConfig(timezone="Mars/Olympus_Mons")
    assert DefaultsConfig(tz="America/Chicago").zone == "America/Chicago"


def test_extensions_config_logging_level_case_insensitive() -> None:
    cfg = ExtensionsConfig.model_validate({"logging": {"level": "debug"}})
    assert cfg.logging.level == LogLevel.debug
