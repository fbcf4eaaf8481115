"""Pydantic models for timestamp helper configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from offset_timestamps.weekdays import weekday_number


class CalendarProvider(str, Enum):
    """Weekend calendar provider."""

    locale = "locale"
    fixed = "fixed"


class UnknownLocalePolicy(str, Enum):
    """Policy when a locale identifier cannot be resolved."""

    error = "error"
    fallback_default_weekend = "fallback_default_weekend"


class LogLevel(str, Enum):
    """Logging level applied by the CLI."""

    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"


class CalendarConfig(BaseModel):
    """Weekend calendar provider and fixed weekend configuration."""

    provider: CalendarProvider = CalendarProvider.locale
    weekend_days: list[int] = Field(
        default_factory=lambda: [5, 6],
        validation_alias=AliasChoices("weekend_days", "weekend"),
    )
    unknown_locale_policy: UnknownLocalePolicy = UnknownLocalePolicy.fallback_default_weekend

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return {
            "babel": CalendarProvider.locale,
            "culture": CalendarProvider.locale,
            "weekdays_only": CalendarProvider.fixed,
        }.get(value, value)

    @field_validator("weekend_days", mode="before")
    @classmethod
    def _parse_weekend_days(cls, values: object) -> object:
        if not isinstance(values, (list, tuple, set, frozenset)):
            return values
        return sorted({weekday_number(value) for value in values})


class DefaultsConfig(BaseModel):
    """Defaults applied when a call does not pass zone/locale/inclusive."""

    zone: str | None = Field(default=None, validation_alias=AliasChoices("zone", "timezone", "tz"))
    locale: str | None = Field(default=None, validation_alias=AliasChoices("locale", "culture"))
    inclusive: bool = True

    @field_validator("zone", "locale")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("zone")
    @classmethod
    def _validate_zone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {value}") from exc
        return value


class LoggingConfig(BaseModel):
    """Logging settings for the CLI."""

    level: LogLevel = LogLevel.warning

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class ExtensionsConfig(BaseModel):
    """Root configuration for the timestamp helpers."""

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
