"""Factory for building weekend calendars from config."""

from __future__ import annotations

from offset_timestamps.calendars.base import CalendarError, WeekendCalendar
from offset_timestamps.calendars.fixed_weekends import FixedWeekendCalendar
from offset_timestamps.calendars.locale_weekends import LocaleWeekendCalendar
from offset_timestamps.config.models import CalendarConfig, CalendarProvider, UnknownLocalePolicy


def build_weekend_calendar(config: CalendarConfig) -> WeekendCalendar:
    """Build the weekend calendar selected by `config.provider`."""

    if config.provider == CalendarProvider.fixed:
        return FixedWeekendCalendar(config.weekend_days)

    if config.provider != CalendarProvider.locale:
        raise CalendarError(f"Unsupported calendar provider: {config.provider}")

    if config.unknown_locale_policy == UnknownLocalePolicy.error:
        return LocaleWeekendCalendar(fallback_to_default=False)

    if config.unknown_locale_policy == UnknownLocalePolicy.fallback_default_weekend:
        return LocaleWeekendCalendar(fallback_to_default=True)

    raise CalendarError(f"Unsupported unknown_locale_policy: {config.unknown_locale_policy}")
