"""Weekend calendar providers (locale-aware and fixed)."""

from offset_timestamps.calendars.base import DEFAULT_WEEKEND, CalendarError, WeekendCalendar
from offset_timestamps.calendars.factory import build_weekend_calendar
from offset_timestamps.calendars.fixed_weekends import FixedWeekendCalendar
from offset_timestamps.calendars.locale_weekends import LocaleError, LocaleWeekendCalendar

__all__ = [
    "DEFAULT_WEEKEND",
    "CalendarError",
    "FixedWeekendCalendar",
    "LocaleError",
    "LocaleWeekendCalendar",
    "WeekendCalendar",
    "build_weekend_calendar",
]
