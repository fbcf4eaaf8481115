"""Fixed weekend calendar (same weekend for every locale)."""

from __future__ import annotations

from collections.abc import Iterable

from offset_timestamps.calendars.base import DEFAULT_WEEKEND
from offset_timestamps.weekdays import weekday_number


class FixedWeekendCalendar:
    """Calendar with an explicit weekend set; the locale argument is ignored."""

    def __init__(self, days: Iterable[int | str] = DEFAULT_WEEKEND) -> None:
        self._days = frozenset(weekday_number(day) for day in days)

    @property
    def days(self) -> frozenset[int]:
        return self._days

    def weekend_days(self, locale: object | None = None) -> frozenset[int]:
        """Return the configured weekend set."""
        _ = locale
        return self._days
