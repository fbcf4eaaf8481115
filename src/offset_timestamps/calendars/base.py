"""Base protocol and utilities for weekend calendars."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol

import pandas as pd
from zoneinfo import ZoneInfo

UTC = ZoneInfo("UTC")

DEFAULT_WEEKEND: frozenset[int] = frozenset({5, 6})


class CalendarError(ValueError):
    """Raised when a weekend calendar cannot be built or resolved."""


class WeekendCalendar(Protocol):
    """Provides the set of non-business weekdays (Monday=0 .. Sunday=6) for a locale."""

    def weekend_days(self, locale: object | None = None) -> frozenset[int]:
        """Return weekend weekday numbers for `locale` (host default when None)."""


def as_timestamp(value: pd.Timestamp | datetime | str) -> pd.Timestamp:
    """Coerce to a tz-aware Timestamp; naive values are taken as UTC."""
    timestamp = pd.Timestamp(value)
    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize(UTC)
    return timestamp


def resolve_zone(zone: str | tzinfo) -> tzinfo:
    """Resolve an IANA key to a ZoneInfo; tzinfo instances pass through.

    Unknown keys raise `zoneinfo.ZoneInfoNotFoundError`.
    """
    if isinstance(zone, tzinfo):
        return zone
    return ZoneInfo(zone.strip())
