"""Business-day and range helpers for offset timestamps.

An offset timestamp is a tz-aware `pandas.Timestamp` (a tz-aware `datetime`
is accepted and coerced). Naive values are taken as UTC. None of the helpers
mutate their inputs.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from numbers import Integral

import pandas as pd
from babel import Locale

from offset_timestamps.calendars.base import UTC, WeekendCalendar, as_timestamp, resolve_zone
from offset_timestamps.calendars.locale_weekends import LocaleWeekendCalendar

logger = logging.getLogger(__name__)

TimestampLike = pd.Timestamp | datetime | str
ZoneLike = str | tzinfo

_ONE_DAY = pd.Timedelta(days=1)
_DEFAULT_CALENDAR = LocaleWeekendCalendar()


class BusinessDayError(ValueError):
    """Raised when business days cannot be counted (e.g. every day is a weekend)."""


def to_utc_datetime(ts: TimestampLike) -> pd.Timestamp:
    """Return the same instant expressed in UTC."""
    return as_timestamp(ts).tz_convert(UTC)


def is_business_day(
    ts: TimestampLike,
    zone: ZoneLike | None = None,
    locale: str | Locale | None = None,
    *,
    weekends: WeekendCalendar | None = None,
) -> bool:
    """Return True when `ts` does not fall on a weekend day.

    With `zone`, the day of week is taken from the wall clock in that zone;
    otherwise from the timestamp's own offset. The weekend set comes from
    `weekends` (default: the CLDR weekend of `locale`, or of the host locale
    when `locale` is None).
    """
    calendar = weekends if weekends is not None else _DEFAULT_CALENDAR
    return _is_business_day(as_timestamp(ts), zone, calendar.weekend_days(locale))


def add_business_days(
    ts: TimestampLike,
    count: int,
    zone: ZoneLike | None = None,
    locale: str | Locale | None = None,
    *,
    weekends: WeekendCalendar | None = None,
) -> pd.Timestamp:
    """Move `ts` by `count` business days (negative counts move backwards).

    Steps are whole 24-hour days on the timestamp's own clock; `zone` and
    `locale` only decide which of the visited days count. The result is always
    a tz-aware Timestamp (naive input is tagged UTC); a zero count returns the
    coerced input without stepping.
    """
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise TypeError(f"count must be an integer, got {type(count).__name__}")
    if count == 0:
        return as_timestamp(ts)

    calendar = weekends if weekends is not None else _DEFAULT_CALENDAR
    weekend = calendar.weekend_days(locale)
    if len(weekend) >= 7:
        raise BusinessDayError("Every day of the week is a weekend day; no business days to count")

    step = _ONE_DAY if count > 0 else -_ONE_DAY
    remaining = abs(int(count))
    current = as_timestamp(ts)
    steps = 0
    while remaining > 0:
        current = current + step
        steps += 1
        if _is_business_day(current, zone, weekend):
            remaining -= 1

    logger.debug("Moved %d business day(s) in %d calendar day(s)", count, steps)
    return current


def is_between(
    ts: TimestampLike,
    start: TimestampLike,
    end: TimestampLike,
    inclusive: bool = True,
) -> bool:
    """Return True when `ts` lies between `start` and `end` (in either order)."""
    value = as_timestamp(ts)
    lower = as_timestamp(start)
    upper = as_timestamp(end)
    if lower > upper:
        lower, upper = upper, lower

    if inclusive:
        return lower <= value <= upper
    return lower < value < upper


def _is_business_day(timestamp: pd.Timestamp, zone: ZoneLike | None, weekend: frozenset[int]) -> bool:
    if zone is not None:
        timestamp = timestamp.tz_convert(resolve_zone(zone))
    return timestamp.dayofweek not in weekend
