"""Business-day and range helpers for timezone-aware timestamps."""

from offset_timestamps.timestamps import (
    BusinessDayError,
    add_business_days,
    is_between,
    is_business_day,
    to_utc_datetime,
)

__all__ = [
    "BusinessDayError",
    "add_business_days",
    "is_between",
    "is_business_day",
    "to_utc_datetime",
]
