"""Weekday numbering shared by calendars and config (Monday=0 .. Sunday=6)."""

from __future__ import annotations

WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def weekday_number(value: int | str) -> int:
    """Parse a weekday given as 0..6 or an (abbreviated) English day name."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid weekday: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 6:
            raise ValueError(f"Weekday must be between 0 (Monday) and 6 (Sunday): {value}")
        return value
    text = str(value).strip().lower()
    if text.isdigit():
        return weekday_number(int(text))
    for number, name in enumerate(WEEKDAY_NAMES):
        if len(text) >= 3 and name.startswith(text):
            return number
    raise ValueError(f"Unknown weekday name: {value!r}")
