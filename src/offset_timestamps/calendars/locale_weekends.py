"""Weekend calendar backed by CLDR week data from the Babel library."""

from __future__ import annotations

import logging
from functools import lru_cache

from babel import Locale, UnknownLocaleError, default_locale

from offset_timestamps.calendars.base import DEFAULT_WEEKEND, CalendarError

logger = logging.getLogger(__name__)


class LocaleError(CalendarError):
    """Raised when a locale identifier cannot be resolved."""


class LocaleWeekendCalendar:
    """Calendar using each locale's CLDR weekend range (e.g. Fri-Sat for he_IL)."""

    def __init__(self, *, fallback_to_default: bool = True) -> None:
        self._fallback_to_default = fallback_to_default

    @property
    def fallback_to_default(self) -> bool:
        return self._fallback_to_default

    def weekend_days(self, locale: str | Locale | None = None) -> frozenset[int]:
        """Return the weekend set for `locale`, or for the host locale when None."""
        if isinstance(locale, Locale):
            return weekend_from_locale(locale)
        if locale is not None and not isinstance(locale, str):
            raise LocaleError(f"Unsupported locale type: {type(locale).__name__}")

        identifier = locale if locale is not None else host_locale_identifier()
        if identifier is None:
            logger.debug("No host locale configured; using default weekend")
            return DEFAULT_WEEKEND

        try:
            return _cached_weekend(_normalize_identifier(identifier))
        except LocaleError:
            if locale is None:
                logger.debug("Host locale %r not recognised; using default weekend", identifier)
                return DEFAULT_WEEKEND
            if not self._fallback_to_default:
                raise
            logger.warning("Unknown locale %r; using default weekend", identifier)
            return DEFAULT_WEEKEND


def host_locale_identifier() -> str | None:
    """Return the host's active locale identifier (LC_ALL, LC_TIME, LANG, ...)."""
    return default_locale("LC_TIME")


def weekend_from_locale(locale: Locale) -> frozenset[int]:
    """Expand a locale's inclusive weekend_start..weekend_end range into a set."""
    start = locale.weekend_start
    end = locale.weekend_end
    span = (end - start) % 7
    return frozenset((start + offset) % 7 for offset in range(span + 1))


def _normalize_identifier(identifier: str) -> str:
    text = identifier.strip()
    # Strip encoding/modifier suffixes such as "de_DE.UTF-8" or "ca_ES@valencia".
    text = text.split(".", 1)[0].split("@", 1)[0]
    return text.replace("-", "_")


@lru_cache(maxsize=128)
def _cached_weekend(identifier: str) -> frozenset[int]:
    try:
        locale = Locale.parse(identifier)
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise LocaleError(f"Unknown locale: {identifier!r}") from exc
    return weekend_from_locale(locale)
