"""Credit card expiration dropdown values."""

from __future__ import annotations

import calendar
import locale as _locale
import threading
from datetime import date
from typing import List, Optional

# LC_TIME is process-wide; renders on different worker threads take turns.
MONTH_NAMES_LOCK = threading.Lock()


def _posix_locale_name(locale_name: str) -> str:
    """``de-DE.UTF-8`` -> ``de_DE.UTF-8``; the codeset is left alone."""
    language, dot, codeset = locale_name.partition(".")
    return language.replace("-", "_") + dot + codeset


def _month_names(locale_name: Optional[str]) -> List[str]:
    with MONTH_NAMES_LOCK:
        if locale_name:
            cal = calendar.LocaleTextCalendar(locale=_posix_locale_name(locale_name))
            try:
                return [
                    cal.formatmonthname(2000, month, 0, withyear=False).strip()
                    for month in range(1, 13)
                ]
            except (_locale.Error, ValueError):
                pass
        return [calendar.month_name[month] for month in range(1, 13)]


def expiration_months(locale_name: Optional[str] = None) -> List[str]:
    """Return ``"01 - January"`` style labels, localized when the locale is installed."""
    names = _month_names(locale_name)
    return [f"{index:02d} - {name}" for index, name in enumerate(names, start=1)]


def expiration_years(count: int = 10, today: Optional[date] = None) -> List[str]:
    """Return the current year and the following ``count - 1`` years."""
    start = (today or date.today()).year
    return [str(start + offset) for offset in range(max(count, 0))]


__all__ = ["MONTH_NAMES_LOCK", "expiration_months", "expiration_years"]
