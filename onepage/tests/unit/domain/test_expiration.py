from __future__ import annotations

import locale
from datetime import date

from onepage.domain.expiration import (
    MONTH_NAMES_LOCK,
    _posix_locale_name,
    expiration_months,
    expiration_years,
)


def test_expiration_months_default_to_english_labels() -> None:
    months = expiration_months()
    assert len(months) == 12
    assert months[0] == "01 - January"
    assert months[11] == "12 - December"


def test_expiration_months_fall_back_for_unknown_locale() -> None:
    assert expiration_months("xx-NOWHERE")[1] == "02 - February"


def test_expiration_months_keep_numeric_prefix_for_any_locale() -> None:
    months = expiration_months("en_US")
    assert [label[:5] for label in months[:3]] == ["01 - ", "02 - ", "03 - "]


def test_expiration_years_start_with_current_year() -> None:
    years = expiration_years(10, today=date(2024, 6, 1))
    assert years[0] == "2024"
    assert years[-1] == "2033"
    assert len(years) == 10


def test_expiration_years_handle_zero_count() -> None:
    assert expiration_years(0, today=date(2024, 1, 1)) == []


def test_expiration_months_fall_back_for_locale_with_null_byte() -> None:
    months = expiration_months("en\x00US")
    assert months[0] == "01 - January"
    assert len(months) == 12


def test_locale_switch_happens_under_month_names_lock(monkeypatch) -> None:
    real_setlocale = locale.setlocale
    held = []

    def _spy(category, value=None):
        held.append(MONTH_NAMES_LOCK.locked())
        return real_setlocale(category, value)

    monkeypatch.setattr(locale, "setlocale", _spy)

    expiration_months("xx-NOWHERE")

    assert held
    assert all(held)
    assert MONTH_NAMES_LOCK.locked() is False


def test_posix_locale_name_keeps_codeset() -> None:
    assert _posix_locale_name("de-DE.UTF-8") == "de_DE.UTF-8"
    assert _posix_locale_name("fr-CA") == "fr_CA"
