from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional

from onepage.domain.entities import Country, State
from onepage.domain.expiration import expiration_months, expiration_years
from onepage.domain.ports import CountryPort, StatePort


@dataclass(frozen=True)
class CheckoutReferenceData:
    """Dropdown lists for the address and card forms."""

    states: List[State]
    countries: List[Country]
    expiration_months: List[str]
    expiration_years: List[str]


@dataclass
class LoadCheckoutReferenceData:
    """Collect state/country lists and card expiration choices."""

    state_port: StatePort
    country_port: CountryPort
    expiration_year_count: int = 10
    today: Callable[[], date] = field(default=date.today)

    def __call__(self, locale_name: Optional[str] = None) -> CheckoutReferenceData:
        return CheckoutReferenceData(
            states=list(self.state_port.find_states()),
            countries=list(self.country_port.find_countries()),
            expiration_months=expiration_months(locale_name),
            expiration_years=expiration_years(self.expiration_year_count, today=self.today()),
        )


__all__ = ["CheckoutReferenceData", "LoadCheckoutReferenceData"]
