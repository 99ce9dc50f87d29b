from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from onepage.domain.entities import (
    Address,
    Country,
    CustomerAddress,
    FulfillmentEstimation,
    FulfillmentGroup,
    FulfillmentOption,
    Order,
    State,
    is_shippable_type,
)
from onepage.domain.ports import (
    AddressPort,
    CountryPort,
    CustomerAddressPort,
    FulfillmentGroupPort,
    FulfillmentOptionPort,
    FulfillmentPriceError,
    FulfillmentPricingPort,
    StatePort,
)

DEFAULT_OPTIONS: Tuple[FulfillmentOption, ...] = (
    FulfillmentOption(id="standard", name="Standard", description="5 - 7 business days"),
    FulfillmentOption(id="priority", name="Priority", description="2 - 3 business days"),
    FulfillmentOption(id="express", name="Express", description="1 - 2 business days"),
)
DEFAULT_STATES: Tuple[State, ...] = (
    State("CA", "California"),
    State("NY", "New York"),
    State("TX", "Texas"),
    State("WA", "Washington"),
)
DEFAULT_COUNTRIES: Tuple[Country, ...] = (
    Country("CA", "Canada"),
    Country("US", "United States"),
)


@dataclass
class InMemoryCommerce(
    FulfillmentGroupPort,
    FulfillmentOptionPort,
    CustomerAddressPort,
    AddressPort,
    StatePort,
    CountryPort,
):
    """Offline stand-in for the catalog, customer and reference services."""

    options: List[FulfillmentOption] = field(default_factory=lambda: list(DEFAULT_OPTIONS))
    states: List[State] = field(default_factory=lambda: list(DEFAULT_STATES))
    countries: List[Country] = field(default_factory=lambda: list(DEFAULT_COUNTRIES))

    def __post_init__(self) -> None:
        self._addresses: Dict[str, Address] = {}
        self._customer_addresses: Dict[str, List[CustomerAddress]] = {}

    # ---------- FulfillmentGroupPort ----------

    def is_shippable(self, fulfillment_type: Optional[str]) -> bool:
        return is_shippable_type(fulfillment_type)

    def first_shippable_group(self, order: Order) -> Optional[FulfillmentGroup]:
        for group in order.fulfillment_groups:
            if self.is_shippable(group.type):
                return group
        return None

    # ---------- FulfillmentOptionPort ----------

    def read_all_fulfillment_options(self) -> List[FulfillmentOption]:
        return list(self.options)

    # ---------- CustomerAddressPort / AddressPort ----------

    def find_default_customer_address(self, customer_id: str) -> Optional[CustomerAddress]:
        for entry in self._customer_addresses.get(customer_id, []):
            if entry.default:
                return entry
        return None

    def read_address_by_id(self, address_id: str) -> Optional[Address]:
        return self._addresses.get(address_id)

    # ---------- StatePort / CountryPort ----------

    def find_states(self) -> List[State]:
        return sorted(self.states, key=lambda item: item.name)

    def find_countries(self) -> List[Country]:
        return sorted(self.countries, key=lambda item: item.name)

    # ---------- Test helpers ----------

    def add_customer_address(
        self,
        customer_id: str,
        address: Address,
        *,
        address_name: str,
        default: bool = False,
    ) -> CustomerAddress:
        if not address.id:
            raise ValueError("add_customer_address: address requires an id")
        self._addresses[address.id] = address
        entry = CustomerAddress(address_name=address_name, address_id=address.id, default=default)
        entries = self._customer_addresses.setdefault(customer_id, [])
        if default:
            entries[:] = [
                CustomerAddress(item.address_name, item.address_id, False) for item in entries
            ]
        entries.append(entry)
        return entry


@dataclass
class FlatRatePricing(FulfillmentPricingPort):
    """Deterministic pricing used when no pricing service is configured.

    Options without a configured rate fail the whole estimate, like a carrier
    that cannot quote one of the requested services.
    """

    rates: Mapping[str, Decimal] = field(
        default_factory=lambda: {
            "standard": Decimal("5.00"),
            "priority": Decimal("12.50"),
            "express": Decimal("25.00"),
        }
    )

    def estimate_cost_for_fulfillment_group(
        self, group: FulfillmentGroup, options: Iterable[FulfillmentOption]
    ) -> FulfillmentEstimation:
        if group.address is None:
            raise FulfillmentPriceError(f"Fulfillment group {group.id} has no address to quote.")
        prices = []
        for option in sorted(options, key=lambda item: item.id):
            rate = self.rates.get(option.id)
            if rate is None:
                raise FulfillmentPriceError(f"No rate configured for option {option.id}.")
            prices.append((option.id, Decimal(rate)))
        return FulfillmentEstimation(group_id=group.id, prices=tuple(prices))


__all__ = ["FlatRatePricing", "InMemoryCommerce"]
