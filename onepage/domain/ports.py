from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .entities import (
    Address,
    Country,
    CustomerAddress,
    FulfillmentEstimation,
    FulfillmentGroup,
    FulfillmentOption,
    Order,
    State,
)


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


class FulfillmentPriceError(UseCaseError):
    """Raised by pricing providers when an estimate cannot be produced."""

    def __init__(self, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__("FULFILLMENT_PRICE_FAILED", message, meta=meta)


# ---- Ports (Hexagonal boundaries) ----
class FulfillmentGroupPort(Protocol):
    """Queries over the fulfillment groups of an order."""

    def is_shippable(self, fulfillment_type: Optional[str]) -> bool: ...
    def first_shippable_group(self, order: Order) -> Optional[FulfillmentGroup]: ...


class FulfillmentOptionPort(Protocol):
    """Catalog of delivery methods."""

    def read_all_fulfillment_options(self) -> List[FulfillmentOption]: ...


class FulfillmentPricingPort(Protocol):
    """Cost estimation for fulfillment options (may raise FulfillmentPriceError)."""

    def estimate_cost_for_fulfillment_group(
        self, group: FulfillmentGroup, options: Iterable[FulfillmentOption]
    ) -> FulfillmentEstimation: ...


class CustomerAddressPort(Protocol):
    """Saved addresses of a customer."""

    def find_default_customer_address(self, customer_id: str) -> Optional[CustomerAddress]: ...


class AddressPort(Protocol):
    def read_address_by_id(self, address_id: str) -> Optional[Address]: ...


class StatePort(Protocol):
    def find_states(self) -> List[State]: ...


class CountryPort(Protocol):
    def find_countries(self) -> List[Country]: ...

