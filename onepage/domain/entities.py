from __future__ import annotations

"""Domain value objects for the cart snapshot read by the checkout page."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal, Optional, Tuple

FulfillmentType = Literal[
    "PHYSICAL_SHIP",
    "PHYSICAL_PICKUP",
    "PHYSICAL_PICKUP_OR_SHIP",
    "DIGITAL",
    "GIFT_CARD",
]
PaymentType = Literal["CREDIT_CARD", "THIRD_PARTY_ACCOUNT", "GIFT_CARD", "CUSTOMER_CREDIT"]
PaymentGatewayType = str

TEMPORARY_GATEWAY: PaymentGatewayType = "TEMPORARY"

SHIPPABLE_FULFILLMENT_TYPES = frozenset({"PHYSICAL_SHIP", "PHYSICAL_PICKUP_OR_SHIP"})
FINAL_PAYMENT_TYPES = frozenset({"CREDIT_CARD", "THIRD_PARTY_ACCOUNT"})


def is_shippable_type(fulfillment_type: Optional[str]) -> bool:
    """Return True for fulfillment types that travel by carrier.

    Groups without an explicit type ship by default.
    """
    if fulfillment_type is None:
        return True
    return fulfillment_type in SHIPPABLE_FULFILLMENT_TYPES


@dataclass(frozen=True)
class Address:
    """Postal address attached to a fulfillment group or a payment."""

    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""


@dataclass(frozen=True)
class CustomerAddress:
    """Named link between a customer and one of their saved addresses."""

    address_name: str
    address_id: str
    default: bool = False


@dataclass(frozen=True)
class Customer:
    """Customer bound to the current session."""

    id: Optional[str] = None
    anonymous: bool = True


@dataclass(frozen=True)
class FulfillmentOption:
    """Delivery method a shopper can pick for a fulfillment group."""

    id: str
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("FulfillmentOption.id must be a non-empty string.")


@dataclass(frozen=True)
class FulfillmentGroup:
    """Items on the order that are fulfilled together."""

    id: str
    type: Optional[FulfillmentType] = None
    address: Optional[Address] = None
    fulfillment_option: Optional[FulfillmentOption] = None


@dataclass(frozen=True)
class OrderPayment:
    """A payment applied to the order."""

    id: str
    type: PaymentType
    active: bool = True
    gateway_type: Optional[PaymentGatewayType] = None
    amount: Optional[Decimal] = None
    billing_address: Optional[Address] = None

    @property
    def is_final_payment(self) -> bool:
        """Final payments settle whatever remains after gift cards and credit."""
        return self.type in FINAL_PAYMENT_TYPES


@dataclass(frozen=True)
class Order:
    """Read-only snapshot of the session cart."""

    id: Optional[str] = None
    email_address: Optional[str] = None
    fulfillment_groups: Tuple[FulfillmentGroup, ...] = ()
    payments: Tuple[OrderPayment, ...] = ()
    total: Optional[Decimal] = None
    currency: str = "USD"
    is_null: bool = False
    """Marks the placeholder used when no cart exists in the session."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "fulfillment_groups", tuple(self.fulfillment_groups or ()))
        object.__setattr__(self, "payments", tuple(self.payments or ()))

    @classmethod
    def null(cls) -> "Order":
        return cls(is_null=True)

    @property
    def total_after_applied_payments(self) -> Optional[Decimal]:
        """Order total minus every active non-final payment (gift cards, credit)."""
        if self.total is None:
            return None
        remaining = Decimal(self.total)
        for payment in self.payments:
            if not payment.active or payment.is_final_payment:
                continue
            if payment.amount is not None:
                remaining -= Decimal(payment.amount)
        return remaining


@dataclass(frozen=True)
class State:
    """Reference row for the state/province dropdown."""

    abbreviation: str
    name: str


@dataclass(frozen=True)
class Country:
    """Reference row for the country dropdown."""

    abbreviation: str
    name: str


@dataclass(frozen=True)
class FulfillmentEstimation:
    """Estimated cost per fulfillment option id for one group."""

    group_id: str
    prices: Tuple[Tuple[str, Decimal], ...] = field(default_factory=tuple)


__all__ = [
    "Address",
    "Country",
    "Customer",
    "CustomerAddress",
    "FINAL_PAYMENT_TYPES",
    "FulfillmentEstimation",
    "FulfillmentGroup",
    "FulfillmentOption",
    "FulfillmentType",
    "Order",
    "OrderPayment",
    "PaymentGatewayType",
    "PaymentType",
    "SHIPPABLE_FULFILLMENT_TYPES",
    "State",
    "TEMPORARY_GATEWAY",
    "is_shippable_type",
]
