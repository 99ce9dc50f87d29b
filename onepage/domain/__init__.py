"""Domain package exports for the checkout value objects and rules."""

from .entities import (
    Address,
    Country,
    Customer,
    CustomerAddress,
    FulfillmentEstimation,
    FulfillmentGroup,
    FulfillmentOption,
    Order,
    OrderPayment,
    State,
    is_shippable_type,
)
from .sections import CheckoutSection, EditRequest, HelpMessages, build_ordered_sections
from .visibility import (
    PopulatedFlags,
    SectionVisibility,
    count_shippable_groups,
    derive_section_visibility,
    populated_flags,
)

__all__ = [
    "Address",
    "CheckoutSection",
    "Country",
    "Customer",
    "CustomerAddress",
    "EditRequest",
    "FulfillmentEstimation",
    "FulfillmentGroup",
    "FulfillmentOption",
    "HelpMessages",
    "Order",
    "OrderPayment",
    "PopulatedFlags",
    "SectionVisibility",
    "State",
    "build_ordered_sections",
    "count_shippable_groups",
    "derive_section_visibility",
    "is_shippable_type",
    "populated_flags",
]
