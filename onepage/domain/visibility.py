"""Visibility rules for the checkout sections, derived from the cart snapshot.

Call context:
    ``CheckoutVM.build`` counts shippable groups once, then passes the count
    into :func:`derive_section_visibility`. Populated checks feed
    :func:`onepage.domain.sections.build_ordered_sections`.

Every helper tolerates empty collections and resolves to the negative state
instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .entities import TEMPORARY_GATEWAY, Order, OrderPayment, is_shippable_type

ShippablePredicate = Callable[[Optional[str]], bool]


@dataclass(frozen=True)
class SectionVisibility:
    """Show/hide flags for the checkout layout."""

    show_billing_info: bool = True
    show_shipping_info: bool = True
    show_all_payment_methods: bool = True
    show_payment_method: bool = True
    contains_third_party_payment: bool = False
    contains_unconfirmed_credit_card: bool = False
    unconfirmed_credit_card: Optional[OrderPayment] = None


@dataclass(frozen=True)
class PopulatedFlags:
    """Which sections already carry enough data to be shown as saved."""

    order_info: bool = False
    billing: bool = False
    shipping: bool = False


def count_shippable_groups(
    order: Order, is_shippable: ShippablePredicate = is_shippable_type
) -> int:
    """Count fulfillment groups on the order that need a shipping address."""
    return sum(1 for group in order.fulfillment_groups if is_shippable(group.type))


def has_populated_order_info(order: Order) -> bool:
    return bool((order.email_address or "").strip())


def has_populated_billing_address(order: Order) -> bool:
    """True when an active credit card payment carries a billing address."""
    for payment in order.payments:
        if payment.active and payment.type == "CREDIT_CARD" and payment.billing_address is not None:
            return True
    return False


def has_populated_shipping_address(
    order: Order, is_shippable: ShippablePredicate = is_shippable_type
) -> bool:
    """True when a shippable group has both an address and a delivery option."""
    for group in order.fulfillment_groups:
        if not is_shippable(group.type):
            continue
        if group.address is not None and group.fulfillment_option is not None:
            return True
    return False


def populated_flags(
    order: Order, is_shippable: ShippablePredicate = is_shippable_type
) -> PopulatedFlags:
    return PopulatedFlags(
        order_info=has_populated_order_info(order),
        billing=has_populated_billing_address(order),
        shipping=has_populated_shipping_address(order, is_shippable),
    )


def derive_section_visibility(order: Order, num_shippable_groups: int) -> SectionVisibility:
    """Decide which sections are drawn for this cart.

    - shipping is hidden when nothing on the order ships;
    - billing and the full payment method list are hidden once a third party
      account (e.g. an express wallet) or a non-temporary card is on the order;
    - the full payment method list is hidden when gift cards or customer
      credit already cover the total.
    """
    contains_third_party = False
    contains_unconfirmed_cc = False
    unconfirmed_cc: Optional[OrderPayment] = None
    for payment in order.payments:
        if not payment.active:
            continue
        if payment.type == "THIRD_PARTY_ACCOUNT":
            contains_third_party = True
        if payment.type == "CREDIT_CARD" and payment.gateway_type != TEMPORARY_GATEWAY:
            contains_unconfirmed_cc = True
            unconfirmed_cc = payment

    show_billing = True
    show_all_methods = True
    remaining = order.total_after_applied_payments
    if contains_third_party or contains_unconfirmed_cc:
        show_billing = False
        show_all_methods = False
    elif remaining is not None and remaining == 0:
        show_all_methods = False

    return SectionVisibility(
        show_billing_info=show_billing,
        show_shipping_info=num_shippable_groups > 0,
        show_all_payment_methods=show_all_methods,
        show_payment_method=True,
        contains_third_party_payment=contains_third_party,
        contains_unconfirmed_credit_card=contains_unconfirmed_cc,
        unconfirmed_credit_card=unconfirmed_cc,
    )


__all__ = [
    "PopulatedFlags",
    "SectionVisibility",
    "count_shippable_groups",
    "derive_section_visibility",
    "has_populated_billing_address",
    "has_populated_order_info",
    "has_populated_shipping_address",
    "populated_flags",
]
