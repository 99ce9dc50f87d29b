from __future__ import annotations

from decimal import Decimal
from typing import Optional

from onepage.adapters.commerce_memory import FlatRatePricing, InMemoryCommerce
from onepage.domain.entities import (
    Address,
    FulfillmentGroup,
    FulfillmentOption,
    Order,
    OrderPayment,
)
from onepage.domain.ports import FulfillmentPricingPort
from onepage.usecases.estimate_fulfillment import EstimateFulfillment
from onepage.usecases.load_reference_data import LoadCheckoutReferenceData
from onepage.usecases.prepopulate_checkout_forms import PrepopulateCheckoutForms
from onepage.usecases.translate_payment_request import TranslateOrderToPaymentRequest
from onepage.viewmodels.checkout_vm import CheckoutVM

HOME = Address(
    id="addr-1",
    first_name="Ada",
    last_name="Lovelace",
    address_line1="12 Analytical Way",
    city="Austin",
    state="TX",
    postal_code="78701",
    country="US",
)
OFFICE = Address(id="addr-2", first_name="Ada", address_line1="1 Engine Plaza", city="Dallas")
STANDARD = FulfillmentOption(id="standard", name="Standard")


def shippable_group(
    *,
    address: Optional[Address] = HOME,
    option: Optional[FulfillmentOption] = STANDARD,
    group_id: str = "fg-1",
) -> FulfillmentGroup:
    return FulfillmentGroup(
        id=group_id, type="PHYSICAL_SHIP", address=address, fulfillment_option=option
    )


def digital_group(group_id: str = "fg-d") -> FulfillmentGroup:
    return FulfillmentGroup(id=group_id, type="DIGITAL")


def credit_card(
    *,
    billing: Optional[Address] = HOME,
    gateway: Optional[str] = "TEMPORARY",
    active: bool = True,
    payment_id: str = "pay-cc",
    amount: Optional[Decimal] = None,
) -> OrderPayment:
    return OrderPayment(
        id=payment_id,
        type="CREDIT_CARD",
        active=active,
        gateway_type=gateway,
        amount=amount,
        billing_address=billing,
    )


def third_party(active: bool = True) -> OrderPayment:
    return OrderPayment(id="pay-tp", type="THIRD_PARTY_ACCOUNT", active=active, gateway_type="PAYPAL")


def gift_card(amount: str, *, active: bool = True) -> OrderPayment:
    return OrderPayment(id=f"pay-gc-{amount}", type="GIFT_CARD", active=active, amount=Decimal(amount))


def make_cart(**overrides) -> Order:
    values = dict(
        id="order-1",
        email_address="ada@example.com",
        fulfillment_groups=(shippable_group(),),
        payments=(),
        total=Decimal("40.00"),
    )
    values.update(overrides)
    return Order(**values)


def make_checkout_vm(
    commerce: Optional[InMemoryCommerce] = None,
    pricing: Optional[FulfillmentPricingPort] = None,
) -> CheckoutVM:
    commerce = commerce or InMemoryCommerce()
    return CheckoutVM(
        prepopulate=PrepopulateCheckoutForms(
            fulfillment_groups=commerce, customer_addresses=commerce, addresses=commerce
        ),
        estimate=EstimateFulfillment(
            option_port=commerce,
            pricing_port=pricing or FlatRatePricing(),
            group_port=commerce,
        ),
        reference_data=LoadCheckoutReferenceData(state_port=commerce, country_port=commerce),
        payment_request=TranslateOrderToPaymentRequest(group_port=commerce),
        is_shippable=commerce.is_shippable,
    )


__all__ = [
    "HOME",
    "OFFICE",
    "STANDARD",
    "credit_card",
    "digital_group",
    "gift_card",
    "make_cart",
    "make_checkout_vm",
    "shippable_group",
    "third_party",
]
