"""Use case that collects the values used to pre-fill the checkout forms."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from onepage.domain.entities import Address, Customer, FulfillmentOption, Order
from onepage.domain.ports import AddressPort, CustomerAddressPort, FulfillmentGroupPort

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutFormData:
    """Pre-fill values; ``None`` leaves the matching form field blank."""

    email_address: Optional[str] = None
    shipping_address: Optional[Address] = None
    shipping_address_name: Optional[str] = None
    fulfillment_option: Optional[FulfillmentOption] = None
    billing_address: Optional[Address] = None


@dataclass
class PrepopulateCheckoutForms:
    """Gather form defaults from the cart and the customer's saved addresses."""

    fulfillment_groups: FulfillmentGroupPort
    customer_addresses: CustomerAddressPort
    addresses: AddressPort

    def __call__(self, order: Order, customer: Optional[Customer] = None) -> CheckoutFormData:
        """Return pre-fill values for the order info, shipping and billing forms.

        Shipping uses the first shippable group's address, falling back to the
        customer's default saved address. Billing is only pre-filled when
        exactly one active credit card payment carries a billing address.
        """
        shipping_address: Optional[Address] = None
        shipping_address_name: Optional[str] = None
        option: Optional[FulfillmentOption] = None

        group = self.fulfillment_groups.first_shippable_group(order)
        if group is not None:
            if group.address is not None:
                shipping_address = group.address
            else:
                shipping_address, shipping_address_name = self._default_address(customer)
            option = group.fulfillment_option

        return CheckoutFormData(
            email_address=order.email_address,
            shipping_address=shipping_address,
            shipping_address_name=shipping_address_name,
            fulfillment_option=option,
            billing_address=self._single_billing_address(order),
        )

    def _default_address(self, customer: Optional[Customer]):
        if customer is None or not customer.id:
            return None, None
        saved = self.customer_addresses.find_default_customer_address(customer.id)
        if saved is None:
            return None, None
        address = self.addresses.read_address_by_id(saved.address_id)
        if address is None:
            log.debug(
                "Default address %s of customer %s could not be read",
                saved.address_id,
                customer.id,
            )
            return None, None
        return address, saved.address_name

    @staticmethod
    def _single_billing_address(order: Order) -> Optional[Address]:
        candidates = [
            payment.billing_address
            for payment in order.payments
            if payment.active
            and payment.type == "CREDIT_CARD"
            and payment.billing_address is not None
        ]
        if len(candidates) == 1:
            return candidates[0]
        return None


__all__ = ["CheckoutFormData", "PrepopulateCheckoutForms"]
