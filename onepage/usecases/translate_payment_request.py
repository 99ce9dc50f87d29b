"""Translate the cart into the request payload shared by payment gateway forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from onepage.domain.entities import Address, Order
from onepage.domain.mapping import address_to_dict, money_str
from onepage.domain.ports import FulfillmentGroupPort


@dataclass
class TranslateOrderToPaymentRequest:
    """Build the gateway-neutral payment request for a non-null cart."""

    group_port: FulfillmentGroupPort

    def __call__(self, order: Order) -> Dict[str, Any]:
        group = self.group_port.first_shippable_group(order)
        shipping: Optional[Address] = group.address if group is not None else None
        return {
            "orderId": order.id,
            "orderCurrencyCode": order.currency,
            "orderTotal": money_str(order.total),
            "transactionTotal": money_str(order.total_after_applied_payments),
            "customer": {"email": order.email_address},
            "billTo": address_to_dict(self._billing_address(order)),
            "shipTo": address_to_dict(shipping),
        }

    @staticmethod
    def _billing_address(order: Order) -> Optional[Address]:
        for payment in order.payments:
            if payment.active and payment.billing_address is not None:
                return payment.billing_address
        return None


__all__ = ["TranslateOrderToPaymentRequest"]
