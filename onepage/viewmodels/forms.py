"""Request-scoped form bags bound by the checkout page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from onepage.domain.entities import Address, FulfillmentOption
from onepage.domain.mapping import address_to_dict, option_to_dict


@dataclass
class OrderInfoForm:
    email_address: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"emailAddress": self.email_address}


@dataclass
class ShippingInfoForm:
    address: Optional[Address] = None
    address_name: str = ""
    fulfillment_option: Optional[FulfillmentOption] = None
    fulfillment_option_id: Optional[str] = None
    delivery_message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": address_to_dict(self.address),
            "addressName": self.address_name,
            "fulfillmentOption": option_to_dict(self.fulfillment_option),
            "fulfillmentOptionId": self.fulfillment_option_id,
            "deliveryMessage": self.delivery_message,
        }


@dataclass
class BillingInfoForm:
    address: Optional[Address] = None
    use_shipping_address: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": address_to_dict(self.address),
            "useShippingAddress": self.use_shipping_address,
        }


__all__ = ["BillingInfoForm", "OrderInfoForm", "ShippingInfoForm"]
