"""Flat mapping helpers for checkout value objects.

Adapters call these when building outbound payloads; the REST layer calls
them when returning view variables as JSON.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from .entities import (
    Address,
    Country,
    FulfillmentGroup,
    FulfillmentOption,
    OrderPayment,
    State,
)


def money_str(value: Optional[Decimal]) -> Optional[str]:
    """Render an amount with two decimals, keeping ``None`` as ``None``."""
    if value is None:
        return None
    return str(Decimal(value).quantize(Decimal("0.01")))


def address_to_dict(address: Optional[Address]) -> Optional[Dict[str, Any]]:
    if address is None:
        return None
    return {
        "id": address.id,
        "firstName": address.first_name,
        "lastName": address.last_name,
        "addressLine1": address.address_line1,
        "addressLine2": address.address_line2,
        "city": address.city,
        "state": address.state,
        "postalCode": address.postal_code,
        "country": address.country,
        "phone": address.phone,
    }


def option_to_dict(option: Optional[FulfillmentOption]) -> Optional[Dict[str, Any]]:
    if option is None:
        return None
    return {"id": option.id, "name": option.name, "description": option.description}


def group_to_dict(group: FulfillmentGroup) -> Dict[str, Any]:
    return {
        "id": group.id,
        "type": group.type,
        "address": address_to_dict(group.address),
        "fulfillmentOption": option_to_dict(group.fulfillment_option),
    }


def payment_to_dict(payment: Optional[OrderPayment]) -> Optional[Dict[str, Any]]:
    if payment is None:
        return None
    return {
        "id": payment.id,
        "type": payment.type,
        "active": payment.active,
        "gatewayType": payment.gateway_type,
        "amount": money_str(payment.amount),
        "billingAddress": address_to_dict(payment.billing_address),
    }


def state_to_dict(state: State) -> Dict[str, str]:
    return {"abbreviation": state.abbreviation, "name": state.name}


def country_to_dict(country: Country) -> Dict[str, str]:
    return {"abbreviation": country.abbreviation, "name": country.name}


__all__ = [
    "address_to_dict",
    "country_to_dict",
    "group_to_dict",
    "money_str",
    "option_to_dict",
    "payment_to_dict",
    "state_to_dict",
]
