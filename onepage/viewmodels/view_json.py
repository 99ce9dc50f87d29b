"""JSON projection of the checkout view variables."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..domain.entities import (
    Country,
    FulfillmentEstimation,
    FulfillmentOption,
    OrderPayment,
    State,
)
from ..domain.mapping import (
    country_to_dict,
    money_str,
    option_to_dict,
    payment_to_dict,
    state_to_dict,
)
from ..domain.sections import CheckoutSection
from .checkout_vm import CheckoutForms


def _estimate_to_dict(estimate: FulfillmentEstimation) -> Dict[str, Any]:
    return {
        "groupId": estimate.group_id,
        "prices": {option_id: money_str(price) for option_id, price in estimate.prices},
    }


def _to_json_value(value: Any) -> Any:
    if isinstance(value, CheckoutSection):
        return value.to_dict()
    if isinstance(value, FulfillmentOption):
        return option_to_dict(value)
    if isinstance(value, FulfillmentEstimation):
        return _estimate_to_dict(value)
    if isinstance(value, OrderPayment):
        return payment_to_dict(value)
    if isinstance(value, State):
        return state_to_dict(value)
    if isinstance(value, Country):
        return country_to_dict(value)
    if isinstance(value, Mapping):
        return {str(key): _to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    return value


def model_to_json(model: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert view variables into JSON-safe values."""
    return {key: _to_json_value(value) for key, value in model.items()}


def forms_to_json(forms: CheckoutForms) -> Dict[str, Any]:
    return {
        "orderInfoForm": forms.order_info.to_dict() if forms.order_info else None,
        "shippingInfoForm": forms.shipping.to_dict() if forms.shipping else None,
        "billingInfoForm": forms.billing.to_dict() if forms.billing else None,
    }


__all__ = ["forms_to_json", "model_to_json"]
