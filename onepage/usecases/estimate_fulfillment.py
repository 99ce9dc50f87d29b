from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from onepage.domain.entities import FulfillmentEstimation, FulfillmentOption, Order
from onepage.domain.ports import (
    FulfillmentGroupPort,
    FulfillmentOptionPort,
    FulfillmentPriceError,
    FulfillmentPricingPort,
)
from onepage.domain.visibility import has_populated_shipping_address

log = logging.getLogger(__name__)


@dataclass
class FulfillmentEstimateResult:
    """Options for the delivery picker plus the optional cost estimate."""

    options: List[FulfillmentOption] = field(default_factory=list)
    attempted: bool = False
    """True when the cart qualified for an estimate (the view gets ``estimateResponse``)."""
    estimate: Optional[FulfillmentEstimation] = None


@dataclass
class EstimateFulfillment:
    """Read all delivery options and price them for the first shippable group."""

    option_port: FulfillmentOptionPort
    pricing_port: FulfillmentPricingPort
    group_port: FulfillmentGroupPort

    def __call__(self, order: Order) -> FulfillmentEstimateResult:
        options = list(self.option_port.read_all_fulfillment_options())
        result = FulfillmentEstimateResult(options=options)

        if order.is_null or not order.fulfillment_groups:
            return result
        if not has_populated_shipping_address(order, self.group_port.is_shippable):
            return result

        result.attempted = True
        group = self.group_port.first_shippable_group(order)
        if group is None:
            return result
        unique = {option.id: option for option in options}
        try:
            result.estimate = self.pricing_port.estimate_cost_for_fulfillment_group(
                group, list(unique.values())
            )
        except FulfillmentPriceError as exc:
            log.warning("Fulfillment estimate unavailable for group %s: %s", group.id, exc.message)
        return result


__all__ = ["EstimateFulfillment", "FulfillmentEstimateResult"]
