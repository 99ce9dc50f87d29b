"""REST adapter for a remote fulfillment pricing service.

Endpoints:
    ``GET  {base}/fulfillment/options``  -> ``[{"id", "name", "description"}]``
    ``POST {base}/fulfillment/estimate`` -> ``{"group_id", "prices": {option_id: amount}}``
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

from onepage.domain.entities import FulfillmentEstimation, FulfillmentGroup, FulfillmentOption
from onepage.domain.mapping import group_to_dict
from onepage.domain.ports import (
    FulfillmentOptionPort,
    FulfillmentPriceError,
    FulfillmentPricingPort,
)

from .api_errors import ApiError, raise_for_status
from .http_client import HttpConfig, RetryingSession

log = logging.getLogger(__name__)


class FulfillmentRestAdapter(FulfillmentOptionPort, FulfillmentPricingPort):
    """Reads fulfillment options and price estimates over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 5,
        retries: int = 1,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("FulfillmentRestAdapter requires a base URL")
        self.base_url = base_url.strip().rstrip("/")
        self.session = RetryingSession(
            api_key, HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        )

    def _make_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # ---------- FulfillmentOptionPort ----------

    def read_all_fulfillment_options(self) -> List[FulfillmentOption]:
        url = self._make_url("/fulfillment/options")
        resp = self.session.get(url)
        raise_for_status(resp, f"GET {url}")
        payload = resp.json()
        if not isinstance(payload, list):
            raise ApiError("fulfillment options: expected a list", context=f"GET {url}")
        options: List[FulfillmentOption] = []
        for entry in payload:
            if not isinstance(entry, dict) or not str(entry.get("id") or "").strip():
                continue
            options.append(
                FulfillmentOption(
                    id=str(entry["id"]).strip(),
                    name=str(entry.get("name") or ""),
                    description=str(entry.get("description") or ""),
                )
            )
        return options

    # ---------- FulfillmentPricingPort ----------

    def estimate_cost_for_fulfillment_group(
        self, group: FulfillmentGroup, options: Iterable[FulfillmentOption]
    ) -> FulfillmentEstimation:
        url = self._make_url("/fulfillment/estimate")
        body = {
            "group": group_to_dict(group),
            "options": sorted({option.id for option in options}),
        }
        try:
            resp = self.session.post(url, json_body=body)
            raise_for_status(resp, f"POST {url}")
            payload = resp.json()
        except ApiError as exc:
            log.debug("Estimate request failed for group %s: %s", group.id, exc)
            raise FulfillmentPriceError(str(exc), meta={"status": exc.status}) from exc
        except ValueError as exc:
            raise FulfillmentPriceError(f"POST {url}: response is not JSON") from exc
        return _parse_estimation(group.id, payload)


def _parse_estimation(group_id: str, payload: Any) -> FulfillmentEstimation:
    if not isinstance(payload, dict) or not isinstance(payload.get("prices"), dict):
        raise FulfillmentPriceError("Estimate response is missing 'prices'.")
    prices = []
    for option_id, raw in sorted(payload["prices"].items()):
        try:
            prices.append((str(option_id), Decimal(str(raw))))
        except InvalidOperation as exc:
            raise FulfillmentPriceError(
                f"Estimate for option {option_id} is not a number: {raw!r}"
            ) from exc
    return FulfillmentEstimation(group_id=str(payload.get("group_id") or group_id), prices=tuple(prices))


__all__ = ["FulfillmentRestAdapter"]
