"""Adapter and use-case wiring for the checkout runtime.

This module owns lazy construction of the adapters and use-case objects that
depend on :class:`onepage.app.settings.CheckoutSettings`. The REST layer asks
it for a ready :class:`~onepage.viewmodels.checkout_vm.CheckoutVM`.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.commerce_memory import FlatRatePricing, InMemoryCommerce
from ..adapters.pricing_rest import FulfillmentRestAdapter
from ..domain.ports import FulfillmentOptionPort, FulfillmentPricingPort
from ..usecases.estimate_fulfillment import EstimateFulfillment
from ..usecases.load_reference_data import LoadCheckoutReferenceData
from ..usecases.prepopulate_checkout_forms import PrepopulateCheckoutForms
from ..usecases.translate_payment_request import TranslateOrderToPaymentRequest
from ..viewmodels.checkout_vm import CheckoutVM
from .settings import CheckoutSettings


class AppController:
    """Create and cache adapters/use-cases from settings state.

    Call chain:
        ``rest_api.app`` creates one instance at startup and calls
        ``checkout_vm()`` for every render. ``reset`` drops the cache after a
        settings change.
    """

    def __init__(
        self,
        settings: CheckoutSettings,
        *,
        commerce: Optional[InMemoryCommerce] = None,
        pricing: Optional[FulfillmentPricingPort] = None,
    ) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings: Pricing service location, timeouts and dropdown sizes.
            commerce: Catalog/customer/reference services. Defaults to the
                in-memory implementation.
            pricing: Explicit pricing port, bypassing the settings lookup.
        """
        self.settings = settings
        self.commerce = commerce or InMemoryCommerce()
        self._pricing_override = pricing
        self._log = logging.getLogger(__name__)
        self._fulfillment_adapter: Optional[FulfillmentRestAdapter] = None
        self._checkout_vm: Optional[CheckoutVM] = None

    @property
    def fulfillment_adapter(self) -> Optional[FulfillmentRestAdapter]:
        """Return the cached REST adapter, if a pricing URL is configured."""
        return self._fulfillment_adapter

    def reset(self, settings: Optional[CheckoutSettings] = None) -> None:
        """Drop cached adapters so the next call rebuilds from current settings."""
        if settings is not None:
            self.settings = settings
        self._fulfillment_adapter = None
        self._checkout_vm = None

    def checkout_vm(self) -> CheckoutVM:
        if self._checkout_vm is not None:
            return self._checkout_vm

        option_port, pricing_port = self._fulfillment_ports()
        commerce = self.commerce
        self._checkout_vm = CheckoutVM(
            prepopulate=PrepopulateCheckoutForms(
                fulfillment_groups=commerce,
                customer_addresses=commerce,
                addresses=commerce,
            ),
            estimate=EstimateFulfillment(
                option_port=option_port,
                pricing_port=pricing_port,
                group_port=commerce,
            ),
            reference_data=LoadCheckoutReferenceData(
                state_port=commerce,
                country_port=commerce,
                expiration_year_count=self.settings.expiration_year_count,
            ),
            payment_request=TranslateOrderToPaymentRequest(group_port=commerce),
            is_shippable=commerce.is_shippable,
        )
        return self._checkout_vm

    def _fulfillment_ports(self) -> tuple[FulfillmentOptionPort, FulfillmentPricingPort]:
        if self._pricing_override is not None:
            return self.commerce, self._pricing_override

        base_url = self.settings.pricing_base_url
        if not base_url:
            self._log.info("No pricing service configured; using flat rate estimates")
            return self.commerce, FlatRatePricing()

        if self._fulfillment_adapter is None:
            self._fulfillment_adapter = FulfillmentRestAdapter(
                base_url,
                api_key=self.settings.pricing_api_key or None,
                request_timeout_s=self.settings.request_timeout_s,
                retries=self.settings.retries,
            )
        return self._fulfillment_adapter, self._fulfillment_adapter


__all__ = ["AppController"]
