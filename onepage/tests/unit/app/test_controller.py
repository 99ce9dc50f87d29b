from __future__ import annotations

from onepage.adapters.commerce_memory import FlatRatePricing
from onepage.adapters.pricing_rest import FulfillmentRestAdapter
from onepage.app.controller import AppController
from onepage.app.settings import CheckoutSettings


def test_controller_defaults_to_flat_rate_pricing() -> None:
    controller = AppController(CheckoutSettings())

    vm = controller.checkout_vm()

    assert isinstance(vm.estimate.pricing_port, FlatRatePricing)
    assert vm.estimate.option_port is controller.commerce
    assert controller.fulfillment_adapter is None


def test_controller_wires_rest_adapter_when_url_configured() -> None:
    settings = CheckoutSettings(
        pricing_base_url="http://pricing.local", pricing_api_key="token", retries=3
    )
    controller = AppController(settings)

    vm = controller.checkout_vm()

    adapter = controller.fulfillment_adapter
    assert isinstance(adapter, FulfillmentRestAdapter)
    assert vm.estimate.pricing_port is adapter
    assert vm.estimate.option_port is adapter
    assert adapter.session.api_key == "token"
    assert adapter.session.cfg.retries == 3


def test_controller_caches_vm_until_reset() -> None:
    controller = AppController(CheckoutSettings())
    first = controller.checkout_vm()
    assert controller.checkout_vm() is first

    controller.reset(CheckoutSettings(expiration_year_count=3))
    second = controller.checkout_vm()

    assert second is not first
    assert second.reference_data.expiration_year_count == 3


def test_controller_prefers_explicit_pricing() -> None:
    pricing = FlatRatePricing(rates={})
    controller = AppController(
        CheckoutSettings(pricing_base_url="http://pricing.local"), pricing=pricing
    )

    assert controller.checkout_vm().estimate.pricing_port is pricing
    assert controller.fulfillment_adapter is None
