from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..domain.entities import Customer, Order, is_shippable_type
from ..domain.sections import CheckoutSection, EditRequest, HelpMessages, build_ordered_sections
from ..domain.visibility import (
    PopulatedFlags,
    SectionVisibility,
    count_shippable_groups,
    derive_section_visibility,
    populated_flags,
)
from ..usecases.estimate_fulfillment import EstimateFulfillment
from ..usecases.load_reference_data import LoadCheckoutReferenceData
from ..usecases.prepopulate_checkout_forms import PrepopulateCheckoutForms
from ..usecases.translate_payment_request import TranslateOrderToPaymentRequest
from .forms import BillingInfoForm, OrderInfoForm, ShippingInfoForm

PAYMENT_PROCESSING_ERROR = "paymentProcessingError"


@dataclass
class CheckoutForms:
    """The three command objects bound by the checkout template."""

    order_info: Optional[OrderInfoForm] = field(default_factory=OrderInfoForm)
    shipping: Optional[ShippingInfoForm] = field(default_factory=ShippingInfoForm)
    billing: Optional[BillingInfoForm] = field(default_factory=BillingInfoForm)


@dataclass
class CheckoutRequest:
    """Everything one checkout page render reads from the HTTP request and session."""

    cart: Optional[Order] = None
    customer: Optional[Customer] = None
    help_messages: HelpMessages = field(default_factory=HelpMessages)
    edit_request: EditRequest = field(default_factory=EditRequest)
    processing_error: Optional[str] = None
    locale: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Optional[str]],
        *,
        cart: Optional[Order] = None,
        customer: Optional[Customer] = None,
        help_messages: Optional[HelpMessages] = None,
        locale: Optional[str] = None,
    ) -> "CheckoutRequest":
        """Build the request from raw query parameters (``edit-*``, processing error)."""
        return cls(
            cart=cart,
            customer=customer,
            help_messages=help_messages or HelpMessages(),
            edit_request=EditRequest.from_params(params),
            processing_error=params.get(PAYMENT_PROCESSING_ERROR),
            locale=locale,
        )


@dataclass
class CheckoutVM:
    """Assemble the view variables of the one page checkout.

    Decides which sections are drawn, their form/saved/inactive state and help
    text, and pre-fills the checkout forms. Holds no state between renders; the
    cart is read, never written.
    """

    prepopulate: PrepopulateCheckoutForms
    estimate: EstimateFulfillment
    reference_data: LoadCheckoutReferenceData
    payment_request: TranslateOrderToPaymentRequest
    is_shippable: Callable[[Optional[str]], bool] = is_shippable_type

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def build(self, request: CheckoutRequest, forms: Optional[CheckoutForms] = None) -> Dict[str, Any]:
        """Return the named view variables for one render.

        ``forms`` are filled in place; missing cart data leaves them blank.
        """
        cart = request.cart if request.cart is not None else Order.null()
        forms = forms or CheckoutForms()
        self.prepopulate_forms(cart, forms, customer=request.customer)

        model: Dict[str, Any] = {}
        if not cart.is_null:
            model["paymentRequestDTO"] = self.payment_request(cart)

        num_shippable = self.count_shippable_groups(cart)
        model["numShippableFulfillmentGroups"] = num_shippable

        estimate = self.estimate(cart)
        if estimate.attempted:
            model["estimateResponse"] = estimate.estimate
        model["fulfillmentOptions"] = estimate.options

        help_messages = request.help_messages
        model["orderInfoHelpMessage"] = help_messages.order_info
        model["billingInfoHelpMessage"] = help_messages.billing_info
        model["shippingInfoHelpMessage"] = help_messages.shipping_info

        populated = populated_flags(cart, self.is_shippable)
        visibility = self.derive_section_visibility(cart, num_shippable)
        sections = self.build_ordered_sections(
            visibility, populated, help_messages, request.edit_request
        )
        model.update(self._section_variables(visibility, populated, sections))

        reference = self.reference_data(request.locale)
        model["states"] = reference.states
        model["countries"] = reference.countries
        model["expirationMonths"] = reference.expiration_months
        model["expirationYears"] = reference.expiration_years

        model[PAYMENT_PROCESSING_ERROR] = request.processing_error

        self._log.debug(
            "Checkout sections for order %s: %s",
            cart.id,
            [(section.view, section.state) for section in sections],
        )
        return model

    def prepopulate_forms(
        self,
        cart: Order,
        forms: CheckoutForms,
        *,
        customer: Optional[Customer] = None,
    ) -> None:
        """Copy cart email, shipping and billing details into the forms."""
        data = self.prepopulate(cart, customer)
        if forms.order_info is not None:
            forms.order_info.email_address = data.email_address or ""
        if forms.shipping is not None:
            if data.shipping_address is not None:
                forms.shipping.address = data.shipping_address
            if data.shipping_address_name:
                forms.shipping.address_name = data.shipping_address_name
            if data.fulfillment_option is not None:
                forms.shipping.fulfillment_option = data.fulfillment_option
                forms.shipping.fulfillment_option_id = data.fulfillment_option.id
        if forms.billing is not None and data.billing_address is not None:
            forms.billing.address = data.billing_address

    def count_shippable_groups(self, cart: Order) -> int:
        return count_shippable_groups(cart, self.is_shippable)

    def derive_section_visibility(self, cart: Order, num_shippable: int) -> SectionVisibility:
        return derive_section_visibility(cart, num_shippable)

    def build_ordered_sections(
        self,
        visibility: SectionVisibility,
        populated: PopulatedFlags,
        help_messages: HelpMessages,
        edit_request: Optional[EditRequest] = None,
    ) -> List[CheckoutSection]:
        return build_ordered_sections(visibility, populated, help_messages, edit_request)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _section_variables(
        visibility: SectionVisibility,
        populated: PopulatedFlags,
        sections: List[CheckoutSection],
    ) -> Dict[str, Any]:
        return {
            "orderInfoPopulated": populated.order_info,
            "billingPopulated": populated.billing,
            "shippingPopulated": populated.shipping,
            "showBillingInfoSection": visibility.show_billing_info,
            "showShippingInfoSection": visibility.show_shipping_info,
            "showAllPaymentMethods": visibility.show_all_payment_methods,
            "showPaymentMethodSection": visibility.show_payment_method,
            "orderContainsThirdPartyPayment": visibility.contains_third_party_payment,
            "orderContainsUnconfirmedCreditCard": visibility.contains_unconfirmed_credit_card,
            "unconfirmedCC": visibility.unconfirmed_credit_card,
            "checkoutSectionDTOs": sections,
        }


__all__ = ["CheckoutForms", "CheckoutRequest", "CheckoutVM", "PAYMENT_PROCESSING_ERROR"]
