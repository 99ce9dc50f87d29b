"""Ordered checkout section descriptors and their view state derivation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Literal, Mapping, Optional

from .visibility import PopulatedFlags, SectionVisibility

SectionView = Literal["ORDER_INFO", "BILLING_INFO", "SHIPPING_INFO", "PAYMENT_INFO"]
SectionState = Literal["FORM", "SAVED", "INACTIVE"]

ORDER_INFO: SectionView = "ORDER_INFO"
BILLING_INFO: SectionView = "BILLING_INFO"
SHIPPING_INFO: SectionView = "SHIPPING_INFO"
PAYMENT_INFO: SectionView = "PAYMENT_INFO"

FORM: SectionState = "FORM"
SAVED: SectionState = "SAVED"
INACTIVE: SectionState = "INACTIVE"

_TRUTHY_PARAMS = {"true", "yes", "on", "y", "t"}


def _param_flag(value: Optional[str]) -> bool:
    return (value or "").lower() in _TRUTHY_PARAMS


@dataclass(frozen=True)
class CheckoutSection:
    """One drawn section of the checkout page."""

    view: SectionView
    populated: bool = False
    state: SectionState = INACTIVE
    help_message: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "view": self.view,
            "populated": self.populated,
            "state": self.state,
            "helpMessage": self.help_message,
        }


@dataclass(frozen=True)
class HelpMessages:
    """Help text the page template supplies for each section."""

    order_info: Optional[str] = None
    billing_info: Optional[str] = None
    shipping_info: Optional[str] = None


@dataclass(frozen=True)
class EditRequest:
    """Sections the shopper asked to reopen with an edit button."""

    edit_order_info: bool = False
    edit_billing: bool = False
    edit_shipping: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, Optional[str]]) -> "EditRequest":
        """Parse ``edit-order-info``/``edit-billing``/``edit-shipping`` request parameters."""
        return cls(
            edit_order_info=_param_flag(params.get("edit-order-info")),
            edit_billing=_param_flag(params.get("edit-billing")),
            edit_shipping=_param_flag(params.get("edit-shipping")),
        )

    def wants_edit(self, view: SectionView) -> bool:
        if view == ORDER_INFO:
            return self.edit_order_info
        if view == BILLING_INFO:
            return self.edit_billing
        if view == SHIPPING_INFO:
            return self.edit_shipping
        return False


def build_ordered_sections(
    visibility: SectionVisibility,
    populated: PopulatedFlags,
    help_messages: HelpMessages,
    edit_request: Optional[EditRequest] = None,
) -> List[CheckoutSection]:
    """Lay out the drawn sections and assign each its view state.

    Sections appear as order info, billing, shipping, payment; billing and
    shipping only when visible. Each section carries the help message of the
    closest drawn section before it. States are then resolved per section, with
    later rules overriding earlier ones:

    1. the first section is a form;
    2. a section following a populated section is a form;
    3. a populated section is saved;
    4. payment is inactive (with the billing help text) while a visible billing
       section is still empty, which is the re-entry flow after a payment
       gateway failure;
    5. an explicit edit request reopens the section as a form.
    """
    edits = edit_request or EditRequest()

    drawn: List[CheckoutSection] = [
        CheckoutSection(view=ORDER_INFO, populated=populated.order_info)
    ]
    previous_help = help_messages.order_info
    if visibility.show_billing_info:
        drawn.append(
            CheckoutSection(view=BILLING_INFO, populated=populated.billing, help_message=previous_help)
        )
        previous_help = help_messages.billing_info
    if visibility.show_shipping_info:
        drawn.append(
            CheckoutSection(view=SHIPPING_INFO, populated=populated.shipping, help_message=previous_help)
        )
        previous_help = help_messages.shipping_info
    drawn.append(CheckoutSection(view=PAYMENT_INFO, populated=False, help_message=previous_help))

    billing_pending = visibility.show_billing_info and not populated.billing
    return [
        _resolve_state(
            section,
            previous=drawn[index - 1] if index > 0 else None,
            billing_pending=billing_pending,
            billing_help=help_messages.billing_info,
            edits=edits,
        )
        for index, section in enumerate(drawn)
    ]


def _resolve_state(
    section: CheckoutSection,
    *,
    previous: Optional[CheckoutSection],
    billing_pending: bool,
    billing_help: Optional[str],
    edits: EditRequest,
) -> CheckoutSection:
    state = section.state
    help_message = section.help_message

    if previous is None:
        state = FORM
    if previous is not None and previous.populated:
        state = FORM
    if section.populated:
        state = SAVED
    if section.view == PAYMENT_INFO and billing_pending:
        state = INACTIVE
        help_message = billing_help
    if edits.wants_edit(section.view):
        state = FORM

    return replace(section, state=state, help_message=help_message)


__all__ = [
    "BILLING_INFO",
    "CheckoutSection",
    "EditRequest",
    "FORM",
    "HelpMessages",
    "INACTIVE",
    "ORDER_INFO",
    "PAYMENT_INFO",
    "SAVED",
    "SHIPPING_INFO",
    "SectionState",
    "SectionView",
    "build_ordered_sections",
]
