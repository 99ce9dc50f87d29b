from __future__ import annotations

import pytest

from onepage.domain.sections import (
    BILLING_INFO,
    FORM,
    INACTIVE,
    ORDER_INFO,
    PAYMENT_INFO,
    SAVED,
    SHIPPING_INFO,
    EditRequest,
    HelpMessages,
    build_ordered_sections,
)
from onepage.domain.visibility import PopulatedFlags, SectionVisibility

HELP = HelpMessages(order_info="help-order", billing_info="help-billing", shipping_info="help-shipping")


def _states(sections):
    return {section.view: section.state for section in sections}


def _help(sections):
    return {section.view: section.help_message for section in sections}


def test_all_sections_drawn_in_fixed_order() -> None:
    sections = build_ordered_sections(SectionVisibility(), PopulatedFlags(), HELP)
    assert [section.view for section in sections] == [ORDER_INFO, BILLING_INFO, SHIPPING_INFO, PAYMENT_INFO]


def test_hidden_sections_are_skipped() -> None:
    visibility = SectionVisibility(show_billing_info=False, show_shipping_info=False)
    sections = build_ordered_sections(visibility, PopulatedFlags(), HELP)
    assert [section.view for section in sections] == [ORDER_INFO, PAYMENT_INFO]


def test_help_messages_chain_from_previous_drawn_section() -> None:
    sections = build_ordered_sections(
        SectionVisibility(), PopulatedFlags(order_info=True, billing=True), HELP
    )
    assert _help(sections) == {
        ORDER_INFO: None,
        BILLING_INFO: "help-order",
        SHIPPING_INFO: "help-billing",
        PAYMENT_INFO: "help-shipping",
    }


def test_help_messages_skip_hidden_billing() -> None:
    visibility = SectionVisibility(show_billing_info=False)
    sections = build_ordered_sections(visibility, PopulatedFlags(), HELP)
    assert _help(sections) == {
        ORDER_INFO: None,
        SHIPPING_INFO: "help-order",
        PAYMENT_INFO: "help-shipping",
    }


def test_payment_takes_billing_help_when_shipping_hidden() -> None:
    visibility = SectionVisibility(show_shipping_info=False)
    sections = build_ordered_sections(visibility, PopulatedFlags(billing=True), HELP)
    assert _help(sections)[PAYMENT_INFO] == "help-billing"


def test_payment_takes_order_help_when_only_section_before_it() -> None:
    visibility = SectionVisibility(show_billing_info=False, show_shipping_info=False)
    sections = build_ordered_sections(visibility, PopulatedFlags(), HELP)
    assert _help(sections)[PAYMENT_INFO] == "help-order"


@pytest.mark.parametrize(
    "populated",
    [
        PopulatedFlags(),
        PopulatedFlags(order_info=True),
        PopulatedFlags(order_info=True, billing=True, shipping=True),
    ],
)
def test_first_section_is_form_or_saved_never_inactive(populated) -> None:
    sections = build_ordered_sections(SectionVisibility(), populated, HELP)
    expected = SAVED if populated.order_info else FORM
    assert sections[0].state == expected


def test_first_section_is_form_when_unpopulated() -> None:
    sections = build_ordered_sections(SectionVisibility(), PopulatedFlags(), HELP)
    assert sections[0].state == FORM
    assert _states(sections)[SHIPPING_INFO] == INACTIVE


def test_section_after_populated_section_opens_as_form() -> None:
    visibility = SectionVisibility(show_billing_info=False)
    sections = build_ordered_sections(visibility, PopulatedFlags(order_info=True), HELP)
    assert _states(sections) == {ORDER_INFO: SAVED, SHIPPING_INFO: FORM, PAYMENT_INFO: INACTIVE}


def test_unpopulated_billing_makes_payment_inactive_with_billing_help() -> None:
    populated = PopulatedFlags(order_info=True, billing=False, shipping=True)
    sections = build_ordered_sections(SectionVisibility(), populated, HELP)
    payment = sections[-1]
    assert payment.view == PAYMENT_INFO
    assert payment.state == INACTIVE
    assert payment.help_message == "help-billing"


def test_payment_opens_once_everything_before_is_saved() -> None:
    populated = PopulatedFlags(order_info=True, billing=True, shipping=True)
    sections = build_ordered_sections(SectionVisibility(), populated, HELP)
    assert _states(sections) == {
        ORDER_INFO: SAVED,
        BILLING_INFO: SAVED,
        SHIPPING_INFO: SAVED,
        PAYMENT_INFO: FORM,
    }
    assert sections[-1].help_message == "help-shipping"


def test_hidden_billing_does_not_block_payment() -> None:
    visibility = SectionVisibility(show_billing_info=False)
    populated = PopulatedFlags(order_info=True, shipping=True)
    sections = build_ordered_sections(visibility, populated, HELP)
    assert _states(sections)[PAYMENT_INFO] == FORM


def test_edit_shipping_reopens_saved_section() -> None:
    populated = PopulatedFlags(order_info=True, billing=True, shipping=True)
    sections = build_ordered_sections(
        SectionVisibility(), populated, HELP, EditRequest(edit_shipping=True)
    )
    states = _states(sections)
    assert states[SHIPPING_INFO] == FORM
    assert states[BILLING_INFO] == SAVED


def test_edit_flags_only_touch_their_section() -> None:
    populated = PopulatedFlags(order_info=True, billing=True, shipping=True)
    sections = build_ordered_sections(
        SectionVisibility(),
        populated,
        HELP,
        EditRequest(edit_order_info=True, edit_billing=True),
    )
    assert _states(sections) == {
        ORDER_INFO: FORM,
        BILLING_INFO: FORM,
        SHIPPING_INFO: SAVED,
        PAYMENT_INFO: FORM,
    }


def test_edit_request_from_params() -> None:
    edits = EditRequest.from_params(
        {"edit-order-info": "TRUE", "edit-billing": "no", "edit-shipping": "on"}
    )
    assert edits == EditRequest(edit_order_info=True, edit_billing=False, edit_shipping=True)


def test_edit_request_from_empty_params() -> None:
    assert EditRequest.from_params({}) == EditRequest()


def test_sections_serialize_for_templates() -> None:
    sections = build_ordered_sections(SectionVisibility(), PopulatedFlags(), HELP)
    assert sections[1].to_dict() == {
        "view": BILLING_INFO,
        "populated": False,
        "state": INACTIVE,
        "helpMessage": "help-order",
    }


def test_edit_request_does_not_trim_parameter_values() -> None:
    edits = EditRequest.from_params({"edit-shipping": " true", "edit-billing": "Y"})
    assert edits == EditRequest(edit_billing=True, edit_shipping=False)
