from __future__ import annotations

from decimal import Decimal

from onepage.domain.entities import Order
from onepage.domain.visibility import (
    count_shippable_groups,
    derive_section_visibility,
    has_populated_billing_address,
    has_populated_order_info,
    has_populated_shipping_address,
    populated_flags,
)
from onepage.tests.unit.helpers import (
    credit_card,
    digital_group,
    gift_card,
    make_cart,
    shippable_group,
    third_party,
)


def test_count_shippable_groups_ignores_digital() -> None:
    cart = make_cart(
        fulfillment_groups=(shippable_group(), digital_group(), shippable_group(group_id="fg-2"))
    )
    assert count_shippable_groups(cart) == 2


def test_count_shippable_groups_uses_supplied_predicate() -> None:
    cart = make_cart(fulfillment_groups=(shippable_group(), digital_group()))
    assert count_shippable_groups(cart, lambda _type: True) == 2


def test_no_shippable_groups_hides_shipping() -> None:
    cart = make_cart(fulfillment_groups=(digital_group(),))
    visibility = derive_section_visibility(cart, count_shippable_groups(cart))
    assert visibility.show_shipping_info is False
    assert visibility.show_billing_info is True


def test_third_party_payment_hides_billing_and_payment_methods() -> None:
    cart = make_cart(payments=(third_party(),))
    visibility = derive_section_visibility(cart, 1)
    assert visibility.contains_third_party_payment is True
    assert visibility.show_billing_info is False
    assert visibility.show_all_payment_methods is False
    assert visibility.show_payment_method is True


def test_inactive_third_party_payment_is_ignored() -> None:
    cart = make_cart(payments=(third_party(active=False),))
    visibility = derive_section_visibility(cart, 1)
    assert visibility.contains_third_party_payment is False
    assert visibility.show_billing_info is True


def test_non_temporary_card_counts_as_unconfirmed() -> None:
    card = credit_card(gateway="ACME_GATEWAY")
    cart = make_cart(payments=(card,))
    visibility = derive_section_visibility(cart, 1)
    assert visibility.contains_unconfirmed_credit_card is True
    assert visibility.unconfirmed_credit_card is card
    assert visibility.show_billing_info is False
    assert visibility.show_all_payment_methods is False


def test_temporary_card_keeps_billing_visible() -> None:
    cart = make_cart(payments=(credit_card(gateway="TEMPORARY"),))
    visibility = derive_section_visibility(cart, 1)
    assert visibility.contains_unconfirmed_credit_card is False
    assert visibility.unconfirmed_credit_card is None
    assert visibility.show_billing_info is True


def test_fully_covered_total_hides_payment_methods_only() -> None:
    cart = make_cart(total=Decimal("30.00"), payments=(gift_card("30.00"),))
    visibility = derive_section_visibility(cart, 1)
    assert visibility.show_all_payment_methods is False
    assert visibility.show_billing_info is True


def test_partially_covered_total_keeps_payment_methods() -> None:
    cart = make_cart(total=Decimal("30.00"), payments=(gift_card("10.00"),))
    visibility = derive_section_visibility(cart, 1)
    assert visibility.show_all_payment_methods is True


def test_unknown_total_keeps_payment_methods() -> None:
    visibility = derive_section_visibility(make_cart(total=None), 1)
    assert visibility.show_all_payment_methods is True


def test_populated_checks() -> None:
    cart = make_cart(payments=(credit_card(),))
    assert has_populated_order_info(cart) is True
    assert has_populated_billing_address(cart) is True
    assert has_populated_shipping_address(cart) is True


def test_populated_checks_on_blank_cart() -> None:
    flags = populated_flags(Order.null())
    assert flags.order_info is False
    assert flags.billing is False
    assert flags.shipping is False


def test_blank_email_is_not_populated() -> None:
    assert has_populated_order_info(make_cart(email_address="   ")) is False


def test_shipping_needs_address_and_option() -> None:
    assert has_populated_shipping_address(
        make_cart(fulfillment_groups=(shippable_group(option=None),))
    ) is False
    assert has_populated_shipping_address(
        make_cart(fulfillment_groups=(shippable_group(address=None),))
    ) is False


def test_inactive_card_does_not_populate_billing() -> None:
    assert has_populated_billing_address(make_cart(payments=(credit_card(active=False),))) is False
