# tests/test_checkout.py
from decimal import Decimal

import pytest

from storefront.checkout import OrderIdMinter, checkout, seed_minter
from storefront.errors import ErrorKind, StoreError
from storefront.models import LineItem
from storefront.payment import PaymentMethod
from storefront.persistence import OrderLog


def test_end_to_end_card_checkout(cart, laptop, headphones, order_log, clock):
    cart.add_product(laptop, 1)
    cart.add_product(headphones, 2)

    receipt = checkout(cart, PaymentMethod.CARD, order_log, OrderIdMinter(clock))

    assert receipt.total_amount == Decimal("1199.97")
    assert receipt.payment_label == "Credit/Debit Card"
    assert receipt.order_id == "ORD1700000000"
    assert cart.is_empty()

    orders = order_log.read_orders()
    assert len(orders) == 1
    assert orders[0].order_id == receipt.order_id
    assert orders[0].payment_label == "Credit/Debit Card"
    assert orders[0].total_amount == Decimal("1199.97")
    assert orders[0].line_items == (
        LineItem(product_id=1, name="Laptop", price=Decimal("999.99"), quantity=1),
        LineItem(product_id=3, name="Headphones", price=Decimal("99.99"), quantity=2),
    )


def test_checkout_of_empty_cart_raises(cart, order_log, clock):
    with pytest.raises(StoreError) as excinfo:
        checkout(cart, PaymentMethod.CASH, order_log, OrderIdMinter(clock))

    assert excinfo.value.kind is ErrorKind.EMPTY_CART
    assert not order_log.path.exists()


def test_failed_persistence_keeps_the_cart(cart, laptop, tmp_path, clock):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    cart.add_product(laptop, 2)

    with pytest.raises(StoreError) as excinfo:
        checkout(cart, PaymentMethod.GCASH, OrderLog(blocker / "orders.log"), OrderIdMinter(clock))

    assert excinfo.value.kind is ErrorKind.ORDER_LOG_UNAVAILABLE
    assert cart.items[0].quantity == 2


def test_order_is_a_snapshot(cart, laptop, order_log, clock):
    cart.add_product(laptop)
    receipt = checkout(cart, PaymentMethod.CASH, order_log, OrderIdMinter(clock))
    cart.add_product(laptop, 9)

    assert receipt.order.line_items[0].quantity == 1


def test_minter_never_repeats_within_the_same_second(clock):
    minter = OrderIdMinter(clock)

    first = minter.next_id()
    second = minter.next_id()
    clock.now += 5
    third = minter.next_id()

    assert first == "ORD1700000000"
    assert second == "ORD1700000001"
    assert third == "ORD1700000005"


def test_minter_does_not_go_backwards_when_clock_does(clock):
    minter = OrderIdMinter(clock)
    minter.next_id()
    clock.now -= 100

    assert minter.next_id() == "ORD1700000001"


def test_observed_ids_push_the_minter_forward(clock):
    minter = OrderIdMinter(clock)
    minter.observe("ORD1700000003")
    minter.observe("ORD1700000001")
    minter.observe("not-an-order")

    assert minter.next_id() == "ORD1700000004"


def test_restarted_minter_skips_ids_already_in_the_log(cart, laptop, order_log, clock):
    first = OrderIdMinter(clock)
    for _ in range(3):
        cart.add_product(laptop)
        checkout(cart, PaymentMethod.CASH, order_log, first)

    restarted = OrderIdMinter(clock)
    seed_minter(restarted, order_log)
    cart.add_product(laptop)
    receipt = checkout(cart, PaymentMethod.CASH, order_log, restarted)

    ids = [order.order_id for order in order_log.read_orders()]
    assert receipt.order_id == "ORD1700000003"
    assert len(ids) == len(set(ids)) == 4


def test_seeding_from_an_empty_log_is_a_no_op(order_log, clock):
    minter = OrderIdMinter(clock)
    seed_minter(minter, order_log)

    assert minter.next_id() == "ORD1700000000"
