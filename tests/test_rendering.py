# tests/test_rendering.py
from decimal import Decimal

from rich.console import Console

from storefront.checkout import OrderIdMinter, checkout
from storefront.data import CATALOG
from storefront.payment import PaymentMethod
from storefront.persistence import MemoryOrderLog
from storefront.rendering import (
    format_money,
    render_cart,
    render_catalog,
    render_main_menu,
    render_order_history,
    render_payment_menu,
    render_receipt,
)


def as_text(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_format_money_uses_two_decimals():
    assert format_money(Decimal("1199.97")) == "$1,199.97"
    assert format_money(Decimal("999.990000")) == "$999.99"


def test_main_menu_lists_options():
    text = as_text(render_main_menu())

    for line in ("1. View Products", "2. View Shopping Cart", "3. View Orders", "4. Exit"):
        assert line in text


def test_catalog_table_lists_products():
    text = as_text(render_catalog(CATALOG))

    assert "Laptop" in text
    assert "$49.99" in text


def test_empty_cart_message(cart):
    assert as_text(render_cart(cart)).strip() == "Your shopping cart is empty."


def test_cart_table_shows_lines_and_total(cart, laptop, headphones):
    cart.add_product(laptop)
    cart.add_product(headphones, 2)

    text = as_text(render_cart(cart))

    assert "Headphones" in text
    assert "$199.98" in text
    assert "$1,199.97" in text


def test_payment_menu_lists_labels():
    assert render_payment_menu().splitlines() == [
        "Select payment method:",
        "1. Cash",
        "2. Credit/Debit Card",
        "3. GCash",
        "Enter your choice (1-3)",
    ]


def test_receipt_and_history(cart, laptop, clock):
    store = MemoryOrderLog()
    cart.add_product(laptop)
    receipt = checkout(cart, PaymentMethod.CASH, store, OrderIdMinter(clock))

    receipt_text = as_text(render_receipt(receipt))
    history_text = as_text(render_order_history(store.read_orders()))

    assert "Order ID: ORD1700000000" in receipt_text
    assert "Payment Method: Cash" in receipt_text
    assert "Order ORD1700000000 (Cash)" in history_text
    assert "$999.99" in history_text
