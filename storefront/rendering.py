"""Rendering helpers for catalog, cart, receipt and order history views."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from rich.console import Group
from rich.table import Table
from rich.text import Text

from storefront.cart import ShoppingCart
from storefront.checkout import CheckoutReceipt
from storefront.config import CURRENCY_SYMBOL
from storefront.constant import MAIN_MENU_OPTIONS
from storefront.models import Order, Product
from storefront.payment import PAYMENT_CHOICES, method_label


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def render_main_menu() -> Text:
    text = Text()
    text.append("===== Online Store Menu =====\n", style="bold")
    for number, label in MAIN_MENU_OPTIONS.items():
        text.append(f"{number}. ", style="bold cyan")
        text.append(f"{label}\n")
    return text


def render_catalog(catalog: Iterable[Product]) -> Table:
    table = Table(title="Available Products", title_justify="left", expand=True)
    table.add_column("ID", justify="right", width=4)
    table.add_column("Name")
    table.add_column("Price", justify="right")
    for product in catalog:
        table.add_row(str(product.product_id), product.name, format_money(product.price))
    return table


def render_cart(cart: ShoppingCart) -> Table | Text:
    if cart.is_empty():
        return Text("Your shopping cart is empty.")

    table = Table(title="Shopping Cart", title_justify="left", expand=True, show_footer=True)
    table.add_column("ID", justify="right", width=4)
    table.add_column("Name", footer="Total")
    table.add_column("Price", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Total", justify="right", footer=format_money(cart.get_total_amount()))
    for item in cart.items:
        table.add_row(
            str(item.product.product_id),
            item.product.name,
            format_money(item.product.price),
            str(item.quantity),
            format_money(item.line_total),
        )
    return table


def render_payment_menu() -> str:
    lines = ["Select payment method:"]
    for number, method in enumerate(PAYMENT_CHOICES, start=1):
        lines.append(f"{number}. {method_label(method)}")
    lines.append(f"Enter your choice (1-{len(PAYMENT_CHOICES)})")
    return "\n".join(lines)


def render_receipt(receipt: CheckoutReceipt) -> Text:
    text = Text()
    text.append("You have successfully checked out the products!\n", style="bold green")
    text.append(f"Order ID: {receipt.order_id}\n")
    text.append(f"Payment Method: {receipt.payment_label}\n")
    text.append(f"Total Amount: {format_money(receipt.total_amount)}")
    return text


def _render_order(order: Order) -> Table:
    table = Table(
        title=f"Order {order.order_id} ({order.payment_label})",
        title_justify="left",
        expand=True,
        show_footer=True,
    )
    table.add_column("ID", justify="right", width=4)
    table.add_column("Name")
    table.add_column("Price", justify="right", footer="Total Amount")
    table.add_column("Qty", justify="right", footer=format_money(order.total_amount))
    for row in order.line_items:
        table.add_row(str(row.product_id), row.name, format_money(row.price), str(row.quantity))
    return table


def render_order_history(orders: list[Order]) -> Group:
    return Group(Text("===== Order History =====", style="bold"), *(_render_order(order) for order in orders))
