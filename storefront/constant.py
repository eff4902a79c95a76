"""Editable static catalog configuration."""

from __future__ import annotations

PRODUCT_ROWS: list[dict[str, object]] = [
    {"id": 1, "name": "Laptop", "price": "999.99"},
    {"id": 2, "name": "Smartphone", "price": "599.99"},
    {"id": 3, "name": "Headphones", "price": "99.99"},
    {"id": 4, "name": "Mouse", "price": "19.99"},
    {"id": 5, "name": "Keyboard", "price": "49.99"},
]

PAYMENT_LABELS: dict[str, str] = {
    "cash": "Cash",
    "card": "Credit/Debit Card",
    "gcash": "GCash",
}

MAIN_MENU_OPTIONS: dict[int, str] = {
    1: "View Products",
    2: "View Shopping Cart",
    3: "View Orders",
    4: "Exit",
}
