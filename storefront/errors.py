"""Error kinds raised by the storefront workflow."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failures the store workflow can report."""

    INVALID_INPUT = "invalid_input"
    INVALID_ID = "invalid_id"
    EMPTY_CART = "empty_cart"
    NO_ORDERS = "no_orders"
    INVALID_CHOICE = "invalid_choice"
    ORDER_LOG_UNAVAILABLE = "order_log_unavailable"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "Invalid input. Please enter a valid number.",
    ErrorKind.INVALID_ID: "Invalid product ID",
    ErrorKind.EMPTY_CART: "Shopping cart is empty",
    ErrorKind.NO_ORDERS: "No orders found",
    ErrorKind.INVALID_CHOICE: "Invalid choice.",
    ErrorKind.ORDER_LOG_UNAVAILABLE: "Order log could not be written",
}


class StoreError(Exception):
    """Raised when a store operation fails; carries its kind and context data."""

    def __init__(self, kind: ErrorKind, message: str | None = None, **context: object):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        self.context = context
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"StoreError({self.kind.name}, {self.message!r}, context={self.context!r})"
