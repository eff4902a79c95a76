"""Checkout workflow: cart -> payment -> order record -> log -> cart clear."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from storefront.cart import ShoppingCart
from storefront.config import ORDER_ID_PREFIX
from storefront.errors import ErrorKind, StoreError
from storefront.models import Order
from storefront.payment import PaymentMethod, confirm_payment, method_label
from storefront.persistence import OrderStore

logger = logging.getLogger(__name__)


class OrderIdMinter:
    """Mints timestamp-derived order ids (``ORD<unix seconds>``), never repeating one it has issued or observed."""

    def __init__(self, clock: Callable[[], float] = time.time, prefix: str = ORDER_ID_PREFIX):
        self.clock = clock
        self.prefix = prefix
        self._last_stamp: int | None = None

    def next_id(self) -> str:
        stamp = int(self.clock())
        if self._last_stamp is not None and stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return f"{self.prefix}{stamp}"

    def observe(self, order_id: str) -> None:
        """Account for an id already on record so later ids sort after it."""
        if not order_id.startswith(self.prefix):
            return
        digits = order_id[len(self.prefix) :]
        if not digits.isdigit():
            return
        stamp = int(digits)
        if self._last_stamp is None or stamp > self._last_stamp:
            self._last_stamp = stamp


def seed_minter(minter: OrderIdMinter, order_store: OrderStore) -> None:
    """Move the minter past every id already in the store, so a restart cannot reuse one."""
    try:
        orders = order_store.read_orders()
    except StoreError as exc:
        if exc.kind is not ErrorKind.NO_ORDERS:
            logger.warning("minter_seed_skipped kind=%s", exc.kind.name)
        return
    for order in orders:
        minter.observe(order.order_id)


@dataclass(frozen=True)
class CheckoutReceipt:
    """What checkout reports back to the caller."""

    order_id: str
    payment_label: str
    total_amount: Decimal
    order: Order


def checkout(
    cart: ShoppingCart,
    method: PaymentMethod,
    order_store: OrderStore,
    minter: OrderIdMinter,
) -> CheckoutReceipt:
    """
    Turn the cart into a recorded order and empty the cart.

    The cart is only cleared once the order has been recorded; when the
    store cannot take the order the StoreError propagates and the cart keeps
    its items.
    """
    if cart.is_empty():
        raise StoreError(ErrorKind.EMPTY_CART)

    total = cart.get_total_amount()
    confirm_payment(method, total)

    order = Order(
        order_id=minter.next_id(),
        payment_label=method_label(method),
        line_items=cart.snapshot(),
        total_amount=total,
    )
    order_store.append(order)
    logger.info(
        "checkout_saved order_id=%s method=%s lines=%d total=%s",
        order.order_id,
        method.value,
        len(order.line_items),
        total,
    )

    cart.clear_cart()
    return CheckoutReceipt(
        order_id=order.order_id,
        payment_label=order.payment_label,
        total_amount=order.total_amount,
        order=order,
    )
