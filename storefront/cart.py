"""Shopping cart holding the session's line items."""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.errors import ErrorKind, StoreError
from storefront.models import CartItem, LineItem, Product
from storefront.persistence import format_line_item

logger = logging.getLogger(__name__)


class ShoppingCart:
    """Ordered cart items, unique by product id, in first-add order."""

    def __init__(self) -> None:
        self._items: list[CartItem] = []

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def add_product(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product, merging into the existing line when the id is already in the cart."""
        if quantity < 1:
            raise StoreError(ErrorKind.INVALID_INPUT, "Quantity must be at least 1.", quantity=quantity)

        for item in self._items:
            if item.product.product_id == product.product_id:
                item.quantity += quantity
                logger.debug("cart_merge product_id=%s quantity=%s", product.product_id, item.quantity)
                return item

        item = CartItem(product=product, quantity=quantity)
        self._items.append(item)
        logger.debug("cart_add product_id=%s quantity=%s", product.product_id, quantity)
        return item

    def get_total_amount(self) -> Decimal:
        if not self._items:
            raise StoreError(ErrorKind.EMPTY_CART)
        return sum((item.line_total for item in self._items), Decimal("0"))

    def clear_cart(self) -> None:
        self._items.clear()
        logger.debug("cart_cleared")

    def is_empty(self) -> bool:
        return not self._items

    def snapshot(self) -> tuple[LineItem, ...]:
        """Copy the current items into frozen order rows."""
        return tuple(
            LineItem(
                product_id=item.product.product_id,
                name=item.product.name,
                price=item.product.price,
                quantity=item.quantity,
            )
            for item in self._items
        )

    def get_cart_contents(self) -> str:
        """Serialize the cart as tab-delimited order log rows, one per line."""
        return "".join(f"{format_line_item(row)}\n" for row in self.snapshot())

    def __len__(self) -> int:
        return len(self._items)
