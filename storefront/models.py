"""Domain models for the online store."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.errors import ErrorKind, StoreError


@dataclass(frozen=True)
class Product:
    """A purchasable catalog entry."""

    product_id: int
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        if self.product_id < 1:
            raise ValueError(f"product id must be >= 1, got {self.product_id}")
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")
        if "\t" in self.name or "\n" in self.name:
            raise ValueError(f"product name may not contain tabs or newlines: {self.name!r}")


@dataclass
class CartItem:
    """A product and the quantity of it held in the cart."""

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise StoreError(ErrorKind.INVALID_INPUT, "Quantity must be at least 1.", quantity=self.quantity)

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class LineItem:
    """One frozen product/quantity row of a placed order."""

    product_id: int
    name: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """A checked-out cart snapshot with its payment label and frozen total."""

    order_id: str
    payment_label: str
    line_items: tuple[LineItem, ...]
    total_amount: Decimal
