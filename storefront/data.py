"""Static product catalog."""

from __future__ import annotations

from decimal import Decimal

from storefront.constant import PRODUCT_ROWS
from storefront.errors import ErrorKind, StoreError
from storefront.models import Product


def build_catalog(rows: list[dict[str, object]]) -> tuple[Product, ...]:
    """Build catalog products from raw rows, rejecting duplicate ids."""
    products: list[Product] = []
    seen: set[int] = set()
    for row in rows:
        product = Product(
            product_id=int(row["id"]),  # type: ignore[arg-type]
            name=str(row["name"]),
            price=Decimal(str(row["price"])),
        )
        if product.product_id in seen:
            raise ValueError(f"duplicate product id in catalog: {product.product_id}")
        seen.add(product.product_id)
        products.append(product)
    return tuple(products)


CATALOG: tuple[Product, ...] = build_catalog(PRODUCT_ROWS)


def find_product(catalog: tuple[Product, ...], product_id: int) -> Product:
    """Look up a catalog product by id."""
    for product in catalog:
        if product.product_id == product_id:
            return product
    raise StoreError(ErrorKind.INVALID_ID, product_id=product_id)
