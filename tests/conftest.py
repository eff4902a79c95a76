# tests/conftest.py
# Ensure project root (parent of tests) is on sys.path so `import storefront...` works.
import sys
from decimal import Decimal
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from storefront.cart import ShoppingCart  # noqa: E402
from storefront.data import CATALOG, find_product  # noqa: E402
from storefront.models import Product  # noqa: E402
from storefront.persistence import OrderLog  # noqa: E402


class FixedClock:
    """Callable clock returning a settable unix time."""

    def __init__(self, now: float = 1700000000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def laptop() -> Product:
    return find_product(CATALOG, 1)


@pytest.fixture
def headphones() -> Product:
    return find_product(CATALOG, 3)


@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()


@pytest.fixture
def order_log(tmp_path) -> OrderLog:
    return OrderLog(tmp_path / "orders.log")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def make_product():
    def _make(product_id: int, name: str, price: str) -> Product:
        return Product(product_id=product_id, name=name, price=Decimal(price))

    return _make
