"""Order log persistence: append-only text stanzas and an in-memory variant."""

from __future__ import annotations

import fcntl
import logging
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import IO, Iterator, Protocol, Sequence

from storefront.config import MEMORY_ORDER_SLOTS, ORDER_LOG_PATH
from storefront.errors import ErrorKind, StoreError
from storefront.models import LineItem, Order

logger = logging.getLogger(__name__)

STANZA_MARKER = "[LOG] -> Order ID: "
_ORDER_ID_END = " has been"
_METHOD_ANCHOR = "using "
TOTAL_PREFIX = "Total Amount: $"


class OrderStore(Protocol):
    """Where checked-out orders are recorded and read back from."""

    def append(self, order: Order) -> None: ...

    def read_orders(self) -> list[Order]: ...


def format_price(price: Decimal) -> str:
    """Render a stored price with six fraction digits, as the log has always held them."""
    return f"{price:.6f}"


def format_line_item(row: LineItem) -> str:
    return f"{row.product_id}\t{row.name}\t{format_price(row.price)}\t{row.quantity}"


def format_order_stanza(order: Order) -> str:
    """Render one order as a log stanza, terminated by a blank line."""
    lines = [
        f"{STANZA_MARKER}{order.order_id} has been successfully checked out "
        f"and paid using {order.payment_label}."
    ]
    lines.extend(format_line_item(row) for row in order.line_items)
    lines.append(f"{TOTAL_PREFIX}{order.total_amount:f}")
    return "\n".join(lines) + "\n\n"


def _parse_header(line: str) -> tuple[str, str] | None:
    _, _, rest = line.partition(STANZA_MARKER)
    order_id, found, tail = rest.partition(_ORDER_ID_END)
    if not found or not order_id:
        return None
    _, found, label = tail.partition(_METHOD_ANCHOR)
    if not found:
        return None
    label = label.rstrip()
    if label.endswith("."):
        label = label[:-1]
    return order_id, label


def _parse_line_item(line: str) -> LineItem | None:
    fields = line.split("\t")
    if len(fields) != 4:
        return None
    product_id, name, price, quantity = fields
    try:
        return LineItem(
            product_id=int(product_id),
            name=name,
            price=Decimal(price),
            quantity=int(quantity),
        )
    except (ValueError, InvalidOperation):
        return None


def _parse_total(line: str) -> Decimal | None:
    try:
        return Decimal(line[len(TOTAL_PREFIX) :].strip())
    except InvalidOperation:
        return None


def parse_order_log(lines: Sequence[str]) -> list[Order]:
    """
    Rebuild orders from log lines.

    A stanza starts at a line holding the order marker, continues with
    tab-delimited item rows and a total line, and ends at a blank line.
    Item rows without exactly four fields are skipped, so names holding a
    tab do not survive the round trip.
    """
    orders: list[Order] = []
    idx = 0
    while idx < len(lines):
        line = lines[idx]
        idx += 1
        if STANZA_MARKER not in line:
            continue

        header = _parse_header(line)
        if header is None:
            logger.warning("order_log_bad_header line=%r", line)
            continue
        order_id, payment_label = header

        rows: list[LineItem] = []
        total: Decimal | None = None
        while idx < len(lines):
            body = lines[idx]
            if STANZA_MARKER in body:
                break
            idx += 1
            if not body.strip():
                break
            if body.startswith(TOTAL_PREFIX):
                total = _parse_total(body)
                continue
            row = _parse_line_item(body)
            if row is None:
                logger.warning("order_log_bad_item order_id=%s line=%r", order_id, body)
                continue
            rows.append(row)

        if total is None:
            logger.warning("order_log_missing_total order_id=%s", order_id)
            continue
        orders.append(
            Order(order_id=order_id, payment_label=payment_label, line_items=tuple(rows), total_amount=total)
        )
    return orders


class OrderLog:
    """Append-only text log of checked-out orders."""

    def __init__(self, path: Path | str = ORDER_LOG_PATH):
        self.path = Path(path)

    @contextmanager
    def _lock(self, handle: IO[str], exclusive: bool) -> Iterator[None]:
        """Hold a shared (read) or exclusive (append) lock on the open log."""
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH)
        try:
            yield
        finally:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)

    def append(self, order: Order) -> None:
        stanza = format_order_stanza(order)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                with self._lock(fh, exclusive=True):
                    fh.write(stanza)
                    fh.flush()
        except OSError as exc:
            logger.error("order_log_write_failed path=%s error=%r", self.path, exc)
            raise StoreError(
                ErrorKind.ORDER_LOG_UNAVAILABLE,
                f"Could not write order log {self.path}: {exc}",
                path=str(self.path),
            ) from exc
        logger.info("order_log_appended order_id=%s path=%s", order.order_id, self.path)

    def read_orders(self) -> list[Order]:
        """Return every order in the log, oldest first."""
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                with self._lock(fh, exclusive=False):
                    lines = fh.read().splitlines()
        except FileNotFoundError as exc:
            raise StoreError(ErrorKind.NO_ORDERS, path=str(self.path)) from exc
        except OSError as exc:
            raise StoreError(
                ErrorKind.ORDER_LOG_UNAVAILABLE,
                f"Could not read order log {self.path}: {exc}",
                path=str(self.path),
            ) from exc

        orders = parse_order_log(lines)
        if not orders:
            raise StoreError(ErrorKind.NO_ORDERS, path=str(self.path))
        return orders


class MemoryOrderLog:
    """Order history kept in process, lost at exit."""

    def __init__(self, slots: int = MEMORY_ORDER_SLOTS):
        self.slots = slots
        self._orders: list[Order] = []

    def append(self, order: Order) -> None:
        if len(self._orders) >= self.slots:
            raise StoreError(
                ErrorKind.ORDER_LOG_UNAVAILABLE,
                f"Order history is full ({self.slots} orders).",
                slots=self.slots,
            )
        self._orders.append(order)
        logger.info("order_recorded order_id=%s count=%d", order.order_id, len(self._orders))

    def read_orders(self) -> list[Order]:
        if not self._orders:
            raise StoreError(ErrorKind.NO_ORDERS)
        return list(self._orders)
