"""Payment method selection."""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum

from storefront.constant import PAYMENT_LABELS
from storefront.errors import ErrorKind, StoreError

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    GCASH = "gcash"


# Menu order of the payment prompt, numbered from 1.
PAYMENT_CHOICES: tuple[PaymentMethod, ...] = (PaymentMethod.CASH, PaymentMethod.CARD, PaymentMethod.GCASH)


def method_label(method: PaymentMethod) -> str:
    """Return the label recorded on orders paid with this method."""
    return PAYMENT_LABELS[method.value]


def confirm_payment(method: PaymentMethod, amount: Decimal) -> None:
    """Accept the payment. No transaction is performed."""
    logger.info("payment_confirmed method=%s amount=%s", method.value, amount)


def payment_method_for_choice(choice: int) -> PaymentMethod:
    """Map a 1-based payment menu choice to its method."""
    if not (1 <= choice <= len(PAYMENT_CHOICES)):
        raise StoreError(
            ErrorKind.INVALID_CHOICE,
            f"Invalid payment method. Please select 1-{len(PAYMENT_CHOICES)}.",
            choice=choice,
        )
    return PAYMENT_CHOICES[choice - 1]
