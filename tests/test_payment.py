# tests/test_payment.py
from decimal import Decimal

import pytest

from storefront.errors import ErrorKind, StoreError
from storefront.payment import PaymentMethod, confirm_payment, method_label, payment_method_for_choice


@pytest.mark.parametrize(
    "choice, method, label",
    [
        (1, PaymentMethod.CASH, "Cash"),
        (2, PaymentMethod.CARD, "Credit/Debit Card"),
        (3, PaymentMethod.GCASH, "GCash"),
    ],
)
def test_choice_maps_to_method_and_label(choice, method, label):
    assert payment_method_for_choice(choice) is method
    assert method_label(method) == label


@pytest.mark.parametrize("choice", [0, 4, -1])
def test_out_of_range_choice_is_invalid(choice):
    with pytest.raises(StoreError) as excinfo:
        payment_method_for_choice(choice)

    assert excinfo.value.kind is ErrorKind.INVALID_CHOICE
    assert excinfo.value.message == "Invalid payment method. Please select 1-3."


def test_confirm_payment_always_succeeds():
    for method in PaymentMethod:
        assert confirm_payment(method, Decimal("10.00")) is None
