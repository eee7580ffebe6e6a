"""Test the record store payment statuses."""

import pytest

from teamintake.records.enums import PaymentStatus, failed_payment_status


@pytest.mark.parametrize(
    ("attempt_count", "expected"),
    [
        (0, "Payment Failed - Retry 1"),
        (1, "Payment Failed - Retry 1"),
        (2, "Payment Failed - Retry 2"),
        (3, PaymentStatus.FINAL_WARNING),
        (7, PaymentStatus.FINAL_WARNING),
    ],
)
def test_failed_payment_status(attempt_count, expected):
    """Failures escalate to the final warning from the third attempt."""
    assert failed_payment_status(attempt_count) == expected
