"""Enums for the record store."""

from enum import StrEnum


class RecordTable(StrEnum):
    """Tables of the record store."""

    SEASON = "season"
    TRYOUT = "tryout"


class PaymentStatus(StrEnum):
    """
    Values of the "Payment Status" field.

    Failed subscription payments also use "Payment Failed - Retry N", see
    `failed_payment_status`.
    """

    PENDING = "Pending"
    PAID = "Paid"
    FINAL_WARNING = "Payment Failed - Final Warning"
    SUBSCRIPTION_ENDED = "Subscription Ended"


FINAL_WARNING_ATTEMPT = 3


def failed_payment_status(attempt_count: int) -> str:
    """Return the status to record after a failed subscription payment attempt."""
    attempt_count = max(attempt_count, 1)
    if attempt_count >= FINAL_WARNING_ATTEMPT:
        return PaymentStatus.FINAL_WARNING
    return f"Payment Failed - Retry {attempt_count}"
