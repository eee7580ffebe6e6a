"""Inbound payment processor events."""

import json
import logging
from dataclasses import dataclass, field
from enum import StrEnum

import stripe

from teamintake.webhooks.exceptions import MalformedEventError, WebhookVerificationError

logger = logging.getLogger(__name__)

SIGNATURE_TOLERANCE = 300


class EventType(StrEnum):
    """Event types handled by the dispatcher."""

    PAYMENT_SUCCEEDED = "payment_intent.succeeded"
    CHECKOUT_COMPLETED = "checkout.session.completed"
    INVOICE_FAILED = "invoice.payment_failed"
    SUBSCRIPTION_DELETED = "customer.subscription.deleted"


@dataclass(frozen=True)
class InboundEvent:
    """A verified event, `object` is the payload of the event ("data.object")."""

    id: str
    type: str
    object: dict = field(default_factory=dict)


def construct_event(payload: bytes, signature: str, secret: str, tolerance=SIGNATURE_TOLERANCE) -> InboundEvent:
    """
    Verify the signature of a raw event body and parse it.

    The signature header is ``t=<timestamp>,v1=<hex HMAC-SHA256 of "<timestamp>.<body>">``
    computed with the endpoint signing secret.

    Raises:
        WebhookVerificationError: If the signature is missing, invalid or too old
        MalformedEventError: If the body is not a JSON event

    """
    try:
        body = payload.decode("utf-8")
    except UnicodeDecodeError as err:
        raise MalformedEventError("Event payload is not valid UTF-8") from err

    if not signature:
        raise WebhookVerificationError("Missing signature header")

    try:
        stripe.WebhookSignature.verify_header(body, signature, secret, tolerance)
    except stripe.SignatureVerificationError as err:
        raise WebhookVerificationError(str(err)) from err

    try:
        data = json.loads(body)
    except json.JSONDecodeError as err:
        raise MalformedEventError(f"Invalid payload: {err}") from err

    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise MalformedEventError("Event has no type")

    event_data = data.get("data")
    event_object = event_data.get("object") if isinstance(event_data, dict) else None
    if not isinstance(event_object, dict):
        raise MalformedEventError("Event has no data object")

    return InboundEvent(id=data.get("id", ""), type=data["type"], object=event_object)
