"""Route verified payment events to the record store, the marketing list and the mailer."""

import logging

from teamintake.configuration import intake_config
from teamintake.marketing import marketing
from teamintake.marketing.backends import ContactData
from teamintake.normalization import NormalizedField, normalize, transform_tryout_registration
from teamintake.notifications.admin import send_payment_failed_admin_notification, send_tryout_admin_notification
from teamintake.notifications.retry import RetryNotifier, format_amount, greeting_name
from teamintake.records import records
from teamintake.records.backends import RecordData
from teamintake.records.enums import PaymentStatus, RecordTable, failed_payment_status
from teamintake.results import call_integration
from teamintake.webhooks.events import EventType, InboundEvent

logger = logging.getLogger(__name__)

TRYOUT_REGISTRATION = "tryout_registration"
TRYOUT_PAYMENT_TAGS = frozenset({"Tryout Registration", "Paid Member", "Newteam FC"})


def split_name(full_name: str) -> tuple[str, str]:
    """Split a full name into first name and the rest."""
    parts = (full_name or "").split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def parse_attempt_count(value) -> int:
    """Return the attempt number of a failed invoice, defaulting to the first attempt."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1


def invoice_subscription_id(invoice: dict) -> str:
    """Return the subscription of an invoice, for both flat and nested ("parent") payloads."""
    if invoice.get("subscription"):
        return invoice["subscription"]
    details = (invoice.get("parent") or {}).get("subscription_details") or {}
    return details.get("subscription") or ""


class EventDispatcher:
    """
    Dispatch a verified event to the matching handler.

    Every downstream call is isolated: a marketing list or mailer failure is logged
    and never prevents the record store write, nor makes the dispatch fail. Event
    sources retry on error responses and the downstream writes are not all
    idempotent, so partial failures are not reported back.
    """

    def __init__(self, records_backend=None, marketing_backend=None, notifier=None, config=None):
        """Initialize the dispatcher, collaborators default to the configured backends."""
        self.records = records_backend if records_backend is not None else records
        self.marketing = marketing_backend if marketing_backend is not None else marketing
        self.config = config if config is not None else intake_config
        self.notifier = notifier if notifier is not None else RetryNotifier(self.config)
        self.handlers = {
            EventType.PAYMENT_SUCCEEDED: self.handle_payment_succeeded,
            EventType.CHECKOUT_COMPLETED: self.handle_payment_succeeded,
            EventType.INVOICE_FAILED: self.handle_invoice_failed,
            EventType.SUBSCRIPTION_DELETED: self.handle_subscription_deleted,
        }

    def dispatch(self, event: InboundEvent) -> bool:
        """
        Run the handler of the event type, return False for unhandled types.

        A handler raising on a malformed payload is logged, the event still counts
        as handled.
        """
        try:
            event_type = EventType(event.type)
        except ValueError:
            logger.info("Received unhandled event type %s (%s)", event.type, event.id)
            return False

        logger.info("Processing %s event %s for %s", event_type, event.id, event.object.get("id"))
        try:
            self.handlers[event_type](event.object)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to process %s event %s", event_type, event.id)
        return True

    def handle_payment_succeeded(self, payment):
        """
        Record a paid tryout registration.

        Writes the record with the "Paid" status, adds the player to the marketing
        list and alerts the admin. Payments without tryout metadata (season
        registrations are recorded by their own endpoint) are ignored.
        """
        payment_id = payment.get("id", "")
        metadata = payment.get("metadata") or {}
        if metadata.get("type", TRYOUT_REGISTRATION) != TRYOUT_REGISTRATION or not metadata.get("player_email"):
            logger.info("Payment %s is not a tryout registration, nothing to record", payment_id)
            return

        first_name, last_name = split_name(metadata.get("player_name", ""))
        registration = {
            "first_name": first_name,
            "last_name": last_name,
            "email": metadata["player_email"],
            "phone": metadata.get("player_phone", ""),
            "position": metadata.get("position", ""),
            "experience": metadata.get("experience", ""),
            "tryout_date": metadata.get("tryout_date", ""),
        }
        amount = payment.get("amount")
        if amount is None:
            amount = payment.get("amount_total")

        record = RecordData(
            key=payment_id,
            fields=transform_tryout_registration(registration, payment_id, PaymentStatus.PAID),
            table=RecordTable.TRYOUT,
        )
        call_integration("Tryout record write", lambda: self.records.upsert_record(record))

        contact = ContactData(
            email=registration["email"],
            first_name=first_name,
            last_name=last_name,
            tags=set(TRYOUT_PAYMENT_TAGS),
            merge_fields={
                "PHONE": registration["phone"],
                "POSITION": normalize(NormalizedField.POSITION, registration["position"]),
                "EXPERIENCE": normalize(NormalizedField.EXPERIENCE, registration["experience"]),
            },
        )
        call_integration("Tryout marketing list upsert", lambda: self.marketing.upsert_contact(contact))

        call_integration(
            "Tryout admin notification",
            send_tryout_admin_notification,
            registration,
            payment_id,
            format_amount(amount) if amount is not None else None,
            config=self.config,
        )
        logger.info("Tryout registration recorded for %s (%s)", registration["email"], payment_id)

    def handle_invoice_failed(self, invoice):
        """Record the failure status and send the escalating notices."""
        customer_email = invoice.get("customer_email") or ""
        customer_name = invoice.get("customer_name") or ""
        subscription_id = invoice_subscription_id(invoice)
        attempt_count = parse_attempt_count(invoice.get("attempt_count"))
        amount_due = format_amount(invoice.get("amount_due"))

        logger.warning(
            "Subscription payment failed: subscription %s, attempt %s, email %s",
            subscription_id,
            attempt_count,
            customer_email,
        )

        if subscription_id:
            status = failed_payment_status(attempt_count)
            call_integration(
                "Failed payment status update",
                lambda: self.records.update_status(subscription_id, status),
            )

        if customer_email:
            call_integration(
                "Payment failed notice",
                self.notifier.notify,
                customer_email,
                greeting_name(customer_name),
                attempt_count,
                amount_due,
            )

        call_integration(
            "Payment failed admin notification",
            send_payment_failed_admin_notification,
            customer_name,
            customer_email,
            subscription_id,
            attempt_count,
            amount_due,
            config=self.config,
        )

    def handle_subscription_deleted(self, subscription):
        """Mark the registration of an ended or canceled subscription."""
        subscription_id = subscription.get("id")
        if not subscription_id:
            logger.warning("Subscription deleted event without subscription id")
            return
        call_integration(
            "Subscription ended status update",
            lambda: self.records.update_status(subscription_id, PaymentStatus.SUBSCRIPTION_ENDED),
        )
