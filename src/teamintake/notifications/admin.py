"""
Internal admin notifications.

The organization admin is alerted on every registration and every failed payment,
so no payment goes unnoticed.
"""

from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils.dateformat import format as format_date
from django.utils.dateparse import parse_date

from teamintake.configuration import intake_config
from teamintake.normalization import NormalizedField, normalize
from teamintake.records.enums import FINAL_WARNING_ATTEMPT


def _send(subject, template_name, context, recipient, config=None):
    config = config if config is not None else intake_config
    message = render_to_string(f"teamintake/emails/{template_name}", context)
    return send_mail(subject, message, config.from_email, [recipient])


def format_tryout_date(value):
    """Format an ISO date as "Saturday, March 14, 2026", other values are kept as is."""
    try:
        parsed = parse_date(value or "")
    except ValueError:
        parsed = None
    return format_date(parsed, "l, F j, Y") if parsed else value


def send_tryout_admin_notification(registration, payment_id, amount_paid=None, config=None):
    """Alert the admin of a new tryout registration."""
    config = config if config is not None else intake_config
    subject = f"New Tryout Registration - {registration['first_name']} {registration['last_name']}"
    context = {
        **registration,
        "tryout_date": format_tryout_date(registration.get("tryout_date")),
        "payment_id": payment_id,
        "amount_paid": amount_paid,
    }
    return _send(subject, "admin_tryout.txt", context, config.admin_email, config)


def send_season_admin_notification(registration, config=None):
    """Alert the team of a new season registration, paid in full or by subscription."""
    config = config if config is not None else intake_config
    player_type_label = normalize(NormalizedField.PLAYER_TYPE, registration.get("player_type", ""))
    subject = (
        f"New Season Registration - {registration['first_name']} {registration['last_name']} ({player_type_label})"
    )
    context = {
        **registration,
        "player_type_label": player_type_label,
        "paid_in_full": registration.get("payment_frequency") == "full",
    }
    return _send(subject, "admin_season.txt", context, config.team_email, config)


def send_payment_failed_admin_notification(
    customer_name, customer_email, subscription_id, attempt_count, amount_due, config=None
):
    """Alert the team of a failed subscription payment, flagged urgent from the third attempt."""
    config = config if config is not None else intake_config
    subject = f"Payment Failed (Attempt {attempt_count}): {customer_name}"
    context = {
        "customer_name": customer_name,
        "customer_email": customer_email,
        "subscription_id": subscription_id,
        "attempt_count": attempt_count,
        "amount_due": amount_due,
        "urgent": attempt_count >= FINAL_WARNING_ATTEMPT,
    }
    return _send(subject, "admin_payment_failed.txt", context, config.team_email, config)
