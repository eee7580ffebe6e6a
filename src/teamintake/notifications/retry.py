"""
Escalating notices for failed subscription payments.

Each retry attempt gets a different message, increasingly urgent but keeping a
supportive tone:

- attempt 1: casual heads up
- attempt 2: friendly follow-up with troubleshooting tips
- attempt 3: urgent, the roster spot is at risk
- attempt 4 and later: final notice before cancellation
"""

import html
import logging
from decimal import Decimal
from enum import StrEnum
from typing import NamedTuple

from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from teamintake.configuration import intake_config

logger = logging.getLogger(__name__)


class RetryTemplate(StrEnum):
    """Payment failure notice templates, by escalation level."""

    CASUAL = "casual"
    FRIENDLY = "friendly"
    URGENT = "urgent"
    FINAL_NOTICE = "final-notice"


class RenderedEmail(NamedTuple):
    """Subject and HTML body of a notice."""

    subject: str
    body: str


ESCALATION = {
    1: RetryTemplate.CASUAL,
    2: RetryTemplate.FRIENDLY,
    3: RetryTemplate.URGENT,
}

SUBJECTS = {
    RetryTemplate.CASUAL: "Quick heads up about your Newteam payment",
    RetryTemplate.FRIENDLY: "Following up on your Newteam payment",
    RetryTemplate.URGENT: "Important: Action needed for your Newteam spot",
    RetryTemplate.FINAL_NOTICE: "Final notice: Your Newteam roster spot",
}


def select_template(attempt_count: int) -> RetryTemplate:
    """
    Return the template for a payment attempt.

    Attempts below 1 are handled as the first one, attempts past the table all get
    the final notice: escalation never goes backwards.
    """
    return ESCALATION.get(max(attempt_count, 1), RetryTemplate.FINAL_NOTICE)


def render(template: RetryTemplate, context: dict) -> RenderedEmail:
    """Render a notice, `context` holds `first_name` and `amount_due`."""
    context = {"team_email": intake_config.team_email, **context}
    body = render_to_string(f"teamintake/emails/retry_{template}.html", context)
    return RenderedEmail(SUBJECTS[template], body)


def format_amount(cents) -> str:
    """Format an amount in cents as dollars, e.g. 8500 -> "85.00"."""
    if cents is None:
        return "0.00"
    return f"{Decimal(cents) / 100:.2f}"


def greeting_name(customer_name: str | None) -> str:
    """Return the first name used to greet the customer."""
    parts = (customer_name or "").split()
    return parts[0] if parts else "there"


class RetryNotifier:
    """
    Send the payment failure notice matching the attempt number.

    Notices come from the team address, players answer the team directly, unless
    `notice_from_email` is configured.
    """

    def __init__(self, config=None):
        """Initialize the notifier with the intake configuration."""
        self.config = config if config is not None else intake_config

    def notify(self, email: str, first_name: str, attempt_count: int, amount_due: str) -> RenderedEmail:
        """Render and send the notice, return what was sent."""
        template = select_template(attempt_count)
        rendered = render(
            template,
            {"first_name": first_name, "amount_due": amount_due, "team_email": self.config.team_email},
        )

        message = EmailMultiAlternatives(
            subject=rendered.subject,
            body=html.unescape(strip_tags(rendered.body)),
            from_email=self.config.notice_from_email or self.config.team_email,
            to=[email],
            reply_to=[self.config.team_email],
        )
        message.attach_alternative(rendered.body, "text/html")
        message.send()

        logger.info("Payment failed notice %s sent for attempt %s to %s", template, attempt_count, email)
        return rendered
