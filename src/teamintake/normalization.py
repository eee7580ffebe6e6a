"""
Field normalization for the record store.

The record store rejects select values that do not match its schema exactly
(e.g. the form sends ``S`` for socks where the schema expects ``S (US 5-7)``, or
``Paid in Full`` where it expects ``Paid in full``). Every mapping used by the
registration endpoints, the webhook and the marketing merge fields lives here.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from django.utils import timezone

logger = logging.getLogger(__name__)


class NormalizedField(StrEnum):
    """Form fields having a canonical record store value."""

    SOCKS_SIZE = "socks_size"
    PAYMENT_STATUS = "payment_status"
    PAYMENT_FREQUENCY = "payment_frequency"
    POSITION = "position"
    EXPERIENCE = "experience"
    PLAYER_TYPE = "player_type"


@dataclass(frozen=True)
class NormalizationRule:
    """
    Map raw form codes to canonical values.

    Without a `default`, unknown values are passed through unchanged so they still
    reach the record store. With a `default`, any value missing from the mapping
    collapses to it (binary choices such as full/monthly payment).
    """

    mapping: Mapping[str, str] = field(default_factory=dict)
    default: str | None = None

    def apply(self, field_name, raw_value):
        """Return the canonical value for `raw_value`."""
        if raw_value in self.mapping:
            return self.mapping[raw_value]
        if self.default is not None:
            return self.default
        if raw_value:
            logger.warning("No %s mapping for value %r, passing it through", field_name, raw_value)
        return raw_value


NORMALIZATION_RULES = {
    NormalizedField.SOCKS_SIZE: NormalizationRule(
        {
            "S": "S (US 5-7)",
            "M": "M (US 7-9)",
            "L": "L (US 9-12)",
            "XL": "XL (US 12+)",
        }
    ),
    NormalizedField.PAYMENT_STATUS: NormalizationRule({"full": "Paid"}, default="Pending"),
    NormalizedField.PAYMENT_FREQUENCY: NormalizationRule({"full": "Paid in full"}, default="Monthly"),
    NormalizedField.POSITION: NormalizationRule(
        {
            "goalkeeper": "Goalkeeper",
            "defender": "Defender",
            "midfielder": "Midfielder",
            "forward": "Forward",
        }
    ),
    NormalizedField.EXPERIENCE: NormalizationRule(
        {
            "high_school": "High School",
            "club": "Club",
            "college": "College",
            "semi_pro": "Semi-Professional",
            "professional": "Professional",
        }
    ),
    NormalizedField.PLAYER_TYPE: NormalizationRule({"guest": "Guest Player"}, default="Full Season Player"),
}


def normalize(field_name, raw_value):
    """Convert a raw form value into the exact string expected by the record store."""
    try:
        rule = NORMALIZATION_RULES[NormalizedField(field_name)]
    except ValueError:
        logger.warning("No normalization rule for field %r", field_name)
        return raw_value
    return rule.apply(field_name, raw_value)


def transform_season_registration(data: Mapping) -> dict:
    """Build the season registration record fields from the submitted form data."""
    frequency = data.get("payment_frequency") or "monthly"
    payment_intent_id = data.get("payment_intent_id") or ""
    subscription_id = data.get("subscription_id") or ""

    return {
        "First Name": data["first_name"],
        "Last Name": data["last_name"],
        "Email": data["email"],
        "Age": data.get("age"),
        "Positions": data.get("position", ""),
        "Tracksuit Size": data.get("tracksuit_size", ""),
        "Practice Jersey Size": data.get("practice_jersey_size", ""),
        "Shorts Size": data.get("shorts_size", ""),
        "Socks Size": normalize(NormalizedField.SOCKS_SIZE, data.get("socks_size", "")),
        "Player Type": normalize(NormalizedField.PLAYER_TYPE, data.get("player_type", "")),
        "Name Personalization": "Yes" if data.get("name_personalization") else "No",
        "Payment Amount": data.get("payment_amount"),
        "Payment Frequency": normalize(NormalizedField.PAYMENT_FREQUENCY, frequency),
        "Subscription ID": subscription_id,
        "Payment Intent ID": payment_intent_id,
        "Stripe Customer ID": data.get("customer_id", ""),
        "Stripe Payment ID": payment_intent_id or subscription_id,
        "Payment Status": normalize(NormalizedField.PAYMENT_STATUS, frequency),
        "Waiver Agreement": "Waiver Signed",
        "Registration date": timezone.localdate().isoformat(),
    }


def transform_tryout_registration(data: Mapping, payment_id: str, payment_status: str | None = None) -> dict:
    """
    Build the tryout registration record fields.

    `payment_status` is only set when the registration comes from a confirmed
    payment event.
    """
    fields = {
        "First Name": data["first_name"],
        "Last Name": data["last_name"],
        "Email": data["email"],
        "Phone": data.get("phone", ""),
        "Date of Birth": data.get("date_of_birth", ""),
        "Position": normalize(NormalizedField.POSITION, data.get("position", "")),
        "Experience": normalize(NormalizedField.EXPERIENCE, data.get("experience", "")),
        "Tryout Date": data.get("tryout_date", ""),
        "Stripe Payment ID": payment_id,
        "Registration Date": timezone.localdate().isoformat(),
        "Status": "Registered",
    }
    if payment_status:
        fields["Payment Status"] = payment_status
    return fields
