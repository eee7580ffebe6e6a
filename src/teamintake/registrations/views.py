"""
Registration and lead capture views.

The browser form posts its fields once the payment is confirmed. Each downstream
call (record store, marketing list, mailer) is isolated: only a validation error
makes the request fail.
"""

import logging

from django.http import JsonResponse
from django.views import View

from teamintake.configuration import intake_config
from teamintake.marketing import marketing
from teamintake.marketing.backends import ContactData
from teamintake.normalization import (
    NormalizedField,
    normalize,
    transform_season_registration,
    transform_tryout_registration,
)
from teamintake.notifications.admin import send_season_admin_notification, send_tryout_admin_notification
from teamintake.records import records
from teamintake.records.backends import RecordData
from teamintake.records.enums import RecordTable
from teamintake.results import call_integration
from teamintake.tools.spam import is_likely_spam

from .forms import LeadSignupForm, SeasonRegistrationForm, TryoutRegistrationForm

logger = logging.getLogger(__name__)

LEAD_TAGS = frozenset({"Winter Protocol Insider Club", "Newteam FC"})
LEAD_SUCCESS_MESSAGE = "Your download is ready!"
CSRF_FAILURE_MESSAGE = "Security check failed. Please refresh the page and try again."


def csrf_failure(request, reason=""):
    """Answer a rejected CSRF check with JSON, the form is submitted in the background."""
    logger.warning("CSRF check failed for %s: %s", request.path, reason)
    return JsonResponse({"success": False, "message": CSRF_FAILURE_MESSAGE}, status=403)


class IntakeFormView(View):
    """Validate a posted form, then hand the cleaned data to `form_valid`."""

    http_method_names = ["post"]
    form_class = None

    def post(self, request, *args, **kwargs):
        """Validate the submission."""
        form = self.form_class(request.POST)
        if not form.is_valid():
            return self.form_invalid(form)
        return self.form_valid(form.cleaned_data)

    def form_invalid(self, form):
        """Reject the submission with every validation error."""
        return JsonResponse({"success": False, "message": form.error_message()}, status=400)

    def form_valid(self, data):
        """Process the cleaned data and return the response."""
        raise NotImplementedError


class LeadSignupView(IntakeFormView):
    """
    Subscribe a visitor downloading the free guide.

    Submissions whose names look like bot generated text get the same response as
    real ones, so bots cannot tell they were filtered. They never reach the
    marketing list.
    """

    form_class = LeadSignupForm

    def post(self, request, *args, **kwargs):
        """Filter spam before validating the submission."""
        first_name = request.POST.get("first_name", "").strip()
        last_name = request.POST.get("last_name", "").strip()
        if is_likely_spam(first_name) or is_likely_spam(last_name):
            logger.warning(
                "Spam lead signup blocked: %r %r from %s",
                first_name,
                last_name,
                request.META.get("REMOTE_ADDR", "unknown"),
            )
            return self.success_response()
        return super().post(request, *args, **kwargs)

    def form_valid(self, data):
        """Add the lead to the marketing list."""
        contact = ContactData(
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            tags=set(LEAD_TAGS),
            merge_fields={"SOURCE": data["traffic_source"]},
        )
        call_integration("Lead marketing list upsert", lambda: marketing.upsert_contact(contact))
        logger.info("Lead signup from %s (source: %s)", data["email"], data["traffic_source"])
        return self.success_response()

    def success_response(self):
        """Response sent to every accepted or silently dropped lead."""
        return JsonResponse({"success": True, "message": LEAD_SUCCESS_MESSAGE})


class TryoutRegistrationView(IntakeFormView):
    """Record a paid tryout registration."""

    form_class = TryoutRegistrationForm

    def form_valid(self, data):
        """Write the record, subscribe the player and alert the admin."""
        payment_id = data["payment_intent_id"]

        record = RecordData(
            key=payment_id,
            fields=transform_tryout_registration(data, payment_id),
            table=RecordTable.TRYOUT,
        )
        call_integration("Tryout record write", lambda: records.upsert_record(record))

        contact = ContactData(
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            tags={f"Tryout Registration {intake_config.season_label}", "Newteam FC"},
            merge_fields={
                "PHONE": data["phone"],
                "POSITION": normalize(NormalizedField.POSITION, data["position"]),
                "EXPERIENCE": normalize(NormalizedField.EXPERIENCE, data["experience"]),
            },
        )
        call_integration("Tryout marketing list upsert", lambda: marketing.upsert_contact(contact))

        call_integration("Tryout admin notification", send_tryout_admin_notification, data, payment_id)

        logger.info("Tryout registration from %s (%s)", data["email"], payment_id)
        return JsonResponse({"success": True, "message": "Registration successful"})


class SeasonRegistrationView(IntakeFormView):
    """Record a season registration, paid in full or by monthly subscription."""

    form_class = SeasonRegistrationForm

    def form_valid(self, data):
        """Write the record, alert the team and subscribe the player."""
        key = data["payment_intent_id"] or data["subscription_id"]
        record = RecordData(key=key, fields=transform_season_registration(data), table=RecordTable.SEASON)
        result = call_integration("Season record write", lambda: records.upsert_record(record))

        call_integration("Season admin notification", send_season_admin_notification, data)

        player_type_label = normalize(NormalizedField.PLAYER_TYPE, data["player_type"])
        contact = ContactData(
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            tags={"Newteam FC", f"Season Registration {intake_config.season_label}", player_type_label},
            merge_fields={"POSITION": data["position"]},
        )
        call_integration("Season marketing list upsert", lambda: marketing.upsert_contact(contact))

        logger.info("Season registration from %s (%s), record saved: %s", data["email"], key, result.ok)
        return JsonResponse(
            {"success": True, "message": "Registration completed successfully!", "record_saved": result.ok}
        )
