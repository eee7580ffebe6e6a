"""Tests for the registration and lead capture views."""

from unittest import mock

import pytest
from django.test import Client

from teamintake.marketing.backends import subscriber_hash
from teamintake.records.enums import RecordTable
from teamintake.registrations import views
from teamintake.results import ErrorKind, Result
from tests.factories import LeadSignupFactory, SeasonRegistrationFactory, TryoutRegistrationFactory

LEAD_URL = "/api/lead-signup/"
TRYOUT_URL = "/api/tryout-registration/"
SEASON_URL = "/api/season-registration/"


# Lead signup


def test_lead_signup(client, marketing_backend):
    """Leads are added to the marketing list with their acquisition source."""
    response = client.post(LEAD_URL, LeadSignupFactory(email="maria@example.com"))

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Your download is ready!"}
    contact = marketing_backend.contacts[subscriber_hash("maria@example.com")]
    assert contact["tags"] == {"Winter Protocol Insider Club", "Newteam FC"}
    assert contact["merge_fields"] == {"FNAME": "Maria", "LNAME": "Garcia", "SOURCE": "instagram"}


def test_lead_signup_unknown_source(client, marketing_backend):
    """Leads without source are tracked as unknown."""
    client.post(LEAD_URL, LeadSignupFactory(email="maria@example.com", traffic_source=""))

    contact = marketing_backend.contacts[subscriber_hash("maria@example.com")]
    assert contact["merge_fields"]["SOURCE"] == "Unknown"


def test_lead_signup_twice_keeps_one_contact(client, marketing_backend):
    """Submitting twice does not duplicate the contact."""
    client.post(LEAD_URL, LeadSignupFactory(email="maria@example.com"))
    client.post(LEAD_URL, LeadSignupFactory(email="MARIA@example.com"))

    assert len(marketing_backend.contacts) == 1


@pytest.mark.parametrize("email", ["", "not-an-email", "maria@"])
def test_lead_signup_invalid_email(client, marketing_backend, email):
    """Invalid emails are rejected."""
    response = client.post(LEAD_URL, LeadSignupFactory(email=email))

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Please enter a valid email address."}
    assert marketing_backend.contacts == {}


@pytest.mark.parametrize(
    ("first_name", "last_name"),
    [("xkcdfghj", "Garcia"), ("Maria", "qwrtzpsdf"), ("zzzz", "zzzz")],
)
def test_lead_signup_spam_is_silently_dropped(client, marketing_backend, caplog, first_name, last_name):
    """Gibberish names get the regular response but never reach the marketing list."""
    response = client.post(LEAD_URL, LeadSignupFactory(first_name=first_name, last_name=last_name))

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Your download is ready!"}
    assert marketing_backend.contacts == {}
    assert "Spam lead signup blocked" in caplog.text


def test_lead_signup_spam_checked_before_email(client, marketing_backend):
    """Bots submitting gibberish with an invalid email learn nothing."""
    response = client.post(LEAD_URL, LeadSignupFactory(first_name="xkcdfghj", email="not-an-email"))

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_lead_signup_marketing_failure(client, monkeypatch):
    """Marketing list failures are not reported to the visitor."""
    marketing = mock.MagicMock()
    marketing.upsert_contact.return_value = Result.failure(ErrorKind.NETWORK, "Failed to connect to Mailchimp")
    monkeypatch.setattr(views, "marketing", marketing)

    response = client.post(LEAD_URL, LeadSignupFactory())

    assert response.status_code == 200
    marketing.upsert_contact.assert_called_once()


def test_lead_signup_requires_csrf_token(marketing_backend):
    """Submissions without CSRF token get a JSON error."""
    response = Client(enforce_csrf_checks=True).post(LEAD_URL, LeadSignupFactory())

    assert response.status_code == 403
    assert response.json() == {
        "success": False,
        "message": "Security check failed. Please refresh the page and try again.",
    }
    assert marketing_backend.contacts == {}


@pytest.mark.parametrize("url", [LEAD_URL, TRYOUT_URL, SEASON_URL])
def test_forms_only_accept_post(client, url):
    """Only POST requests are accepted."""
    assert client.get(url).status_code == 405


# Tryout registration


def test_tryout_registration(client, records_backend, marketing_backend, mailoutbox):
    """Tryout registrations are recorded, subscribed and notified."""
    data = TryoutRegistrationFactory(payment_intent_id="pi_tryout", first_name="Jo", last_name="Park")

    response = client.post(TRYOUT_URL, data)

    assert response.status_code == 200
    assert response.json()["success"] is True

    record = records_backend.records[(RecordTable.TRYOUT, "pi_tryout")]
    assert record["Position"] == "Midfielder"
    assert record["Experience"] == "College"
    assert record["Status"] == "Registered"
    assert "Payment Status" not in record

    contact = marketing_backend.contacts[subscriber_hash(data["email"])]
    assert contact["tags"] == {"Tryout Registration Spring 2026", "Newteam FC"}
    assert contact["merge_fields"]["EXPERIENCE"] == "College"

    assert len(mailoutbox) == 1
    assert mailoutbox[0].subject == "New Tryout Registration - Jo Park"
    assert mailoutbox[0].to == ["info@newteamfc.com"]


def test_tryout_registration_missing_fields(client, records_backend, mailoutbox):
    """Every missing field is reported."""
    response = client.post(TRYOUT_URL, {})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "First name is required, Last name is required, Valid email is required, "
        "Payment verification failed",
    }
    assert records_backend.records == {}
    assert mailoutbox == []


def test_tryout_registration_record_failure(client, monkeypatch, marketing_backend, mailoutbox):
    """The registration succeeds for the player when the record store fails."""
    records = mock.MagicMock()
    records.upsert_record.side_effect = RuntimeError("Airtable is down")
    monkeypatch.setattr(views, "records", records)

    response = client.post(TRYOUT_URL, TryoutRegistrationFactory())

    assert response.status_code == 200
    assert len(marketing_backend.contacts) == 1
    assert len(mailoutbox) == 1


# Season registration


def test_season_registration_paid_in_full(client, records_backend, marketing_backend, mailoutbox):
    """Paid in full registrations are recorded as paid."""
    data = SeasonRegistrationFactory(payment_intent_id="pi_season", first_name="Sam", last_name="Lee")

    response = client.post(SEASON_URL, data)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Registration completed successfully!",
        "record_saved": True,
    }

    record = records_backend.records[(RecordTable.SEASON, "pi_season")]
    assert record["Payment Status"] == "Paid"
    assert record["Payment Frequency"] == "Paid in full"
    assert record["Socks Size"] == "M (US 7-9)"
    assert record["Player Type"] == "Full Season Player"
    assert record["Name Personalization"] == "Yes"
    assert record["Age"] == 24
    assert record["Payment Amount"] == 450

    contact = marketing_backend.contacts[subscriber_hash(data["email"])]
    assert contact["tags"] == {"Newteam FC", "Season Registration Spring 2026", "Full Season Player"}
    assert contact["merge_fields"]["POSITION"] == "Forward"

    assert len(mailoutbox) == 1
    assert mailoutbox[0].subject == "New Season Registration - Sam Lee (Full Season Player)"
    assert mailoutbox[0].to == ["goal@newteamfc.com"]


def test_season_registration_monthly_guest(client, records_backend, marketing_backend):
    """Monthly registrations are pending and keyed by their subscription."""
    data = SeasonRegistrationFactory(
        payment_intent_id="",
        subscription_id="sub_season",
        payment_frequency="monthly",
        player_type="guest",
        name_personalization="0",
    )

    client.post(SEASON_URL, data)

    record = records_backend.records[(RecordTable.SEASON, "sub_season")]
    assert record["Payment Status"] == "Pending"
    assert record["Payment Frequency"] == "Monthly"
    assert record["Player Type"] == "Guest Player"
    assert record["Name Personalization"] == "No"
    assert record["Stripe Payment ID"] == "sub_season"

    contact = marketing_backend.contacts[subscriber_hash(data["email"])]
    assert "Guest Player" in contact["tags"]


def test_season_registration_unknown_player_type(client, records_backend):
    """Unknown player types are registered as full season players."""
    client.post(SEASON_URL, SeasonRegistrationFactory(payment_intent_id="pi_x", player_type="coach"))

    assert records_backend.records[(RecordTable.SEASON, "pi_x")]["Player Type"] == "Full Season Player"


def test_season_registration_without_payment(client, records_backend):
    """Registrations must reference a payment or a subscription."""
    response = client.post(SEASON_URL, SeasonRegistrationFactory(payment_intent_id=""))

    assert response.status_code == 400
    assert response.json()["message"] == "Payment verification failed"
    assert records_backend.records == {}


def test_season_registration_invalid_email(client, records_backend):
    """Invalid emails are rejected."""
    response = client.post(SEASON_URL, SeasonRegistrationFactory(email="nope"))

    assert response.status_code == 400
    assert response.json()["message"] == "Valid email is required"


def test_season_registration_record_failure(client, monkeypatch, marketing_backend, mailoutbox):
    """A failed record write is reported but the registration still succeeds."""
    records = mock.MagicMock()
    records.upsert_record.return_value = Result.failure(ErrorKind.INVALID_REQUEST, "Failed to save record")
    monkeypatch.setattr(views, "records", records)

    response = client.post(SEASON_URL, SeasonRegistrationFactory())

    assert response.status_code == 200
    assert response.json()["record_saved"] is False
    assert len(marketing_backend.contacts) == 1
    assert len(mailoutbox) == 1


def test_season_registration_season_label(client, settings, marketing_backend, records_backend):
    """The season tag follows the configured season."""
    settings.INTAKE_SEASON_LABEL = "Fall 2026"
    data = SeasonRegistrationFactory()

    client.post(SEASON_URL, data)

    contact = marketing_backend.contacts[subscriber_hash(data["email"])]
    assert "Season Registration Fall 2026" in contact["tags"]
