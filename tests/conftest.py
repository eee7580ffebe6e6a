"""Fixtures for the test suite."""

import pytest

from teamintake.marketing.backends.locmem import LocmemBackend as MarketingLocmemBackend
from teamintake.records.backends.locmem import LocmemBackend as RecordsLocmemBackend
from teamintake.registrations import views as registration_views
from teamintake.webhooks import dispatcher


@pytest.fixture(autouse=True)
def _clear_credentials_env(monkeypatch):
    """Make sure credentials only come from the test settings."""
    for name in (
        "STRIPE_WEBHOOK_SECRET",
        "AIRTABLE_API_KEY",
        "AIRTABLE_BASE_ID",
        "AIRTABLE_SEASON_TABLE_ID",
        "AIRTABLE_TRYOUT_TABLE_ID",
        "MAILCHIMP_API_KEY",
        "MAILCHIMP_LIST_ID",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def records_backend(monkeypatch):
    """Fresh in-memory record store used by the views and the dispatcher."""
    backend = RecordsLocmemBackend()
    monkeypatch.setattr(registration_views, "records", backend)
    monkeypatch.setattr(dispatcher, "records", backend)
    return backend


@pytest.fixture
def marketing_backend(monkeypatch):
    """Fresh in-memory marketing list used by the views and the dispatcher."""
    backend = MarketingLocmemBackend()
    monkeypatch.setattr(registration_views, "marketing", backend)
    monkeypatch.setattr(dispatcher, "marketing", backend)
    return backend
