"""Test the marketing lazy handler."""

from teamintake.marketing import marketing
from teamintake.marketing.backends.dummy import DummyBackend
from teamintake.marketing.backends.locmem import LocmemBackend


def test_marketing_lazy_handler(settings):
    """Test the marketing lazy handler."""
    settings.INTAKE_MARKETING = {
        "BACKEND": "teamintake.marketing.backends.dummy.DummyBackend",
    }
    assert isinstance(marketing, DummyBackend)

    settings.INTAKE_MARKETING = {
        "BACKEND": "teamintake.marketing.backends.locmem.LocmemBackend",
    }
    assert isinstance(marketing, LocmemBackend)
