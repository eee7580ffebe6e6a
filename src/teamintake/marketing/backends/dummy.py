"""Dummy marketing backend."""

from teamintake.marketing.backends import ContactData
from teamintake.results import Result

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy marketing backend doing nothing."""

    def __init__(self, **kwargs):
        """Accept and ignore any configuration."""

    def upsert_contact(self, contact_data: ContactData, timeout: int = None) -> Result:
        """Pretend the contact was created."""
        return Result.success({})
