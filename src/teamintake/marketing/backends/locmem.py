"""In-memory marketing backend."""

from teamintake.marketing.backends import ContactData, subscriber_hash
from teamintake.results import Result

from .base import BaseBackend


class LocmemBackend(BaseBackend):
    """
    Marketing backend keeping contacts in memory.

    Members are keyed by subscriber hash like in Mailchimp, so repeated upserts
    merge tags and merge fields instead of duplicating the contact.
    Useful for tests and local development.
    """

    def __init__(self, **kwargs):
        """Start with an empty list."""
        self.contacts = {}

    def upsert_contact(self, contact_data: ContactData, timeout: int = None) -> Result:
        """Create the contact or merge its tags and merge fields."""
        key = subscriber_hash(contact_data.email)
        contact = self.contacts.setdefault(
            key,
            {"email": contact_data.email, "tags": set(), "merge_fields": {}},
        )
        contact["tags"] |= set(contact_data.tags)
        contact["merge_fields"].update(
            {"FNAME": contact_data.first_name, "LNAME": contact_data.last_name, **contact_data.merge_fields}
        )
        return Result.success(contact)
