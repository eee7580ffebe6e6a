"""Marketing backend base module."""

from abc import ABC, abstractmethod

from teamintake.marketing.backends import ContactData
from teamintake.results import Result


class BaseBackend(ABC):
    """Base class for all marketing backends."""

    @abstractmethod
    def upsert_contact(self, contact_data: ContactData, timeout: int = None) -> Result:
        """
        Create a contact or add tags to an existing one.

        Calling it twice with the same email never duplicates the contact, it ends
        up with the union of the tags.

        Args:
            contact_data: Contact information, tags and merge fields
            timeout: API request timeout in seconds

        Returns:
            Result: Service response on success, the error kind otherwise

        """
