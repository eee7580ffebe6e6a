"""Record store backend base module."""

from abc import ABC, abstractmethod

from teamintake.records.backends import RecordData
from teamintake.results import Result


class BaseBackend(ABC):
    """Base class for all record store backends."""

    @abstractmethod
    def upsert_record(self, record: RecordData, timeout: int = None) -> Result:
        """
        Create a record, or update the one already written for the same key.

        Args:
            record: Key, table and schema compatible fields
            timeout: API request timeout in seconds

        Returns:
            Result: Service response on success, the error kind otherwise

        """

    @abstractmethod
    def update_status(self, key: str, status: str, timeout: int = None) -> Result:
        """
        Update the payment status of the record written for `key`.

        Args:
            key: Subscription or payment identifier
            status: New "Payment Status" value
            timeout: API request timeout in seconds

        Returns:
            Result: Service response on success, the error kind otherwise

        """
