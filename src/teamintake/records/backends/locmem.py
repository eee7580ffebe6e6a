"""In-memory record store backend."""

from teamintake.records.backends import RecordData
from teamintake.results import ErrorKind, Result

from .base import BaseBackend


class LocmemBackend(BaseBackend):
    """Record store backend keeping records in memory, for tests and local development."""

    def __init__(self, **kwargs):
        """Start with empty tables."""
        self.records = {}

    def upsert_record(self, record: RecordData, timeout: int = None) -> Result:
        """Store the record fields, merging them with an existing record."""
        stored = self.records.setdefault((record.table, record.key), {})
        stored.update(record.fields)
        return Result.success(stored)

    def update_status(self, key: str, status: str, timeout: int = None) -> Result:
        """Update the payment status of every record matching the key."""
        matches = [fields for (_table, record_key), fields in self.records.items() if record_key == key]
        if not matches:
            return Result.failure(ErrorKind.NOT_FOUND, f"No record found for {key}")
        for fields in matches:
            fields["Payment Status"] = status
        return Result.success(matches[0])
