"""Dummy record store backend."""

from teamintake.records.backends import RecordData
from teamintake.results import Result

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy record store backend doing nothing."""

    def __init__(self, **kwargs):
        """Accept and ignore any configuration."""

    def upsert_record(self, record: RecordData, timeout: int = None) -> Result:
        """Pretend the record was written."""
        return Result.success({})

    def update_status(self, key: str, status: str, timeout: int = None) -> Result:
        """Pretend the status was updated."""
        return Result.success({})
