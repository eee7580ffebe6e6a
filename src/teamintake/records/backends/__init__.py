"""Record store backends module."""

from dataclasses import dataclass

from teamintake.records.enums import RecordTable


@dataclass
class RecordData:
    """A record to write, keyed by the payment processor identifier."""

    key: str
    fields: dict
    table: RecordTable = RecordTable.SEASON
