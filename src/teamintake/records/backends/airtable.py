"""Airtable record store integration."""

import logging

import requests

from teamintake.configuration.config import IntakeConfig
from teamintake.records.backends import RecordData
from teamintake.records.enums import RecordTable
from teamintake.results import ErrorKind, Result, error_kind_for_exception, error_kind_for_status

from .base import BaseBackend

logger = logging.getLogger(__name__)


def quote_formula_string(value):
    """Quote a value for use in an Airtable formula."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class AirtableBackend(BaseBackend):
    """
    Airtable record store integration.

    Registrations are upserted on the "Stripe Payment ID" field, so writing the same
    payment twice updates the existing record. Status updates look the record up by
    subscription or payment id, then patch its "Payment Status" field.

    Note:
        Lookup and patch are two separate calls: two status updates for the same
        subscription running concurrently are applied in no particular order, and an
        older failure event can overwrite a newer status.

    """

    api_url = "https://api.airtable.com/v0"
    merge_field = "Stripe Payment ID"
    status_field = "Payment Status"
    lookup_fields = ("Subscription ID", "Stripe Payment ID")

    def __init__(
        self,
        config,
        api_key: str | None = None,
        base_id: str | None = None,
        tables: dict | None = None,
        timeout: int = 30,
    ):
        """Configure the Airtable backend, credentials default to the intake configuration."""
        self._api_key = api_key or config.airtable_api_key
        self.base_id = base_id or config.airtable_base_id
        self.tables = {
            RecordTable.SEASON: config.airtable_season_table_id,
            RecordTable.TRYOUT: config.airtable_tryout_table_id,
            **(tables or {}),
        }
        self.timeout = timeout

    @property
    def _headers(self):
        return {"Authorization": f"Bearer {self._api_key}"}

    def _missing_credentials(self, table):
        """Describe the credentials missing to reach `table`, empty when configured."""
        return IntakeConfig.missing_message(
            {
                "airtable_api_key": self._api_key,
                "airtable_base_id": self.base_id,
                f"airtable_{table}_table_id": self.tables.get(table),
            }
        )

    def _table_url(self, table):
        return f"{self.api_url}/{self.base_id}/{self.tables[table]}"

    def upsert_record(self, record: RecordData, timeout: int = None) -> Result:
        """
        Create or update a registration record.

        Args:
            record: Key, table and schema compatible fields
            timeout: API request timeout in seconds

        Returns:
            Result: Airtable API response on success

        Note:
            Select field values must match the table schema exactly, Airtable
            rejects the whole write (HTTP 422) otherwise.

        """
        missing = self._missing_credentials(record.table)
        if missing:
            logger.error("Airtable %s: %s, skipping save", record.table, missing)
            return Result.failure(ErrorKind.CONFIGURATION, missing)
        url = self._table_url(record.table)

        payload = {
            "performUpsert": {"fieldsToMergeOn": [self.merge_field]},
            "records": [{"fields": {**record.fields, self.merge_field: record.key}}],
        }
        logger.info("Airtable %s: saving record %s", record.table, record.key)

        try:
            response = requests.patch(url, json=payload, headers=self._headers, timeout=timeout or self.timeout)
            response.raise_for_status()
        except requests.RequestException as err:
            logger.error("Airtable %s: failed to save record %s: %s", record.table, record.key, err)
            return Result.failure(error_kind_for_exception(err), "Failed to save record in Airtable")

        return Result.success(response.json())

    def find_record(self, key: str, table=RecordTable.SEASON, timeout: int = None) -> Result:
        """Find the record written for a subscription or payment id."""
        missing = self._missing_credentials(table)
        if missing:
            return Result.failure(ErrorKind.CONFIGURATION, missing)
        url = self._table_url(table)

        conditions = ",".join(f"{{{field}}}={quote_formula_string(key)}" for field in self.lookup_fields)
        try:
            response = requests.get(
                url,
                params={"filterByFormula": f"OR({conditions})", "maxRecords": 1},
                headers=self._headers,
                timeout=timeout or self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as err:
            return Result.failure(error_kind_for_exception(err), "Failed to look up record in Airtable")

        found = response.json().get("records") or []
        if not found:
            return Result.failure(ErrorKind.NOT_FOUND, f"No record found for {key}")
        return Result.success(found[0])

    def update_status(self, key: str, status: str, timeout: int = None) -> Result:
        """
        Update the payment status of a season registration.

        Args:
            key: Subscription or payment identifier
            status: New "Payment Status" value
            timeout: API request timeout in seconds

        Returns:
            Result: Airtable API response on success

        """
        found = self.find_record(key, timeout=timeout)
        if not found:
            return found

        url = f"{self._table_url(RecordTable.SEASON)}/{found.value['id']}"
        try:
            response = requests.patch(
                url,
                json={"fields": {self.status_field: str(status)}},
                headers=self._headers,
                timeout=timeout or self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as err:
            return Result.failure(error_kind_for_exception(err), "Failed to update record status in Airtable")

        logger.info("Airtable: status of %s set to %r", key, str(status))
        return Result.success(response.json())
