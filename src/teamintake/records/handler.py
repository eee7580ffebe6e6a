"""Record store backend handler."""

from teamintake.handler import BackendHandler
from teamintake.records.exceptions import RecordStoreInvalidBackendError


class RecordsHandler(BackendHandler):
    """Record store handler managing the backend instantiation."""

    setting_name = "INTAKE_RECORDS"
    default_backend = "teamintake.records.backends.airtable.AirtableBackend"
    invalid_backend_error = RecordStoreInvalidBackendError
