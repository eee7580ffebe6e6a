"""Record store exceptions module."""


class RecordStoreError(Exception):
    """Base exception for all record store exceptions."""


class RecordStoreInvalidBackendError(RecordStoreError):
    """Exception raised when the backend is invalid."""
