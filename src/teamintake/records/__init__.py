"""Record store module."""

from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import LazyObject, empty

from .handler import RecordsHandler


class DefaultRecords(LazyObject):
    """Lazy object to handle the record store backend."""

    def _setup(self):
        """Configure the record store backend."""
        self._wrapped = records_handler()


records_handler = RecordsHandler()
records = DefaultRecords()


@receiver(setting_changed)
def reset_records(*, setting, **kwargs):
    """Instantiate the backend again when its settings change."""
    if setting == RecordsHandler.setting_name or setting.startswith("AIRTABLE_"):
        records_handler.reset()
        records._wrapped = empty
