"""Marketing module."""

from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import LazyObject, empty

from .handler import MarketingHandler


class DefaultMarketing(LazyObject):
    """Lazy object to handle the marketing backend."""

    def _setup(self):
        """Configure the marketing backend."""
        self._wrapped = marketing_handler()


marketing_handler = MarketingHandler()
marketing = DefaultMarketing()


@receiver(setting_changed)
def reset_marketing(*, setting, **kwargs):
    """Instantiate the backend again when its settings change."""
    if setting == MarketingHandler.setting_name or setting.startswith("MAILCHIMP_"):
        marketing_handler.reset()
        marketing._wrapped = empty
