"""Backend handler shared by the record store and the marketing list."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from teamintake.configuration import intake_config


class BackendHandler:
    """
    Handler managing the instantiation of a pluggable backend.

    The backend is described by a settings dict such as::

        INTAKE_MARKETING = {
            "BACKEND": "teamintake.marketing.backends.mailchimp.MailchimpBackend",
            "PARAMETERS": {"timeout": 10},
        }

    Backends receive the intake configuration as `config` keyword argument.
    """

    setting_name = None
    default_backend = None
    invalid_backend_error = ImproperlyConfigured

    def __init__(self, backend=None, config=None):
        """Initialize the handler."""
        # backend is an optional dict structured like the settings value.
        self._backend = backend
        self._config = config
        self._instance = None

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is not None:
            return self._backend

        params = getattr(settings, self.setting_name, {"BACKEND": self.default_backend})
        try:
            return params.copy()
        except AttributeError as e:
            raise ImproperlyConfigured(f"settings.{self.setting_name} is not configured") from e

    def __call__(self):
        """Create if not existing the backend and then return it."""
        if self._instance is None:
            self._instance = self.create_backend(self.backend)
        return self._instance

    def reset(self):
        """Forget the instantiated backend, settings are read again on next call."""
        self.__dict__.pop("backend", None)
        self._instance = None

    def create_backend(self, params):
        """Instantiate and configure the backend."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise self.invalid_backend_error(f"Could not find backend {backend!r}: {e}") from e
        config = self._config if self._config is not None else intake_config
        return klass(config=config, **parameters)
