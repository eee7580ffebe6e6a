"""Configuration module."""

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import LazyObject, empty
from django.utils.module_loading import import_string

from .config import IntakeConfig
from .credentials import CredentialChain, EnvironSource, SecretsDirectorySource, SettingsSource

__all__ = ["IntakeConfig", "get_credential_chain", "intake_config"]


def get_credential_chain():
    """
    Build the credential chain.

    Defaults to secrets directory, then Django settings, then environment. Projects
    can set `INTAKE_CREDENTIAL_SOURCES` to a list of dotted paths to
    `CredentialSource` classes instantiated without arguments.
    """
    source_paths = getattr(settings, "INTAKE_CREDENTIAL_SOURCES", None)
    if source_paths is not None:
        return CredentialChain(import_string(path)() for path in source_paths)

    return CredentialChain(
        [
            SecretsDirectorySource(getattr(settings, "INTAKE_SECRETS_DIR", "/run/secrets")),
            SettingsSource(),
            EnvironSource(),
        ]
    )


class DefaultConfig(LazyObject):
    """Lazy object resolving the intake configuration on first access."""

    def _setup(self):
        """Resolve the configuration."""
        self._wrapped = IntakeConfig.resolve(get_credential_chain())


intake_config = DefaultConfig()


@receiver(setting_changed)
def reset_intake_config(*, setting, **kwargs):
    """Resolve the configuration again when credentials are overridden (tests)."""
    if setting.startswith(("INTAKE_", "STRIPE_", "AIRTABLE_", "MAILCHIMP_")):
        intake_config._wrapped = empty
