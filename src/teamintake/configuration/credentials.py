"""Credential sources, evaluated in order until one of them knows the credential."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)


class CredentialSource(ABC):
    """A place credentials can be read from."""

    @abstractmethod
    def resolve(self, name: str) -> str | None:
        """Return the value of the credential `name`, or None if unknown to this source."""


class SecretsDirectorySource(CredentialSource):
    """
    Read credentials from a directory holding one file per secret.

    This is how Docker and Kubernetes mount secrets: `STRIPE_WEBHOOK_SECRET` is read
    from `/run/secrets/stripe_webhook_secret`.
    """

    def __init__(self, directory="/run/secrets"):
        """Configure the secrets directory."""
        self.directory = Path(directory)

    def resolve(self, name: str) -> str | None:
        """Read the secret file named after the lowercased credential name."""
        path = self.directory / name.lower()
        try:
            value = path.read_text().strip()
        except FileNotFoundError:
            return None
        except OSError as err:
            logger.warning("Secret file %s cannot be read: %r", path, err)
            return None
        return value or None


class SecretFileSource(CredentialSource):
    """
    Read credentials from the file referenced by the `{name}_{file_suffix}` variable.

    A variable pointing to a missing or unreadable file is a deployment error and
    raises `ValueError`.
    """

    def __init__(self, file_suffix="FILE"):
        """Configure the environment variable suffix."""
        self.file_suffix = file_suffix

    def resolve(self, name: str) -> str | None:
        """Read the file referenced by the environment."""
        variable = f"{name}_{self.file_suffix}"
        if variable not in os.environ:
            return None

        filename = os.environ[variable]
        if not os.path.exists(filename):
            raise ValueError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().removesuffix("\n")
        except (OSError, PermissionError) as err:
            raise ValueError(f"Path {filename!r} cannot be read: {err!r}") from err


class SettingsSource(CredentialSource):
    """Read credentials from the Django settings."""

    def resolve(self, name: str) -> str | None:
        """Return the setting, empty values being considered as missing."""
        return getattr(settings, name, None) or None


class EnvironSource(CredentialSource):
    """Read credentials from environment variables, with an optional prefix."""

    def __init__(self, prefix=""):
        """Configure the variable prefix."""
        self.prefix = prefix

    def resolve(self, name: str) -> str | None:
        """Return the environment variable, empty values being considered as missing."""
        return os.environ.get(f"{self.prefix}{name}") or None


class CredentialChain:
    """Ordered list of credential sources, first match wins."""

    def __init__(self, sources):
        """Keep the sources in priority order."""
        self.sources = list(sources)

    def resolve(self, name: str, default=None):
        """Return the first value found for `name`."""
        for source in self.sources:
            value = source.resolve(name)
            if value is not None:
                return value
        return default
