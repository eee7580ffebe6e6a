"""Custom value classes for django-configurations."""

from configurations import values

from .credentials import EnvironSource, SecretFileSource, SecretsDirectorySource


class CredentialValue(values.Value):
    """
    Class used to interpret a credential from environment variables or secret files.

    The value set is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set.
    * The content of the file `{secrets_dir}/{name}` (lowercased) if it exists.
    * The value of the environment variable `{name}` if set.
    * The default value
    """

    file_suffix = "FILE"
    secrets_dir = "/run/secrets"

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if "file_suffix" in kwargs:
            self.file_suffix = kwargs["file_suffix"]
        if "secrets_dir" in kwargs:
            self.secrets_dir = kwargs["secrets_dir"]

    def setup(self, name):
        """Get the value from the credential sources."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            found = SecretFileSource(self.file_suffix).resolve(full_environ_name)
            if found is None:
                found = SecretsDirectorySource(self.secrets_dir).resolve(name)
            if found is None:
                found = EnvironSource().resolve(full_environ_name)

            if found is not None:
                value = self.to_python(found)
            elif self.environ_required:
                raise ValueError(
                    f"Value {name!r} is required to be set as the environment variable "
                    f"'{full_environ_name}_{self.file_suffix}' or {full_environ_name!r}"
                )
        self.value = value
        return value
