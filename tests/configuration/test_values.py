"""Tests for CredentialValue."""

import pytest

from teamintake.configuration.values import CredentialValue


@pytest.fixture(autouse=True)
def _mock_clear_env(monkeypatch):
    """Reset environment variables."""
    monkeypatch.delenv("DJANGO_TEST_SECRET_KEY", raising=False)
    monkeypatch.delenv("DJANGO_TEST_SECRET_KEY_FILE", raising=False)
    monkeypatch.delenv("DJANGO_TEST_SECRET_KEY_PATH", raising=False)


@pytest.fixture
def secret_file(tmp_path):
    """Secret file content."""
    path = tmp_path / "test_secret"
    path.write_text("TestSecretInFile\n")
    return path


@pytest.fixture
def secrets_dir(tmp_path):
    """Secrets directory holding the test secret."""
    directory = tmp_path / "secrets"
    directory.mkdir()
    (directory / "test_secret_key").write_text("TestSecretInDirectory")
    return directory


def test_secret_default(tmp_path):
    """Test call with no environment variable."""
    value = CredentialValue("DefaultTestSecret", secrets_dir=tmp_path)
    assert value.setup("TEST_SECRET_KEY") == "DefaultTestSecret"


def test_secret_in_env(tmp_path, monkeypatch):
    """Test call with secret key environment variable."""
    monkeypatch.setenv("DJANGO_TEST_SECRET_KEY", "TestSecretInEnv")
    value = CredentialValue("DefaultTestSecret", secrets_dir=tmp_path)
    assert value.setup("TEST_SECRET_KEY") == "TestSecretInEnv"


def test_secret_in_file(tmp_path, monkeypatch, secret_file):
    """Test call with secret key file environment variable."""
    monkeypatch.setenv("DJANGO_TEST_SECRET_KEY", "TestSecretInEnv")
    monkeypatch.setenv("DJANGO_TEST_SECRET_KEY_FILE", str(secret_file))
    value = CredentialValue("DefaultTestSecret", secrets_dir=tmp_path)
    assert value.setup("TEST_SECRET_KEY") == "TestSecretInFile"


def test_secret_in_file_suffix(tmp_path, monkeypatch, secret_file):
    """Test call with secret key file environment variable and non default `file_suffix`."""
    monkeypatch.setenv("DJANGO_TEST_SECRET_KEY_PATH", str(secret_file))
    value = CredentialValue("DefaultTestSecret", file_suffix="PATH", secrets_dir=tmp_path)
    assert value.setup("TEST_SECRET_KEY") == "TestSecretInFile"


def test_secret_in_secrets_dir(monkeypatch, secrets_dir):
    """The secrets directory is used before the environment variable."""
    monkeypatch.setenv("DJANGO_TEST_SECRET_KEY", "TestSecretInEnv")
    value = CredentialValue("DefaultTestSecret", secrets_dir=secrets_dir)
    assert value.setup("TEST_SECRET_KEY") == "TestSecretInDirectory"


def test_secret_required(tmp_path):
    """A required credential found nowhere is an error."""
    value = CredentialValue(environ_required=True, secrets_dir=tmp_path)
    with pytest.raises(ValueError, match="DJANGO_TEST_SECRET_KEY_FILE"):
        value.setup("TEST_SECRET_KEY")
