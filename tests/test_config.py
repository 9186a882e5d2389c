"""Settings validation."""

import pytest
from pydantic import ValidationError

from crm_backend.config import Settings


def test_secret_key_is_mandatory(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_short_secret_key_is_refused(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "short")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "a-long-enough-secret-value")
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.JWT_EXPIRATION_HOURS == 24
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.ENFORCE_SINGLE_SESSION is False
