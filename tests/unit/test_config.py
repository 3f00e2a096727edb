"""Unit tests for environment-based configuration."""

import pytest
from pydantic import ValidationError

from blogapi.core.environment import (
    AuthSettings,
    ConfigurationService,
    Environment,
    EnvironmentConfigProvider,
)


def test_settings_are_read_from_prefixed_env(monkeypatch):
    monkeypatch.setenv("BLOGAPI_JWT_SECRET_KEY", "from-env")
    monkeypatch.setenv("BLOGAPI_TOKEN_EXPIRATION_MINUTES", "15")
    monkeypatch.setenv("BLOGAPI_API_PORT", "8080")
    monkeypatch.setenv("BLOGAPI_ENVIRONMENT", "production")

    config = ConfigurationService(EnvironmentConfigProvider())

    assert config.get_auth_settings().jwt_secret_key == "from-env"
    assert config.get_auth_settings().token_expiration_minutes == 15
    assert config.get_api_settings().api_port == 8080
    assert config.get_environment() == Environment.PRODUCTION
    assert config.is_development() is False


def test_defaults(monkeypatch):
    monkeypatch.delenv("BLOGAPI_TOKEN_EXPIRATION_MINUTES", raising=False)
    monkeypatch.delenv("BLOGAPI_JWT_ALGORITHM", raising=False)

    settings = AuthSettings()

    assert settings.jwt_algorithm == "HS256"
    assert settings.token_expiration_minutes == 60


def test_secret_key_is_required(monkeypatch):
    monkeypatch.delenv("BLOGAPI_JWT_SECRET_KEY", raising=False)

    with pytest.raises(ValidationError):
        AuthSettings(_env_file=None)


def test_blank_secret_key_is_rejected(monkeypatch):
    monkeypatch.setenv("BLOGAPI_JWT_SECRET_KEY", "   ")

    with pytest.raises(ValidationError):
        AuthSettings()


def test_settings_are_cached_until_reload(monkeypatch):
    config = ConfigurationService(EnvironmentConfigProvider())
    first = config.get_auth_settings()

    monkeypatch.setenv("BLOGAPI_JWT_SECRET_KEY", "rotated")
    assert config.get_auth_settings() is first

    config.reload_settings()
    assert config.get_auth_settings().jwt_secret_key == "rotated"
