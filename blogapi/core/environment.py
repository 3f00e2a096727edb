"""
Environment-based Configuration System

Settings are loaded from environment variables (prefix ``BLOGAPI_``) and an
optional ``.env`` file. Each concern gets its own settings group; the
``ConfigurationService`` caches them so every part of the process sees the
same values.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "BLOGAPI_"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class _BlogSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class ServiceSettings(_BlogSettings):
    """Base settings with common configuration."""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    service_name: str = "blogapi"


class DatabaseSettings(_BlogSettings):
    """Database configuration settings."""

    database_url: str = "sqlite+aiosqlite:///./blog.db"
    echo: bool = False

    @property
    def connection_url(self) -> str:
        """Get database connection URL."""
        return self.database_url


class AuthSettings(_BlogSettings):
    """Authentication and security settings."""

    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    token_expiration_minutes: int = 60

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_secret(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("jwt_secret_key must not be empty")
        return value


class APISettings(_BlogSettings):
    """API server configuration."""

    api_host: str = "0.0.0.0"
    api_port: int = 4000
    reload: bool = False


class ConfigProvider(ABC):
    """Abstract configuration provider interface."""

    @abstractmethod
    def get_service_settings(self) -> ServiceSettings:
        """Get service settings."""

    @abstractmethod
    def get_database_settings(self) -> DatabaseSettings:
        """Get database settings."""

    @abstractmethod
    def get_auth_settings(self) -> AuthSettings:
        """Get authentication settings."""

    @abstractmethod
    def get_api_settings(self) -> APISettings:
        """Get API settings."""


class EnvironmentConfigProvider(ConfigProvider):
    """Configuration provider that loads from environment variables only."""

    def get_service_settings(self) -> ServiceSettings:
        return ServiceSettings()

    def get_database_settings(self) -> DatabaseSettings:
        return DatabaseSettings()

    def get_auth_settings(self) -> AuthSettings:
        return AuthSettings()

    def get_api_settings(self) -> APISettings:
        return APISettings()


class ConfigurationService:
    """Main configuration service that aggregates all settings."""

    def __init__(self, provider: ConfigProvider):
        self._provider = provider
        self._cache: Dict[str, BaseSettings] = {}
        logger.info("Configuration service initialized")

    def get_service_settings(self) -> ServiceSettings:
        """Get service settings with caching."""
        if "service" not in self._cache:
            self._cache["service"] = self._provider.get_service_settings()
        return self._cache["service"]

    def get_database_settings(self) -> DatabaseSettings:
        """Get database settings with caching."""
        if "database" not in self._cache:
            self._cache["database"] = self._provider.get_database_settings()
        return self._cache["database"]

    def get_auth_settings(self) -> AuthSettings:
        """Get auth settings with caching."""
        if "auth" not in self._cache:
            self._cache["auth"] = self._provider.get_auth_settings()
        return self._cache["auth"]

    def get_api_settings(self) -> APISettings:
        """Get API settings with caching."""
        if "api" not in self._cache:
            self._cache["api"] = self._provider.get_api_settings()
        return self._cache["api"]

    def reload_settings(self) -> None:
        """Clear cache and force reload of all settings."""
        self._cache.clear()
        logger.info(
            "Configuration cache cleared, settings will be reloaded on next access"
        )

    def get_environment(self) -> Environment:
        """Get current environment."""
        return self.get_service_settings().environment

    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.get_environment() == Environment.DEVELOPMENT


_config_service: Optional[ConfigurationService] = None


def get_config_service() -> ConfigurationService:
    """Get the global configuration service instance."""
    global _config_service
    if _config_service is None:
        _config_service = ConfigurationService(EnvironmentConfigProvider())
    return _config_service


def get_auth_settings() -> AuthSettings:
    """Get auth settings."""
    return get_config_service().get_auth_settings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return get_config_service().get_database_settings()
