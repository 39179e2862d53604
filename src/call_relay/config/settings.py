"""
Configuration management for the call relay service.

Environment driven settings following the neo-commons BaseAppSettings pattern:
values come from the process environment or a local .env file.
"""
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __version__
from .constants import (
    DEFAULT_BROADCAST_TOPIC,
    DEFAULT_LOGIN_RATE_LIMIT,
    DEFAULT_RECIPIENT_ROLE,
    DEFAULT_ROLE_TOPICS,
    LEGACY_IDENTITY_PREFIX,
)


class RegistryBackend(str, Enum):
    """Supported recipient registry backends."""
    MEMORY = "memory"
    JSON_FILE = "json_file"


class RelaySettings(BaseSettings):
    """Application settings for the call relay."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="neo-call-relay")
    app_version: str = Field(default=__version__)
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Recipient Registry
    registry_backend: RegistryBackend = Field(default=RegistryBackend.MEMORY)
    registry_file: Path = Field(default=Path("tokens.json"))
    default_recipient_role: str = Field(default=DEFAULT_RECIPIENT_ROLE)

    # Dispatch
    broadcast_topic: str = Field(default=DEFAULT_BROADCAST_TOPIC)
    role_topics: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ROLE_TOPICS))

    # Firebase Cloud Messaging
    firebase_service_account: Optional[SecretStr] = Field(default=None)
    firebase_credentials_path: Optional[Path] = Field(default=None)
    firebase_http_timeout: int = Field(default=10)

    # Legacy login
    login_rate_limit: str = Field(default=DEFAULT_LOGIN_RATE_LIMIT)
    legacy_accounts_file: Optional[Path] = Field(default=None)
    legacy_identity_prefix: str = Field(default=LEGACY_IDENTITY_PREFIX)
    jwt_secret_key: SecretStr = Field(default=SecretStr("change-me-in-production-use-strong-secret-key"))
    jwt_algorithm: str = Field(default="HS256")
    jwt_expires_in: int = Field(default=3600)

    # Client address resolution
    trust_forwarded_headers: bool = Field(default=False)

    @field_validator("role_topics")
    @classmethod
    def normalize_role_topics(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Role lookups are case-insensitive."""
        return {role.strip().lower(): topic for role, topic in value.items()}

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def firebase_configured(self) -> bool:
        return self.firebase_service_account is not None or self.firebase_credentials_path is not None


@lru_cache()
def get_settings() -> RelaySettings:
    """Get cached settings instance."""
    return RelaySettings()
