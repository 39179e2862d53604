"""Configuration for the call relay service."""

from .logging_config import LoggingConfig
from .settings import RegistryBackend, RelaySettings, get_settings

__all__ = [
    "LoggingConfig",
    "RegistryBackend",
    "RelaySettings",
    "get_settings",
]
