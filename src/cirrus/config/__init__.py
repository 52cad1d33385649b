"""Cirrus configuration loading."""

from cirrus.config.settings import (
    DEFAULT_PROJECT_ENV_VARS,
    AuthConfig,
    CirrusConfig,
    CloudSettingsConfig,
    ConfigError,
    load_config,
)

__all__ = [
    "DEFAULT_PROJECT_ENV_VARS",
    "AuthConfig",
    "CirrusConfig",
    "CloudSettingsConfig",
    "ConfigError",
    "load_config",
]
