"""Cirrus config models and loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cirrus.auth.types import AuthType

DEFAULT_PROJECT_ENV_VARS = ("GOOGLE_CLOUD_PROJECT", "GOOGLE_CLOUD_PROJECT_ID")


class CloudSettingsConfig(BaseModel):
    """Location of the per-project settings document in cloud storage."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    storage_base_url: str = "https://storage.googleapis.com/storage/v1"
    bucket_suffix: str = "gemini-cli-settings"
    object_name: str = "settings.json"
    project_env_vars: tuple[str, ...] = Field(
        default=DEFAULT_PROJECT_ENV_VARS, min_length=1
    )

    def settings_url(self, project: str) -> str:
        """Build the media download URL for one project.

        Args:
            project: Cloud project identifier.

        Returns:
            Storage object URL requesting raw content.
        """
        base = self.storage_base_url.rstrip("/")
        return (
            f"{base}/b/{project}-{self.bucket_suffix}/o/{self.object_name}?alt=media"
        )


class AuthConfig(BaseModel):
    """Startup authentication settings."""

    model_config = ConfigDict(extra="forbid")

    auth_type: AuthType | None = None
    silent_only: bool = False


class CirrusConfig(BaseModel):
    """Root cirrus configuration model."""

    model_config = ConfigDict(extra="forbid")

    auth: AuthConfig = AuthConfig()
    cloud_settings: CloudSettingsConfig = CloudSettingsConfig()


class ConfigError(RuntimeError):
    """Raised when config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw) if raw.strip() else None
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError("Invalid config payload: root must be an object")
    return payload


def load_config(path: Path) -> CirrusConfig:
    """Load cirrus config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        ConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return CirrusConfig()
    payload = _decode_config_payload(path)
    try:
        return CirrusConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config payload: {exc}") from exc
