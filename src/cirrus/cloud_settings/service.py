"""Per-project settings retrieval from cloud storage."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from threading import Lock

from cirrus.auth.types import AuthType
from cirrus.cloud_settings.types import (
    OAuthClientProvider,
    ProjectSettings,
    RequestError,
)
from cirrus.config.settings import CloudSettingsConfig
from cirrus.session.context import SessionContext

_LOGGER = logging.getLogger(__name__)

_EXPECTED_ABSENCE_STATUSES = frozenset({403, 404})


class CloudSettingsService:
    """Fetch the settings document stored for the active cloud project.

    Every call performs a fresh round trip; nothing is cached between calls.
    """

    def __init__(
        self,
        client_provider: OAuthClientProvider,
        *,
        config: CloudSettingsConfig | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Store collaborators.

        Args:
            client_provider: Source of OAuth-authorized clients.
            config: Storage location settings.
            env: Optional environment override; defaults to ``os.environ``.
        """
        self._client_provider = client_provider
        self._config = config if config is not None else CloudSettingsConfig()
        self._env = env

    def resolve_project_id(self) -> str | None:
        """Return the first non-empty project identifier from the environment.

        Returns:
            Project identifier, or ``None`` when no variable is set.
        """
        env = self._env if self._env is not None else os.environ
        for name in self._config.project_env_vars:
            value = (env.get(name) or "").strip()
            if value:
                return value
        return None

    async def load_settings(
        self, session: SessionContext, auth_type: AuthType
    ) -> ProjectSettings | None:
        """Load the project's settings document.

        Args:
            session: Running session passed to the client provider.
            auth_type: Login strategy used to authorize the request.

        Returns:
            Settings mapping, or ``None`` when unavailable or malformed.
        """
        project = self.resolve_project_id()
        if project is None:
            return None

        url = self._config.settings_url(project)
        try:
            client = await self._client_provider.get_client(auth_type, session)
            response = await client.request(url=url, method="GET")
        except RequestError as exc:
            if exc.status in _EXPECTED_ABSENCE_STATUSES:
                _LOGGER.debug(
                    "No cloud settings available for project %s (status %s).",
                    project,
                    exc.status,
                )
            else:
                _LOGGER.debug("Failed to fetch cloud settings: %s", exc)
            return None
        except Exception as exc:
            _LOGGER.debug("Failed to fetch cloud settings: %s", exc)
            return None

        if response.status != 200:
            _LOGGER.debug(
                "Cloud settings fetch for %s returned status %s.",
                project,
                response.status,
            )
            return None
        if not isinstance(response.data, dict):
            _LOGGER.error(
                "Failed to parse settings.json for project %s: expected a JSON "
                "object, got %s.",
                project,
                type(response.data).__name__,
            )
            return None
        return response.data


_instance_lock = Lock()
_instance: CloudSettingsService | None = None


def get_cloud_settings_service(
    client_provider: OAuthClientProvider | None = None,
    *,
    config: CloudSettingsConfig | None = None,
) -> CloudSettingsService:
    """Return the process-wide settings service, creating it on first access.

    Arguments are only consulted when the instance is created.

    Args:
        client_provider: Source of OAuth-authorized clients.
        config: Storage location settings.

    Returns:
        Shared service instance.

    Raises:
        RuntimeError: If first access does not supply a client provider.
    """
    global _instance  # noqa: PLW0603
    if _instance is not None:
        return _instance
    with _instance_lock:
        if _instance is None:
            if client_provider is None:
                raise RuntimeError(
                    "Cloud settings service requires a client provider on first use"
                )
            _instance = CloudSettingsService(client_provider, config=config)
        return _instance


def reset_cloud_settings_service() -> None:
    """Drop the shared service instance (test-only helper)."""
    global _instance  # noqa: PLW0603
    with _instance_lock:
        _instance = None
