"""Startup lifecycle helpers: logging, initial auth, remote settings."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict
from rich.logging import RichHandler

from cirrus.auth.initial_auth import perform_initial_auth
from cirrus.auth.types import AuthOutcome
from cirrus.cloud_settings.service import CloudSettingsService
from cirrus.config.settings import CirrusConfig
from cirrus.session.context import SessionContext

_LOGGING_CONFIGURED = False
_LOGGER = logging.getLogger(__name__)


class StartupReport(BaseModel):
    """Result of the startup bootstrap sequence."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    auth: AuthOutcome
    remote_settings: dict[str, Any] | None = None


def configure_logging(level: int = logging.INFO) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        level: Root log level.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


async def run_startup(
    session: SessionContext,
    config: CirrusConfig,
    settings_service: CloudSettingsService,
) -> StartupReport:
    """Authenticate the session, then pull cloud settings when signed in.

    Args:
        session: Session to authenticate.
        config: Loaded cirrus config.
        settings_service: Remote settings service handle.

    Returns:
        Auth outcome and any remote settings document.
    """
    auth_type = config.auth.auth_type
    outcome = await perform_initial_auth(
        session, auth_type, silent_only=config.auth.silent_only
    )
    if not outcome.is_success or auth_type is None:
        return StartupReport(auth=outcome)

    remote_settings = await settings_service.load_settings(session, auth_type)
    if remote_settings is not None:
        _LOGGER.debug("Loaded %d cloud settings keys.", len(remote_settings))
    return StartupReport(auth=outcome, remote_settings=remote_settings)
