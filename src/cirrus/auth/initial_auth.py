"""Initial authentication flow run at process startup."""

from __future__ import annotations

import logging

from cirrus.auth.errors import (
    FatalCancellationError,
    InteractionRequiredError,
    error_message,
)
from cirrus.auth.types import AuthOutcome, AuthRefreshRequest, AuthSession, AuthType

_LOGGER = logging.getLogger(__name__)


async def perform_initial_auth(
    session: AuthSession,
    auth_type: AuthType | None = None,
    silent_only: bool = False,
) -> AuthOutcome:
    """Authenticate the session once and classify the result.

    Args:
        session: Session whose credentials should be refreshed.
        auth_type: Selected login strategy; ``None`` skips authentication.
        silent_only: Forbid interactive login flows for this attempt.

    Returns:
        Tagged authentication outcome.
    """
    if auth_type is None:
        return AuthOutcome.success()

    request = AuthRefreshRequest(silent_only=silent_only)
    try:
        await session.refresh_auth(auth_type, request=request)
    except InteractionRequiredError as exc:
        if silent_only:
            _LOGGER.debug("Silent login for %s requires interaction.", auth_type)
            return AuthOutcome.interaction_required()
        return _failed(auth_type, exc)
    except FatalCancellationError:
        _LOGGER.debug("Login for %s was cancelled.", auth_type)
        return AuthOutcome.cancelled()
    except Exception as exc:
        return _failed(auth_type, exc)
    return AuthOutcome.success()


def _failed(auth_type: AuthType, exc: Exception) -> AuthOutcome:
    _LOGGER.debug("Login for %s failed: %s", auth_type, exc)
    return AuthOutcome.failed(f"Failed to login. Message: {error_message(exc)}")
