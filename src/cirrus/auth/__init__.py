"""Authentication package."""

from cirrus.auth.errors import (
    AuthError,
    FatalCancellationError,
    InteractionRequiredError,
    error_message,
)
from cirrus.auth.initial_auth import perform_initial_auth
from cirrus.auth.types import (
    INTERACTION_REQUIRED,
    Authenticator,
    AuthOutcome,
    AuthOutcomeKind,
    AuthRefreshRequest,
    AuthSession,
    AuthType,
)

__all__ = [
    "INTERACTION_REQUIRED",
    "AuthError",
    "AuthOutcome",
    "AuthOutcomeKind",
    "AuthRefreshRequest",
    "AuthSession",
    "AuthType",
    "Authenticator",
    "FatalCancellationError",
    "InteractionRequiredError",
    "error_message",
    "perform_initial_auth",
]
