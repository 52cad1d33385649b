"""Authentication domain types and collaborator ports."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, model_validator

INTERACTION_REQUIRED = "INTERACTION_REQUIRED"


class AuthType(StrEnum):
    """Supported login strategies."""

    LOGIN_WITH_GOOGLE = "oauth-personal"
    USE_GEMINI = "gemini-api-key"
    USE_VERTEX_AI = "vertex-ai"
    CLOUD_SHELL = "cloud-shell"
    COMPUTE_ADC = "compute-default-credentials"


class AuthRefreshRequest(BaseModel):
    """Per-call options passed to the re-authentication provider."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    silent_only: bool = False


class AuthOutcomeKind(StrEnum):
    """Caller-visible authentication outcome tags."""

    SUCCESS = "success"
    INTERACTION_REQUIRED = "interaction_required"
    CANCELLED = "cancelled"
    FAILED = "failed"


class AuthOutcome(BaseModel):
    """Tagged result of one initial authentication attempt."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: AuthOutcomeKind
    message: str | None = None

    @model_validator(mode="after")
    def _validate_message(self) -> AuthOutcome:
        """Require a message exactly for failed outcomes.

        Returns:
            Validated outcome.

        Raises:
            ValueError: If a failed outcome has no message.
        """
        if self.kind == AuthOutcomeKind.FAILED and not self.message:
            raise ValueError("failed outcomes require a non-empty message.")
        return self

    @classmethod
    def success(cls) -> AuthOutcome:
        """Construct a successful outcome.

        Returns:
            Success outcome.
        """
        return cls(kind=AuthOutcomeKind.SUCCESS)

    @classmethod
    def interaction_required(cls) -> AuthOutcome:
        """Construct an interaction-required outcome.

        Returns:
            Interaction-required outcome.
        """
        return cls(kind=AuthOutcomeKind.INTERACTION_REQUIRED)

    @classmethod
    def cancelled(cls) -> AuthOutcome:
        """Construct a cancelled outcome.

        Returns:
            Cancelled outcome.
        """
        return cls(kind=AuthOutcomeKind.CANCELLED)

    @classmethod
    def failed(cls, message: str) -> AuthOutcome:
        """Construct a failed outcome.

        Args:
            message: Human-readable failure text.

        Returns:
            Failed outcome.
        """
        return cls(kind=AuthOutcomeKind.FAILED, message=message)

    @property
    def is_success(self) -> bool:
        """Whether the session ended up authenticated."""
        return self.kind == AuthOutcomeKind.SUCCESS

    def as_error_message(self) -> str | None:
        """Collapse to the string surface used by auth dialogs.

        ``None`` means success, ``INTERACTION_REQUIRED`` asks for an
        interactive login, an empty string is a cancellation with nothing to
        display, anything else is a failure message.

        Returns:
            Optional error message.
        """
        if self.kind == AuthOutcomeKind.SUCCESS:
            return None
        if self.kind == AuthOutcomeKind.INTERACTION_REQUIRED:
            return INTERACTION_REQUIRED
        if self.kind == AuthOutcomeKind.CANCELLED:
            return ""
        return self.message


class Authenticator(Protocol):
    """Re-authentication provider port."""

    async def refresh(self, auth_type: AuthType, request: AuthRefreshRequest) -> None:
        """Refresh credentials for one login strategy."""


class AuthSession(Protocol):
    """Session surface consumed by the initial auth flow."""

    async def refresh_auth(
        self, auth_type: AuthType, *, request: AuthRefreshRequest
    ) -> None:
        """Refresh session credentials."""
