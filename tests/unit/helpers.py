"""Test-only helpers for unit tests. Not part of the cirrus API."""

from __future__ import annotations

from cirrus.auth.types import AuthRefreshRequest, AuthType


class RecordingAuthenticator:
    """Authenticator fake that records calls and optionally raises."""

    def __init__(self, error: BaseException | None = None) -> None:
        """Store the error raised on refresh.

        Args:
            error: Exception raised from ``refresh``; ``None`` succeeds.
        """
        self.error = error
        self.calls: list[tuple[AuthType, AuthRefreshRequest]] = []

    async def refresh(self, auth_type: AuthType, request: AuthRefreshRequest) -> None:
        """Record the call and raise the configured error.

        Args:
            auth_type: Requested login strategy.
            request: Per-call refresh options.
        """
        self.calls.append((auth_type, request))
        if self.error is not None:
            raise self.error
