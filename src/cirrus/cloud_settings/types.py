"""Remote settings fetch types and collaborator ports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from pydantic import BaseModel, ConfigDict

from cirrus.auth.types import AuthType

if TYPE_CHECKING:
    from cirrus.session.context import SessionContext

ProjectSettings: TypeAlias = dict[str, Any]


class HttpResponse(BaseModel):
    """Response returned by an authorized client."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: int
    data: Any = None


class ResponseInfo(BaseModel):
    """Response details attached to a failed request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: int


class RequestError(RuntimeError):
    """Authorized request failure with optional status details."""

    def __init__(
        self,
        message: str = "",
        *,
        code: int | None = None,
        response: ResponseInfo | None = None,
    ) -> None:
        """Create request failure.

        Args:
            message: Human-readable error message.
            code: Status code reported directly by the client library.
            response: Response details when the server answered.
        """
        super().__init__(message or _default_message(code, response))
        self.code = code
        self.response = response

    @property
    def status(self) -> int | None:
        """Status code carried by the error, top-level code first."""
        if self.code is not None:
            return self.code
        if self.response is not None:
            return self.response.status
        return None


def _default_message(code: int | None, response: ResponseInfo | None) -> str:
    status = code if code is not None else (response.status if response else None)
    if status is None:
        return "Request failed"
    return f"Request failed with status {status}"


class AuthorizedClient(Protocol):
    """Client that signs requests with the session's OAuth credentials."""

    async def request(self, *, url: str, method: str) -> HttpResponse:
        """Issue one request."""


class OAuthClientProvider(Protocol):
    """Factory for authorized clients."""

    async def get_client(
        self, auth_type: AuthType, session: SessionContext
    ) -> AuthorizedClient:
        """Return a client authorized for ``auth_type``."""
