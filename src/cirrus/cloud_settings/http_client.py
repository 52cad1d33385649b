"""httpx-backed authorized client."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeAlias

import httpx

from cirrus.cloud_settings.types import HttpResponse, RequestError, ResponseInfo

TokenProvider: TypeAlias = Callable[[], Awaitable[str]]


class HttpxAuthorizedClient:
    """Send bearer-authorized requests through ``httpx.AsyncClient``."""

    def __init__(
        self,
        token_provider: TokenProvider,
        *,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Store request settings.

        Args:
            token_provider: Async callable returning an OAuth access token.
            timeout: Per-request timeout in seconds.
            transport: Optional transport override.
        """
        self._token_provider = token_provider
        self._timeout = timeout
        self._transport = transport

    async def request(self, *, url: str, method: str) -> HttpResponse:
        """Issue one authorized request.

        Args:
            url: Absolute request URL.
            method: HTTP method.

        Returns:
            Status and decoded body.

        Raises:
            RequestError: On error statuses or transport failures.
        """
        token = await self._token_provider()
        headers = {"Authorization": f"Bearer {token}"}
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.request(method, url, headers=headers)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise RequestError(
                    str(exc), response=ResponseInfo(status=exc.response.status_code)
                ) from exc
            except httpx.HTTPError as exc:
                raise RequestError(str(exc)) from exc

        try:
            data = resp.json()
        except ValueError:
            data = resp.text
        return HttpResponse(status=resp.status_code, data=data)
