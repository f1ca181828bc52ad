"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, default headers and credential injection.
- Makes testing easy: an `httpx.MockTransport` can be plugged under the same
  client, so auth and error mapping are exercised too.
"""

from __future__ import annotations

from collections.abc import Generator

import httpx

from apisports_football.core.config import ClientConfig
from apisports_football.core.errors import APIKeyMissingError, TransportError
from apisports_football.core.interfaces.transport import TransportResponse

USER_AGENT = "apisports-football/0.1"


class APIKeyAuth(httpx.Auth):
    """Adds the subscription credential header to every request."""

    def __init__(self, config: ClientConfig) -> None:
        self._header = config.api_key_header
        self._api_key = config.api_key
        self._env_var = config.api_key_env_var

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if not self._api_key:
            raise APIKeyMissingError(self._env_var)
        request.headers[self._header] = self._api_key
        yield request


def build_async_client(
    config: ClientConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the client's defaults.

    `transport` lets tests (or proxies) replace the network layer.
    """

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        headers=headers,
        auth=APIKeyAuth(config),
        transport=transport,
    )


class HttpxTransport:
    """`Transport` implementation over a shared `httpx.AsyncClient`."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: httpx.AsyncClient | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = client or build_async_client(config, transport=http_transport)

    async def send(self, request: httpx.Request) -> TransportResponse:
        # Rebuilt through the client: default headers and timeout apply.
        wire = self._client.build_request(request.method, request.url, headers=request.headers)

        try:
            response = await self._client.send(wire)
        except httpx.HTTPError as exc:
            raise TransportError(f"failed to execute http request: {exc}") from exc

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
