"""HTTP transport: tests for credential injection and error mapping.

Tests cover:
    - The subscription header carries the API key, default headers are merged
    - An empty credential fails before anything is sent
    - Network failures map to TransportError with the cause chained
    - Non-2xx statuses are returned untouched (decoding happens later)
"""

import httpx
import pytest

from apisports_football.adapters.http_client import USER_AGENT, HttpxTransport
from apisports_football.core.config import SubscriptionType
from apisports_football.core.errors import APIKeyMissingError, ErrorCategory, TransportError
from apisports_football.core.interfaces.transport import Transport
from tests.conftest import TEST_API_KEY, make_config
from tests.mock_api import MOCK_BASE_URL, MockAPI


def test_httpx_transport_satisfies_protocol():
    assert isinstance(HttpxTransport(make_config()), Transport)


async def test_api_sports_header_is_injected():
    api = MockAPI()
    api.add("/countries", {"response": []})
    transport = HttpxTransport(make_config(), http_transport=api.transport)

    response = await transport.send(httpx.Request("GET", f"{MOCK_BASE_URL}/countries"))
    await transport.aclose()

    assert response.status_code == 200
    sent = api.last_request
    assert sent.headers["x-apisports-key"] == TEST_API_KEY
    assert sent.headers["user-agent"] == USER_AGENT
    assert sent.headers["accept"] == "application/json"


async def test_rapid_api_header_is_injected():
    api = MockAPI()
    transport = HttpxTransport(
        make_config(SubscriptionType.RAPID_API, api_key="rapid"),
        http_transport=api.transport,
    )

    await transport.send(httpx.Request("GET", f"{MOCK_BASE_URL}/teams"))
    await transport.aclose()

    assert api.last_request.headers["x-rapidapi-key"] == "rapid"
    assert "x-apisports-key" not in api.last_request.headers


async def test_missing_key_fails_before_sending():
    api = MockAPI()
    transport = HttpxTransport(make_config(api_key=""), http_transport=api.transport)

    with pytest.raises(APIKeyMissingError) as exc_info:
        await transport.send(httpx.Request("GET", f"{MOCK_BASE_URL}/countries"))
    await transport.aclose()

    assert api.requests == []
    assert exc_info.value.env_var == "API_SPORTS_KEY"
    assert exc_info.value.category is ErrorCategory.TRANSPORT


async def test_connection_error_maps_to_transport_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(make_config(), http_transport=httpx.MockTransport(refuse))

    with pytest.raises(TransportError) as exc_info:
        await transport.send(httpx.Request("GET", f"{MOCK_BASE_URL}/countries"))
    await transport.aclose()

    assert exc_info.value.code == "TRANSPORT_ERROR"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_error_status_is_returned_as_is():
    api = MockAPI()
    transport = HttpxTransport(make_config(), http_transport=api.transport)

    response = await transport.send(httpx.Request("GET", f"{MOCK_BASE_URL}/unknown"))
    await transport.aclose()

    assert response.status_code == 404
    assert b"Endpoint not found" in response.body


async def test_request_headers_kept_and_client_timeout_applied():
    api = MockAPI()
    transport = HttpxTransport(make_config(), http_transport=api.transport)

    request = httpx.Request("GET", f"{MOCK_BASE_URL}/countries", headers={"X-Trace": "abc"})
    await transport.send(request)
    await transport.aclose()

    sent = api.last_request
    assert sent.headers["x-trace"] == "abc"
    assert sent.headers["user-agent"] == USER_AGENT
    assert sent.extensions["timeout"]["read"] == 30.0
