"""Shared fixtures: a resolved client config and a client wired to MockAPI.

Invariants:
    - No test touches the network: every client goes through MockAPI
    - The credential is injected in ClientConfig, never read from the
      developer's environment or .env files
"""

import pytest

from apisports_football.adapters.http_client import HttpxTransport
from apisports_football.client import FootballClient
from apisports_football.core.config import (
    SUBSCRIPTION_PROFILES,
    ClientConfig,
    SubscriptionType,
)
from tests.mock_api import MOCK_BASE_URL, MockAPI

TEST_API_KEY = "test-api-key"


def make_config(
    subscription: SubscriptionType = SubscriptionType.API_SPORTS,
    api_key: str = TEST_API_KEY,
    base_url: str = MOCK_BASE_URL,
) -> ClientConfig:
    profile = SUBSCRIPTION_PROFILES[subscription]
    return ClientConfig(
        subscription=subscription,
        base_url=base_url,
        api_key_env_var=profile.api_key_env_var,
        api_key_header=profile.api_key_header,
        api_key=api_key,
    )


@pytest.fixture
def config() -> ClientConfig:
    return make_config()


@pytest.fixture
def mock_api() -> MockAPI:
    return MockAPI()


@pytest.fixture
async def client(config, mock_api):
    transport = HttpxTransport(config, http_transport=mock_api.transport)
    async with FootballClient(config, transport=transport) as football:
        yield football
