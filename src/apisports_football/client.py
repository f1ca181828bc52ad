"""Client facade.

`FootballClient` wires one `ResourcePipeline` (config + transport + logger)
into the endpoint adapters and exposes one coroutine per resource. A call
either returns a populated result or raises exactly one `ApiSportsError`.
"""

from __future__ import annotations

import logging

from apisports_football.adapters.endpoints import (
    CountriesEndpoint,
    FixturesEndpoint,
    LeaguesEndpoint,
    TeamsInformationEndpoint,
)
from apisports_football.adapters.http_client import HttpxTransport
from apisports_football.core.config import AppSettings, ClientConfig, SubscriptionType
from apisports_football.core.domain.countries import CountriesQueryParams, CountriesResult
from apisports_football.core.domain.fixtures import FixturesQueryParams, FixturesResult
from apisports_football.core.domain.leagues import LeaguesQueryParams, LeaguesResult
from apisports_football.core.domain.teams import TeamsInformationQueryParams, TeamsInformationResult
from apisports_football.core.interfaces.transport import Transport
from apisports_football.core.services.resource_pipeline import ResourcePipeline


class FootballClient:
    """Async client for the API-Football v3 service.

    Usage:

        async with FootballClient.for_subscription(SubscriptionType.API_SPORTS) as client:
            result = await client.countries()
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ClientConfig.for_subscription()
        self.logger = logger or logging.getLogger(__name__)
        self.transport = transport or HttpxTransport(self.config)

        pipeline = ResourcePipeline(self.config, self.transport, self.logger)
        self._countries = CountriesEndpoint(pipeline)
        self._fixtures = FixturesEndpoint(pipeline)
        self._leagues = LeaguesEndpoint(pipeline)
        self._teams = TeamsInformationEndpoint(pipeline)

    @classmethod
    def for_subscription(
        cls,
        subscription: SubscriptionType | str | None = None,
        *,
        base_url: str | None = None,
        settings: AppSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> FootballClient:
        config = ClientConfig.for_subscription(subscription, base_url=base_url, settings=settings)
        return cls(config, logger=logger)

    def __repr__(self) -> str:
        return self.config.describe()

    async def __aenter__(self) -> FootballClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def countries(self, params: CountriesQueryParams | None = None) -> CountriesResult:
        """GET /countries. `params=None` sends no query string."""

        return await self._countries.fetch(params)

    async def fixtures(self, params: FixturesQueryParams | None = None) -> FixturesResult:
        return await self._fixtures.fetch(params)

    async def leagues(self, params: LeaguesQueryParams | None = None) -> LeaguesResult:
        return await self._leagues.fetch(params)

    async def teams_information(
        self, params: TeamsInformationQueryParams | None = None
    ) -> TeamsInformationResult:
        return await self._teams.fetch(params)
