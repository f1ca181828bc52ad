"""Endpoint: /countries."""

from __future__ import annotations

from pydantic import TypeAdapter

from apisports_football.core.domain.countries import CountriesQueryParams, CountriesResult, Country
from apisports_football.core.interfaces.endpoint import ResourceEndpoint
from apisports_football.core.services.resource_pipeline import ResourcePipeline

_RECORDS = TypeAdapter(list[Country])


class CountriesEndpoint(ResourceEndpoint):
    path = "/countries"

    def __init__(self, pipeline: ResourcePipeline) -> None:
        self._pipeline = pipeline

    async def fetch(self, params: CountriesQueryParams | None = None) -> CountriesResult:
        envelope = await self._pipeline.execute(self.path, params)
        countries = self._pipeline.project(envelope, _RECORDS)
        return CountriesResult(**envelope.model_dump(), countries=countries)
