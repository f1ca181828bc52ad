"""Endpoint: /leagues."""

from __future__ import annotations

from pydantic import TypeAdapter

from apisports_football.core.domain.leagues import League, LeaguesQueryParams, LeaguesResult
from apisports_football.core.interfaces.endpoint import ResourceEndpoint
from apisports_football.core.services.resource_pipeline import ResourcePipeline

_RECORDS = TypeAdapter(list[League])


class LeaguesEndpoint(ResourceEndpoint):
    path = "/leagues"

    def __init__(self, pipeline: ResourcePipeline) -> None:
        self._pipeline = pipeline

    async def fetch(self, params: LeaguesQueryParams | None = None) -> LeaguesResult:
        envelope = await self._pipeline.execute(self.path, params)
        leagues = self._pipeline.project(envelope, _RECORDS)
        return LeaguesResult(**envelope.model_dump(), leagues=leagues)
