"""Endpoint: /teams (team information)."""

from __future__ import annotations

from pydantic import TypeAdapter

from apisports_football.core.domain.teams import (
    TeamInformation,
    TeamsInformationQueryParams,
    TeamsInformationResult,
)
from apisports_football.core.interfaces.endpoint import ResourceEndpoint
from apisports_football.core.services.resource_pipeline import ResourcePipeline

_RECORDS = TypeAdapter(list[TeamInformation])


class TeamsInformationEndpoint(ResourceEndpoint):
    path = "/teams"

    def __init__(self, pipeline: ResourcePipeline) -> None:
        self._pipeline = pipeline

    async def fetch(self, params: TeamsInformationQueryParams | None = None) -> TeamsInformationResult:
        envelope = await self._pipeline.execute(self.path, params)
        teams = self._pipeline.project(envelope, _RECORDS)
        return TeamsInformationResult(**envelope.model_dump(), teams=teams)
