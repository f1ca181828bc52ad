"""Endpoint: /fixtures.

The caller-facing `FixturesQueryParams` is translated into
`FixturesWireParams` before validation:

- `ids`: empty -> omitted; one id -> `ids=<n>`; several -> `ids=<n1>-<n2>-...`.
- `live=True`: no (or empty) league list -> `live=all`; one league ->
  `live=all` and that league replaces any `league` filter; several leagues ->
  `live=<id1>-<id2>-...`. The league list is ignored unless `live` is set.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import TypeAdapter

from apisports_football.core.domain.fixtures import (
    Fixture,
    FixturesQueryParams,
    FixturesResult,
    FixturesWireParams,
)
from apisports_football.core.interfaces.endpoint import ResourceEndpoint
from apisports_football.core.services.resource_pipeline import ResourcePipeline

LIVE_ALL = "all"
ID_SEPARATOR = "-"

_RECORDS = TypeAdapter(list[Fixture])


def join_ids(ids: Sequence[int], delim: str = ID_SEPARATOR) -> str:
    return delim.join(str(i) for i in ids)


def translate_params(params: FixturesQueryParams | None) -> FixturesWireParams | None:
    if params is None:
        return None

    league = params.league
    live: str | None = None

    if params.live:
        live = LIVE_ALL
        leagues = params.live_leagues or []
        if len(leagues) == 1:
            # Single league: stays 'all' and filters on the league instead.
            # TODO: confirm against the live service that `league` is honoured with `live=all`.
            league = leagues[0]
        elif len(leagues) > 1:
            live = join_ids(leagues)

    ids: str | None = None
    if params.ids:
        ids = str(params.ids[0]) if len(params.ids) == 1 else join_ids(params.ids)

    return FixturesWireParams(
        id=params.id,
        ids=ids,
        live=live,
        date=params.date,
        league=league,
        season=params.season,
        team=params.team,
        last=params.last,
        next=params.next,
        from_=params.from_,
        to=params.to,
        round=params.round,
        status=params.status,
        timezone=params.timezone,
    )


class FixturesEndpoint(ResourceEndpoint):
    path = "/fixtures"

    def __init__(self, pipeline: ResourcePipeline) -> None:
        self._pipeline = pipeline

    async def fetch(self, params: FixturesQueryParams | None = None) -> FixturesResult:
        envelope = await self._pipeline.execute(self.path, translate_params(params))
        fixtures = self._pipeline.project(envelope, _RECORDS)
        return FixturesResult(**envelope.model_dump(), fixtures=fixtures)
