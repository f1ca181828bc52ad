"""Leagues endpoint shapes."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field

from apisports_football.core.domain.constraints import (
    LAST_N,
    SEASON,
    Constraint,
    Length,
    MinLength,
    NonNegative,
)
from apisports_football.core.domain.countries import Country
from apisports_football.core.domain.envelope import ResponseOK
from apisports_football.core.domain.params import QueryParams


class LeagueTypeParam(str, Enum):
    """Restricts /leagues to championships or cups."""

    LEAGUE = "league"
    CUP = "cup"


class LeaguesQueryParams(QueryParams):
    id: int | None = None
    name: str | None = None
    country: str | None = None
    code: str | None = None
    season: int | None = None
    team: int | None = None
    type: LeagueTypeParam | None = None
    current: bool | None = None
    search: str | None = None
    last: int | None = None

    constraints: ClassVar[dict[str, Constraint]] = {
        "id": NonNegative(),
        "name": MinLength(1),
        "country": MinLength(1),
        "code": Length(2),
        "season": SEASON,
        "team": NonNegative(),
        "search": MinLength(3),
        "last": LAST_N,
    }


class LeagueInfo(BaseModel):
    id: int
    name: str
    type: str
    logo: str | None = None


class FixturesCoverage(BaseModel):
    events: bool = False
    lineups: bool = False
    statistics_fixtures: bool = False
    statistics_players: bool = False


class Coverage(BaseModel):
    standings: bool = False
    players: bool = False
    top_scorers: bool = False
    top_assists: bool = False
    top_cards: bool = False
    injuries: bool = False
    predictions: bool = False
    odds: bool = False
    fixtures: FixturesCoverage = Field(default_factory=FixturesCoverage)


class SeasonInfo(BaseModel):
    year: int
    start: str | None = None
    end: str | None = None
    current: bool = False
    coverage: Coverage = Field(default_factory=Coverage)


class League(BaseModel):
    league: LeagueInfo
    country: Country
    seasons: list[SeasonInfo] = Field(default_factory=list)


class LeaguesResult(ResponseOK):
    leagues: list[League] = Field(default_factory=list)
