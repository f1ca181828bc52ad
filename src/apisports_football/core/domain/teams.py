"""Teams endpoint shapes."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from apisports_football.core.domain.constraints import (
    SEASON,
    Constraint,
    Length,
    MinLength,
    NonNegative,
)
from apisports_football.core.domain.envelope import ResponseOK
from apisports_football.core.domain.params import QueryParams


class TeamsInformationQueryParams(QueryParams):
    id: int | None = None
    name: str | None = None
    country: str | None = None
    season: int | None = None
    search: str | None = None
    league: int | None = None
    code: str | None = None
    venue: int | None = None

    constraints: ClassVar[dict[str, Constraint]] = {
        "id": NonNegative(),
        "name": MinLength(1),
        "country": MinLength(1),
        "season": SEASON,
        "search": MinLength(3),
        "league": NonNegative(),
        "code": Length(3),
        "venue": NonNegative(),
    }


class Team(BaseModel):
    id: int
    name: str
    code: str | None = None
    country: str | None = None
    founded: int | None = None
    national: bool = False
    logo: str | None = None


class Venue(BaseModel):
    id: int | None = None
    name: str | None = None
    address: str | None = None
    city: str | None = None
    capacity: int | None = None
    surface: str | None = None
    image: str | None = None


class TeamInformation(BaseModel):
    team: Team
    venue: Venue = Field(default_factory=Venue)


class TeamsInformationResult(ResponseOK):
    teams: list[TeamInformation] = Field(default_factory=list)
