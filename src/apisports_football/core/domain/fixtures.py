"""Fixtures endpoint shapes.

`FixturesQueryParams` is what callers build; it is richer than what goes on
the wire (typed id lists, a boolean `live` plus its league list).
`FixturesWireParams` is the serialized form produced by the fixtures
endpoint adapter and is the one that gets validated and encoded.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from apisports_football.core.domain.constraints import (
    LAST_N,
    SEASON,
    Constraint,
    MinLength,
    NonNegative,
)
from apisports_football.core.domain.envelope import ResponseOK
from apisports_football.core.domain.params import QueryParams


class FixtureStatusType(str, Enum):
    """Short status codes accepted by the `status` filter."""

    TBD = "TBD"  # Time To Be Defined
    NS = "NS"  # Not Started
    FIRST_HALF = "1H"
    HALFTIME = "HT"
    SECOND_HALF = "2H"
    ET = "ET"  # Extra Time
    P = "P"  # Penalty In Progress
    FT = "FT"  # Match Finished
    AET = "AET"  # Finished After Extra Time
    PEN = "PEN"  # Finished After Penalty
    BT = "BT"  # Break Time (in Extra Time)
    SUSP = "SUSP"
    INT = "INT"  # Interrupted
    PST = "PST"  # Postponed
    CANC = "CANC"
    ABD = "ABD"  # Abandoned
    AWD = "AWD"  # Technical Loss
    WO = "WO"  # WalkOver
    LIVE = "LIVE"


class FixturesQueryParams(BaseModel):
    """Caller-facing filters for /fixtures."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    id: int | None = None
    ids: list[int] | None = None
    live: bool | None = None
    live_leagues: list[int] | None = None
    date: dt.date | None = None
    league: int | None = None
    season: int | None = None
    team: int | None = None
    last: int | None = None
    next: int | None = None
    from_: dt.date | None = Field(default=None, alias="from")
    to: dt.date | None = None
    round: str | None = None
    status: FixtureStatusType | None = None
    timezone: str | None = None


class FixturesWireParams(QueryParams):
    id: int | None = None
    ids: str | None = None
    live: str | None = None
    date: dt.date | None = None
    league: int | None = None
    season: int | None = None
    team: int | None = None
    last: int | None = None
    next: int | None = None
    from_: dt.date | None = Field(default=None, alias="from")
    to: dt.date | None = None
    round: str | None = None
    status: FixtureStatusType | None = None
    timezone: str | None = None

    constraints: ClassVar[dict[str, Constraint]] = {
        "id": NonNegative(),
        "league": NonNegative(),
        "season": SEASON,
        "team": NonNegative(),
        "last": LAST_N,
        "next": LAST_N,
        "round": MinLength(1),
        "status": MinLength(1),
        "timezone": MinLength(1),
    }


class Periods(BaseModel):
    first: int | None = None
    second: int | None = None


class FixtureVenue(BaseModel):
    id: int | None = None
    name: str | None = None
    city: str | None = None


class FixtureStatus(BaseModel):
    long: str
    short: str
    elapsed: int | None = None


class FixtureInfo(BaseModel):
    id: int
    referee: str | None = None
    timezone: str
    date: dt.datetime
    timestamp: int
    periods: Periods = Field(default_factory=Periods)
    venue: FixtureVenue = Field(default_factory=FixtureVenue)
    status: FixtureStatus


class FixtureLeagueInfo(BaseModel):
    id: int
    name: str
    country: str
    logo: str | None = None
    flag: str | None = None
    season: int
    round: str | None = None


class FixtureTeam(BaseModel):
    id: int
    name: str
    logo: str | None = None
    # None until the fixture has a result (and for draws).
    winner: bool | None = None


class FixtureTeams(BaseModel):
    home: FixtureTeam
    away: FixtureTeam


class FixtureGoals(BaseModel):
    """Goals are null for periods that did not happen."""

    home: int | None = None
    away: int | None = None


class FixtureScore(BaseModel):
    halftime: FixtureGoals = Field(default_factory=FixtureGoals)
    fulltime: FixtureGoals = Field(default_factory=FixtureGoals)
    extratime: FixtureGoals = Field(default_factory=FixtureGoals)
    penalty: FixtureGoals = Field(default_factory=FixtureGoals)


class Fixture(BaseModel):
    fixture: FixtureInfo
    league: FixtureLeagueInfo
    teams: FixtureTeams
    goals: FixtureGoals = Field(default_factory=FixtureGoals)
    score: FixtureScore = Field(default_factory=FixtureScore)


class FixturesResult(ResponseOK):
    fixtures: list[Fixture] = Field(default_factory=list)
