"""Countries endpoint shapes."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from apisports_football.core.domain.constraints import Constraint, Length, MinLength
from apisports_football.core.domain.envelope import ResponseOK
from apisports_football.core.domain.params import QueryParams


class Country(BaseModel):
    name: str
    code: str | None = None
    flag: str | None = None


class CountriesQueryParams(QueryParams):
    name: str | None = None
    code: str | None = None
    search: str | None = None

    constraints: ClassVar[dict[str, Constraint]] = {
        "name": MinLength(1),
        "code": Length(2),
        "search": MinLength(3),
    }


class CountriesResult(ResponseOK):
    countries: list[Country] = Field(default_factory=list)
