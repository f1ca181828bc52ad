"""Typed async client for the API-Football v3 REST service."""

from apisports_football.client import FootballClient
from apisports_football.core.config import AppSettings, ClientConfig, SubscriptionType
from apisports_football.core.domain.countries import CountriesQueryParams, CountriesResult, Country
from apisports_football.core.domain.fixtures import (
    Fixture,
    FixturesQueryParams,
    FixturesResult,
    FixtureStatusType,
)
from apisports_football.core.domain.leagues import (
    League,
    LeaguesQueryParams,
    LeaguesResult,
    LeagueTypeParam,
)
from apisports_football.core.domain.teams import (
    TeamInformation,
    TeamsInformationQueryParams,
    TeamsInformationResult,
)
from apisports_football.core.errors import (
    APIKeyMissingError,
    APIResponseError,
    ApiSportsError,
    DecodingError,
    ErrorCategory,
    FieldValidationError,
    TransportError,
    UnknownHTTPCodeError,
)

__all__ = [
    "APIKeyMissingError",
    "APIResponseError",
    "ApiSportsError",
    "AppSettings",
    "ClientConfig",
    "CountriesQueryParams",
    "CountriesResult",
    "Country",
    "DecodingError",
    "ErrorCategory",
    "FieldValidationError",
    "Fixture",
    "FixtureStatusType",
    "FixturesQueryParams",
    "FixturesResult",
    "FootballClient",
    "League",
    "LeagueTypeParam",
    "LeaguesQueryParams",
    "LeaguesResult",
    "SubscriptionType",
    "TeamInformation",
    "TeamsInformationQueryParams",
    "TeamsInformationResult",
    "TransportError",
    "UnknownHTTPCodeError",
]
