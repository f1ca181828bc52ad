"""API endpoints (one adapter per resource).

Why a package:
- Groups modules by resource (countries, fixtures, ...).
- Each module implements `core.interfaces.endpoint.ResourceEndpoint`.
"""

from apisports_football.adapters.endpoints.countries import CountriesEndpoint
from apisports_football.adapters.endpoints.fixtures import FixturesEndpoint
from apisports_football.adapters.endpoints.leagues import LeaguesEndpoint
from apisports_football.adapters.endpoints.teams import TeamsInformationEndpoint

__all__ = [
    "CountriesEndpoint",
    "FixturesEndpoint",
    "LeaguesEndpoint",
    "TeamsInformationEndpoint",
]
