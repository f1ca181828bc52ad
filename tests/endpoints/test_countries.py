"""Countries endpoint: tests through FootballClient against MockAPI.

Tests cover:
    - No params: no query string, all records decoded
    - Filters are sent in canonical form
    - Validation errors never reach the network
"""

import pytest

from apisports_football.core.domain.countries import CountriesQueryParams
from apisports_football.core.errors import FieldValidationError
from tests.mock_api import countries_payload, envelope


async def test_countries_without_params(client, mock_api):
    mock_api.add("/countries", countries_payload())

    result = await client.countries()

    assert result.get == "countries"
    assert result.results == 164
    assert len(result.countries) == 164
    assert result.countries[0].name == "World"
    assert result.countries[0].code is None
    assert mock_api.last_request.url.query == b""


async def test_countries_by_code(client, mock_api):
    france = {"name": "France", "code": "FR", "flag": "https://media.api-sports.io/flags/fr.svg"}
    mock_api.add("/countries", envelope("countries", [france], parameters={"code": "FR"}), params={"code": "FR"})

    result = await client.countries(CountriesQueryParams(code="FR"))

    assert [c.name for c in result.countries] == ["France"]
    assert result.parameters == {"code": "FR"}


@pytest.mark.parametrize(
    "params",
    [
        CountriesQueryParams(code="FRA"),
        CountriesQueryParams(search="fr"),
        CountriesQueryParams(name=""),
    ],
)
async def test_countries_validation_errors(client, mock_api, params):
    with pytest.raises(FieldValidationError):
        await client.countries(params)
    assert mock_api.requests == []
