"""Request building: tests for URL assembly, validation gate and query shape.

Tests cover:
    - params=None gives no query string at all
    - Valid params give the canonical query
    - Invalid params raise before any request is built
"""

import pytest

from apisports_football.core.domain.countries import CountriesQueryParams
from apisports_football.core.domain.leagues import LeaguesQueryParams
from apisports_football.core.errors import FieldValidationError
from apisports_football.core.services.request_builder import build_request, prepare_request
from tests.conftest import make_config


def test_no_params_means_no_query():
    request = prepare_request(make_config(), "/countries", None)
    assert request.method == "GET"
    assert request.url.query == b""
    assert str(request.url) == "https://mock.api-football.test/countries"


def test_params_are_encoded_in_canonical_order():
    params = LeaguesQueryParams(season=2021, country="France")
    request = prepare_request(make_config(), "/leagues", params)
    assert request.url.path == "/leagues"
    assert request.url.query == b"country=France&season=2021"


def test_empty_params_object_gives_empty_query():
    request = prepare_request(make_config(), "/countries", CountriesQueryParams())
    assert request.url.query == b""


def test_invalid_params_raise_validation_error():
    with pytest.raises(FieldValidationError) as exc_info:
        prepare_request(make_config(), "/leagues", LeaguesQueryParams(season=42, last=500))
    assert sorted(exc_info.value.fields) == ["last", "season"]


def test_base_url_with_path_prefix_is_kept():
    config = make_config(base_url="https://api-football-v1.p.rapidapi.com/v3")
    request = build_request(config, "/teams", [("id", "33")])
    assert str(request.url) == "https://api-football-v1.p.rapidapi.com/v3/teams?id=33"

