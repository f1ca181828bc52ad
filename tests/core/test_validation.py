"""Parameter validation: tests for the constraint tables and the generic validator.

Tests cover:
    - Absent fields are never checked
    - Every violation is reported, not only the first one
    - Boundaries of ranges and lengths are inclusive
    - Violations are reported under their wire name
"""

import pytest

from apisports_football.core.domain.countries import CountriesQueryParams
from apisports_football.core.domain.fixtures import FixturesWireParams
from apisports_football.core.domain.leagues import LeaguesQueryParams, LeagueTypeParam
from apisports_football.core.domain.teams import TeamsInformationQueryParams
from apisports_football.core.errors import ErrorCategory, FieldValidationError
from apisports_football.core.services.validation import collect_violations, validate_params


def test_validate_params_accepts_none():
    validate_params(None)


def test_empty_params_are_valid():
    for params in (
        CountriesQueryParams(),
        LeaguesQueryParams(),
        TeamsInformationQueryParams(),
        FixturesWireParams(),
    ):
        assert collect_violations(params) == []


def test_all_fixture_violations_reported_together():
    params = FixturesWireParams(id=-1, season=666, team=-1, last=100)
    with pytest.raises(FieldValidationError) as exc_info:
        validate_params(params)

    err = exc_info.value
    assert sorted(err.fields) == ["id", "last", "season", "team"]
    assert err.category is ErrorCategory.VALIDATION
    assert err.code == "FIELD_VALIDATION_ERROR"
    assert err.message.startswith("error while validating field : ")


@pytest.mark.parametrize("season", [1000, 2021, 9999])
def test_season_bounds_are_inclusive(season):
    assert collect_violations(LeaguesQueryParams(season=season)) == []


@pytest.mark.parametrize("season", [999, 10000, 0])
def test_season_out_of_range(season):
    violations = collect_violations(LeaguesQueryParams(season=season))
    assert [v.field for v in violations] == ["season"]
    assert violations[0].constraint == "between 1000 and 9999"


def test_last_range_is_zero_to_ninety_nine():
    assert collect_violations(LeaguesQueryParams(last=0)) == []
    assert collect_violations(LeaguesQueryParams(last=99)) == []
    assert [v.field for v in collect_violations(LeaguesQueryParams(last=100))] == ["last"]


def test_zero_ids_are_valid():
    assert collect_violations(TeamsInformationQueryParams(id=0, league=0, venue=0)) == []


def test_country_code_length():
    assert collect_violations(CountriesQueryParams(code="FR")) == []
    assert [v.field for v in collect_violations(CountriesQueryParams(code="FRA"))] == ["code"]


def test_team_code_is_three_characters():
    assert collect_violations(TeamsInformationQueryParams(code="MUN")) == []
    assert [v.field for v in collect_violations(TeamsInformationQueryParams(code="MU"))] == ["code"]


def test_search_needs_three_characters():
    violations = collect_violations(CountriesQueryParams(search="fr"))
    assert [v.field for v in violations] == ["search"]
    assert "at least 3" in str(violations[0])


def test_empty_string_fails_min_length_one():
    violations = collect_violations(LeaguesQueryParams(name="", country=""))
    assert sorted(v.field for v in violations) == ["country", "name"]


def test_enum_and_bool_fields_are_not_constrained():
    params = LeaguesQueryParams(type=LeagueTypeParam.CUP, current=False)
    assert collect_violations(params) == []


def test_unconstrained_alias_field_is_accepted():
    params = FixturesWireParams.model_validate({"from": "2021-08-01", "round": ""})
    violations = collect_violations(params)
    assert [v.field for v in violations] == ["round"]
