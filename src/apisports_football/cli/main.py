"""apisports-football command line.

Thin layer over `FootballClient`: options become a parameter object (or
`None` when no option is given), results are rendered as Rich tables and
library errors end the command with exit code 1.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console

from apisports_football.cli import doctor
from apisports_football.cli.ui_components import (
    build_countries_table,
    build_error_panel,
    build_fixtures_table,
    build_leagues_table,
    build_teams_table,
    print_banner,
)
from apisports_football.client import FootballClient
from apisports_football.core.config import AppSettings, SubscriptionType
from apisports_football.core.domain.countries import CountriesQueryParams
from apisports_football.core.domain.fixtures import FixturesQueryParams, FixtureStatusType
from apisports_football.core.domain.leagues import LeaguesQueryParams, LeagueTypeParam
from apisports_football.core.domain.teams import TeamsInformationQueryParams
from apisports_football.core.errors import ApiSportsError
from apisports_football.core.observability import setup_logging

app = typer.Typer(no_args_is_help=True, help="Query the API-Football v3 service.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R")


@dataclass
class CLIState:
    client_factory: Callable[[], FootballClient]
    quiet: bool = False


def _maybe_params(model: type[M], **values: Any) -> M | None:
    """Build `model` from the given options, or `None` if none was set."""

    present = {k: v for k, v in values.items() if v is not None and v != []}
    if not present:
        return None
    return model(**present)


def _as_date(value: datetime | None):
    return value.date() if value is not None else None


def _fetch(ctx: typer.Context, call: Callable[[FootballClient], Awaitable[R]]) -> R:
    state: CLIState = ctx.obj

    async def _run() -> R:
        async with state.client_factory() as client:
            return await call(client)

    try:
        return asyncio.run(_run())
    except ApiSportsError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    subscription: Optional[SubscriptionType] = typer.Option(
        None, "--subscription", "-s", help="APISports or RapidAPI (default from settings)."
    ),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the banner."),
) -> None:
    settings = AppSettings()
    if not logging.root.handlers:
        setup_logging(settings.log_level, settings.log_format)

    if ctx.obj is None:
        ctx.obj = CLIState(
            client_factory=lambda: FootballClient.for_subscription(
                subscription, base_url=base_url, settings=settings
            ),
            quiet=quiet,
        )
    if not ctx.obj.quiet and ctx.invoked_subcommand != "doctor":
        print_banner(_console)


@app.command()
def countries(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, help="Exact country name."),
    code: Optional[str] = typer.Option(None, help="Two-letter country code."),
    search: Optional[str] = typer.Option(None, help="Search (3 characters minimum)."),
) -> None:
    """List countries."""

    params = _maybe_params(CountriesQueryParams, name=name, code=code, search=search)
    result = _fetch(ctx, lambda client: client.countries(params))
    _console.print(build_countries_table(result.countries))


@app.command()
def leagues(
    ctx: typer.Context,
    id: Optional[int] = typer.Option(None, "--id"),
    name: Optional[str] = typer.Option(None),
    country: Optional[str] = typer.Option(None),
    code: Optional[str] = typer.Option(None, help="Two-letter country code."),
    season: Optional[int] = typer.Option(None, help="Four-digit season."),
    team: Optional[int] = typer.Option(None),
    type: Optional[LeagueTypeParam] = typer.Option(None, "--type"),
    current: Optional[bool] = typer.Option(None, "--current/--no-current"),
    search: Optional[str] = typer.Option(None),
    last: Optional[int] = typer.Option(None, help="Last N leagues added (max 99)."),
) -> None:
    """List leagues and cups."""

    params = _maybe_params(
        LeaguesQueryParams,
        id=id,
        name=name,
        country=country,
        code=code,
        season=season,
        team=team,
        type=type,
        current=current,
        search=search,
        last=last,
    )
    result = _fetch(ctx, lambda client: client.leagues(params))
    _console.print(build_leagues_table(result.leagues))


@app.command()
def teams(
    ctx: typer.Context,
    id: Optional[int] = typer.Option(None, "--id"),
    name: Optional[str] = typer.Option(None),
    country: Optional[str] = typer.Option(None),
    season: Optional[int] = typer.Option(None),
    search: Optional[str] = typer.Option(None),
    league: Optional[int] = typer.Option(None),
    code: Optional[str] = typer.Option(None, help="Three-letter team code."),
    venue: Optional[int] = typer.Option(None),
) -> None:
    """Show team information."""

    params = _maybe_params(
        TeamsInformationQueryParams,
        id=id,
        name=name,
        country=country,
        season=season,
        search=search,
        league=league,
        code=code,
        venue=venue,
    )
    result = _fetch(ctx, lambda client: client.teams_information(params))
    _console.print(build_teams_table(result.teams))


@app.command()
def fixtures(
    ctx: typer.Context,
    id: Optional[int] = typer.Option(None, "--id"),
    ids: Optional[List[int]] = typer.Option(None, "--ids", help="Repeat for several fixtures."),
    live: bool = typer.Option(False, "--live", help="Only fixtures in play."),
    live_league: Optional[List[int]] = typer.Option(None, "--live-league", help="Repeat to restrict --live."),
    date: Optional[datetime] = typer.Option(None, formats=["%Y-%m-%d"]),
    league: Optional[int] = typer.Option(None),
    season: Optional[int] = typer.Option(None),
    team: Optional[int] = typer.Option(None),
    last: Optional[int] = typer.Option(None),
    next_: Optional[int] = typer.Option(None, "--next"),
    from_: Optional[datetime] = typer.Option(None, "--from", formats=["%Y-%m-%d"]),
    to: Optional[datetime] = typer.Option(None, formats=["%Y-%m-%d"]),
    round: Optional[str] = typer.Option(None),
    status: Optional[FixtureStatusType] = typer.Option(None),
    timezone: Optional[str] = typer.Option(None),
) -> None:
    """List fixtures."""

    params = _maybe_params(
        FixturesQueryParams,
        id=id,
        ids=ids,
        live=live or None,
        live_leagues=live_league,
        date=_as_date(date),
        league=league,
        season=season,
        team=team,
        last=last,
        next=next_,
        from_=_as_date(from_),
        to=_as_date(to),
        round=round,
        status=status,
        timezone=timezone,
    )
    result = _fetch(ctx, lambda client: client.fixtures(params))
    _console.print(build_fixtures_table(result.fixtures))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
