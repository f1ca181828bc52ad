"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Builders return Rich renderables, so tests and commands share them.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from apisports_football.core.domain.countries import Country
from apisports_football.core.domain.fixtures import Fixture, FixtureGoals
from apisports_football.core.domain.leagues import League
from apisports_football.core.domain.teams import TeamInformation
from apisports_football.core.errors import ApiSportsError


def print_banner(console: Console) -> None:
    title = Text("apisports-football", style="bold cyan")
    subtitle = Text("API-Football v3 • countries • leagues • teams • fixtures", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_countries_table(countries: list[Country]) -> Table:
    table = Table(title=f"Countries ({len(countries)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Code", style="white")
    table.add_column("Flag", style="magenta")
    for country in countries:
        table.add_row(country.name, country.code or "-", country.flag or "-")
    return table


def build_leagues_table(leagues: list[League]) -> Table:
    table = Table(title=f"Leagues ({len(leagues)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Type", style="green")
    table.add_column("Country", style="white")
    table.add_column("Current season", style="magenta")
    for item in leagues:
        current = next((s for s in item.seasons if s.current), None)
        season = f"{current.year} ({current.start} → {current.end})" if current else "-"
        table.add_row(str(item.league.id), item.league.name, item.league.type, item.country.name, season)
    return table


def build_teams_table(teams: list[TeamInformation]) -> Table:
    table = Table(title=f"Teams ({len(teams)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Code", style="white")
    table.add_column("Country", style="white")
    table.add_column("Founded", style="green")
    table.add_column("Venue", style="magenta")
    for info in teams:
        team = info.team
        table.add_row(
            str(team.id),
            team.name,
            team.code or "-",
            team.country or "-",
            str(team.founded) if team.founded is not None else "-",
            info.venue.name or "-",
        )
    return table


def _score(goals: FixtureGoals) -> str:
    if goals.home is None or goals.away is None:
        return "-"
    return f"{goals.home} - {goals.away}"


def build_fixtures_table(fixtures: list[Fixture]) -> Table:
    table = Table(title=f"Fixtures ({len(fixtures)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Date", style="white")
    table.add_column("League", style="white")
    table.add_column("Home", style="green")
    table.add_column("Score", style="bold")
    table.add_column("Away", style="green")
    table.add_column("Status", style="magenta")
    for item in fixtures:
        table.add_row(
            str(item.fixture.id),
            item.fixture.date.strftime("%Y-%m-%d %H:%M"),
            item.league.name,
            item.teams.home.name,
            _score(item.goals),
            item.teams.away.name,
            item.fixture.status.short,
        )
    return table


def build_error_panel(exc: ApiSportsError) -> Panel:
    body = Text()
    body.append(f"{exc.message}\n", style="red")
    body.append(f"\ncode: {exc.code}  category: {exc.category.value}", style="dim")
    return Panel(body, title=Text("Request failed", style="bold red"), border_style="red")
