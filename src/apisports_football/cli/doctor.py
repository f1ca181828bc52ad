"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from apisports_football.adapters.http_client import build_async_client
from apisports_football.core.config import (
    SUBSCRIPTION_PROFILES,
    AppSettings,
    ClientConfig,
    SubscriptionType,
    write_user_env_vars,
)
from apisports_football.core.errors import ApiSportsError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(config: ClientConfig) -> tuple[bool, str]:
    try:
        async with build_async_client(config) as client:
            response = await client.get(f"{config.base_url}/status")
        return True, f"HTTP {response.status_code}"
    except (ApiSportsError, httpx.HTTPError) as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    config = ClientConfig.for_subscription(settings=settings)

    table = Table(title="apisports-football Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Subscription", "OK", config.subscription.value)
    table.add_row("Base URL", "OK", config.base_url)
    if config.api_key:
        table.add_row("API key", "OK", f"read from {config.api_key_env_var}")
    else:
        table.add_row("API key", "MISSING", f"set {config.api_key_env_var} or run `doctor setup-key`")

    ok_http, detail_http = asyncio.run(_check_http(config))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup-key")
def setup_key() -> None:
    """Interactive credential setup (stored in the user config .env)."""

    raw = typer.prompt(
        "Subscription (APISports/RapidAPI)",
        default=SubscriptionType.API_SPORTS.value,
        show_default=True,
    ).strip()
    try:
        subscription = SubscriptionType(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"unknown subscription: {raw}") from exc

    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    profile = SUBSCRIPTION_PROFILES[subscription]
    env_path = write_user_env_vars(
        {
            "APISPORTS_FOOTBALL_SUBSCRIPTION": subscription.value,
            profile.api_key_env_var: api_key,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
