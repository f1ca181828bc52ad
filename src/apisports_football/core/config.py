"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Resolves the subscription-specific base URL, credential variable and header
  once, into an immutable `ClientConfig` that the transport and the request
  builder share for the lifetime of a client.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SubscriptionType(str, Enum):
    """How the API-Football account was purchased."""

    API_SPORTS = "APISports"
    RAPID_API = "RapidAPI"


@dataclass(frozen=True)
class SubscriptionProfile:
    base_url: str
    api_key_env_var: str
    api_key_header: str


SUBSCRIPTION_PROFILES: dict[SubscriptionType, SubscriptionProfile] = {
    SubscriptionType.API_SPORTS: SubscriptionProfile(
        base_url="https://v3.football.api-sports.io",
        api_key_env_var="API_SPORTS_KEY",
        api_key_header="x-apisports-key",
    ),
    SubscriptionType.RAPID_API: SubscriptionProfile(
        base_url="https://api-football-v1.p.rapidapi.com/v3",
        api_key_env_var="RAPID_API_KEY",
        api_key_header="x-rapidapi-key",
    ),
}


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "apisports-football"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "apisports-football"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "apisports-football"
    return Path.home() / ".config" / "apisports-football"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# apisports-football user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Environment-driven settings.

    The two credentials keep their historical, subscription-specific variable
    names (`API_SPORTS_KEY`, `RAPID_API_KEY`); everything else uses the
    `APISPORTS_FOOTBALL_` prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="APISPORTS_FOOTBALL_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    subscription: SubscriptionType = Field(
        default=SubscriptionType.API_SPORTS,
        description="Subscription channel: APISports or RapidAPI.",
    )
    base_url: str | None = Field(
        default=None,
        min_length=1,
        description="Overrides the subscription base URL (mock servers, proxies).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    api_sports_key: str | None = Field(
        default=None,
        validation_alias="API_SPORTS_KEY",
        description="Credential for the API-Sports subscription.",
    )
    rapid_api_key: str | None = Field(
        default=None,
        validation_alias="RAPID_API_KEY",
        description="Credential for the RapidAPI subscription.",
    )
    log_level: str = Field(default="INFO", min_length=1)
    log_format: str = Field(default="text", pattern="^(text|json)$")

    def api_key_for(self, subscription: SubscriptionType) -> str | None:
        if subscription is SubscriptionType.RAPID_API:
            return self.rapid_api_key
        return self.api_sports_key


@dataclass(frozen=True)
class ClientConfig:
    """Everything a client needs to talk to one subscription endpoint."""

    subscription: SubscriptionType
    base_url: str
    api_key_env_var: str
    api_key_header: str
    api_key: str = field(default="", repr=False)
    timeout_seconds: float = 30.0

    @classmethod
    def for_subscription(
        cls,
        subscription: SubscriptionType | str | None = None,
        *,
        base_url: str | None = None,
        settings: AppSettings | None = None,
    ) -> ClientConfig:
        """Resolve the config, reading the credential exactly once."""

        settings = settings or AppSettings()
        sub = SubscriptionType(subscription) if subscription is not None else settings.subscription
        profile = SUBSCRIPTION_PROFILES[sub]
        url = base_url or settings.base_url or profile.base_url
        return cls(
            subscription=sub,
            base_url=url.rstrip("/"),
            api_key_env_var=profile.api_key_env_var,
            api_key_header=profile.api_key_header,
            api_key=(settings.api_key_for(sub) or "").strip(),
            timeout_seconds=settings.http_timeout_seconds,
        )

    def with_base_url(self, url: str) -> ClientConfig:
        return replace(self, base_url=url.rstrip("/"))

    def describe(self) -> str:
        return (
            f"Client [Type = {self.subscription.value}, BasePath = {self.base_url}, "
            f"ApiKeyEnv = {self.api_key_env_var}]"
        )
