"""Configuration: tests for subscription profiles, settings and user .env handling.

Tests cover:
    - Each subscription resolves its base URL, key variable and header
    - Base URL overrides (argument beats settings) and trailing slash trimming
    - The credential is read once from settings
    - write_user_env_vars merges into an existing file
"""

import pytest

from apisports_football.core.config import (
    AppSettings,
    ClientConfig,
    SubscriptionType,
    write_user_env_vars,
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (
        "API_SPORTS_KEY",
        "RAPID_API_KEY",
        "APISPORTS_FOOTBALL_SUBSCRIPTION",
        "APISPORTS_FOOTBALL_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def _settings(**values) -> AppSettings:
    # env_file is resolved at import time; _env_file=None keeps every .env out.
    return AppSettings(_env_file=None, **values)


def test_api_sports_profile(clean_env):
    config = ClientConfig.for_subscription(
        SubscriptionType.API_SPORTS, settings=_settings(API_SPORTS_KEY="abc")
    )
    assert config.base_url == "https://v3.football.api-sports.io"
    assert config.api_key_env_var == "API_SPORTS_KEY"
    assert config.api_key_header == "x-apisports-key"
    assert config.api_key == "abc"


def test_rapid_api_profile(clean_env):
    config = ClientConfig.for_subscription("RapidAPI", settings=_settings(RAPID_API_KEY="xyz"))
    assert config.subscription is SubscriptionType.RAPID_API
    assert config.base_url == "https://api-football-v1.p.rapidapi.com/v3"
    assert config.api_key_header == "x-rapidapi-key"
    assert config.api_key == "xyz"


def test_subscription_defaults_from_settings(clean_env, monkeypatch):
    monkeypatch.setenv("APISPORTS_FOOTBALL_SUBSCRIPTION", "RapidAPI")
    config = ClientConfig.for_subscription(settings=_settings())
    assert config.subscription is SubscriptionType.RAPID_API


def test_key_of_the_other_subscription_is_not_used(clean_env):
    config = ClientConfig.for_subscription(
        SubscriptionType.RAPID_API, settings=_settings(API_SPORTS_KEY="abc")
    )
    assert config.api_key == ""


def test_credentials_read_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("API_SPORTS_KEY", "from-env")
    config = ClientConfig.for_subscription(SubscriptionType.API_SPORTS, settings=_settings())
    assert config.api_key == "from-env"


def test_base_url_override_and_trailing_slash(clean_env):
    settings = _settings(base_url="http://settings.local/")
    assert ClientConfig.for_subscription(settings=settings).base_url == "http://settings.local"

    config = ClientConfig.for_subscription(base_url="http://arg.local/v3/", settings=settings)
    assert config.base_url == "http://arg.local/v3"


def test_with_base_url_returns_copy(clean_env):
    config = ClientConfig.for_subscription(settings=_settings())
    other = config.with_base_url("http://127.0.0.1:8080/")
    assert other.base_url == "http://127.0.0.1:8080"
    assert config.base_url == "https://v3.football.api-sports.io"


def test_describe_hides_the_key(clean_env):
    config = ClientConfig.for_subscription(settings=_settings(API_SPORTS_KEY="secret"))
    assert config.describe() == (
        "Client [Type = APISports, BasePath = https://v3.football.api-sports.io, "
        "ApiKeyEnv = API_SPORTS_KEY]"
    )
    assert "secret" not in repr(config)


def test_unknown_subscription_is_rejected(clean_env):
    with pytest.raises(ValueError):
        ClientConfig.for_subscription("Premium", settings=_settings())


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "apisports" / ".env"
    write_user_env_vars({"API_SPORTS_KEY": "one"}, env_path=env_path)
    write_user_env_vars({"APISPORTS_FOOTBALL_SUBSCRIPTION": "APISports"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    # Plain string order: "APIS..." sorts before "API_..." (S < _).
    assert lines[1:] == ["APISPORTS_FOOTBALL_SUBSCRIPTION=APISports", "API_SPORTS_KEY=one"]
