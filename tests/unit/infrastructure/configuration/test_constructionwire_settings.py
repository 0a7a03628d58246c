"""Unit tests for settings loading and validate_config."""

import pytest
from pydantic import SecretStr

from conftest import make_cw_settings
from constructionwire_mcp.core.exceptions.configuration_error import ConfigurationError
from constructionwire_mcp.infrastructure.configuration import (
    DEFAULT_API_BASE_URL,
    ConstructionwireSettings,
    ServerSettings,
    Settings,
    validate_config,
)

_ENV_VARS = (
    "CONSTRUCTIONWIRE_USERNAME",
    "CONSTRUCTIONWIRE_EMAIL",
    "CONSTRUCTIONWIRE_PASSWORD",
    "CONSTRUCTIONWIRE_API_BASE_URL",
    "CONSTRUCTIONWIRE_MAX_RETRIES",
    "MCP_TOOL_TIMEOUT",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _settings(**cw_overrides) -> Settings:
    return Settings(constructionwire=make_cw_settings(**cw_overrides), server=ServerSettings(_env_file=None))


class TestLoading:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONSTRUCTIONWIRE_USERNAME", "env-user")
        monkeypatch.setenv("CONSTRUCTIONWIRE_PASSWORD", "env-pass")
        monkeypatch.setenv("CONSTRUCTIONWIRE_MAX_RETRIES", "5")

        settings = ConstructionwireSettings(_env_file=None)

        assert settings.username == "env-user"
        assert settings.password.get_secret_value() == "env-pass"
        assert settings.max_retries == 5
        assert settings.api_base_url == DEFAULT_API_BASE_URL

    def test_email_is_accepted_as_username(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONSTRUCTIONWIRE_EMAIL", "me@example.com")
        assert ConstructionwireSettings(_env_file=None).username == "me@example.com"

    def test_password_is_masked(self) -> None:
        settings = make_cw_settings(password=SecretStr("hunter2"))
        assert "hunter2" not in repr(settings)

    def test_server_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_TOOL_TIMEOUT", "45")
        server = ServerSettings(_env_file=None)
        assert server.tool_timeout == 45.0
        assert server.log_format == "json"
        assert not server.tracing_enabled


class TestValidateConfig:
    def test_valid_settings(self) -> None:
        result = validate_config(_settings())
        assert result.is_valid
        result.ensure_valid()

    def test_missing_credentials_reported_together(self) -> None:
        result = validate_config(_settings(username="", password=SecretStr("")))

        assert not result.is_valid
        assert result.errors == [
            "CONSTRUCTIONWIRE_USERNAME environment variable is required for ConstructionWire basic authentication",
            "CONSTRUCTIONWIRE_PASSWORD environment variable is required for ConstructionWire basic authentication",
        ]

    def test_ensure_valid_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="CONSTRUCTIONWIRE_PASSWORD"):
            validate_config(_settings(password=SecretStr(""))).ensure_valid()

    @pytest.mark.parametrize(
        ("overrides", "fragment"),
        [
            ({"api_base_url": "api.constructionwire.com"}, "absolute http(s) URL"),
            ({"max_retries": -1}, "MAX_RETRIES"),
            ({"retry_initial_delay": 2.0, "retry_max_delay": 1.0}, "RETRY_MAX_DELAY"),
            ({"request_timeout": 0}, "REQUEST_TIMEOUT"),
        ],
    )
    def test_invalid_values(self, overrides, fragment: str) -> None:
        result = validate_config(_settings(**overrides))
        assert any(fragment in error for error in result.errors)

    def test_invalid_server_values(self) -> None:
        server = ServerSettings(tool_timeout=-1, log_level="LOUD", log_format="xml", _env_file=None)
        result = validate_config(Settings(constructionwire=make_cw_settings(), server=server))

        assert len(result.errors) == 3
