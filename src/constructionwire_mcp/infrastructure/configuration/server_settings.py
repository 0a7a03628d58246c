from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from constructionwire_mcp import __version__


class ServerSettings(BaseSettings):
    """Settings for the MCP server process itself."""

    name: str = Field(default="constructionwire-mcp", alias="MCP_SERVER_NAME")
    version: str = Field(default=__version__, alias="MCP_SERVER_VERSION")

    # ── Invocation lifecycle ──
    tool_timeout: float | None = Field(
        default=None,
        alias="MCP_TOOL_TIMEOUT",
        description="Seconds before an invocation is cancelled automatically; unset disables it",
    )
    progress_timeout: float = Field(
        default=5.0,
        alias="MCP_PROGRESS_TIMEOUT",
    )

    # ── Observability ──
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")
    tracing_enabled: bool = Field(
        default=False,
        alias="OTEL_TRACING_ENABLED",
    )
    environment: str = Field(default="local", alias="APP_ENV")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
