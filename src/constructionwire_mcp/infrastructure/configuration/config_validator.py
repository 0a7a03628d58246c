from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import urlparse

from constructionwire_mcp.core.exceptions.configuration_error import ConfigurationError
from constructionwire_mcp.infrastructure.configuration.app_settings import Settings

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())
_LOG_FORMATS = frozenset({"json", "console"})


@dataclass(frozen=True)
class ConfigValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def ensure_valid(self) -> None:
        if self.errors:
            raise ConfigurationError(self.errors)


def validate_config(settings: Settings) -> ConfigValidationResult:
    """Collect every configuration problem instead of failing on the first one."""
    errors: list[str] = []
    cw = settings.constructionwire

    if not cw.username:
        errors.append("CONSTRUCTIONWIRE_USERNAME environment variable is required for ConstructionWire basic authentication")
    if not cw.password.get_secret_value():
        errors.append("CONSTRUCTIONWIRE_PASSWORD environment variable is required for ConstructionWire basic authentication")

    parsed = urlparse(cw.api_base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        errors.append("CONSTRUCTIONWIRE_API_BASE_URL must be an absolute http(s) URL")

    if cw.max_retries < 0:
        errors.append("CONSTRUCTIONWIRE_MAX_RETRIES must be 0 or greater")
    if cw.retry_initial_delay < 0:
        errors.append("CONSTRUCTIONWIRE_RETRY_INITIAL_DELAY must be 0 or greater")
    if cw.retry_max_delay < cw.retry_initial_delay:
        errors.append("CONSTRUCTIONWIRE_RETRY_MAX_DELAY must be at least CONSTRUCTIONWIRE_RETRY_INITIAL_DELAY")
    if cw.request_timeout <= 0:
        errors.append("CONSTRUCTIONWIRE_REQUEST_TIMEOUT must be greater than 0")

    server = settings.server
    if server.tool_timeout is not None and server.tool_timeout <= 0:
        errors.append("MCP_TOOL_TIMEOUT must be greater than 0 when set")
    if server.progress_timeout <= 0:
        errors.append("MCP_PROGRESS_TIMEOUT must be greater than 0")
    if server.log_level.upper() not in _LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")
    if server.log_format.lower() not in _LOG_FORMATS:
        errors.append("LOG_FORMAT must be 'json' or 'console'")

    return ConfigValidationResult(errors=errors)
