import asyncio
import sys

import structlog

from constructionwire_mcp.infrastructure.configuration import Settings, validate_config
from constructionwire_mcp.infrastructure.observability import configure_logging, configure_tracing
from constructionwire_mcp.infrastructure.resolution import build_container

logger = structlog.get_logger()


async def serve(settings: Settings) -> None:
    container = build_container(settings)
    try:
        await container.server.run()
    finally:
        await container.aclose()


def main() -> None:
    """Entry point for the ConstructionWire MCP server."""
    settings = Settings.load()
    configure_logging(settings.server.log_level, settings.server.log_format)
    if settings.server.tracing_enabled:
        configure_tracing(settings.server.name, settings.server.environment)

    result = validate_config(settings)
    if not result.is_valid:
        for error in result.errors:
            logger.error("Invalid configuration", error_type="ConfigurationError", error_details=error)
        sys.exit(1)

    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
