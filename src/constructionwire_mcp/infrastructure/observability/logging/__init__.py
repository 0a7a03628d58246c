from constructionwire_mcp.infrastructure.observability.logging.schema_processor import (
    schema_processor,
)

__all__ = ["schema_processor"]
