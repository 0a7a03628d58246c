from constructionwire_mcp.core.application.catalog.tool_catalog import ToolCatalog

__all__ = ["ToolCatalog"]
