from __future__ import annotations

from constructionwire_mcp.core.exceptions.constructionwire_error import ConstructionwireError


class UnknownToolError(ConstructionwireError):
    """Raised when an invocation names a tool that is not in the catalog."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
