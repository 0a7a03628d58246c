from __future__ import annotations

from constructionwire_mcp.core.exceptions.constructionwire_error import ConstructionwireError


class ValidationError(ConstructionwireError):
    """Raised when tool arguments do not satisfy the tool's input schema."""

    def __init__(self, tool_name: str, errors: list[str]) -> None:
        self.tool_name = tool_name
        self.errors = list(errors)
        summary = "; ".join(self.errors) if self.errors else "invalid arguments"
        super().__init__(f"Invalid arguments for {tool_name}: {summary}")
