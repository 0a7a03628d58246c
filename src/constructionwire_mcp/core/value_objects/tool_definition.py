from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

TOOL_PREFIX = "constructionwire_"

_PATH_PARAM = re.compile(r"\{(\w+)\}")

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Descriptor binding one tool name to one REST endpoint."""

    name: str
    description: str
    method: str
    path: str
    input_schema: dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ToolDefinition.name must be non-empty")
        if not self.description:
            raise ValueError(f"ToolDefinition.description must be non-empty ({self.name})")
        if self.input_schema.get("type") != "object":
            raise ValueError(f"ToolDefinition.input_schema must be an object schema ({self.name})")

    @property
    def operation(self) -> str:
        return self.name.removeprefix(TOOL_PREFIX)

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(_PATH_PARAM.findall(self.path))

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))

    @property
    def sends_body(self) -> bool:
        return self.method.upper() in _BODY_METHODS

    def to_mcp_tool(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema}
