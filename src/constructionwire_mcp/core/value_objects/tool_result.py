from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Normalized tool output: JSON payload wrapped as a single text block."""

    content: list[TextContent] = field(default_factory=list)

    @staticmethod
    def from_json(value: Any) -> "ToolResult":
        return ToolResult(content=[TextContent(text=json.dumps(value, indent=2, default=str))])

    @property
    def text(self) -> str:
        return self.content[0].text if self.content else ""
