from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from constructionwire_mcp.core.value_objects.tool_definition import ToolDefinition


class ToolCatalog:
    """Read-only name -> ToolDefinition lookup, built once at startup."""

    def __init__(self, definitions: Iterable[ToolDefinition]) -> None:
        by_name: dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in by_name:
                raise ValueError(f"Duplicate tool name: {definition.name}")
            by_name[definition.name] = definition
        self._by_name = MappingProxyType(by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> ToolDefinition | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return list(self._by_name)
