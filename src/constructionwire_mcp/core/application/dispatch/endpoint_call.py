from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from constructionwire_mcp.core.exceptions.validation_error import ValidationError
from constructionwire_mcp.core.value_objects.tool_definition import ToolDefinition


@dataclass(frozen=True, slots=True)
class EndpointCall:
    method: str
    path: str
    query: dict[str, Any] | None = None
    body: dict[str, Any] | None = None


def bind_arguments(definition: ToolDefinition, arguments: Mapping[str, Any]) -> EndpointCall:
    """Substitute path parameters; the rest go to the query string or the JSON body."""
    remaining = {key: value for key, value in arguments.items() if value is not None}
    path = definition.path
    missing = []
    for param in definition.path_params:
        if param not in remaining:
            missing.append(f"'{param}' is a required property")
            continue
        path = path.replace(f"{{{param}}}", quote(str(remaining.pop(param)), safe=""))
    if missing:
        raise ValidationError(definition.name, missing)

    method = definition.method.upper()
    if definition.sends_body:
        return EndpointCall(method=method, path=path, body=remaining or None)
    return EndpointCall(method=method, path=path, query=remaining or None)
