"""Small builders that keep the tool catalog tables readable."""

from __future__ import annotations

from typing import Any

from constructionwire_mcp.core.value_objects.tool_definition import TOOL_PREFIX, ToolDefinition

PAGE_SIZE_NOTE = "Number of results per page (should not exceed 10)"


def integer(description: str) -> dict[str, Any]:
    return {"type": "integer", "description": description}


def string(description: str, **extra: Any) -> dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def integer_list(description: str) -> dict[str, Any]:
    # A single value is accepted and sent as one query parameter
    return {"type": ["array", "integer"], "items": {"type": "integer"}, "description": description}


def string_list(description: str) -> dict[str, Any]:
    return {"type": ["array", "string"], "items": {"type": "string"}, "description": description}


def pagination() -> dict[str, Any]:
    return {
        "PageNumber": integer("Page number to return, starting at 1"),
        "PageSize": integer(PAGE_SIZE_NOTE),
    }


def sorting() -> dict[str, Any]:
    return {
        "SortBy": string("Field to sort results by"),
        "SortDirection": string("Sort direction", enum=["asc", "desc"]),
    }


def tool(
    operation: str,
    description: str,
    method: str,
    path: str,
    properties: dict[str, Any] | None = None,
    required: list[str] | None = None,
) -> ToolDefinition:
    schema: dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = list(required)
    return ToolDefinition(
        name=f"{TOOL_PREFIX}{operation}",
        description=description,
        method=method,
        path=path,
        input_schema=schema,
    )


def follow_tools(group: str, noun: str) -> list[ToolDefinition]:
    """followings / follow / unfollow share one shape across reports, companies and people."""
    item_id = {"ItemId": integer(f"ID of the {noun} to follow or unfollow")}
    return [
        tool(
            f"{group}_followings",
            f"List the {group} the current user follows.",
            "GET",
            f"/2.0/{group}/followings",
            pagination(),
        ),
        tool(
            f"{group}_follow",
            f"Follow a {noun} to receive updates about it.",
            "POST",
            f"/2.0/{group}/followings",
            item_id,
            ["ItemId"],
        ),
        tool(
            f"{group}_unfollow",
            f"Stop following a {noun}.",
            "DELETE",
            f"/2.0/{group}/followings",
            item_id,
            ["ItemId"],
        ),
    ]
