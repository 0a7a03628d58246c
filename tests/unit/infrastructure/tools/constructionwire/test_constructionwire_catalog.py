"""Unit tests for the ConstructionWire tool catalog."""

from collections import Counter

import pytest

from constructionwire_mcp.core.application.catalog.tool_catalog import ToolCatalog
from constructionwire_mcp.core.value_objects.tool_definition import ToolDefinition
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog import ALL_TOOLS


def test_catalog_has_75_tools(catalog) -> None:
    assert len(catalog) == 75


def test_names_are_prefixed_and_unique(catalog) -> None:
    names = catalog.names()
    assert all(name.startswith("constructionwire_") for name in names)
    assert len(set(names)) == len(names)


def test_every_tool_has_description_and_object_schema(catalog) -> None:
    for definition in catalog:
        assert definition.description
        assert definition.input_schema["type"] == "object"
        assert isinstance(definition.input_schema["properties"], dict)


def test_required_fields_are_declared_properties(catalog) -> None:
    for definition in catalog:
        assert set(definition.required) <= set(definition.input_schema["properties"]), definition.name


def test_path_parameters_are_required(catalog) -> None:
    for definition in catalog:
        assert set(definition.path_params) <= set(definition.required), definition.name


def test_group_sizes() -> None:
    groups = Counter(d.operation.split("_")[0] for d in ALL_TOOLS)
    assert groups == {
        "auth": 3,
        "reports": 19,
        "companies": 11,
        "people": 8,
        "folders": 8,
        "notes": 5,
        "tasks": 5,
        "searches": 5,
        "common": 6,
        "news": 3,
        "subscriptions": 2,
    }


@pytest.mark.parametrize(
    ("name", "method", "path"),
    [
        ("constructionwire_reports_list", "GET", "/2.0/reports"),
        ("constructionwire_companies_get", "GET", "/2.0/companies/{companyId}"),
        ("constructionwire_folders_update", "PATCH", "/2.0/folders/{folderId}"),
        ("constructionwire_people_unfollow", "DELETE", "/2.0/people/followings"),
        ("constructionwire_auth_login", "POST", "/auth"),
    ],
)
def test_endpoint_bindings(catalog, name: str, method: str, path: str) -> None:
    definition = catalog.get(name)
    assert (definition.method, definition.path) == (method, path)


def test_duplicate_names_rejected() -> None:
    definition = ToolDefinition("constructionwire_x", "X", "GET", "/x")
    with pytest.raises(ValueError, match="Duplicate"):
        ToolCatalog([definition, definition])


def test_definition_rejects_non_object_schema() -> None:
    with pytest.raises(ValueError):
        ToolDefinition("constructionwire_x", "X", "GET", "/x", {"type": "string"})


def test_mcp_tool_shape(catalog) -> None:
    tool = catalog.get("constructionwire_companies_get").to_mcp_tool()
    assert tool["name"] == "constructionwire_companies_get"
    assert tool["inputSchema"]["required"] == ["companyId"]
