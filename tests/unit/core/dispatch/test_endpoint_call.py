"""Unit tests for bind_arguments (tool arguments -> REST call)."""

import pytest

from constructionwire_mcp.core.application.dispatch.endpoint_call import bind_arguments
from constructionwire_mcp.core.exceptions.validation_error import ValidationError


def test_get_substitutes_path_and_moves_rest_to_query(catalog) -> None:
    definition = catalog.get("constructionwire_reports_list")
    call = bind_arguments(definition, {"PageSize": 5, "City": "Austin", "State": None})

    assert call.method == "GET"
    assert call.path == "/2.0/reports"
    assert call.query == {"PageSize": 5, "City": "Austin"}
    assert call.body is None


def test_path_parameter_is_consumed(catalog) -> None:
    call = bind_arguments(catalog.get("constructionwire_companies_get"), {"companyId": 55})

    assert call.path == "/2.0/companies/55"
    assert call.query is None


def test_path_parameter_is_url_encoded(catalog) -> None:
    call = bind_arguments(catalog.get("constructionwire_common_counties"), {"stateAbbr": "N/A"})
    assert call.path == "/2.0/common/lists/states/N%2FA/counties"


def test_post_sends_body(catalog) -> None:
    call = bind_arguments(
        catalog.get("constructionwire_folders_add_item"),
        {"folderId": 3, "ItemType": "Report", "ItemId": 99},
    )

    assert call.method == "POST"
    assert call.path == "/2.0/folders/3/items"
    assert call.body == {"ItemType": "Report", "ItemId": 99}
    assert call.query is None


def test_missing_path_parameter_raises(catalog) -> None:
    with pytest.raises(ValidationError, match="reportId"):
        bind_arguments(catalog.get("constructionwire_reports_get"), {})
