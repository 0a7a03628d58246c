from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    integer,
    pagination,
    string,
    tool,
)

_SEARCH_ID = {"searchId": integer("Saved search ID")}

SEARCHES_TOOLS = [
    tool("searches_list", "List the current user's saved searches.", "GET", "/2.0/searches", pagination()),
    tool("searches_get", "Get a saved search by ID.", "GET", "/2.0/searches/{searchId}", _SEARCH_ID, ["searchId"]),
    tool(
        "searches_create",
        "Save a search so it can be re-run later.",
        "POST",
        "/2.0/searches",
        {
            "Name": string("Saved search name"),
            "SearchType": string("Kind of search", enum=["Report", "Company", "Person"]),
            "Criteria": {"type": "object", "description": "Filter criteria, same fields as the matching list tool"},
        },
        ["Name", "SearchType"],
    ),
    tool(
        "searches_run",
        "Run a saved search and return its results.",
        "GET",
        "/2.0/searches/{searchId}/results",
        {**_SEARCH_ID, **pagination()},
        ["searchId"],
    ),
    tool("searches_delete", "Delete a saved search.", "DELETE", "/2.0/searches/{searchId}", _SEARCH_ID, ["searchId"]),
]
