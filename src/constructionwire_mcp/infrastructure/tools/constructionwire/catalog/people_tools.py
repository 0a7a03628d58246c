from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    follow_tools,
    integer,
    integer_list,
    pagination,
    sorting,
    string,
    string_list,
    tool,
)

_NAME_ID = {"nameId": integer("Person (name) ID")}

_PEOPLE_FILTERS = {
    **pagination(),
    **sorting(),
    "NameId": integer_list("Filter by person IDs"),
    "FirstName": string("First name"),
    "LastName": string("Last name"),
    "CompanyName": string("Employer company name"),
    "City": string("City"),
    "State": string_list("State abbreviations"),
    "Keyword": string("Full-text keyword search"),
}

PEOPLE_TOOLS = [
    tool("people_list", "Search people.", "GET", "/2.0/people", _PEOPLE_FILTERS),
    tool("people_get", "Get a person by ID.", "GET", "/2.0/people/{nameId}", _NAME_ID, ["nameId"]),
    tool("people_facets", "Get facet counts for a people search.", "GET", "/2.0/people/facets", _PEOPLE_FILTERS),
    tool(
        "people_projects",
        "List project reports a person is involved in.",
        "GET",
        "/2.0/people/{nameId}/projects",
        {**_NAME_ID, **pagination()},
        ["nameId"],
    ),
    tool(
        "people_relationships",
        "List people this person has worked with.",
        "GET",
        "/2.0/people/{nameId}/relationships",
        {**_NAME_ID, **pagination()},
        ["nameId"],
    ),
    *follow_tools("people", "person"),
]
