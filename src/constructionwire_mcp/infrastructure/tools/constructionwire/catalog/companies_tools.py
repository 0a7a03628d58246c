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

_COMPANY_ID = {"companyId": integer("Company ID")}

_COMPANY_FILTERS = {
    **pagination(),
    **sorting(),
    "CompanyId": integer_list("Filter by company IDs"),
    "CompanyName": string("Company name"),
    "City": string("Company city"),
    "State": string_list("Company state abbreviations"),
    "PostalCode": string("Company postal code"),
    "County": string_list("Company counties"),
    "Keyword": string("Full-text keyword search"),
}

COMPANIES_TOOLS = [
    tool("companies_list", "Search companies.", "GET", "/2.0/companies", _COMPANY_FILTERS),
    tool("companies_get", "Get a company by ID.", "GET", "/2.0/companies/{companyId}", _COMPANY_ID, ["companyId"]),
    tool("companies_facets", "Get facet counts for a company search.", "GET", "/2.0/companies/facets", _COMPANY_FILTERS),
    tool(
        "companies_locations",
        "List office locations of a company.",
        "GET",
        "/2.0/companies/{companyId}/locations",
        {**_COMPANY_ID, **pagination()},
        ["companyId"],
    ),
    tool(
        "companies_location",
        "Get one office location of a company.",
        "GET",
        "/2.0/companies/{companyId}/locations/{locationId}",
        {**_COMPANY_ID, "locationId": integer("Location ID")},
        ["companyId", "locationId"],
    ),
    tool(
        "companies_people",
        "List people who work at a company.",
        "GET",
        "/2.0/companies/{companyId}/people",
        {**_COMPANY_ID, **pagination()},
        ["companyId"],
    ),
    tool(
        "companies_projects",
        "List project reports a company is involved in.",
        "GET",
        "/2.0/companies/{companyId}/projects",
        {**_COMPANY_ID, **pagination()},
        ["companyId"],
    ),
    tool(
        "companies_relationships",
        "List companies this company has worked with.",
        "GET",
        "/2.0/companies/{companyId}/relationships",
        {**_COMPANY_ID, **pagination()},
        ["companyId"],
    ),
    *follow_tools("companies", "company"),
]
