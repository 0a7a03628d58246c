from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import string, tool

COMMON_TOOLS = [
    tool("common_lists", "List the available lookup lists (stages, types, building uses...).", "GET", "/2.0/common/lists"),
    tool(
        "common_list",
        "Get the values of one lookup list.",
        "GET",
        "/2.0/common/lists/{listId}",
        {"listId": string("Lookup list identifier")},
        ["listId"],
    ),
    tool("common_states", "List states and their abbreviations.", "GET", "/2.0/common/lists/states"),
    tool(
        "common_counties",
        "List the counties of a state.",
        "GET",
        "/2.0/common/lists/states/{stateAbbr}/counties",
        {"stateAbbr": string("Two-letter state abbreviation")},
        ["stateAbbr"],
    ),
    tool("common_countries", "List countries.", "GET", "/2.0/common/lists/countries"),
    tool("common_regions", "List geographic regions.", "GET", "/2.0/common/lists/regions"),
]
