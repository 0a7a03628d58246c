from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    integer,
    pagination,
    string,
    tool,
)

NEWS_TOOLS = [
    tool(
        "news_list",
        "List construction industry news entries.",
        "GET",
        "/2.0/news",
        {**pagination(), "Category": string("News category"), "Keyword": string("Full-text keyword search")},
    ),
    tool("news_get", "Get a news entry by ID.", "GET", "/2.0/news/{entryId}", {"entryId": integer("News entry ID")}, ["entryId"]),
    tool("news_categories", "List news categories.", "GET", "/2.0/news/categories"),
]
