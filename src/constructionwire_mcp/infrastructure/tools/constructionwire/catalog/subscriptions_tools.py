from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import tool

SUBSCRIPTIONS_TOOLS = [
    tool("subscriptions_details", "Get the current account's subscription details.", "GET", "/2.0/subscriptions"),
    tool("subscriptions_usage", "Get API and export usage for the current subscription.", "GET", "/2.0/subscriptions/usage"),
]
