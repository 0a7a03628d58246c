from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import string, tool

AUTH_TOOLS = [
    tool(
        "auth_login",
        "Authenticate with ConstructionWire and obtain a session token.",
        "POST",
        "/auth",
        {
            "username": string("ConstructionWire account username or email"),
            "password": string("ConstructionWire account password"),
        },
        ["username", "password"],
    ),
    tool("auth_logout", "End the current ConstructionWire session.", "DELETE", "/auth"),
    tool("auth_details", "Get details about the authenticated account and session.", "GET", "/auth/details"),
]
