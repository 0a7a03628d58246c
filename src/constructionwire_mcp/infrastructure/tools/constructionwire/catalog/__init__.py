from constructionwire_mcp.core.application.catalog.tool_catalog import ToolCatalog
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.auth_tools import AUTH_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.common_tools import COMMON_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.companies_tools import COMPANIES_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.folders_tools import FOLDERS_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.news_tools import NEWS_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.notes_tools import NOTES_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.people_tools import PEOPLE_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.reports_tools import REPORTS_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.searches_tools import SEARCHES_TOOLS
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.subscriptions_tools import (
    SUBSCRIPTIONS_TOOLS,
)
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.tasks_tools import TASKS_TOOLS

ALL_TOOLS = [
    *AUTH_TOOLS,
    *REPORTS_TOOLS,
    *COMPANIES_TOOLS,
    *PEOPLE_TOOLS,
    *FOLDERS_TOOLS,
    *NOTES_TOOLS,
    *TASKS_TOOLS,
    *SEARCHES_TOOLS,
    *COMMON_TOOLS,
    *NEWS_TOOLS,
    *SUBSCRIPTIONS_TOOLS,
]


def build_constructionwire_catalog() -> ToolCatalog:
    return ToolCatalog(ALL_TOOLS)


__all__ = ["ALL_TOOLS", "build_constructionwire_catalog"]
