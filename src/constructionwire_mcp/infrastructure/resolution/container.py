"""Composition root: the only place that turns settings into live objects."""

from __future__ import annotations

from dataclasses import dataclass

from constructionwire_mcp.core.application.dispatch.tool_dispatcher import ToolDispatcher
from constructionwire_mcp.core.application.tracking.request_tracker import RequestTracker
from constructionwire_mcp.infrastructure.common.retry.retry_policy import RetryPolicy
from constructionwire_mcp.infrastructure.configuration.app_settings import Settings
from constructionwire_mcp.infrastructure.entrypoints.mcp.mcp_server import ConstructionwireMcpServer
from constructionwire_mcp.infrastructure.observability.lifecycle_event_logger import LifecycleEventLogger
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog import build_constructionwire_catalog
from constructionwire_mcp.infrastructure.tools.constructionwire.constructionwire_http_client import (
    ConstructionwireHttpClient,
)


@dataclass(frozen=True)
class Container:
    http_client: ConstructionwireHttpClient
    dispatcher: ToolDispatcher
    server: ConstructionwireMcpServer

    async def aclose(self) -> None:
        await self.http_client.aclose()


def build_container(settings: Settings) -> Container:
    cw = settings.constructionwire
    http_client = ConstructionwireHttpClient(cw)
    dispatcher = ToolDispatcher(
        catalog=build_constructionwire_catalog(),
        transport=http_client,
        retry_policy=RetryPolicy(
            max_retries=cw.max_retries,
            initial_delay=cw.retry_initial_delay,
            max_delay=cw.retry_max_delay,
        ),
        tracker=RequestTracker(),
        events=LifecycleEventLogger(),
        default_timeout=settings.server.tool_timeout,
    )
    server = ConstructionwireMcpServer(dispatcher, settings.server)
    return Container(http_client=http_client, dispatcher=dispatcher, server=server)
