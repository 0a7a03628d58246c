"""MCP stdio server exposing the ConstructionWire tool catalog.

Protocol concerns only: translating MCP requests into dispatcher calls and
dispatcher results back into MCP content. Cancellation notifications are
handled by the ``mcp`` session, which cancels the handler task; the
dispatcher observes that and records the call as cancelled.
"""

from __future__ import annotations

from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from constructionwire_mcp.core.application.dispatch.tool_call_context import ToolCallContext
from constructionwire_mcp.core.application.dispatch.tool_dispatcher import ToolDispatcher
from constructionwire_mcp.core.application.progress.progress_reporter import ProgressReporter
from constructionwire_mcp.core.value_objects.progress_update import ProgressUpdate
from constructionwire_mcp.infrastructure.configuration.server_settings import ServerSettings
from constructionwire_mcp.infrastructure.observability.logger_factory_service import get_logger


class ConstructionwireMcpServer:
    def __init__(self, dispatcher: ToolDispatcher, settings: ServerSettings) -> None:
        self._dispatcher = dispatcher
        self._settings = settings
        self.server: Server = Server(settings.name, version=settings.version)
        self._register_handlers()

    def _register_handlers(self) -> None:
        @self.server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return self.list_tools()

        # Arguments are validated by the dispatcher so every tool fails the same way.
        @self.server.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
            ctx = self.server.request_context
            progress_token = ctx.meta.progressToken if ctx.meta is not None else None
            return await self.call_tool(
                name,
                arguments or {},
                request_id=str(ctx.request_id),
                progress_token=progress_token,
                session=ctx.session,
            )

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
            for tool in self._dispatcher.get_tool_definitions()
        ]

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any],
        *,
        request_id: str | None = None,
        progress_token: str | int | None = None,
        session: Any = None,
    ) -> list[types.TextContent]:
        reporter = self._progress_reporter(session) if session is not None else None
        context = ToolCallContext(request_id=request_id, progress_token=progress_token)
        result = await self._dispatcher.execute_tool(name, arguments, context=context, reporter=reporter)
        return [types.TextContent(type="text", text=item.text) for item in result.content]

    def cancel(self, request_id: str | int, reason: str = "cancelled") -> bool:
        """Cancel an in-flight call by its MCP request id."""
        return self._dispatcher.tracker.cancel(str(request_id), reason)

    def _progress_reporter(self, session: Any) -> ProgressReporter:
        async def _send(token: str | int, update: ProgressUpdate) -> None:
            await session.send_progress_notification(
                progress_token=token,
                progress=update.progress,
                total=update.total,
                message=update.message,
            )

        return ProgressReporter(_send, timeout=self._settings.progress_timeout)

    async def run(self) -> None:
        """Serve MCP over stdio until the client disconnects."""
        get_logger("McpServer").info(
            "Starting MCP server (stdio transport)",
            tools=len(self._dispatcher.get_tool_definitions()),
            server_version=self._settings.version,
        )
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
