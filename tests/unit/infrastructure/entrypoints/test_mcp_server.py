"""Unit tests for ConstructionwireMcpServer (no stdio, fake session)."""

import asyncio
from unittest.mock import AsyncMock

import mcp.types as types
import pytest

from constructionwire_mcp.core.application.dispatch.tool_dispatcher import ToolDispatcher
from constructionwire_mcp.core.application.ports.transport_port import TransportPort
from constructionwire_mcp.core.exceptions.cancellation_error import CancellationError
from constructionwire_mcp.core.exceptions.unknown_tool_error import UnknownToolError
from constructionwire_mcp.infrastructure.common.retry.retry_policy import RetryPolicy
from constructionwire_mcp.infrastructure.configuration.server_settings import ServerSettings
from constructionwire_mcp.infrastructure.entrypoints.mcp.mcp_server import ConstructionwireMcpServer


class StubTransport(TransportPort):
    def __init__(self, payload=None, block: bool = False) -> None:
        self.payload = payload if payload is not None else {"reports": [{"id": 1}]}
        self.block = block

    async def send(self, method, path, *, query=None, body=None, headers=None, cancellation=None, operation=None):
        if self.block:
            return await cancellation.guard(asyncio.sleep(10))
        return self.payload


def _server(catalog, transport: TransportPort | None = None) -> ConstructionwireMcpServer:
    dispatcher = ToolDispatcher(catalog, transport or StubTransport(), RetryPolicy(max_retries=0))
    return ConstructionwireMcpServer(dispatcher, ServerSettings(_env_file=None))


def test_list_tools_returns_mcp_tools(catalog) -> None:
    tools = _server(catalog).list_tools()

    assert len(tools) == 75
    assert all(isinstance(tool, types.Tool) for tool in tools)
    assert tools[0].inputSchema["type"] == "object"


@pytest.mark.asyncio
async def test_call_tool_returns_text_content_and_progress(catalog) -> None:
    session = AsyncMock()
    server = _server(catalog)

    content = await server.call_tool(
        "constructionwire_reports_list",
        {"PageSize": 1},
        request_id="7",
        progress_token="tok",
        session=session,
    )

    assert len(content) == 1
    assert content[0].type == "text"
    assert '"id": 1' in content[0].text
    progress = [call.kwargs["progress"] for call in session.send_progress_notification.await_args_list]
    assert progress == [0, 100]
    assert session.send_progress_notification.await_args_list[0].kwargs["progress_token"] == "tok"


@pytest.mark.asyncio
async def test_call_tool_unknown_name(catalog) -> None:
    with pytest.raises(UnknownToolError):
        await _server(catalog).call_tool("constructionwire_missing", {})


@pytest.mark.asyncio
async def test_cancel_by_request_id(catalog) -> None:
    server = _server(catalog, StubTransport(block=True))
    task = asyncio.create_task(server.call_tool("constructionwire_reports_list", {}, request_id="42"))
    for _ in range(100):
        if "42" in server._dispatcher.tracker:
            break
        await asyncio.sleep(0)

    assert server.cancel(42) is True
    with pytest.raises(CancellationError):
        await task
    assert server.cancel(42) is False
