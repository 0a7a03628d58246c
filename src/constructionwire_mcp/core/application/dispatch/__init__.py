from constructionwire_mcp.core.application.dispatch.argument_validator import ArgumentValidator
from constructionwire_mcp.core.application.dispatch.endpoint_call import EndpointCall, bind_arguments
from constructionwire_mcp.core.application.dispatch.tool_call_context import ToolCallContext
from constructionwire_mcp.core.application.dispatch.tool_dispatcher import ToolDispatcher

__all__ = ["ArgumentValidator", "EndpointCall", "ToolCallContext", "ToolDispatcher", "bind_arguments"]
