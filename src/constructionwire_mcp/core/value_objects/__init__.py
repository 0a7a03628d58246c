from constructionwire_mcp.core.value_objects.lifecycle_event import LifecycleEvent, LifecyclePhase
from constructionwire_mcp.core.value_objects.progress_update import ProgressUpdate
from constructionwire_mcp.core.value_objects.tool_definition import TOOL_PREFIX, ToolDefinition
from constructionwire_mcp.core.value_objects.tool_result import TextContent, ToolResult

__all__ = [
    "LifecycleEvent",
    "LifecyclePhase",
    "ProgressUpdate",
    "TOOL_PREFIX",
    "TextContent",
    "ToolDefinition",
    "ToolResult",
]
