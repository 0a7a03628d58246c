from constructionwire_mcp.core.exceptions.cancellation_error import CancellationError
from constructionwire_mcp.core.exceptions.configuration_error import ConfigurationError
from constructionwire_mcp.core.exceptions.constructionwire_error import ConstructionwireError
from constructionwire_mcp.core.exceptions.transport_error import TransportError
from constructionwire_mcp.core.exceptions.unknown_tool_error import UnknownToolError
from constructionwire_mcp.core.exceptions.validation_error import ValidationError

__all__ = [
    "CancellationError",
    "ConfigurationError",
    "ConstructionwireError",
    "TransportError",
    "UnknownToolError",
    "ValidationError",
]
