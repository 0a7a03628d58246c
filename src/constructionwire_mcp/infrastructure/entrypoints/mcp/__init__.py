from .mcp_server import ConstructionwireMcpServer

__all__ = ["ConstructionwireMcpServer"]
