from constructionwire_mcp.core.application.ports.lifecycle_event_sink_port import (
    LifecycleEventSinkPort,
    NullLifecycleEventSink,
)
from constructionwire_mcp.core.application.ports.retry_port import RetryPort
from constructionwire_mcp.core.application.ports.transport_port import TransportPort

__all__ = ["LifecycleEventSinkPort", "NullLifecycleEventSink", "RetryPort", "TransportPort"]
