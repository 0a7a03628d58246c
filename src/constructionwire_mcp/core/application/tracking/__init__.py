from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle
from constructionwire_mcp.core.application.tracking.invocation_request import InvocationRequest
from constructionwire_mcp.core.application.tracking.request_tracker import TIMEOUT_REASON, RequestTracker

__all__ = ["CancellationHandle", "InvocationRequest", "RequestTracker", "TIMEOUT_REASON"]
