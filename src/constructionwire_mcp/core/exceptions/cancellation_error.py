from __future__ import annotations

from constructionwire_mcp.core.exceptions.constructionwire_error import ConstructionwireError


class CancellationError(ConstructionwireError):
    """Raised when a request's cancellation handle is observed as cancelled.

    ``reason`` distinguishes explicit cancellation from timeouts for logging;
    the message is the same either way.
    """

    MESSAGE = "Request was cancelled"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(self.MESSAGE)
        self.reason = reason
