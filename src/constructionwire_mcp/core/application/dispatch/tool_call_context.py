from __future__ import annotations

from dataclasses import dataclass

from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle


@dataclass(frozen=True, slots=True)
class ToolCallContext:
    """Optional per-call context supplied by the protocol layer."""

    request_id: str | None = None
    cancellation: CancellationHandle | None = None
    progress_token: str | int | None = None
    timeout: float | None = None
