from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    request_id: str
    tool_name: str
    start_time: float
    cancellation: CancellationHandle = field(compare=False)
    arguments: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    progress_token: str | int | None = None
