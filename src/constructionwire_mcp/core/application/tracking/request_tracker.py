"""In-flight registry of tool invocations.

All mutations are synchronous so they stay atomic under asyncio's
cooperative scheduling; no lock is needed as long as nothing here awaits.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from uuid import uuid4

from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle
from constructionwire_mcp.core.application.tracking.invocation_request import InvocationRequest

TIMEOUT_REASON = "timeout"


@dataclass(slots=True)
class _Entry:
    request: InvocationRequest
    timer: asyncio.TimerHandle | None = None


class RequestTracker:
    def __init__(self) -> None:
        self._in_flight: dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._in_flight)

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._in_flight

    def active_ids(self) -> list[str]:
        return list(self._in_flight)

    def get(self, request_id: str) -> InvocationRequest | None:
        entry = self._in_flight.get(request_id)
        return entry.request if entry else None

    def begin(
        self,
        tool_name: str,
        progress_token: str | int | None = None,
        *,
        arguments: Mapping[str, Any] | None = None,
        request_id: str | None = None,
        cancellation: CancellationHandle | None = None,
        timeout: float | None = None,
    ) -> InvocationRequest:
        request_id = request_id or str(uuid4())
        if request_id in self._in_flight:
            raise ValueError(f"Request id already in flight: {request_id}")

        handle = cancellation or CancellationHandle()
        request = InvocationRequest(
            request_id=request_id,
            tool_name=tool_name,
            start_time=time.monotonic(),
            cancellation=handle,
            arguments=MappingProxyType(dict(arguments or {})),
            progress_token=progress_token,
        )
        entry = _Entry(request=request)
        if timeout is not None and timeout > 0:
            loop = asyncio.get_running_loop()
            entry.timer = loop.call_later(timeout, handle.cancel, TIMEOUT_REASON)
        self._in_flight[request_id] = entry
        return request

    def cancel(self, request_id: str, reason: str = "cancelled") -> bool:
        entry = self._in_flight.get(request_id)
        if entry is None:
            return False
        return entry.request.cancellation.cancel(reason)

    def end(self, request_id: str) -> None:
        entry = self._in_flight.pop(request_id, None)
        if entry is None:
            return
        if entry.timer is not None:
            entry.timer.cancel()
        entry.request.cancellation.mark_completed()

    @contextmanager
    def track(
        self,
        tool_name: str,
        progress_token: str | int | None = None,
        **kwargs: Any,
    ) -> Iterator[InvocationRequest]:
        request = self.begin(tool_name, progress_token, **kwargs)
        try:
            yield request
        finally:
            self.end(request.request_id)
