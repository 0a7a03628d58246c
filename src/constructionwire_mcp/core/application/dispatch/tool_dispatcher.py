"""Single entry point that turns a tool invocation into one retried API call.

Per invocation the dispatcher walks
``received -> validated -> (cancelled-early | executing) -> (succeeded | failed | cancelled)``.
Errors always reach the caller unmodified; the cancelled/failed split only
changes which lifecycle event is emitted.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import Any

from constructionwire_mcp.core.application.catalog.tool_catalog import ToolCatalog
from constructionwire_mcp.core.application.dispatch.argument_validator import ArgumentValidator
from constructionwire_mcp.core.application.dispatch.endpoint_call import bind_arguments
from constructionwire_mcp.core.application.dispatch.tool_call_context import ToolCallContext
from constructionwire_mcp.core.application.ports.lifecycle_event_sink_port import (
    LifecycleEventSinkPort,
    NullLifecycleEventSink,
)
from constructionwire_mcp.core.application.ports.retry_port import RetryPort
from constructionwire_mcp.core.application.ports.transport_port import TransportPort
from constructionwire_mcp.core.application.progress.progress_reporter import (
    ProgressCallback,
    ProgressReporter,
)
from constructionwire_mcp.core.application.tracking.invocation_request import InvocationRequest
from constructionwire_mcp.core.application.tracking.request_tracker import RequestTracker
from constructionwire_mcp.core.exceptions.cancellation_error import CancellationError
from constructionwire_mcp.core.exceptions.transport_error import TransportError
from constructionwire_mcp.core.exceptions.unknown_tool_error import UnknownToolError
from constructionwire_mcp.core.value_objects.lifecycle_event import LifecycleEvent, LifecyclePhase
from constructionwire_mcp.core.value_objects.progress_update import ProgressUpdate
from constructionwire_mcp.core.value_objects.tool_definition import ToolDefinition
from constructionwire_mcp.core.value_objects.tool_result import ToolResult

logger = logging.getLogger(__name__)

CLIENT_CANCEL_REASON = "client"


class ToolDispatcher:
    def __init__(
        self,
        catalog: ToolCatalog,
        transport: TransportPort,
        retry_policy: RetryPort,
        tracker: RequestTracker | None = None,
        events: LifecycleEventSinkPort | None = None,
        default_timeout: float | None = None,
        validator: ArgumentValidator | None = None,
    ) -> None:
        self._catalog = catalog
        self._transport = transport
        self._retry_policy = retry_policy
        self._tracker = tracker or RequestTracker()
        self._events = events or NullLifecycleEventSink()
        self._default_timeout = default_timeout
        self._validator = validator or ArgumentValidator()

    @property
    def tracker(self) -> RequestTracker:
        return self._tracker

    def can_handle(self, name: str) -> bool:
        return name in self._catalog

    def get_tool_definitions(self) -> list[dict[str, Any]]:
        return [definition.to_mcp_tool() for definition in self._catalog]

    async def execute_tool(
        self,
        name: str,
        arguments: Mapping[str, Any] | None = None,
        context: ToolCallContext | None = None,
        reporter: ProgressReporter | None = None,
    ) -> ToolResult:
        definition = self._catalog.get(name)
        if definition is None:
            logger.warning("[Dispatcher] Rejected unknown tool %r", name)
            raise UnknownToolError(name)

        context = context or ToolCallContext()
        timeout = context.timeout if context.timeout is not None else self._default_timeout
        with self._tracker.track(
            name,
            context.progress_token,
            arguments=arguments,
            request_id=context.request_id,
            cancellation=context.cancellation,
            timeout=timeout,
        ) as request:
            return await self._execute(definition, request, reporter)

    async def _execute(
        self,
        definition: ToolDefinition,
        request: InvocationRequest,
        reporter: ProgressReporter | None,
    ) -> ToolResult:
        self._emit(LifecyclePhase.START, request, arguments=dict(request.arguments))
        try:
            # Fast path: no round-trip for requests cancelled before they started.
            request.cancellation.raise_if_cancelled()
            self._validator.validate(definition, request.arguments)
            call = bind_arguments(definition, request.arguments)

            progress = self._progress_callback(request, reporter)
            if progress is not None:
                await progress(ProgressUpdate(progress=0, total=100, message=f"Starting {definition.name}"))

            payload = await self._retry_policy.run(
                lambda: self._transport.send(
                    call.method,
                    call.path,
                    query=call.query,
                    body=call.body,
                    cancellation=request.cancellation,
                    operation=definition.operation,
                ),
                cancellation=request.cancellation,
            )
            result = ToolResult.from_json(payload)

            if progress is not None:
                await progress(ProgressUpdate(progress=100, total=100, message=f"Completed {definition.name}"))
        except CancellationError as exc:
            self._emit(LifecyclePhase.CANCELLED, request, reason=exc.reason)
            raise
        except asyncio.CancelledError:
            request.cancellation.cancel(CLIENT_CANCEL_REASON)
            self._emit(LifecyclePhase.CANCELLED, request, reason=CLIENT_CANCEL_REASON)
            raise
        except Exception as exc:
            self._emit(
                LifecyclePhase.ERROR,
                request,
                error_type=type(exc).__name__,
                error_details=str(exc),
                status_code=exc.status_code if isinstance(exc, TransportError) else None,
            )
            raise

        self._emit(LifecyclePhase.SUCCESS, request)
        return result

    @staticmethod
    def _progress_callback(
        request: InvocationRequest,
        reporter: ProgressReporter | None,
    ) -> ProgressCallback | None:
        if reporter is None or request.progress_token is None:
            return None
        return reporter.create_progress_callback(request.progress_token)

    def _emit(self, phase: LifecyclePhase, request: InvocationRequest, **details: Any) -> None:
        duration_ms = None
        if phase is not LifecyclePhase.START:
            duration_ms = round((time.monotonic() - request.start_time) * 1000, 2)
        event = LifecycleEvent(
            phase=phase,
            tool_name=request.tool_name,
            request_id=request.request_id,
            duration_ms=duration_ms,
            details={key: value for key, value in details.items() if value is not None},
        )
        try:
            self._events.emit(event)
        except Exception:  # noqa: BLE001
            logger.exception("[Dispatcher] Lifecycle event sink failed for %s", request.tool_name)
