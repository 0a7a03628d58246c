"""Lifecycle event sink: structured logs plus Prometheus tool metrics."""

from __future__ import annotations

from typing import Any

import structlog

from constructionwire_mcp.core.application.ports.lifecycle_event_sink_port import LifecycleEventSinkPort
from constructionwire_mcp.core.value_objects.lifecycle_event import LifecycleEvent, LifecyclePhase
from constructionwire_mcp.infrastructure.observability.metrics_service import (
    TOOL_CALL_DURATION_SECONDS,
    TOOL_CALLS_INFLIGHT,
    TOOL_CALLS_TOTAL,
)
from constructionwire_mcp.infrastructure.observability.redaction_service import redact_dict

logger = structlog.get_logger()


class LifecycleEventLogger(LifecycleEventSinkPort):
    _COMPONENT = "ToolDispatcher"

    def emit(self, event: LifecycleEvent) -> None:
        if event.phase is LifecyclePhase.START:
            TOOL_CALLS_INFLIGHT.inc()
            self._log_start(event)
            return

        TOOL_CALLS_INFLIGHT.dec()
        TOOL_CALLS_TOTAL.labels(tool=event.tool_name, outcome=event.phase.value).inc()
        if event.duration_ms is not None:
            TOOL_CALL_DURATION_SECONDS.labels(tool=event.tool_name).observe(event.duration_ms / 1000)

        if event.phase is LifecyclePhase.SUCCESS:
            logger.info("Tool call succeeded", **self._common(event), processing_status="SUCCESS")
        elif event.phase is LifecyclePhase.CANCELLED:
            logger.info(
                "Tool call cancelled",
                **self._common(event),
                processing_status="CANCELLED",
                cancel_reason=event.details.get("reason"),
            )
        else:
            logger.error(
                "Tool call failed",
                **self._common(event),
                processing_status="ERROR",
                error_type=event.details.get("error_type"),
                error_code=event.details.get("status_code"),
                error_details=event.details.get("error_details"),
                tags=["tool-error"],
            )

    def _log_start(self, event: LifecycleEvent) -> None:
        arguments = event.details.get("arguments") or {}
        logger.info(
            "Tool call started",
            **self._common(event),
            arguments=redact_dict(dict(arguments)),
        )

    def _common(self, event: LifecycleEvent) -> dict[str, Any]:
        return {
            "context_component": self._COMPONENT,
            "tool_name": event.tool_name,
            "request_id": event.request_id,
            "processing_duration_ms": event.duration_ms,
        }
