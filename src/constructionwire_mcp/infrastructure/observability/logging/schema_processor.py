"""Structured log schema processor for structlog.

Transforms the flat structlog event_dict into a nested JSON structure with
root fields plus optional ``processing``, ``error``, ``context`` and
``metadata`` blocks.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

from typing import Any

SERVICE_NAME = "constructionwire-mcp"


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, IDs."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": SERVICE_NAME,
        "request_id": event_dict.pop("request_id", None),
        "trace_id": event_dict.pop("trace_id", None),
        "span_id": event_dict.pop("span_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    """Cast a value to float, returning None on failure."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract processing metrics block."""
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
        "retries": event_dict.pop("processing_retries", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract tool/execution context block."""
    component = event_dict.pop("context_component", None)
    tool = event_dict.pop("tool_name", None)
    if component is None and tool is None:
        return None
    return {
        "component": component,
        "tool": tool,
        "progress_token": event_dict.pop("progress_token", None),
    }


def _build_metadata(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract metadata block."""
    source = event_dict.pop("source_system", None)
    tags = event_dict.pop("tags", None)
    if source is None and tags is None:
        return None
    return {
        "source_system": source,
        "tags": tags,
    }


def _inject_otel_ids(event_dict: dict[str, Any]) -> None:
    """Overwrite trace_id and span_id from the current OTel span if recording."""
    try:
        from opentelemetry import trace

        span = trace.get_current_span()
        if span.is_recording():
            ctx = span.get_span_context()
            event_dict["trace_id"] = format(ctx.trace_id, "032x")
            event_dict["span_id"] = format(ctx.span_id, "016x")
    except Exception:  # noqa: BLE001
        pass  # OTel not configured; keep existing values


def schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that reshapes a flat event_dict into the nested log schema."""
    _inject_otel_ids(event_dict)
    result = _build_root_fields(event_dict)

    processing = _build_processing(event_dict)
    if processing is not None:
        result["processing"] = processing

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    metadata = _build_metadata(event_dict)
    if metadata is not None:
        result["metadata"] = metadata

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
