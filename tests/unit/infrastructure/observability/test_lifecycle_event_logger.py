"""Unit tests for LifecycleEventLogger (structured logs + tool metrics)."""

from unittest.mock import patch

from prometheus_client import REGISTRY

from constructionwire_mcp.core.value_objects.lifecycle_event import LifecycleEvent, LifecyclePhase
from constructionwire_mcp.infrastructure.observability.lifecycle_event_logger import LifecycleEventLogger

MODULE = "constructionwire_mcp.infrastructure.observability.lifecycle_event_logger"
TOOL = "constructionwire_notes_list"


def _calls(outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "constructionwire_tool_calls_total", {"tool": TOOL, "outcome": outcome}
    )
    return value or 0.0


def test_start_logs_redacted_arguments() -> None:
    event = LifecycleEvent(
        LifecyclePhase.START, TOOL, "r1", details={"arguments": {"password": "hunter2", "PageSize": 5}}
    )
    with patch(f"{MODULE}.logger") as logger:
        LifecycleEventLogger().emit(event)

    kwargs = logger.info.call_args.kwargs
    assert kwargs["arguments"] == {"password": "[REDACTED]", "PageSize": 5}
    assert kwargs["tool_name"] == TOOL


def test_success_counts_outcome() -> None:
    before = _calls("success")
    with patch(f"{MODULE}.logger"):
        LifecycleEventLogger().emit(LifecycleEvent(LifecyclePhase.SUCCESS, TOOL, "r1", duration_ms=12.0))
    assert _calls("success") == before + 1


def test_error_logged_at_error_level() -> None:
    event = LifecycleEvent(
        LifecyclePhase.ERROR,
        TOOL,
        "r1",
        duration_ms=3.0,
        details={"error_type": "TransportError", "error_details": "boom", "status_code": 500},
    )
    with patch(f"{MODULE}.logger") as logger:
        LifecycleEventLogger().emit(event)

    kwargs = logger.error.call_args.kwargs
    assert kwargs["error_type"] == "TransportError"
    assert kwargs["error_code"] == 500


def test_cancelled_includes_reason() -> None:
    with patch(f"{MODULE}.logger") as logger:
        LifecycleEventLogger().emit(
            LifecycleEvent(LifecyclePhase.CANCELLED, TOOL, "r1", duration_ms=1.0, details={"reason": "timeout"})
        )
    assert logger.info.call_args.kwargs["cancel_reason"] == "timeout"
