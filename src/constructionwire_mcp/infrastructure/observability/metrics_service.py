"""Prometheus metrics declarations for the ConstructionWire MCP server.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never dynamic IDs (request ids, report ids).
"""

from prometheus_client import Counter, Gauge, Histogram

# ── Tool invocation metrics ───────────────────────────────────────

TOOL_CALLS_TOTAL = Counter(
    "constructionwire_tool_calls_total",
    "Total completed tool invocations",
    ["tool", "outcome"],
)

TOOL_CALL_DURATION_SECONDS = Histogram(
    "constructionwire_tool_call_duration_seconds",
    "End-to-end tool invocation duration in seconds",
    ["tool"],
)

TOOL_CALLS_INFLIGHT = Gauge(
    "constructionwire_tool_calls_inflight",
    "Currently running tool invocations",
)

# ── Upstream HTTP metrics ─────────────────────────────────────────

HTTP_REQUESTS_TOTAL = Counter(
    "constructionwire_http_requests_total",
    "Total HTTP requests sent to the ConstructionWire API",
    ["method", "status"],
)

HTTP_RETRIES_TOTAL = Counter(
    "constructionwire_http_retries_total",
    "Total retried ConstructionWire API requests",
    ["operation"],
)
