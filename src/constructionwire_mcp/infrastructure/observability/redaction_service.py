"""Masks ConstructionWire credentials before they reach logs.

Tool arguments (``auth_login`` carries a password) and upstream error bodies
are both logged, so both pass through here first.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

MASK = "[REDACTED]"

# (prefix)(secret): only the secret group is masked
_SECRET_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(\b(?:Basic|Bearer)\s+)([A-Za-z0-9\-._~+/]+=*)",
        r"(https?://[^:/\s@]+:)([^@\s]+)(?=@)",
        r"([\"']?(?:password|token|secret)[\"']?\s*[:=]\s*[\"']?)([^\s\"',}&]+)",
    )
)

_SENSITIVE_KEY = re.compile(r"authorization|password|passwd|token|secret|api[_-]?key", re.IGNORECASE)


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(rf"\1{MASK}", text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, Mapping):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``obj`` with sensitive keys masked and string values scrubbed, recursively."""
    return {
        key: MASK if _SENSITIVE_KEY.search(str(key)) else redact_value(value)
        for key, value in obj.items()
    }
