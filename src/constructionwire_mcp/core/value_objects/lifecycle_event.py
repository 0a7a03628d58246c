from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LifecyclePhase(str, Enum):
    START = "start"
    SUCCESS = "success"
    ERROR = "error"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class LifecycleEvent:
    phase: LifecyclePhase
    tool_name: str
    request_id: str
    duration_ms: float | None = None
    details: dict[str, Any] = field(default_factory=dict)
