from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProgressUpdate:
    progress: float
    total: float | None = None
    message: str | None = None
