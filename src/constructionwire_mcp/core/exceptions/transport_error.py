from __future__ import annotations

from dataclasses import dataclass

from constructionwire_mcp.core.exceptions.constructionwire_error import ConstructionwireError


@dataclass(eq=False)
class TransportError(ConstructionwireError):
    operation: str
    message: str
    retryable: bool = False
    status_code: int | None = None
    body: str | None = None

    def __str__(self) -> str:
        return f"Failed to execute {self.operation}: {self.message}"
