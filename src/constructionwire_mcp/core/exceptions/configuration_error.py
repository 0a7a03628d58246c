from __future__ import annotations

from constructionwire_mcp.core.exceptions.constructionwire_error import ConstructionwireError


class ConfigurationError(ConstructionwireError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))
