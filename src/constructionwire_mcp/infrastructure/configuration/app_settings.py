from __future__ import annotations

from dataclasses import dataclass, field

from constructionwire_mcp.infrastructure.configuration.constructionwire_settings import (
    ConstructionwireSettings,
)
from constructionwire_mcp.infrastructure.configuration.server_settings import ServerSettings


@dataclass(frozen=True)
class Settings:
    """
    Aggregates every settings group.
    Built once at process start and passed down explicitly.
    """

    constructionwire: ConstructionwireSettings = field(default_factory=ConstructionwireSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    @staticmethod
    def load() -> "Settings":
        return Settings(constructionwire=ConstructionwireSettings(), server=ServerSettings())
