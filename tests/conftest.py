from typing import Any

import pytest
from pydantic import SecretStr

from constructionwire_mcp.core.application.catalog.tool_catalog import ToolCatalog
from constructionwire_mcp.core.application.ports.lifecycle_event_sink_port import LifecycleEventSinkPort
from constructionwire_mcp.core.value_objects.lifecycle_event import LifecycleEvent
from constructionwire_mcp.infrastructure.configuration.constructionwire_settings import (
    ConstructionwireSettings,
)
from constructionwire_mcp.infrastructure.tools.constructionwire.catalog import build_constructionwire_catalog

BASE_URL = "https://api.constructionwire.com/v1"


class RecordingEventSink(LifecycleEventSinkPort):
    def __init__(self) -> None:
        self.events: list[LifecycleEvent] = []

    def emit(self, event: LifecycleEvent) -> None:
        self.events.append(event)

    @property
    def phases(self) -> list[str]:
        return [event.phase.value for event in self.events]


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays and returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_cw_settings(**overrides: Any) -> ConstructionwireSettings:
    defaults: dict[str, Any] = {
        "username": "builder@example.com",
        "password": SecretStr("s3cret"),
        "api_base_url": BASE_URL,
        "request_timeout": 5.0,
        "max_retries": 0,
        "_env_file": None,
    }
    defaults.update(overrides)
    return ConstructionwireSettings(**defaults)


@pytest.fixture
def cw_settings() -> ConstructionwireSettings:
    return make_cw_settings()


@pytest.fixture
def catalog() -> ToolCatalog:
    return build_constructionwire_catalog()


@pytest.fixture
def event_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()
