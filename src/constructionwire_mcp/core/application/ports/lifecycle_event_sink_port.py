from abc import ABC, abstractmethod

from constructionwire_mcp.core.value_objects.lifecycle_event import LifecycleEvent


class LifecycleEventSinkPort(ABC):
    @abstractmethod
    def emit(self, event: LifecycleEvent) -> None:
        """Record one lifecycle event. Fire-and-forget."""


class NullLifecycleEventSink(LifecycleEventSinkPort):
    def emit(self, event: LifecycleEvent) -> None:
        return None
