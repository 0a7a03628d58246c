from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle


class TransportPort(ABC):
    @abstractmethod
    async def send(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        cancellation: CancellationHandle | None = None,
        operation: str | None = None,
    ) -> Any:
        """Issue one request and return the decoded JSON payload.

        Raises TransportError on network or HTTP failures and
        CancellationError when ``cancellation`` fires mid-flight.
        """
