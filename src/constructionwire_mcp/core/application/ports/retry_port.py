from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TypeVar

from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle

_T = TypeVar("_T")


class RetryPort(ABC):
    @abstractmethod
    async def run(
        self,
        fn: Callable[[], Awaitable[_T]],
        cancellation: CancellationHandle | None = None,
    ) -> _T:
        """Run ``fn`` with retries; re-raise the last real error on exhaustion."""
