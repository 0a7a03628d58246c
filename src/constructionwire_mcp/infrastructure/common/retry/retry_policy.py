from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from constructionwire_mcp.core.application.ports.retry_port import RetryPort
from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle
from constructionwire_mcp.core.exceptions.cancellation_error import CancellationError
from constructionwire_mcp.core.exceptions.transport_error import TransportError
from constructionwire_mcp.infrastructure.observability.metrics_service import HTTP_RETRIES_TOTAL

_T = TypeVar("_T")

logger = structlog.get_logger()

Sleep = Callable[[float], Awaitable[None]]


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, TransportError) and exc.retryable


@dataclass(frozen=True)
class RetryState:
    attempt_number: int
    last_error: BaseException | None
    next_delay: float


@dataclass(frozen=True)
class RetryPolicy(RetryPort):
    max_retries: int = 3
    initial_delay: float = 0.5
    max_delay: float = 8.0
    sleep: Sleep | None = None  # Injected by tests; cancellation is still checked after it returns
    on_retry: Callable[[RetryState], None] | None = None

    async def run(
        self,
        fn: Callable[[], Awaitable[_T]],
        cancellation: CancellationHandle | None = None,
    ) -> _T:
        async def _attempt() -> _T:
            if cancellation is not None:
                cancellation.raise_if_cancelled()
            return await fn()

        try:
            return await self._retrying(cancellation)(_attempt)
        except RetryError as err:
            raise err.last_attempt.result()  # type: ignore[misc]

    def _retrying(self, cancellation: CancellationHandle | None) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(max(0, self.max_retries) + 1),
            wait=wait_exponential(multiplier=self.initial_delay, min=self.initial_delay, max=self.max_delay),
            sleep=self._sleeper(cancellation),
            before_sleep=self._before_sleep,
            reraise=True,
        )

    def _sleeper(self, cancellation: CancellationHandle | None) -> Sleep:
        async def _sleep(seconds: float) -> None:
            if cancellation is None:
                await (self.sleep or asyncio.sleep)(seconds)
                return
            if self.sleep is not None:
                await self.sleep(seconds)
            elif await cancellation.wait(seconds):
                raise CancellationError(cancellation.reason)
            cancellation.raise_if_cancelled()

        return _sleep

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        operation = error.operation if isinstance(error, TransportError) else "unknown"
        HTTP_RETRIES_TOTAL.labels(operation=operation).inc()
        logger.warning(
            "Retrying ConstructionWire request",
            processing_status="RETRY",
            processing_retries=retry_state.attempt_number,
            error_type=type(error).__name__ if error else None,
            error_details=str(error) if error else None,
            error_retryable=True,
            next_delay_s=delay,
            source_system="ConstructionWire",
        )
        if self.on_retry is not None:
            self.on_retry(RetryState(retry_state.attempt_number, error, delay))
