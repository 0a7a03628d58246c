"""Cooperative cancellation signal shared by every layer that can suspend.

A handle starts active and moves one way to either *cancelled* or
*completed*. Once cancelled it never un-cancels; cancelling a completed
handle is a no-op.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from constructionwire_mcp.core.exceptions.cancellation_error import CancellationError

_T = TypeVar("_T")


class CancellationHandle:
    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None
        self._completed = False

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled") -> bool:
        """Signal cancellation. Returns True only on the active -> cancelled transition."""
        if self._completed or self._event.is_set():
            return False
        self._reason = reason
        self._event.set()
        return True

    def mark_completed(self) -> None:
        self._completed = True

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise CancellationError(self._reason)

    async def wait(self, timeout: float | None = None) -> bool:
        """Wait up to ``timeout`` seconds; return True if cancelled meanwhile."""
        if timeout is not None and timeout <= 0:
            return self._event.is_set()
        try:
            await asyncio.wait_for(self._event.wait(), timeout)
        except TimeoutError:
            return False
        return True

    async def guard(self, awaitable: Awaitable[_T]) -> _T:
        """Run ``awaitable`` and cancel it (closing its I/O) if this handle fires first."""
        if self._event.is_set():
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise CancellationError(self._reason)
        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()
                await asyncio.gather(task, return_exceptions=True)
        if task.cancelled():
            raise CancellationError(self._reason)
        return task.result()
