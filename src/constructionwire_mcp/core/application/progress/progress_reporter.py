"""Out-of-band progress delivery keyed by caller-supplied progress tokens.

The reporter is a pass-through sink: it neither orders nor persists updates,
and a failed delivery never fails the request that produced it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from constructionwire_mcp.core.value_objects.progress_update import ProgressUpdate

logger = logging.getLogger(__name__)

ProgressToken = str | int
ProgressSender = Callable[[ProgressToken, ProgressUpdate], Awaitable[None]]
ProgressCallback = Callable[[ProgressUpdate], Awaitable[None]]


class ProgressReporter:
    def __init__(self, send: ProgressSender, timeout: float | None = 5.0) -> None:
        self._send = send
        self._timeout = timeout

    def create_progress_callback(self, progress_token: ProgressToken) -> ProgressCallback:
        async def _callback(update: ProgressUpdate) -> None:
            await self.report(progress_token, update)

        return _callback

    async def report(self, progress_token: ProgressToken, update: ProgressUpdate) -> None:
        try:
            await asyncio.wait_for(self._send(progress_token, update), self._timeout)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "[Progress] Notification for token %s not delivered: %s: %s",
                progress_token,
                type(exc).__name__,
                exc,
            )
