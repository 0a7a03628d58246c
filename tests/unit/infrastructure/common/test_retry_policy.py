"""Unit tests for RetryPolicy (tenacity backoff, cancellation-aware sleep)."""

import asyncio

import pytest

from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle
from constructionwire_mcp.core.exceptions.cancellation_error import CancellationError
from constructionwire_mcp.core.exceptions.transport_error import TransportError
from constructionwire_mcp.infrastructure.common.retry.retry_policy import RetryPolicy, RetryState


def _failing(error: Exception, succeed_after: int | None = None):
    attempts = {"n": 0}

    async def fn():
        attempts["n"] += 1
        if succeed_after is not None and attempts["n"] > succeed_after:
            return {"ok": True}
        raise error

    return fn, attempts


def _server_error() -> TransportError:
    return TransportError(operation="reports_list", message="HTTP 503", retryable=True, status_code=503)


class TestRetries:
    @pytest.mark.asyncio
    async def test_retryable_error_uses_all_attempts(self, recording_sleep) -> None:
        error = _server_error()
        fn, attempts = _failing(error)
        policy = RetryPolicy(max_retries=3, initial_delay=0.5, max_delay=8.0, sleep=recording_sleep)

        with pytest.raises(TransportError) as exc_info:
            await policy.run(fn)

        assert exc_info.value is error
        assert attempts["n"] == 4
        assert recording_sleep.delays == sorted(recording_sleep.delays)
        assert recording_sleep.delays[0] == pytest.approx(0.5)
        assert max(recording_sleep.delays) <= 8.0

    @pytest.mark.asyncio
    async def test_delays_capped_at_max(self, recording_sleep) -> None:
        fn, _ = _failing(_server_error())
        policy = RetryPolicy(max_retries=6, initial_delay=1.0, max_delay=4.0, sleep=recording_sleep)

        with pytest.raises(TransportError):
            await policy.run(fn)

        assert recording_sleep.delays[-1] == pytest.approx(4.0)
        assert all(delay <= 4.0 for delay in recording_sleep.delays)

    @pytest.mark.asyncio
    async def test_recovers_after_transient_failures(self, recording_sleep) -> None:
        fn, attempts = _failing(_server_error(), succeed_after=2)
        policy = RetryPolicy(max_retries=3, sleep=recording_sleep)

        assert await policy.run(fn) == {"ok": True}
        assert attempts["n"] == 3

    @pytest.mark.asyncio
    async def test_zero_retries_means_single_attempt(self, recording_sleep) -> None:
        error = _server_error()
        fn, attempts = _failing(error)

        with pytest.raises(TransportError) as exc_info:
            await RetryPolicy(max_retries=0, sleep=recording_sleep).run(fn)

        assert exc_info.value is error
        assert attempts["n"] == 1
        assert recording_sleep.delays == []

    @pytest.mark.asyncio
    async def test_non_retryable_error_fails_fast(self, recording_sleep) -> None:
        fn, attempts = _failing(TransportError(operation="reports_get", message="HTTP 404", status_code=404))

        with pytest.raises(TransportError):
            await RetryPolicy(max_retries=3, sleep=recording_sleep).run(fn)

        assert attempts["n"] == 1

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_not_retried(self, recording_sleep) -> None:
        fn, attempts = _failing(KeyError("x"))

        with pytest.raises(KeyError):
            await RetryPolicy(max_retries=3, sleep=recording_sleep).run(fn)

        assert attempts["n"] == 1

    @pytest.mark.asyncio
    async def test_on_retry_hook_receives_state(self, recording_sleep) -> None:
        seen: list[RetryState] = []
        fn, _ = _failing(_server_error(), succeed_after=1)

        await RetryPolicy(max_retries=2, sleep=recording_sleep, on_retry=seen.append).run(fn)

        assert len(seen) == 1
        assert seen[0].attempt_number == 1
        assert isinstance(seen[0].last_error, TransportError)


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancelled_before_first_attempt(self) -> None:
        handle = CancellationHandle()
        handle.cancel()
        fn, attempts = _failing(_server_error())

        with pytest.raises(CancellationError):
            await RetryPolicy().run(fn, cancellation=handle)

        assert attempts["n"] == 0

    @pytest.mark.asyncio
    async def test_cancel_during_backoff_aborts_wait(self) -> None:
        handle = CancellationHandle()
        fn, attempts = _failing(_server_error())
        policy = RetryPolicy(max_retries=3, initial_delay=30.0, max_delay=30.0)
        asyncio.get_running_loop().call_later(0.02, handle.cancel, "client")

        with pytest.raises(CancellationError) as exc_info:
            await asyncio.wait_for(policy.run(fn, cancellation=handle), timeout=5)

        assert exc_info.value.reason == "client"
        assert attempts["n"] == 1

    @pytest.mark.asyncio
    async def test_cancel_observed_after_injected_sleep(self) -> None:
        handle = CancellationHandle()
        fn, attempts = _failing(_server_error())

        async def cancelling_sleep(_seconds: float) -> None:
            handle.cancel()

        with pytest.raises(CancellationError):
            await RetryPolicy(max_retries=3, sleep=cancelling_sleep).run(fn, cancellation=handle)

        assert attempts["n"] == 1
