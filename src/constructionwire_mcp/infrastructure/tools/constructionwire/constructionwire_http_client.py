"""Async HTTP transport for the ConstructionWire REST API.

One shared ``httpx.AsyncClient`` (connection pooling + timeouts) per server.
Every failure is translated into a ``TransportError`` whose ``retryable``
flag drives the retry policy: network errors, timeouts, HTTP 429 and 5xx
are retryable; every other status is not.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from constructionwire_mcp import __version__
from constructionwire_mcp.core.application.ports.transport_port import TransportPort
from constructionwire_mcp.core.application.tracking.cancellation_handle import CancellationHandle
from constructionwire_mcp.core.exceptions.transport_error import TransportError
from constructionwire_mcp.infrastructure.configuration.constructionwire_settings import (
    ConstructionwireSettings,
)
from constructionwire_mcp.infrastructure.observability.metrics_service import HTTP_REQUESTS_TOTAL
from constructionwire_mcp.infrastructure.observability.redaction_service import redact_text
from constructionwire_mcp.infrastructure.observability.tracing_setup import get_tracer

logger = structlog.get_logger()

_MAX_ERROR_BODY = 500


class ConstructionwireHttpClient(TransportPort):
    _PROVIDER = "ConstructionWire"

    def __init__(
        self,
        settings: ConstructionwireSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
        )
        self._client.headers.update(self._default_headers())

    def _default_headers(self) -> dict[str, str]:
        creds = f"{self._settings.username}:{self._settings.password.get_secret_value()}"
        encoded = base64.b64encode(creds.encode("utf-8")).decode("utf-8")
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"constructionwire-mcp/{__version__}",
            "Authorization": f"Basic {encoded}",
        }

    async def aclose(self) -> None:
        await self._client.aclose()

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
        operation = operation or f"{method.upper()} {path}"
        with get_tracer().start_as_current_span("constructionwire.http") as span:
            span.set_attribute("http.method", method.upper())
            span.set_attribute("constructionwire.operation", operation)

            response = await self._request(method, path, query, body, headers, cancellation, operation)
            span.set_attribute("http.status_code", response.status_code)
            HTTP_REQUESTS_TOTAL.labels(method=method.upper(), status=str(response.status_code)).inc()

            if response.is_error:
                span.set_attribute("error", True)
                raise self._status_error(operation, response)
            return self._decode(response)

    async def _request(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None,
        body: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        cancellation: CancellationHandle | None,
        operation: str,
    ) -> httpx.Response:
        request = self._client.request(
            method.upper(),
            path,
            params=dict(query) if query else None,
            json=dict(body) if body is not None else None,
            headers=dict(headers) if headers else None,
        )
        try:
            if cancellation is not None:
                return await cancellation.guard(request)
            return await request
        except httpx.TimeoutException as exc:
            raise self._network_error(operation, f"Request timed out ({type(exc).__name__})", exc) from exc
        except httpx.TransportError as exc:
            raise self._network_error(operation, f"{type(exc).__name__}: {exc}", exc) from exc

    def _network_error(self, operation: str, message: str, exc: Exception) -> TransportError:
        logger.warning(
            "ConstructionWire network failure",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=redact_text(str(exc)),
            error_retryable=True,
            source_system=self._PROVIDER,
            operation=operation,
        )
        return TransportError(operation=operation, message=message, retryable=True)

    def _status_error(self, operation: str, response: httpx.Response) -> TransportError:
        status = response.status_code
        body = response.text[:_MAX_ERROR_BODY]
        retryable = status == 429 or status >= 500
        logger.warning(
            "ConstructionWire API error response",
            processing_status="ERROR",
            error_type="HttpStatusError",
            error_code=status,
            error_details=redact_text(body),
            error_retryable=retryable,
            source_system=self._PROVIDER,
            operation=operation,
        )
        detail = f"HTTP {status} {response.reason_phrase}".rstrip()
        if body:
            detail = f"{detail} - {body}"
        return TransportError(
            operation=operation,
            message=detail,
            retryable=retryable,
            status_code=status,
            body=body,
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return {"success": True, "status": response.status_code}
        try:
            return response.json()
        except ValueError:
            return {"status": response.status_code, "body": response.text}
