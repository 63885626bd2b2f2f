"""Async HTTP transport with request building and status evaluation."""

from __future__ import annotations

from typing import Protocol

import httpx

from ..config import TicketSwitchConfig
from .context import RequestContext
from .errors import TicketSwitchTransportError
from .request import Request
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    check_response_status,
    logger,
    prepare_request,
    send_kwargs,
)


class AsyncTransportClient(Protocol):
    async def request(self, method: str, url: httpx.URL, **kwargs: object) -> httpx.Response: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the ticketswitch API.

    Cancelling the awaiting task cancels the in-flight request; it surfaces
    as ``asyncio.CancelledError`` and never yields a partial result.
    """

    def __init__(
        self,
        config: TicketSwitchConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def execute(
        self,
        request: Request,
        *,
        context: RequestContext | None = None,
    ) -> httpx.Response:
        if self._closed:
            raise TicketSwitchTransportError("transport is already closed")

        prepared = prepare_request(self._config, request, context)
        logger.debug("request start method=%s endpoint=%s", prepared.method, request.endpoint)

        try:
            response = await self._client.request(
                prepared.method,
                prepared.url,
                **send_kwargs(prepared),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                request.endpoint,
                exc.__class__.__name__,
            )
            raise TicketSwitchTransportError(
                f"network/transport error: {exc}",
                cause="network",
            ) from exc

        check_response_status(self._config, request.endpoint, response)
        return response


__all__ = [
    "AsyncTransportClient",
    "AsyncTransport",
]
