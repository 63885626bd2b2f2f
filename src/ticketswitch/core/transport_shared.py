"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from ..config import TicketSwitchConfig
from .context import EMPTY_CONTEXT, RequestContext
from .errors import TicketSwitchApiError, TicketSwitchDecodeError
from .request import Request
from .request_builder import apply_headers, build_content, build_url
from .response_parsing import classify_error_response

logger = logging.getLogger("ticketswitch")

HTTP_STATUS_OK = 200


def build_default_headers(config: TicketSwitchConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: TicketSwitchConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


@dataclass(slots=True, frozen=True)
class PreparedRequest:
    method: str
    url: httpx.URL
    headers: httpx.Headers
    content: bytes | None
    timeout: float | None


def prepare_request(
    config: TicketSwitchConfig,
    request: Request,
    context: RequestContext | None,
) -> PreparedRequest:
    """Resolve URL, headers and body; fails before any network I/O."""

    resolved_context = context or EMPTY_CONTEXT
    url = build_url(config, request)
    apply_headers(config, request, resolved_context)
    content = build_content(config, request)
    return PreparedRequest(
        method=request.method,
        url=url,
        headers=request.headers,
        content=content,
        timeout=resolved_context.timeout,
    )


def send_kwargs(prepared: PreparedRequest) -> dict[str, object]:
    kwargs: dict[str, object] = {"headers": prepared.headers}
    if prepared.content is not None:
        kwargs["content"] = prepared.content
    if prepared.timeout is not None:
        kwargs["timeout"] = prepared.timeout
    return kwargs


def check_response_status(
    config: TicketSwitchConfig,
    endpoint: str,
    response: httpx.Response,
) -> None:
    """Raise the classified error for any non-200 response."""

    http_status = response.status_code
    logger.debug("response received endpoint=%s http_status=%s", endpoint, http_status)
    if config.debug_mode:
        logger.debug("response body endpoint=%s body=%r", endpoint, response.content)

    if http_status == HTTP_STATUS_OK:
        logger.info("request success endpoint=%s", endpoint)
        return

    try:
        mapped_error = classify_error_response(response)
    except TicketSwitchDecodeError:
        logger.error(
            "error response not decodable endpoint=%s http_status=%s",
            endpoint,
            http_status,
        )
        raise

    if mapped_error is None:
        logger.error(
            "error response without error envelope endpoint=%s http_status=%s",
            endpoint,
            http_status,
        )
        raise TicketSwitchDecodeError(
            f"HTTP {http_status} response carries no error envelope",
            http_status=http_status,
        )

    _log_api_error(endpoint, mapped_error)
    raise mapped_error


def _log_api_error(endpoint: str, error: TicketSwitchApiError) -> None:
    logger.error(
        "request failed endpoint=%s http_status=%s code=%s auth=%s gone=%s",
        endpoint,
        error.http_status,
        error.code,
        error.is_authentication_error,
        error.is_gone,
    )


__all__ = [
    "HTTP_STATUS_OK",
    "PreparedRequest",
    "build_default_headers",
    "build_default_timeout",
    "prepare_request",
    "send_kwargs",
    "check_response_status",
]
