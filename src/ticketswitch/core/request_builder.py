"""Build wire-level URL, headers and body from a request descriptor."""

from __future__ import annotations

import base64
from urllib.parse import urlencode

import httpx

from ..config import TicketSwitchConfig
from .context import TRACKING_ID_HEADER, RequestContext
from .errors import TicketSwitchConfigError, TicketSwitchTransportError
from .json_encoding import encode_body
from .request import Request

API_VERSION_SEGMENT = "f13"


def _parse_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise TicketSwitchTransportError(
            f"base_url is not a valid URL: {base_url!r}",
            cause="url",
        ) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise TicketSwitchTransportError(
            f"base_url must be an absolute http(s) URL: {base_url!r}",
            cause="url",
        )
    return url


def build_url(config: TicketSwitchConfig, request: Request) -> httpx.URL:
    """Compose ``{base}/f13/{endpoint}?{query}`` for ``request``.

    Query keys are sorted; repeated values of one key keep their order.
    """

    base = _parse_base_url(config.base_url)

    query: dict[str, list[str]] = {}
    for key, value in base.params.multi_items():
        query.setdefault(key, []).append(value)
    for key, value in request.iter_values():
        query.setdefault(key, []).append(value)

    if config.crypto_block:
        if not config.user:
            raise TicketSwitchConfigError(
                "ticketswitch: config specifies crypto_block but doesn't supply a user"
            )
        query["user_id"] = [config.user]
        query["crypto_block"] = [config.crypto_block]

    if config.sub_user:
        query["sub_id"] = [config.sub_user]

    path = f"{base.path.rstrip('/')}/{API_VERSION_SEGMENT}/{request.endpoint}"
    url = f"{base.scheme}://{base.netloc.decode('ascii')}{path}"
    encoded = urlencode([(key, value) for key in sorted(query) for value in query[key]])
    if encoded:
        url = f"{url}?{encoded}"
    return httpx.URL(url)


def basic_auth(username: str, password: str) -> str:
    token = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(token).decode("ascii")


def apply_headers(
    config: TicketSwitchConfig,
    request: Request,
    context: RequestContext,
) -> None:
    """Set language, authentication and tracking headers on ``request``."""

    if config.language:
        request.headers["Accept-Language"] = config.language

    if not config.uses_crypto_block:
        if not config.user:
            raise TicketSwitchConfigError("ticketswitch: config does not specify a user")
        if not config.password:
            raise TicketSwitchConfigError("ticketswitch: config does not specify a password")
        request.headers["Authorization"] = "Basic " + basic_auth(config.user, config.password)

    if context.tracking_id:
        request.headers[TRACKING_ID_HEADER] = context.tracking_id


def build_content(config: TicketSwitchConfig, request: Request) -> bytes | None:
    if request.body is None:
        return None
    content = encode_body(request.body, config.encoder)
    request.headers["Content-Type"] = "application/json"
    return content


__all__ = [
    "API_VERSION_SEGMENT",
    "build_url",
    "basic_auth",
    "apply_headers",
    "build_content",
]
