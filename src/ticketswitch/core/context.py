"""Request-scoped call metadata."""

from __future__ import annotations

from dataclasses import dataclass, replace

TRACKING_ID_HEADER = "x-request-id"


@dataclass(slots=True, frozen=True)
class RequestContext:
    """Metadata travelling with one call.

    ``tracking_id`` is sent as the ``x-request-id`` header so that concurrent
    calls on one client can be told apart upstream. ``timeout`` overrides the
    configured httpx timeout for this call only.
    """

    tracking_id: str | None = None
    timeout: float | None = None

    def with_tracking_id(self, tracking_id: str) -> "RequestContext":
        return replace(self, tracking_id=tracking_id)

    def with_timeout(self, timeout: float) -> "RequestContext":
        return replace(self, timeout=timeout)


EMPTY_CONTEXT = RequestContext()


__all__ = [
    "TRACKING_ID_HEADER",
    "RequestContext",
    "EMPTY_CONTEXT",
]
