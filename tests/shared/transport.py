from __future__ import annotations

import json
from collections.abc import Callable, Sequence

import httpx

from ticketswitch.config import TicketSwitchConfig
from ticketswitch.core.async_transport import AsyncTransport
from ticketswitch.core.transport import SyncTransport

BASE_URL = "https://super.awesome.tickets"


def build_config(**overrides: object) -> TicketSwitchConfig:
    values: dict[str, object] = {
        "base_url": BASE_URL,
        "user": "bill",
        "password": "hahaha",
    }
    values.update(overrides)
    return TicketSwitchConfig(**values)  # type: ignore[arg-type]


def json_response(status_code: int, payload: object) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


Step = httpx.Response | Exception


class RecordingHandler:
    """Replays scripted responses and records every request it receives."""

    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


def sync_transport(
    handler: Callable[[httpx.Request], httpx.Response],
    config: TicketSwitchConfig | None = None,
) -> SyncTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SyncTransport(config or build_config(), client=client)


def async_transport(
    handler: Callable[[httpx.Request], httpx.Response],
    config: TicketSwitchConfig | None = None,
) -> AsyncTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncTransport(config or build_config(), client=client)


class DummyTransport:
    def __init__(self) -> None:
        self.closed = False
        self.calls = 0

    def execute(self, request, *, context=None):
        self.calls += 1
        return json_response(200, {"user_id": "bill"})

    def close(self) -> None:
        self.closed = True


class AsyncDummyTransport:
    def __init__(self) -> None:
        self.closed = False
        self.calls = 0

    async def execute(self, request, *, context=None):
        self.calls += 1
        return json_response(200, {"user_id": "bill"})

    async def close(self) -> None:
        self.closed = True
