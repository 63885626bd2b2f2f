"""Transport-agnostic request descriptor."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

import httpx

ParameterSet = dict[str, str]

METHOD_GET = "GET"
METHOD_POST = "POST"


@dataclass(slots=True)
class Request:
    """A single call against one ``f13`` endpoint.

    ``values`` is multi-valued: a key may carry several values and each is
    sent as its own query pair. ``body`` is JSON-encoded by the transport and
    is only used by POST-shaped calls.
    """

    method: str
    endpoint: str
    body: object | None = None
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    values: dict[str, list[str]] = field(default_factory=dict)

    def set_value(self, key: str, value: str) -> None:
        self.values[key] = [value]

    def add_value(self, key: str, value: str) -> None:
        self.values.setdefault(key, []).append(value)

    def set_values(self, params: Mapping[str, str]) -> None:
        for key, value in params.items():
            self.set_value(key, value)

    def get_value(self, key: str) -> str | None:
        values = self.values.get(key)
        if not values:
            return None
        return values[0]

    def iter_values(self) -> Iterator[tuple[str, str]]:
        for key, values in self.values.items():
            for value in values:
                yield key, value


def new_request(method: str, endpoint: str, body: object | None = None) -> Request:
    return Request(method=method, endpoint=endpoint, body=body)


__all__ = [
    "ParameterSet",
    "METHOD_GET",
    "METHOD_POST",
    "Request",
    "new_request",
]
