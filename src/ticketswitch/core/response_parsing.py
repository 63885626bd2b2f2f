"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Protocol

from .errors import TicketSwitchApiError, TicketSwitchDecodeError, classify_api_error


class ContentResponse(Protocol):
    status_code: int

    @property
    def content(self) -> bytes: ...


def decode_json(content: bytes, *, http_status: int | None = None) -> object:
    """Decode a JSON document, keeping non-integer numbers as ``Decimal``."""

    try:
        return json.loads(content, parse_float=Decimal)
    except ValueError as exc:
        raise TicketSwitchDecodeError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc


def parse_json_object(response: ContentResponse) -> dict[str, object]:
    payload = decode_json(response.content, http_status=response.status_code)
    if not isinstance(payload, dict):
        raise TicketSwitchDecodeError(
            "response JSON root must be an object",
            http_status=response.status_code,
        )
    return payload


def parse_json_array(response: ContentResponse) -> list[object]:
    payload = decode_json(response.content, http_status=response.status_code)
    if not isinstance(payload, list):
        raise TicketSwitchDecodeError(
            "response JSON root must be an array",
            http_status=response.status_code,
        )
    return payload


def classify_error_response(response: ContentResponse) -> TicketSwitchApiError | None:
    """Classify a non-200 response from its error envelope.

    A body that cannot be decoded as a JSON object is itself fatal and raises
    :class:`TicketSwitchDecodeError`.
    """

    payload = parse_json_object(response)
    try:
        return classify_api_error(payload, http_status=response.status_code)
    except TicketSwitchDecodeError as exc:
        raise TicketSwitchDecodeError(str(exc), http_status=response.status_code) from exc


__all__ = [
    "ContentResponse",
    "decode_json",
    "parse_json_object",
    "parse_json_array",
    "classify_error_response",
]
