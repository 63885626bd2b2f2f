"""Error types and API error classification."""

from __future__ import annotations

from collections.abc import Mapping

AUTHENTICATION_ERROR_CODE = 3
HTTP_STATUS_GONE = 410


class TicketSwitchError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class TicketSwitchConfigError(TicketSwitchError):
    """Configuration cannot produce a valid request (e.g. missing credentials)."""


class TicketSwitchValidationError(TicketSwitchError):
    """Invalid input rejected before any request is sent."""


class TicketSwitchEncodeError(TicketSwitchError):
    """Request body could not be encoded as JSON."""


class TicketSwitchTransportError(TicketSwitchError):
    """Network/transport-level failure."""


class TicketSwitchDecodeError(TicketSwitchError):
    """Response body is malformed or does not match the expected shape."""


class TicketSwitchClientClosedError(TicketSwitchError):
    """Raised when client is used after close."""


class EventNotFoundError(TicketSwitchError):
    """A specific event was requested but absent from the response."""

    def __init__(self, event_id: str) -> None:
        super().__init__(f"ticketswitch: event not found: {event_id}")
        self.event_id = event_id


class TicketSwitchApiError(TicketSwitchError):
    """Error reported by the API in its error envelope.

    ``is_authentication_error`` is set for the reserved authentication
    failure code; ``is_gone`` is set whenever the HTTP status was 410, which
    means a callback has expired and should not be polled again.
    """

    def __init__(
        self,
        code: int,
        description: str,
        *,
        http_status: int | None = None,
        is_authentication_error: bool = False,
        is_gone: bool = False,
    ) -> None:
        super().__init__(
            f"ticketswitch: API error {code}: {description}",
            http_status=http_status,
        )
        self.code = code
        self.description = description
        self.is_authentication_error = is_authentication_error
        self.is_gone = is_gone


def extract_error_code(payload: Mapping[str, object]) -> int:
    value = payload.get("error_code")
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TicketSwitchDecodeError("error_code must be an integer")
    return value


def extract_error_description(payload: Mapping[str, object]) -> str:
    value = payload.get("error_desc")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TicketSwitchDecodeError("error_desc must be a string")
    return value


def classify_api_error(
    payload: Mapping[str, object],
    *,
    http_status: int | None,
) -> TicketSwitchApiError | None:
    """Map an error envelope and HTTP status to a classified API error."""

    code = extract_error_code(payload)
    description = extract_error_description(payload)
    is_gone = http_status == HTTP_STATUS_GONE
    is_authentication_error = code == AUTHENTICATION_ERROR_CODE

    if code == 0 and description == "" and not is_gone:
        return None

    return TicketSwitchApiError(
        code,
        description,
        http_status=http_status,
        is_authentication_error=is_authentication_error,
        is_gone=is_gone,
    )


__all__ = [
    "AUTHENTICATION_ERROR_CODE",
    "HTTP_STATUS_GONE",
    "TicketSwitchError",
    "TicketSwitchConfigError",
    "TicketSwitchValidationError",
    "TicketSwitchEncodeError",
    "TicketSwitchTransportError",
    "TicketSwitchDecodeError",
    "TicketSwitchClientClosedError",
    "TicketSwitchApiError",
    "EventNotFoundError",
    "extract_error_code",
    "extract_error_description",
    "classify_api_error",
]
