"""Public package exports for the ticketswitch inventory API client."""

from .async_client import AsyncTicketSwitchClient
from .client import TicketSwitchClient
from .config import EncoderConfig, TicketSwitchConfig, TransportConfig
from .core.context import RequestContext
from .core.errors import (
    EventNotFoundError,
    TicketSwitchApiError,
    TicketSwitchClientClosedError,
    TicketSwitchConfigError,
    TicketSwitchDecodeError,
    TicketSwitchEncodeError,
    TicketSwitchError,
    TicketSwitchTransportError,
    TicketSwitchValidationError,
)
from .geo import Circle

__all__ = [
    "TicketSwitchClient",
    "AsyncTicketSwitchClient",
    "TicketSwitchConfig",
    "TransportConfig",
    "EncoderConfig",
    "RequestContext",
    "Circle",
    "TicketSwitchError",
    "TicketSwitchConfigError",
    "TicketSwitchValidationError",
    "TicketSwitchEncodeError",
    "TicketSwitchTransportError",
    "TicketSwitchDecodeError",
    "TicketSwitchApiError",
    "TicketSwitchClientClosedError",
    "EventNotFoundError",
]
