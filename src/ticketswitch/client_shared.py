"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import TicketSwitchConfig
from .core.errors import TicketSwitchConfigError


def validate_client_config(config: TicketSwitchConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise TicketSwitchConfigError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
