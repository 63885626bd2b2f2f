"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.ticketswitch.com"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class EncoderConfig:
    """JSON request body encoding settings."""

    indent: bool = True
    escape_html: bool = False

    def validate(self) -> None:
        if not isinstance(self.indent, bool):
            raise ValueError("encoder.indent must be bool")
        if not isinstance(self.escape_html, bool):
            raise ValueError("encoder.escape_html must be bool")


@dataclass(slots=True, frozen=True)
class TicketSwitchConfig:
    """Runtime configuration and credentials for the ticketswitch client.

    Authentication is either a ``user``/``password`` pair sent as HTTP basic
    auth, or a ``user``/``crypto_block`` pair sent as query parameters. A
    crypto block always takes precedence. Missing credentials are reported
    when a request is built, not here.
    """

    base_url: str = DEFAULT_BASE_URL
    user: str = ""
    password: str = field(default="", repr=False)
    sub_user: str = ""
    language: str = ""
    crypto_block: str = field(default="", repr=False)
    debug_mode: bool = False
    user_agent: str = "ticketswitch-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    encoder: EncoderConfig = field(default_factory=EncoderConfig)

    @classmethod
    def with_credentials(cls, user: str, password: str) -> "TicketSwitchConfig":
        return cls(user=user, password=password)

    @property
    def uses_crypto_block(self) -> bool:
        return self.crypto_block != ""

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not isinstance(self.debug_mode, bool):
            raise ValueError("debug_mode must be bool")
        self.transport.validate()
        self.encoder.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "TransportConfig",
    "EncoderConfig",
    "TicketSwitchConfig",
]
