from __future__ import annotations

from dataclasses import FrozenInstanceError

import httpx
import pytest

from ticketswitch.config import (
    DEFAULT_BASE_URL,
    EncoderConfig,
    TicketSwitchConfig,
    TransportConfig,
)
from ticketswitch.core.transport_shared import build_default_headers, build_default_timeout


def test_config_validate_rejects_empty_base_url():
    cfg = TicketSwitchConfig(base_url="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_is_immutable():
    cfg = TicketSwitchConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.user = "someone"  # type: ignore[misc]


def test_config_defaults():
    cfg = TicketSwitchConfig()
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.encoder.indent is True
    assert cfg.encoder.escape_html is False
    assert cfg.debug_mode is False
    assert cfg.uses_crypto_block is False
    cfg.validate()


def test_with_credentials():
    cfg = TicketSwitchConfig.with_credentials("fred_flintstone", "yabadabadoo")
    assert cfg.user == "fred_flintstone"
    assert cfg.password == "yabadabadoo"


def test_repr_hides_secrets():
    cfg = TicketSwitchConfig(user="fred", password="yabadabadoo", crypto_block="secret-block")
    text = repr(cfg)
    assert "fred" in text
    assert "yabadabadoo" not in text
    assert "secret-block" not in text


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_config_validate_rejects_non_positive_timeouts(field):
    cfg = TicketSwitchConfig(transport=TransportConfig(**{field: 0.0}))
    with pytest.raises(ValueError, match=field):
        cfg.validate()


@pytest.mark.parametrize(
    "encoder",
    [EncoderConfig(indent="yes"), EncoderConfig(escape_html=1)],  # type: ignore[arg-type]
    ids=["indent", "escape-html"],
)
def test_config_validate_rejects_non_bool_encoder_flags(encoder):
    with pytest.raises(ValueError):
        TicketSwitchConfig(encoder=encoder).validate()


def test_default_headers_and_timeout():
    cfg = TicketSwitchConfig(user_agent="agent/1.0", transport=TransportConfig(timeout_read_seconds=9))
    assert build_default_headers(cfg) == {"Accept": "application/json", "User-Agent": "agent/1.0"}
    assert build_default_timeout(cfg) == httpx.Timeout(connect=5.0, read=9, write=30.0, pool=5.0)
