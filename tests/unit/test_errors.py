from __future__ import annotations

import pytest

from ticketswitch.core.errors import (
    EventNotFoundError,
    TicketSwitchApiError,
    TicketSwitchDecodeError,
    TicketSwitchError,
    classify_api_error,
)


def test_api_error_message():
    err = TicketSwitchApiError(123, "hampster dead")
    assert str(err) == "ticketswitch: API error 123: hampster dead"
    assert isinstance(err, TicketSwitchError)


@pytest.mark.parametrize("http_status", [200, 400, 401, 500])
def test_code_3_is_authentication_error_at_any_status(http_status: int):
    err = classify_api_error(
        {"error_code": 3, "error_desc": "Authentication Error"},
        http_status=http_status,
    )
    assert err is not None
    assert err.is_authentication_error is True
    assert err.is_gone is False
    assert err.http_status == http_status


@pytest.mark.parametrize(
    "payload",
    [{}, {"error_code": 123, "error_desc": "Callback Gone Error"}, {"foo": "bar"}],
    ids=["empty", "envelope", "unrelated"],
)
def test_status_410_is_always_gone(payload: dict[str, object]):
    err = classify_api_error(payload, http_status=410)
    assert err is not None
    assert err.is_gone is True


def test_empty_body_at_200_is_not_an_error():
    assert classify_api_error({}, http_status=200) is None


def test_unrelated_keys_are_not_an_error():
    payload = {"foo": "bar", "lol": "beans", "code": 123, "desc": "some cool stuff"}
    assert classify_api_error(payload, http_status=200) is None


@pytest.mark.parametrize(
    ("payload", "code", "description"),
    [
        ({"error_code": 123, "error_desc": "hampster dead"}, 123, "hampster dead"),
        ({"error_code": 8}, 8, ""),
        ({"error_desc": "Bad data supplied"}, 0, "Bad data supplied"),
    ],
    ids=["code-and-desc", "code-only", "desc-only"],
)
def test_any_signal_is_an_error(payload: dict[str, object], code: int, description: str):
    err = classify_api_error(payload, http_status=400)
    assert err is not None
    assert (err.code, err.description) == (code, description)
    assert err.is_authentication_error is False
    assert err.is_gone is False


@pytest.mark.parametrize(
    "payload",
    [{"error_code": "3"}, {"error_code": True}, {"error_desc": 12}],
    ids=["string-code", "bool-code", "numeric-desc"],
)
def test_mistyped_envelope_is_decode_error(payload: dict[str, object]):
    with pytest.raises(TicketSwitchDecodeError):
        classify_api_error(payload, http_status=400)


def test_event_not_found_error_keeps_event_id():
    err = EventNotFoundError("1AA")
    assert err.event_id == "1AA"
    assert "1AA" in str(err)
