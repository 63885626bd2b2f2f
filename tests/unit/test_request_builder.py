from __future__ import annotations

import json

import pytest

from ticketswitch.config import EncoderConfig
from ticketswitch.core.context import EMPTY_CONTEXT, RequestContext
from ticketswitch.core.errors import (
    TicketSwitchConfigError,
    TicketSwitchEncodeError,
    TicketSwitchTransportError,
)
from ticketswitch.core.json_encoding import encode_body
from ticketswitch.core.request import METHOD_GET, METHOD_POST, new_request
from ticketswitch.core.request_builder import apply_headers, basic_auth, build_content, build_url
from tests.shared.transport import build_config


def test_build_url_for_endpoint():
    url = build_url(build_config(), new_request(METHOD_GET, "events.v1"))
    assert str(url) == "https://super.awesome.tickets/f13/events.v1"


def test_build_url_keeps_base_path_and_trailing_slash():
    config = build_config(base_url="https://super.awesome.tickets/api/")
    url = build_url(config, new_request(METHOD_GET, "events.v1"))
    assert str(url) == "https://super.awesome.tickets/api/f13/events.v1"


def test_build_url_with_repeated_values():
    request = new_request(METHOD_GET, "events.v1")
    request.add_value("lol", "beans")
    request.add_value("foo", "bar")
    request.add_value("lol", "icoptor")
    url = build_url(build_config(), request)
    assert str(url) == (
        "https://super.awesome.tickets/f13/events.v1?foo=bar&lol=beans&lol=icoptor"
    )


def test_build_url_with_crypto_block():
    config = build_config(crypto_block="x", user="u", password="")
    url = build_url(config, new_request(METHOD_GET, "events.v1"))
    assert url.query == b"crypto_block=x&user_id=u"


def test_build_url_with_crypto_block_requires_user():
    config = build_config(crypto_block="abc123", user="")
    with pytest.raises(TicketSwitchConfigError):
        build_url(config, new_request(METHOD_GET, "events.v1"))


def test_build_url_with_sub_user():
    config = build_config(sub_user="bambam")
    url = build_url(config, new_request(METHOD_GET, "events.v1"))
    assert str(url) == "https://super.awesome.tickets/f13/events.v1?sub_id=bambam"


@pytest.mark.parametrize(
    "base_url",
    [":!::!::::HAHAHAH NOPE!", "NOPE://google.com", "not a real url"],
    ids=["garbage", "bad-scheme", "relative"],
)
def test_build_url_rejects_unusable_base_url(base_url: str):
    config = build_config(base_url=base_url)
    with pytest.raises(TicketSwitchTransportError):
        build_url(config, new_request(METHOD_GET, "events.v1"))


def test_basic_auth_vector():
    assert basic_auth("fred_flintstone", "yabadabadoo") == "ZnJlZF9mbGludHN0b25lOnlhYmFkYWJhZG9v"


def test_apply_headers_sets_language_auth_and_tracking():
    config = build_config(user="fred_flintstone", password="yabadabadoo", language="en-GB")
    request = new_request(METHOD_GET, "events.v1")
    apply_headers(config, request, RequestContext(tracking_id="trackingid"))
    assert request.headers["Accept-Language"] == "en-GB"
    assert request.headers["x-request-id"] == "trackingid"
    assert request.headers["Authorization"] == "Basic ZnJlZF9mbGludHN0b25lOnlhYmFkYWJhZG9v"


def test_apply_headers_omits_optional_headers():
    request = new_request(METHOD_GET, "events.v1")
    apply_headers(build_config(), request, EMPTY_CONTEXT)
    assert "Accept-Language" not in request.headers
    assert "x-request-id" not in request.headers


@pytest.mark.parametrize(
    "overrides",
    [{"user": ""}, {"password": ""}],
    ids=["missing-user", "missing-password"],
)
def test_apply_headers_requires_credentials(overrides: dict[str, str]):
    request = new_request(METHOD_GET, "events.v1")
    with pytest.raises(TicketSwitchConfigError):
        apply_headers(build_config(**overrides), request, EMPTY_CONTEXT)


def test_crypto_block_replaces_basic_auth():
    config = build_config(crypto_block="abc123", password="")
    request = new_request(METHOD_GET, "events.v1")
    apply_headers(config, request, EMPTY_CONTEXT)
    assert "Authorization" not in request.headers


def test_build_content_sets_json_content_type_only_with_body():
    config = build_config()
    get_request = new_request(METHOD_GET, "events.v1")
    assert build_content(config, get_request) is None
    assert "Content-Type" not in get_request.headers

    post_request = new_request(METHOD_POST, "release.v1", body={"transaction_uuid": "t-1"})
    content = build_content(config, post_request)
    assert post_request.headers["Content-Type"] == "application/json"
    assert json.loads(content) == {"transaction_uuid": "t-1"}


def test_encode_body_indent_and_compact():
    body = {"b": "2", "a": "1"}
    assert encode_body(body, EncoderConfig()) == b'{\n  "a": "1",\n  "b": "2"\n}\n'
    assert encode_body(body, EncoderConfig(indent=False)) == b'{"a":"1","b":"2"}\n'


def test_encode_body_html_escaping_is_opt_in():
    body = {"q": "<a & b>"}
    raw = encode_body(body, EncoderConfig(indent=False))
    escaped = encode_body(body, EncoderConfig(indent=False, escape_html=True))
    assert raw == b'{"q":"<a & b>"}\n'
    assert escaped == b'{"q":"\\u003ca \\u0026 b\\u003e"}\n'
    assert json.loads(escaped) == body


def test_encode_body_keeps_non_ascii():
    assert encode_body({"s": "£"}, EncoderConfig(indent=False)) == '{"s":"£"}\n'.encode("utf-8")


def test_encode_body_rejects_unencodable_values():
    with pytest.raises(TicketSwitchEncodeError):
        encode_body({"x": object()}, EncoderConfig())
