from __future__ import annotations

import httpx
import pytest

from ticketswitch.core.async_transport import AsyncTransport
from ticketswitch.core.context import RequestContext
from ticketswitch.core.errors import (
    TicketSwitchApiError,
    TicketSwitchDecodeError,
    TicketSwitchTransportError,
)
from ticketswitch.core.request import METHOD_GET, METHOD_POST, new_request
from tests.shared.transport import (
    RecordingHandler,
    Step,
    async_transport,
    build_config,
    json_response,
)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("step", "expected_exception"),
    [
        (json_response(200, {"user_id": "bill"}), None),
        (json_response(400, {"error_code": 8, "error_desc": "bad"}), TicketSwitchApiError),
        (httpx.Response(502, content=b"<html>bad gateway</html>"), TicketSwitchDecodeError),
        (httpx.ConnectError("connection refused"), TicketSwitchTransportError),
        (httpx.ReadTimeout("timed out"), TicketSwitchTransportError),
    ],
    ids=["success", "api-error", "undecodable-error", "connect-error", "timeout"],
)
async def test_async_transport_status_matrix(
    step: Step,
    expected_exception: type[Exception] | None,
):
    handler = RecordingHandler([step])
    transport = async_transport(handler)
    request = new_request(METHOD_GET, "test.v1")

    if expected_exception is None:
        response = await transport.execute(request)
        assert response.status_code == 200
    else:
        with pytest.raises(expected_exception):
            await transport.execute(request)

    assert len(handler.requests) == 1
    await transport.close()


@pytest.mark.asyncio
async def test_async_transport_sends_body_and_headers():
    handler = RecordingHandler([json_response(200, {"released_ok": True})])
    transport = async_transport(handler, build_config(language="en-GB"))
    request = new_request(METHOD_POST, "release.v1", body={"transaction_uuid": "t-1"})

    await transport.execute(request, context=RequestContext(tracking_id="abc", timeout=3.0))

    sent = handler.last
    assert sent.method == "POST"
    assert str(sent.url) == "https://super.awesome.tickets/f13/release.v1"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers["Accept-Language"] == "en-GB"
    assert sent.headers["x-request-id"] == "abc"
    assert sent.extensions["timeout"]["read"] == 3.0
    assert handler.last_json() == {"transaction_uuid": "t-1"}


@pytest.mark.asyncio
async def test_async_transport_rejects_use_after_close():
    handler = RecordingHandler([])
    transport = async_transport(handler)
    await transport.close()
    await transport.close()
    with pytest.raises(TicketSwitchTransportError):
        await transport.execute(new_request(METHOD_GET, "test.v1"))
    assert handler.requests == []


@pytest.mark.asyncio
async def test_async_transport_owns_default_client():
    transport = AsyncTransport(build_config())
    await transport.close()
    with pytest.raises(TicketSwitchTransportError):
        await transport.execute(new_request(METHOD_GET, "test.v1"))
