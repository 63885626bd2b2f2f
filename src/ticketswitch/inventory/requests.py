"""Per-endpoint request construction shared by sync/async services."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.errors import TicketSwitchValidationError
from ..core.request import METHOD_GET, METHOD_POST, Request, new_request
from .params import (
    CancellationParams,
    EmailCheckParams,
    GetAvailabilityParams,
    ListEventsParams,
    ListPerformancesParams,
    MakePurchaseParams,
    MakeReservationParams,
    ParameterProvider,
    TransactionParams,
    UniversalParams,
)

ENDPOINT_TEST = "test.v1"
ENDPOINT_EVENTS = "events.v1"
ENDPOINT_EVENTS_BY_ID = "events_by_id.v1"
ENDPOINT_PERFORMANCES = "performances.v1"
ENDPOINT_TIMES = "times.v1"
ENDPOINT_AVAILABILITY = "availability.v1"
ENDPOINT_DISCOUNTS = "discounts.v1"
ENDPOINT_SOURCES = "sources.v1"
ENDPOINT_SEND_METHODS = "send_methods.v1"
ENDPOINT_RESERVE = "reserve.v1"
ENDPOINT_RELEASE = "release.v1"
ENDPOINT_PURCHASE = "purchase.v1"
ENDPOINT_STATUS = "status.v1"
ENDPOINT_CANCEL = "cancel.v1"
ENDPOINT_EMAIL_CHECK = "email_check.v1"


def _query_request(
    method: str,
    endpoint: str,
    params: ParameterProvider | None,
) -> Request:
    request = new_request(method, endpoint)
    if params is not None:
        request.set_values(params.flatten())
    return request


def _body_request(endpoint: str, params: ParameterProvider) -> Request:
    return new_request(METHOD_POST, endpoint, body=params.flatten())


def _require(params: object, expected: type, name: str) -> None:
    if not isinstance(params, expected):
        raise TicketSwitchValidationError(f"{name} must be {expected.__name__}")


def build_test_request() -> Request:
    return new_request(METHOD_GET, ENDPOINT_TEST)


def build_list_events_request(params: ListEventsParams | None) -> Request:
    return _query_request(METHOD_GET, ENDPOINT_EVENTS, params)


def build_events_by_id_request(
    event_ids: Sequence[str],
    params: UniversalParams | None,
) -> Request:
    if isinstance(event_ids, str):
        raise TicketSwitchValidationError("event_ids must be a sequence of str, not str")
    request = _query_request(METHOD_GET, ENDPOINT_EVENTS_BY_ID, params)
    request.set_value("event_id_list", ",".join(event_ids))
    return request


def build_list_performances_request(params: ListPerformancesParams | None) -> Request:
    return _query_request(METHOD_GET, ENDPOINT_PERFORMANCES, params)


def build_performance_times_request(params: ListPerformancesParams | None) -> Request:
    return _query_request(METHOD_GET, ENDPOINT_TIMES, params)


def build_availability_request(
    performance_id: str,
    params: GetAvailabilityParams | None,
) -> Request:
    request = _query_request(METHOD_GET, ENDPOINT_AVAILABILITY, params)
    request.set_value("perf_id", performance_id)
    return request


def build_discounts_request(
    performance_id: str,
    ticket_type_code: str,
    price_band_code: str,
    params: UniversalParams | None,
) -> Request:
    request = _query_request(METHOD_GET, ENDPOINT_DISCOUNTS, params)
    request.set_value("perf_id", performance_id)
    request.set_value("ticket_type_code", ticket_type_code)
    request.set_value("price_band_code", price_band_code)
    return request


def build_sources_request(params: UniversalParams | None) -> Request:
    return _query_request(METHOD_GET, ENDPOINT_SOURCES, params)


def build_send_methods_request(
    performance_id: str,
    params: UniversalParams | None,
) -> Request:
    request = _query_request(METHOD_GET, ENDPOINT_SEND_METHODS, params)
    request.set_value("perf_id", performance_id)
    return request


def build_reservation_request(params: MakeReservationParams) -> Request:
    _require(params, MakeReservationParams, "params")
    return _body_request(ENDPOINT_RESERVE, params)


def build_release_request(params: TransactionParams) -> Request:
    _require(params, TransactionParams, "params")
    return _body_request(ENDPOINT_RELEASE, params)


def build_purchase_request(params: MakePurchaseParams) -> Request:
    _require(params, MakePurchaseParams, "params")
    return _body_request(ENDPOINT_PURCHASE, params)


def build_status_request(params: TransactionParams | None) -> Request:
    return _query_request(METHOD_GET, ENDPOINT_STATUS, params)


def build_cancel_request(params: CancellationParams | None) -> Request:
    """Cancellation is POST but sends everything in the query string."""

    return _query_request(METHOD_POST, ENDPOINT_CANCEL, params)


def build_email_check_request(params: EmailCheckParams | None) -> Request:
    if params is None or not params.email_address:
        raise TicketSwitchValidationError("no email address was provided for verification")
    return _query_request(METHOD_GET, ENDPOINT_EMAIL_CHECK, params)


__all__ = [
    "ENDPOINT_TEST",
    "ENDPOINT_EVENTS",
    "ENDPOINT_EVENTS_BY_ID",
    "ENDPOINT_PERFORMANCES",
    "ENDPOINT_TIMES",
    "ENDPOINT_AVAILABILITY",
    "ENDPOINT_DISCOUNTS",
    "ENDPOINT_SOURCES",
    "ENDPOINT_SEND_METHODS",
    "ENDPOINT_RESERVE",
    "ENDPOINT_RELEASE",
    "ENDPOINT_PURCHASE",
    "ENDPOINT_STATUS",
    "ENDPOINT_CANCEL",
    "ENDPOINT_EMAIL_CHECK",
    "build_test_request",
    "build_list_events_request",
    "build_events_by_id_request",
    "build_list_performances_request",
    "build_performance_times_request",
    "build_availability_request",
    "build_discounts_request",
    "build_sources_request",
    "build_send_methods_request",
    "build_reservation_request",
    "build_release_request",
    "build_purchase_request",
    "build_status_request",
    "build_cancel_request",
    "build_email_check_request",
]
