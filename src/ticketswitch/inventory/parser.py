"""Resolvers from decoded JSON payloads into typed results.

Each endpoint wraps its result differently: some nest it under ``results``,
some carry a side table of currencies next to it, and sources come back as
a bare array.
"""

from __future__ import annotations

from dataclasses import replace

from ..core.errors import EventNotFoundError, TicketSwitchDecodeError
from .fields import JsonObject, get_list, require_object
from .models import (
    AvailabilityResult,
    DiscountsResult,
    Event,
    ListEventsResults,
    ListPerformancesResults,
    ListPerformanceTimesResults,
    SendMethodsResult,
    Source,
    SourcesResult,
    User,
    currency_table,
)
from .trolley import CancellationResult, MakePurchaseResult, ReservationResult, StatusResult


def _root_object(payload: object) -> JsonObject:
    return require_object(payload, "response JSON root")


def _inner_results(payload: JsonObject) -> JsonObject:
    raw = payload.get("results")
    if raw is None:
        return {}
    return require_object(raw, "results")


def resolve_user(payload: object) -> User:
    return User.from_payload(_root_object(payload))


def resolve_list_events(payload: object) -> ListEventsResults:
    """Decode ``results`` (required) and merge the optional currency table."""

    root = _root_object(payload)
    if "results" not in root:
        raise TicketSwitchDecodeError("no results in list events response")
    results = ListEventsResults.from_payload(require_object(root["results"], "results"))
    if root.get("currency_details") is None:
        return results
    return replace(results, currencies=currency_table(root))


def resolve_events_by_id(payload: object) -> dict[str, Event]:
    """Unwrap ``{"events_by_id": {id: {"event": {...}}}}``.

    Entries without an ``event`` object are left out.
    """

    root = _root_object(payload)
    raw = root.get("events_by_id")
    if raw is None:
        return {}
    events: dict[str, Event] = {}
    for event_id, wrapper in require_object(raw, "events_by_id").items():
        wrapped = require_object(wrapper, f"events_by_id entry {event_id!r}")
        event = wrapped.get("event")
        if event is None:
            continue
        events[event_id] = Event.from_payload(require_object(event, f"event {event_id!r}"))
    return events


def pick_event(events: dict[str, Event], event_id: str) -> Event:
    try:
        return events[event_id]
    except KeyError:
        raise EventNotFoundError(event_id) from None


def resolve_list_performances(payload: object) -> ListPerformancesResults:
    return ListPerformancesResults.from_payload(_inner_results(_root_object(payload)))


def resolve_list_performance_times(payload: object) -> ListPerformanceTimesResults:
    return ListPerformanceTimesResults.from_payload(_inner_results(_root_object(payload)))


def resolve_availability(payload: object) -> AvailabilityResult:
    return AvailabilityResult.from_payload(_root_object(payload))


def resolve_discounts(payload: object) -> DiscountsResult:
    return DiscountsResult.from_payload(_root_object(payload))


def resolve_sources(payload: object) -> SourcesResult:
    if not isinstance(payload, list):
        raise TicketSwitchDecodeError("sources response must be an array")
    return SourcesResult(sources=get_list({"sources": payload}, "sources", Source.from_payload))


def resolve_send_methods(payload: object) -> SendMethodsResult:
    return SendMethodsResult.from_payload(_root_object(payload))


def resolve_reservation(payload: object) -> ReservationResult:
    return ReservationResult.from_payload(_root_object(payload))


def resolve_release(payload: object) -> bool:
    """Read ``released_ok``; a missing key means the release did not happen."""

    root = _root_object(payload)
    value = root.get("released_ok", False)
    if not isinstance(value, bool):
        raise TicketSwitchDecodeError("released_ok must be a boolean")
    return value


def resolve_purchase(payload: object) -> MakePurchaseResult:
    return MakePurchaseResult.from_payload(_root_object(payload))


def resolve_status(payload: object) -> StatusResult:
    return StatusResult.from_payload(_root_object(payload))


def resolve_cancellation(payload: object) -> CancellationResult:
    return CancellationResult.from_payload(_root_object(payload))


__all__ = [
    "resolve_user",
    "resolve_list_events",
    "resolve_events_by_id",
    "pick_event",
    "resolve_list_performances",
    "resolve_list_performance_times",
    "resolve_availability",
    "resolve_discounts",
    "resolve_sources",
    "resolve_send_methods",
    "resolve_reservation",
    "resolve_release",
    "resolve_purchase",
    "resolve_status",
    "resolve_cancellation",
]
