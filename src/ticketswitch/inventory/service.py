"""Inventory endpoint execution: one request, one resolved result."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.context import RequestContext
from ..core.request import Request
from ..core.response_parsing import decode_json
from ..core.transport import SyncTransport
from .models import (
    AvailabilityResult,
    DiscountsResult,
    Event,
    ListEventsResults,
    ListPerformancesResults,
    ListPerformanceTimesResults,
    SendMethodsResult,
    SourcesResult,
    User,
)
from .params import (
    CancellationParams,
    EmailCheckParams,
    GetAvailabilityParams,
    ListEventsParams,
    ListPerformancesParams,
    MakePurchaseParams,
    MakeReservationParams,
    TransactionParams,
    UniversalParams,
)
from .parser import (
    pick_event,
    resolve_availability,
    resolve_cancellation,
    resolve_discounts,
    resolve_events_by_id,
    resolve_list_events,
    resolve_list_performance_times,
    resolve_list_performances,
    resolve_purchase,
    resolve_release,
    resolve_reservation,
    resolve_send_methods,
    resolve_sources,
    resolve_status,
    resolve_user,
)
from .requests import (
    build_availability_request,
    build_cancel_request,
    build_discounts_request,
    build_email_check_request,
    build_events_by_id_request,
    build_list_events_request,
    build_list_performances_request,
    build_performance_times_request,
    build_purchase_request,
    build_release_request,
    build_reservation_request,
    build_send_methods_request,
    build_sources_request,
    build_status_request,
    build_test_request,
)
from .trolley import CancellationResult, MakePurchaseResult, ReservationResult, StatusResult


class InventoryService:
    """Synchronous executor for inventory endpoints."""

    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def _fetch(self, request: Request, context: RequestContext | None) -> object:
        response = self._transport.execute(request, context=context)
        return decode_json(response.content, http_status=response.status_code)

    def test(self, *, context: RequestContext | None = None) -> User:
        return resolve_user(self._fetch(build_test_request(), context))

    def list_events(
        self,
        params: ListEventsParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> ListEventsResults:
        return resolve_list_events(self._fetch(build_list_events_request(params), context))

    def get_events(
        self,
        event_ids: Sequence[str],
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> dict[str, Event]:
        request = build_events_by_id_request(event_ids, params)
        return resolve_events_by_id(self._fetch(request, context))

    def get_event(
        self,
        event_id: str,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Event:
        return pick_event(self.get_events([event_id], params, context=context), event_id)

    def list_performances(
        self,
        params: ListPerformancesParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> ListPerformancesResults:
        request = build_list_performances_request(params)
        return resolve_list_performances(self._fetch(request, context))

    def list_performance_times(
        self,
        params: ListPerformancesParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> ListPerformanceTimesResults:
        request = build_performance_times_request(params)
        return resolve_list_performance_times(self._fetch(request, context))

    def get_availability(
        self,
        performance_id: str,
        params: GetAvailabilityParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> AvailabilityResult:
        request = build_availability_request(performance_id, params)
        return resolve_availability(self._fetch(request, context))

    def get_discounts(
        self,
        performance_id: str,
        ticket_type_code: str,
        price_band_code: str,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> DiscountsResult:
        request = build_discounts_request(
            performance_id,
            ticket_type_code,
            price_band_code,
            params,
        )
        return resolve_discounts(self._fetch(request, context))

    def get_sources(
        self,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> SourcesResult:
        return resolve_sources(self._fetch(build_sources_request(params), context))

    def get_send_methods(
        self,
        performance_id: str,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> SendMethodsResult:
        request = build_send_methods_request(performance_id, params)
        return resolve_send_methods(self._fetch(request, context))

    def make_reservation(
        self,
        params: MakeReservationParams,
        *,
        context: RequestContext | None = None,
    ) -> ReservationResult:
        return resolve_reservation(self._fetch(build_reservation_request(params), context))

    def release_reservation(
        self,
        params: TransactionParams,
        *,
        context: RequestContext | None = None,
    ) -> bool:
        return resolve_release(self._fetch(build_release_request(params), context))

    def make_purchase(
        self,
        params: MakePurchaseParams,
        *,
        context: RequestContext | None = None,
    ) -> MakePurchaseResult:
        return resolve_purchase(self._fetch(build_purchase_request(params), context))

    def get_status(
        self,
        params: TransactionParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> StatusResult:
        return resolve_status(self._fetch(build_status_request(params), context))

    def cancel(
        self,
        params: CancellationParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> CancellationResult:
        return resolve_cancellation(self._fetch(build_cancel_request(params), context))

    def email_check(
        self,
        params: EmailCheckParams | None,
        *,
        context: RequestContext | None = None,
    ) -> None:
        """Ask the API whether an address is acceptable; rejection raises."""

        self._transport.execute(build_email_check_request(params), context=context)


__all__ = [
    "InventoryService",
]
