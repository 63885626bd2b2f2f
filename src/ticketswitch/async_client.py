"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

from .client_shared import validate_client_config
from .config import TicketSwitchConfig
from .core.async_transport import AsyncTransport
from .core.context import RequestContext
from .core.errors import TicketSwitchClientClosedError
from .inventory.async_service import AsyncInventoryService
from .inventory.models import (
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
from .inventory.params import (
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
from .inventory.trolley import (
    CancellationResult,
    MakePurchaseResult,
    ReservationResult,
    StatusResult,
)


class AsyncTicketSwitchClient:
    """Public asynchronous ticketswitch API client.

    Every call issues exactly one HTTP request. Pass ``context=`` to attach a
    tracking id or a per-call timeout.
    """

    def __init__(
        self,
        *,
        config: TicketSwitchConfig | None = None,
        transport: AsyncTransport | None = None,
        inventory_service: AsyncInventoryService | None = None,
    ) -> None:
        self._config = config or TicketSwitchConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._inventory = inventory_service or AsyncInventoryService(self._transport)
        self._closed = False

    @property
    def config(self) -> TicketSwitchConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise TicketSwitchClientClosedError("AsyncTicketSwitchClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncTicketSwitchClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False

    async def test(self, *, context: RequestContext | None = None) -> User:
        """Check credentials and return the authenticated user."""

        self._ensure_open()
        return await self._inventory.test(context=context)

    async def list_events(
        self,
        params: ListEventsParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> ListEventsResults:
        self._ensure_open()
        return await self._inventory.list_events(params, context=context)

    async def get_events(
        self,
        event_ids: Sequence[str],
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> dict[str, Event]:
        """Fetch events keyed by id; ids unknown to the API are absent."""

        self._ensure_open()
        return await self._inventory.get_events(event_ids, params, context=context)

    async def get_event(
        self,
        event_id: str,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Event:
        """Fetch one event; raises :class:`EventNotFoundError` if it is missing."""

        self._ensure_open()
        return await self._inventory.get_event(event_id, params, context=context)

    async def list_performances(
        self,
        params: ListPerformancesParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> ListPerformancesResults:
        self._ensure_open()
        return await self._inventory.list_performances(params, context=context)

    async def list_performance_times(
        self,
        params: ListPerformancesParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> ListPerformanceTimesResults:
        self._ensure_open()
        return await self._inventory.list_performance_times(params, context=context)

    async def get_availability(
        self,
        performance_id: str,
        params: GetAvailabilityParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> AvailabilityResult:
        self._ensure_open()
        return await self._inventory.get_availability(performance_id, params, context=context)

    async def get_discounts(
        self,
        performance_id: str,
        ticket_type_code: str,
        price_band_code: str,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> DiscountsResult:
        self._ensure_open()
        return await self._inventory.get_discounts(
            performance_id,
            ticket_type_code,
            price_band_code,
            params,
            context=context,
        )

    async def get_sources(
        self,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> SourcesResult:
        self._ensure_open()
        return await self._inventory.get_sources(params, context=context)

    async def get_send_methods(
        self,
        performance_id: str,
        params: UniversalParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> SendMethodsResult:
        self._ensure_open()
        return await self._inventory.get_send_methods(performance_id, params, context=context)

    async def make_reservation(
        self,
        params: MakeReservationParams,
        *,
        context: RequestContext | None = None,
    ) -> ReservationResult:
        self._ensure_open()
        return await self._inventory.make_reservation(params, context=context)

    async def release_reservation(
        self,
        params: TransactionParams,
        *,
        context: RequestContext | None = None,
    ) -> bool:
        """Best-effort release of backend holds; returns whether it succeeded."""

        self._ensure_open()
        return await self._inventory.release_reservation(params, context=context)

    async def make_purchase(
        self,
        params: MakePurchaseParams,
        *,
        context: RequestContext | None = None,
    ) -> MakePurchaseResult:
        self._ensure_open()
        return await self._inventory.make_purchase(params, context=context)

    async def get_status(
        self,
        params: TransactionParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> StatusResult:
        self._ensure_open()
        return await self._inventory.get_status(params, context=context)

    async def cancel(
        self,
        params: CancellationParams | None = None,
        *,
        context: RequestContext | None = None,
    ) -> CancellationResult:
        self._ensure_open()
        return await self._inventory.cancel(params, context=context)

    async def email_check(
        self,
        params: EmailCheckParams | None,
        *,
        context: RequestContext | None = None,
    ) -> None:
        self._ensure_open()
        await self._inventory.email_check(params, context=context)


__all__ = [
    "AsyncTicketSwitchClient",
]
