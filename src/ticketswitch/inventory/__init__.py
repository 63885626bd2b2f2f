"""Inventory service package."""

from .models import (
    Availability,
    AvailabilityResult,
    Currency,
    Discount,
    DiscountsResult,
    Event,
    ListEventsResults,
    ListPerformancesResults,
    ListPerformanceTimesResults,
    Performance,
    PerformanceTime,
    PriceBand,
    SendMethod,
    SendMethodsResult,
    Source,
    SourcesResult,
    TicketType,
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
    PaginationParams,
    ParameterProvider,
    PaymentMethod,
    TransactionParams,
    UniversalParams,
)
from .trolley import (
    Bundle,
    CancellationResult,
    Customer,
    MakePurchaseResult,
    Order,
    ReservationResult,
    StatusResult,
    Trolley,
)

__all__ = [
    "ParameterProvider",
    "PaymentMethod",
    "UniversalParams",
    "PaginationParams",
    "ListEventsParams",
    "ListPerformancesParams",
    "GetAvailabilityParams",
    "MakeReservationParams",
    "TransactionParams",
    "MakePurchaseParams",
    "CancellationParams",
    "EmailCheckParams",
    "User",
    "Currency",
    "Event",
    "ListEventsResults",
    "Performance",
    "ListPerformancesResults",
    "PerformanceTime",
    "ListPerformanceTimesResults",
    "Availability",
    "AvailabilityResult",
    "TicketType",
    "PriceBand",
    "Discount",
    "DiscountsResult",
    "Source",
    "SourcesResult",
    "SendMethod",
    "SendMethodsResult",
    "Customer",
    "Trolley",
    "Bundle",
    "Order",
    "ReservationResult",
    "MakePurchaseResult",
    "StatusResult",
    "CancellationResult",
]
