"""Request parameter providers for inventory endpoints.

Every provider exposes ``flatten()`` returning a ``dict[str, str]``. Call
providers hold optional ``universal`` and ``pagination`` sub-objects; their
contributions are merged in a fixed order:

1. universal options (without ``misc``)
2. pagination options
3. the provider's own fields
4. ``universal.misc``

so call-specific values win over shared options, and ``misc`` can override
anything, which keeps undocumented API parameters reachable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol, runtime_checkable

from ..dates import date_range, format_date
from ..geo import Circle
from .trolley import Customer

SORT_MOST_POPULAR = "most_popular"
SORT_ALPHABETIC = "alphabetic"
SORT_COST_ASCENDING = "cost_ascending"
SORT_COST_DESCENDING = "cost_descending"
SORT_CRITIC_RATING = "critic_rating"
SORT_RECENT = "recent"
SORT_LAST_SALE = "last_sale"

_MEDIA_KEYS: tuple[str, ...] = (
    "req_media_triplet_one",
    "req_media_triplet_two",
    "req_media_triplet_three",
    "req_media_triplet_four",
    "req_media_triplet_five",
    "req_media_seating_plan",
    "req_media_square",
    "req_media_landscape",
    "req_media_marquee",
    "req_video_iframe",
)

# Offer and no-singles data are only returned alongside a cost range.
_COST_RANGE_DEPENDENT_FLAGS: tuple[tuple[str, str], ...] = (
    ("best_value_offer", "req_best_value_offer"),
    ("max_saving_offer", "req_max_saving_offer"),
    ("min_cost_offer", "req_min_cost_offer"),
    ("top_price_offer", "req_top_price_offer"),
    ("no_singles_data", "req_no_singles_data"),
)


@runtime_checkable
class ParameterProvider(Protocol):
    def flatten(self) -> dict[str, str]: ...


@runtime_checkable
class PaymentMethod(Protocol):
    """Payment details supplied to a purchase.

    Implementations contribute their own parameters; the library does not
    interpret them.
    """

    def contribute_params(self) -> Mapping[str, str]: ...


def _set_flag(values: dict[str, str], key: str, enabled: bool) -> None:
    if enabled:
        values[key] = "1"


def _to_tuple(value: Sequence[object], *, name: str) -> tuple:
    if isinstance(value, str):
        raise TypeError(f"{name} must be a sequence, not str")
    return tuple(value)


@dataclass(slots=True, frozen=True)
class UniversalParams:
    """Options accepted by every call."""

    availability: bool = False
    availability_with_performances: bool = False
    extra_info: bool = False
    reviews: bool = False
    media: bool = False
    cost_range: bool = False
    best_value_offer: bool = False
    max_saving_offer: bool = False
    min_cost_offer: bool = False
    top_price_offer: bool = False
    no_singles_data: bool = False
    cost_range_details: bool = False
    source_info: bool = False
    add_customer: bool = False
    tracking_id: str = ""
    misc: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "misc", dict(self.misc))

    def flatten_options(self) -> dict[str, str]:
        values: dict[str, str] = {}
        _set_flag(values, "req_avail_details", self.availability)
        if self.availability_with_performances:
            values["req_avail_details"] = "1"
            values["req_avail_details_with_perfs"] = "1"
        _set_flag(values, "req_extra_info", self.extra_info)
        _set_flag(values, "req_reviews", self.reviews)
        if self.media:
            for key in _MEDIA_KEYS:
                values[key] = "1"
        _set_flag(values, "req_cost_range", self.cost_range)
        for attr, key in _COST_RANGE_DEPENDENT_FLAGS:
            if getattr(self, attr):
                values["req_cost_range"] = "1"
                values[key] = "1"
        _set_flag(values, "req_cost_range_details", self.cost_range_details)
        _set_flag(values, "req_src_info", self.source_info)
        _set_flag(values, "add_customer", self.add_customer)
        if self.tracking_id:
            values["custom_tracking_id"] = self.tracking_id
        return values

    def flatten(self) -> dict[str, str]:
        values = self.flatten_options()
        values.update(self.misc)
        return values


@dataclass(slots=True, frozen=True)
class PaginationParams:
    page_length: int = 0
    page_number: int = 0

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self.page_length > 0:
            values["page_len"] = str(self.page_length)
        if self.page_number > 0:
            values["page_no"] = str(self.page_number)
        return values


def merge_params(
    own: Mapping[str, str],
    *,
    universal: UniversalParams | None = None,
    pagination: PaginationParams | None = None,
) -> dict[str, str]:
    values: dict[str, str] = {}
    if universal is not None:
        values.update(universal.flatten_options())
    if pagination is not None:
        values.update(pagination.flatten())
    values.update(own)
    if universal is not None:
        values.update(universal.misc)
    return values


@dataclass(slots=True, frozen=True)
class ListEventsParams:
    keywords: Sequence[str] = ()
    start_date: date | None = None
    end_date: date | None = None
    country_code: str = ""
    city_code: str = ""
    circle: Circle | None = None
    include_dead: bool = False
    sort_order: str = ""
    universal: UniversalParams = field(default_factory=UniversalParams)
    pagination: PaginationParams = field(default_factory=PaginationParams)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _to_tuple(self.keywords, name="keywords"))

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self.keywords:
            values["keywords"] = ",".join(self.keywords)
        if dr := date_range(self.start_date, self.end_date):
            values["date_range"] = dr
        if self.country_code:
            values["country_code"] = self.country_code
        if self.city_code:
            values["city_code"] = self.city_code
        if self.circle is not None and self.circle.is_valid():
            values["circle"] = self.circle.param()
        _set_flag(values, "include_dead", self.include_dead)
        if self.sort_order:
            values["sort_order"] = self.sort_order
        return merge_params(values, universal=self.universal, pagination=self.pagination)


@dataclass(slots=True, frozen=True)
class ListPerformancesParams:
    event_id: str = ""
    start_date: date | None = None
    end_date: date | None = None
    universal: UniversalParams = field(default_factory=UniversalParams)
    pagination: PaginationParams = field(default_factory=PaginationParams)

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self.event_id:
            values["event_id"] = self.event_id
        if dr := date_range(self.start_date, self.end_date):
            values["date_range"] = dr
        return merge_params(values, universal=self.universal, pagination=self.pagination)


@dataclass(slots=True, frozen=True)
class GetAvailabilityParams:
    number_of_seats: int = 0
    discounts: bool = False
    example_seats: bool = False
    seat_blocks: bool = False
    user_commission: bool = False
    universal: UniversalParams = field(default_factory=UniversalParams)

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self.number_of_seats > 0:
            values["number_of_seats"] = str(self.number_of_seats)
        _set_flag(values, "add_discounts", self.discounts)
        _set_flag(values, "add_example_seats", self.example_seats)
        _set_flag(values, "add_seat_blocks", self.seat_blocks)
        _set_flag(values, "req_predicted_commission", self.user_commission)
        return merge_params(values, universal=self.universal)


@dataclass(slots=True, frozen=True)
class MakeReservationParams:
    """Parameters for placing a hold on tickets.

    ``discounts`` and ``seats`` are positional: the n-th entry is sent as
    ``disc{n}`` / ``seat{n}``. A send method is only sent together with the
    source code it belongs to.
    """

    performance_id: str
    ticket_type_code: str
    price_band_code: str
    number_of_seats: int
    departure_date: date | None = None
    discounts: Sequence[str] = ()
    seats: Sequence[str] = ()
    send_method: str = ""
    source_code: str = ""
    trolley_token: str = ""
    user_commission: bool = False
    universal: UniversalParams = field(default_factory=UniversalParams)

    def __post_init__(self) -> None:
        object.__setattr__(self, "discounts", _to_tuple(self.discounts, name="discounts"))
        object.__setattr__(self, "seats", _to_tuple(self.seats, name="seats"))

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {
            "no_of_seats": str(self.number_of_seats),
            "perf_id": self.performance_id,
            "price_band_code": self.price_band_code,
            "ticket_type_code": self.ticket_type_code,
        }
        if self.departure_date is not None:
            values["departure_date"] = format_date(self.departure_date)
        for index, discount in enumerate(self.discounts):
            values[f"disc{index}"] = discount
        for index, seat in enumerate(self.seats):
            values[f"seat{index}"] = seat
        if self.send_method and self.source_code:
            values[f"{self.source_code}_send_method"] = self.send_method
        if self.trolley_token:
            values["trolley_token"] = self.trolley_token
        _set_flag(values, "req_predicted_commission", self.user_commission)
        return merge_params(values, universal=self.universal)


@dataclass(slots=True, frozen=True)
class TransactionParams:
    """Identifies a transaction for release and status calls."""

    transaction_uuid: str
    universal: UniversalParams = field(default_factory=UniversalParams)

    def flatten(self) -> dict[str, str]:
        return merge_params(
            {"transaction_uuid": self.transaction_uuid},
            universal=self.universal,
        )


@dataclass(slots=True, frozen=True)
class MakePurchaseParams:
    """Parameters for purchasing a reserved transaction.

    ``payment_method`` is only needed when not purchasing on credit.
    ``send_confirmation_email`` requires the customer to carry an email
    address.
    """

    transaction_uuid: str
    customer: Customer | None = None
    agent_reference: str = ""
    payment_method: PaymentMethod | None = None
    send_confirmation_email: bool = False
    universal: UniversalParams = field(default_factory=UniversalParams)

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {"transaction_uuid": self.transaction_uuid}
        if self.agent_reference:
            values["agent_reference"] = self.agent_reference
        _set_flag(values, "send_confirmation_email", self.send_confirmation_email)
        if self.customer is not None:
            values.update(self.customer.flatten())
        if self.payment_method is not None:
            values.update(self.payment_method.contribute_params())
        return merge_params(values, universal=self.universal)


@dataclass(slots=True, frozen=True)
class CancellationParams:
    transaction_uuid: str
    cancel_items: Sequence[int] = ()
    universal: UniversalParams = field(default_factory=UniversalParams)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cancel_items", _to_tuple(self.cancel_items, name="cancel_items"))

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {"transaction_uuid": self.transaction_uuid}
        if self.cancel_items:
            values["cancel_items_list"] = join_item_numbers(self.cancel_items)
        return merge_params(values, universal=self.universal)


@dataclass(slots=True, frozen=True)
class EmailCheckParams:
    email_address: str = ""
    universal: UniversalParams = field(default_factory=UniversalParams)

    def flatten(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self.email_address:
            values["email_address"] = self.email_address
        return merge_params(values, universal=self.universal)


def join_item_numbers(items: Sequence[int]) -> str:
    return ",".join(str(item) for item in items)


__all__ = [
    "SORT_MOST_POPULAR",
    "SORT_ALPHABETIC",
    "SORT_COST_ASCENDING",
    "SORT_COST_DESCENDING",
    "SORT_CRITIC_RATING",
    "SORT_RECENT",
    "SORT_LAST_SALE",
    "ParameterProvider",
    "PaymentMethod",
    "UniversalParams",
    "PaginationParams",
    "merge_params",
    "ListEventsParams",
    "ListPerformancesParams",
    "GetAvailabilityParams",
    "MakeReservationParams",
    "TransactionParams",
    "MakePurchaseParams",
    "CancellationParams",
    "EmailCheckParams",
    "join_item_numbers",
]
