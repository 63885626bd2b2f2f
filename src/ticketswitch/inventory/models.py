"""Inventory domain models: events, performances, availability and pricing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .fields import (
    JsonObject,
    get_bool,
    get_datetime,
    get_decimal,
    get_float,
    get_int,
    get_int_list,
    get_list,
    get_mapping,
    get_object,
    get_str,
    get_str_list,
    get_str_mapping,
    get_str_matrix_mapping,
)

_ZERO = Decimal("0")


@dataclass(slots=True, frozen=True)
class User:
    """The account the API credentials belong to."""

    id: str = ""
    name: str = ""
    country: str = ""
    sub_user: str = ""
    is_b2b: bool = False
    statement_descriptor: str = ""
    backend_group: str = ""
    content_group: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> User:
        return cls(
            id=get_str(payload, "user_id"),
            name=get_str(payload, "real_name"),
            country=get_str(payload, "default_country_code"),
            sub_user=get_str(payload, "sub_user"),
            is_b2b=get_bool(payload, "is_b2b"),
            statement_descriptor=get_str(payload, "statement_descriptor"),
            backend_group=get_str(payload, "backend_group"),
            content_group=get_str(payload, "content_group"),
        )


@dataclass(slots=True, frozen=True)
class Currency:
    """ISO 4217 currency with display hints.

    ``factor`` is an arbitrary scale that can be used to roughly convert
    between currencies.
    """

    code: str = ""
    places: int = 0
    pre_symbol: str = ""
    post_symbol: str = ""
    factor: int = 0
    number: int = 0

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Currency:
        return cls(
            code=get_str(payload, "currency_code"),
            places=get_int(payload, "currency_places"),
            pre_symbol=get_str(payload, "currency_pre_symbol"),
            post_symbol=get_str(payload, "currency_post_symbol"),
            factor=get_int(payload, "currency_factor"),
            number=get_int(payload, "currency_number"),
        )


def currency_table(payload: JsonObject, key: str = "currency_details") -> dict[str, Currency]:
    return get_mapping(payload, key, Currency.from_payload)


@dataclass(slots=True, frozen=True)
class Offer:
    seat_price: Decimal = _ZERO
    surcharge: Decimal = _ZERO
    full_seat_price: Decimal = _ZERO
    full_surcharge: Decimal = _ZERO
    absolute_saving: Decimal = _ZERO
    percentage_saving: Decimal = _ZERO

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Offer:
        return cls(
            seat_price=get_decimal(payload, "offer_seatprice"),
            surcharge=get_decimal(payload, "offer_surcharge"),
            full_seat_price=get_decimal(payload, "full_seatprice"),
            full_surcharge=get_decimal(payload, "full_surcharge"),
            absolute_saving=get_decimal(payload, "absolute_saving"),
            percentage_saving=get_decimal(payload, "percentage_saving"),
        )


@dataclass(slots=True, frozen=True)
class CostRange:
    """Summarised pricing for an event or performance.

    Built from cached availability and therefore not guaranteed accurate.
    """

    valid_quantities: tuple[int, ...] = ()
    min_seat_price: Decimal = _ZERO
    max_seat_price: Decimal = _ZERO
    min_surcharge: Decimal = _ZERO
    max_surcharge: Decimal = _ZERO
    currency_code: str = ""
    currency: Currency | None = None
    best_value_offer: Offer | None = None
    max_saving_offer: Offer | None = None
    min_cost_offer: Offer | None = None
    top_price_offer: Offer | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> CostRange:
        return cls(
            valid_quantities=get_int_list(payload, "valid_quantities"),
            min_seat_price=get_decimal(payload, "min_seatprice"),
            max_seat_price=get_decimal(payload, "max_seatprice"),
            min_surcharge=get_decimal(payload, "min_surcharge"),
            max_surcharge=get_decimal(payload, "max_surcharge"),
            currency_code=get_str(payload, "currency_code"),
            currency=get_object(payload, "currency", Currency.from_payload),
            best_value_offer=get_object(payload, "best_value_offer", Offer.from_payload),
            max_saving_offer=get_object(payload, "max_saving_offer", Offer.from_payload),
            min_cost_offer=get_object(payload, "min_cost_offer", Offer.from_payload),
            top_price_offer=get_object(payload, "top_price", Offer.from_payload),
        )


@dataclass(slots=True, frozen=True)
class CostRangeDetails:
    ticket_type_code: str = ""
    price_band_code: str = ""
    ticket_type_description: str = ""
    price_band_description: str = ""
    cost_range: CostRange | None = None
    no_singles_cost_range: CostRange | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> CostRangeDetails:
        return cls(
            ticket_type_code=get_str(payload, "ticket_type_code"),
            price_band_code=get_str(payload, "price_band_code"),
            ticket_type_description=get_str(payload, "ticket_type_desc"),
            price_band_description=get_str(payload, "price_band_desc"),
            cost_range=get_object(payload, "cost_range", CostRange.from_payload),
            no_singles_cost_range=get_object(
                payload, "no_singles_cost_range", CostRange.from_payload
            ),
        )


@dataclass(slots=True, frozen=True)
class GeoData:
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_payload(cls, payload: JsonObject) -> GeoData:
        return cls(
            latitude=get_float(payload, "latitude"),
            longitude=get_float(payload, "longitude"),
        )


@dataclass(slots=True, frozen=True)
class UpsellList:
    event_ids: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> UpsellList:
        return cls(event_ids=get_str_list(payload, "event_id"))


@dataclass(slots=True, frozen=True)
class Content:
    name: str = ""
    value: str = ""
    value_html: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Content:
        return cls(
            name=get_str(payload, "name"),
            value=get_str(payload, "value"),
            value_html=get_str(payload, "value_html"),
        )


@dataclass(slots=True, frozen=True)
class Field:
    """A custom field attached to an event."""

    name: str = ""
    label: str = ""
    data: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Field:
        return cls(
            name=get_str(payload, "name"),
            label=get_str(payload, "label"),
            data=get_str(payload, "data"),
        )


@dataclass(slots=True, frozen=True)
class Media:
    """An event media asset. Only video assets carry dimensions."""

    caption: str = ""
    caption_html: str = ""
    name: str = ""
    url: str = ""
    secure: bool = False
    width: int = 0
    height: int = 0

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Media:
        return cls(
            caption=get_str(payload, "caption"),
            caption_html=get_str(payload, "caption_html"),
            name=get_str(payload, "name"),
            url=get_str(payload, "url"),
            secure=get_bool(payload, "secure"),
            width=get_int(payload, "width"),
            height=get_int(payload, "height"),
        )


@dataclass(slots=True, frozen=True)
class Review:
    body: str = ""
    date_time: datetime | None = None
    star_rating: int = 0
    language: str = ""
    title: str = ""
    is_user: bool = False
    author: str = ""
    url: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Review:
        return cls(
            body=get_str(payload, "body"),
            date_time=get_datetime(payload, "iso8601_date_and_time"),
            star_rating=get_int(payload, "star_rating"),
            language=get_str(payload, "language"),
            title=get_str(payload, "title"),
            is_user=get_bool(payload, "is_user"),
            author=get_str(payload, "author"),
            url=get_str(payload, "url"),
        )


@dataclass(slots=True, frozen=True)
class AvailabilityDetails:
    """Cached availability summary for one ticket type and price band."""

    ticket_type_code: str = ""
    ticket_type_description: str = ""
    price_band_code: str = ""
    price_band_description: str = ""
    seat_price: Decimal = _ZERO
    surcharge: Decimal = _ZERO
    full_seat_price: Decimal = _ZERO
    full_surcharge: Decimal = _ZERO
    currency_code: str = ""
    first_date: datetime | None = None
    last_date: datetime | None = None
    valid_quantities: tuple[int, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> AvailabilityDetails:
        return cls(
            ticket_type_code=get_str(payload, "ticket_type_code"),
            ticket_type_description=get_str(payload, "ticket_type_desc"),
            price_band_code=get_str(payload, "price_band_code"),
            price_band_description=get_str(payload, "price_band_desc"),
            seat_price=get_decimal(payload, "seatprice"),
            surcharge=get_decimal(payload, "surcharge"),
            full_seat_price=get_decimal(payload, "full_seatprice"),
            full_surcharge=get_decimal(payload, "full_surcharge"),
            currency_code=get_str(payload, "currency_code"),
            first_date=get_datetime(payload, "first_date"),
            last_date=get_datetime(payload, "last_date"),
            valid_quantities=get_int_list(payload, "valid_quantities"),
        )


@dataclass(slots=True, frozen=True)
class Event:
    """A product in the inventory.

    Everything past ``needs_performance`` is only populated when the
    matching request flag was set.
    """

    id: str = ""
    status: str = ""
    description: str = ""
    source: str = ""
    source_code: str = ""
    event_type: str = ""
    venue: str = ""
    classes: dict[str, str] = field(default_factory=dict)
    filters: tuple[str, ...] = ()
    postcode: str = ""
    geo_data: GeoData | None = None
    city: str = ""
    city_code: str = ""
    country: str = ""
    country_code: str = ""
    max_running_time: int = 0
    min_running_time: int = 0
    show_performance_time: bool = False
    has_no_performances: bool = False
    is_seated: bool = False
    needs_departure_date: bool = False
    needs_duration: bool = False
    needs_performance: bool = False
    upsell_list: UpsellList | None = None
    cost_range: CostRange | None = None
    no_singles_cost_range: CostRange | None = None
    cost_range_details: CostRangeDetails | None = None
    content: dict[str, Content] = field(default_factory=dict)
    fields: dict[str, Field] = field(default_factory=dict)
    event_info: str = ""
    event_info_html: str = ""
    venue_address: str = ""
    venue_address_html: str = ""
    venue_info: str = ""
    venue_info_html: str = ""
    media: dict[str, Media] = field(default_factory=dict)
    reviews: tuple[Review, ...] = ()
    critic_review_percent: float = 0.0
    availability_details: AvailabilityDetails | None = None
    component_events: tuple[Event, ...] = ()
    valid_quantities: tuple[int, ...] = ()
    is_addon: bool = False
    area_code: str = ""
    code: str = ""
    venue_code: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Event:
        return cls(
            id=get_str(payload, "event_id"),
            status=get_str(payload, "event_status"),
            description=get_str(payload, "event_desc"),
            source=get_str(payload, "source_desc"),
            source_code=get_str(payload, "source_code"),
            event_type=get_str(payload, "event_type"),
            venue=get_str(payload, "venue_desc"),
            classes=get_str_mapping(payload, "classes"),
            filters=get_str_list(payload, "custom_filter"),
            postcode=get_str(payload, "postcode"),
            geo_data=get_object(payload, "geo_data", GeoData.from_payload),
            city=get_str(payload, "city_desc"),
            city_code=get_str(payload, "city_code"),
            country=get_str(payload, "country_desc"),
            country_code=get_str(payload, "country_code"),
            max_running_time=get_int(payload, "max_running_time"),
            min_running_time=get_int(payload, "min_running_time"),
            show_performance_time=get_bool(payload, "show_perf_time"),
            has_no_performances=get_bool(payload, "has_no_perfs"),
            is_seated=get_bool(payload, "is_seated"),
            needs_departure_date=get_bool(payload, "needs_departure_date"),
            needs_duration=get_bool(payload, "needs_duration"),
            needs_performance=get_bool(payload, "needs_performance"),
            upsell_list=get_object(payload, "event_upsell_list", UpsellList.from_payload),
            cost_range=get_object(payload, "cost_range", CostRange.from_payload),
            no_singles_cost_range=get_object(
                payload, "no_singles_cost_range", CostRange.from_payload
            ),
            cost_range_details=get_object(
                payload, "cost_range_details", CostRangeDetails.from_payload
            ),
            content=get_mapping(payload, "content", Content.from_payload),
            fields=get_mapping(payload, "fields", Field.from_payload),
            event_info=get_str(payload, "event_info"),
            event_info_html=get_str(payload, "event_info_html"),
            venue_address=get_str(payload, "venue_addr"),
            venue_address_html=get_str(payload, "venue_addr_html"),
            venue_info=get_str(payload, "venue_info"),
            venue_info_html=get_str(payload, "venue_info_html"),
            media=get_mapping(payload, "media", Media.from_payload),
            reviews=get_list(payload, "reviews", Review.from_payload),
            critic_review_percent=get_float(payload, "critic_review_percent"),
            availability_details=get_object(
                payload, "availability_details", AvailabilityDetails.from_payload
            ),
            component_events=get_list(payload, "component_events", Event.from_payload),
            valid_quantities=get_int_list(payload, "valid_quantities"),
            is_addon=get_bool(payload, "is_add_on"),
            area_code=get_str(payload, "area_code"),
            code=get_str(payload, "event_code"),
            venue_code=get_str(payload, "venue_code"),
        )


@dataclass(slots=True, frozen=True)
class PagingStatus:
    page_length: int = 0
    page_number: int = 0
    pages_remaining: int = 0
    results_remaining: int = 0
    total_results: int = 0

    @classmethod
    def from_payload(cls, payload: JsonObject) -> PagingStatus:
        return cls(
            page_length=get_int(payload, "page_length"),
            page_number=get_int(payload, "page_number"),
            pages_remaining=get_int(payload, "pages_remaining"),
            results_remaining=get_int(payload, "results_remaining"),
            total_results=get_int(payload, "total_unpaged_results"),
        )


@dataclass(slots=True, frozen=True)
class ListEventsResults:
    """One page of events.

    ``currencies`` is filled from the response's top-level currency table,
    which sits beside ``results`` rather than inside it.
    """

    events: tuple[Event, ...] = ()
    paging_status: PagingStatus | None = None
    currencies: dict[str, Currency] = field(default_factory=dict)
    default_currency_code: str = ""
    desired_currency_code: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> ListEventsResults:
        return cls(
            events=get_list(payload, "event", Event.from_payload),
            paging_status=get_object(payload, "paging_status", PagingStatus.from_payload),
            default_currency_code=get_str(payload, "default_currency_code"),
            desired_currency_code=get_str(payload, "desired_currency_code"),
        )


@dataclass(slots=True, frozen=True)
class Performance:
    """A single occurrence of an event.

    ``cached_max_seats`` and ``availability_details`` come from cached data
    and may be stale.
    """

    id: str = ""
    name: str = ""
    event_id: str = ""
    date_time: datetime | None = None
    date_description: str = ""
    time_description: str = ""
    running_time: int = 0
    has_pool_seats: bool = False
    is_limited: bool = False
    is_ghost: bool = False
    cached_max_seats: int = 0
    cost_range: CostRange | None = None
    no_singles_cost_range: CostRange | None = None
    availability_details: AvailabilityDetails | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Performance:
        return cls(
            id=get_str(payload, "perf_id"),
            name=get_str(payload, "perf_name"),
            event_id=get_str(payload, "event_id"),
            date_time=get_datetime(payload, "iso8601_date_and_time"),
            date_description=get_str(payload, "date_desc"),
            time_description=get_str(payload, "time_desc"),
            running_time=get_int(payload, "running_time"),
            has_pool_seats=get_bool(payload, "has_pool_seats"),
            is_limited=get_bool(payload, "is_limited"),
            is_ghost=get_bool(payload, "is_ghost"),
            cached_max_seats=get_int(payload, "cached_max_seats"),
            cost_range=get_object(payload, "cost_range", CostRange.from_payload),
            no_singles_cost_range=get_object(
                payload, "no_singles_cost_range", CostRange.from_payload
            ),
            availability_details=get_object(
                payload, "avail_details", AvailabilityDetails.from_payload
            ),
        )


@dataclass(slots=True, frozen=True)
class ListPerformancesResults:
    has_performance_names: bool = False
    paging_status: PagingStatus | None = None
    performances: tuple[Performance, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> ListPerformancesResults:
        return cls(
            has_performance_names=get_bool(payload, "has_perf_names"),
            paging_status=get_object(payload, "paging_status", PagingStatus.from_payload),
            performances=get_list(payload, "performance", Performance.from_payload),
        )


@dataclass(slots=True, frozen=True)
class PerformanceTime:
    date_time: datetime | None = None
    time_description: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> PerformanceTime:
        return cls(
            date_time=get_datetime(payload, "iso8601_date_and_time"),
            time_description=get_str(payload, "time_desc"),
        )


@dataclass(slots=True, frozen=True)
class ListPerformanceTimesResults:
    times: tuple[PerformanceTime, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> ListPerformanceTimesResults:
        return cls(times=get_list(payload, "time", PerformanceTime.from_payload))


@dataclass(slots=True, frozen=True)
class UserCommission:
    """What the user is paid for selling a ticket."""

    amount_including_vat: Decimal = _ZERO
    amount_excluding_vat: Decimal = _ZERO
    currency_code: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> UserCommission:
        return cls(
            amount_including_vat=get_decimal(payload, "amount_including_vat"),
            amount_excluding_vat=get_decimal(payload, "amount_excluding_vat"),
            currency_code=get_str(payload, "commission_currency_code"),
        )


@dataclass(slots=True, frozen=True)
class GrossCommission:
    """Total commission shared between the platform and the user."""

    amount_including_vat: Decimal = _ZERO
    amount_excluding_vat: Decimal = _ZERO
    currency_code: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> GrossCommission:
        return cls(
            amount_including_vat=get_decimal(payload, "amount_including_vat"),
            amount_excluding_vat=get_decimal(payload, "amount_excluding_vat"),
            currency_code=get_str(payload, "commission_currency_code"),
        )


@dataclass(slots=True, frozen=True)
class Discount:
    code: str = ""
    description: str = ""
    absolute_saving: Decimal = _ZERO
    allows_leaving_single_seats: str = ""
    minimum_eligible_age: int = 0
    maximum_eligible_age: int = 0
    semantic_type: str = ""
    is_offer: bool = False
    non_offer_seat_price: Decimal = _ZERO
    non_offer_surcharge: Decimal = _ZERO
    non_offer_combined: Decimal = _ZERO
    number_available: int = 0
    percentage_saving: Decimal = _ZERO
    price_band_code: str = ""
    seat_price: Decimal = _ZERO
    surcharge: Decimal = _ZERO
    combined: Decimal = _ZERO

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Discount:
        return cls(
            code=get_str(payload, "discount_code"),
            description=get_str(payload, "discount_desc"),
            absolute_saving=get_decimal(payload, "absolute_saving"),
            allows_leaving_single_seats=get_str(payload, "allows_leaving_single_seats"),
            minimum_eligible_age=get_int(payload, "discount_minimum_eligible_age"),
            maximum_eligible_age=get_int(payload, "discount_maximum_eligible_age"),
            semantic_type=get_str(payload, "discount_semantic_type"),
            is_offer=get_bool(payload, "is_offer"),
            non_offer_seat_price=get_decimal(payload, "non_offer_sale_seatprice"),
            non_offer_surcharge=get_decimal(payload, "non_offer_sale_surcharge"),
            non_offer_combined=get_decimal(payload, "non_offer_sale_combined"),
            number_available=get_int(payload, "number_available"),
            percentage_saving=get_decimal(payload, "percentage_saving"),
            price_band_code=get_str(payload, "price_band_code"),
            seat_price=get_decimal(payload, "sale_seatprice"),
            surcharge=get_decimal(payload, "sale_surcharge"),
            combined=get_decimal(payload, "sale_combined"),
        )




def _discount_holder(payload: JsonObject, key: str) -> tuple[Discount, ...]:
    """Unwrap ``{key: {"discount": [...]}}``."""

    holder = get_object(
        payload,
        key,
        lambda inner: get_list(inner, "discount", Discount.from_payload),
    )
    return holder or ()


@dataclass(slots=True, frozen=True)
class PriceBand:
    """Tickets within a ticket type sharing a price point.

    The price is that of the band's default discount, normally the most
    expensive discount available.
    """

    code: str = ""
    description: str = ""
    discount_code: str = ""
    discount_description: str = ""
    number_available: int = 0
    seat_price: Decimal = _ZERO
    surcharge: Decimal = _ZERO
    allows_leaving_single_seats: str = ""
    is_offer: bool = False
    non_offer_seat_price: Decimal = _ZERO
    non_offer_surcharge: Decimal = _ZERO
    percentage_saving: Decimal = _ZERO
    absolute_saving: Decimal = _ZERO
    free_seat_blocks: dict[str, tuple[tuple[str, ...], ...]] = field(default_factory=dict)
    restricted_view_seats: tuple[str, ...] = ()
    seats_by_text_message: tuple[str, ...] = ()
    predicted_user_commission: UserCommission | None = None
    possible_discounts: tuple[Discount, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> PriceBand:
        return cls(
            code=get_str(payload, "price_band_code"),
            description=get_str(payload, "price_band_desc"),
            discount_code=get_str(payload, "discount_code"),
            discount_description=get_str(payload, "discount_desc"),
            number_available=get_int(payload, "number_available"),
            seat_price=get_decimal(payload, "sale_seatprice"),
            surcharge=get_decimal(payload, "sale_surcharge"),
            allows_leaving_single_seats=get_str(payload, "allows_leaving_single_seats"),
            is_offer=get_bool(payload, "is_offer"),
            non_offer_seat_price=get_decimal(payload, "non_offer_sale_seatprice"),
            non_offer_surcharge=get_decimal(payload, "non_offer_sale_surcharge"),
            percentage_saving=get_decimal(payload, "percentage_saving"),
            absolute_saving=get_decimal(payload, "absolute_saving"),
            free_seat_blocks=get_str_matrix_mapping(payload, "free_seat_blocks"),
            restricted_view_seats=get_str_list(payload, "restricted_view_seats_raw"),
            seats_by_text_message=get_str_list(payload, "seats_by_text_message_raw"),
            predicted_user_commission=get_object(
                payload, "predicted_user_commission", UserCommission.from_payload
            ),
            possible_discounts=_discount_holder(payload, "possible_discounts"),
        )


@dataclass(slots=True, frozen=True)
class TicketType:
    """Tickets grouped by something other than price, usually a part of the house."""

    code: str = ""
    description: str = ""
    price_bands: tuple[PriceBand, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> TicketType:
        return cls(
            code=get_str(payload, "ticket_type_code"),
            description=get_str(payload, "ticket_type_desc"),
            price_bands=get_list(payload, "price_band", PriceBand.from_payload),
        )


@dataclass(slots=True, frozen=True)
class Availability:
    ticket_types: tuple[TicketType, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Availability:
        return cls(ticket_types=get_list(payload, "ticket_type", TicketType.from_payload))


@dataclass(slots=True, frozen=True)
class AvailabilityResult:
    availability: Availability | None = None
    backend_is_broken: bool = False
    backend_is_down: bool = False
    backend_throttle_failed: bool = False
    contiguous_seat_selection_only: bool = False
    currency_code: str = ""
    currency_details: dict[str, Currency] = field(default_factory=dict)
    valid_quantities: tuple[int, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> AvailabilityResult:
        return cls(
            availability=get_object(payload, "availability", Availability.from_payload),
            backend_is_broken=get_bool(payload, "backend_is_broken"),
            backend_is_down=get_bool(payload, "backend_is_down"),
            backend_throttle_failed=get_bool(payload, "backend_throttle_failed"),
            contiguous_seat_selection_only=get_bool(payload, "contiguous_seat_selection_only"),
            currency_code=get_str(payload, "currency_code"),
            currency_details=currency_table(payload),
            valid_quantities=get_int_list(payload, "valid_quantities"),
        )


@dataclass(slots=True, frozen=True)
class DiscountsResult:
    discounts: tuple[Discount, ...] = ()
    currency_code: str = ""
    currency_details: dict[str, Currency] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: JsonObject) -> DiscountsResult:
        return cls(
            discounts=_discount_holder(payload, "discounts"),
            currency_code=get_str(payload, "currency_code"),
            currency_details=currency_table(payload),
        )


@dataclass(slots=True, frozen=True)
class Source:
    """A backend system supplying inventory.

    Contact and terms fields are only returned when source info was requested.
    """

    code: str = ""
    description: str = ""
    email: str = ""
    address: str = ""
    system_class: str = ""
    system_type: str = ""
    terms_and_conditions: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Source:
        return cls(
            code=get_str(payload, "source_code"),
            description=get_str(payload, "source_desc_from_config"),
            email=get_str(payload, "source_after_sales_email"),
            address=get_str(payload, "source_postal_addr"),
            system_class=get_str(payload, "source_system_class"),
            system_type=get_str(payload, "source_system_type_string"),
            terms_and_conditions=get_str(payload, "source_t_and_c"),
        )


@dataclass(slots=True, frozen=True)
class SourcesResult:
    sources: tuple[Source, ...] = ()


@dataclass(slots=True, frozen=True)
class Country:
    code: str = ""
    description: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Country:
        return cls(
            code=get_str(payload, "country_code"),
            description=get_str(payload, "country_desc"),
        )


@dataclass(slots=True, frozen=True)
class SendMethod:
    """How tickets reach the customer (collection, post, self print...)."""

    code: str = ""
    cost: Decimal = _ZERO
    description: str = ""
    type: str = ""
    permitted_countries: tuple[Country, ...] = ()
    final_type: str = ""
    can_generate_self_print: bool = False
    self_print_voucher_url: str = ""
    has_html_page: bool = False

    @classmethod
    def from_payload(cls, payload: JsonObject) -> SendMethod:
        countries = get_object(
            payload,
            "permitted_countries",
            lambda inner: get_list(inner, "country", Country.from_payload),
        )
        return cls(
            code=get_str(payload, "send_code"),
            cost=get_decimal(payload, "send_cost"),
            description=get_str(payload, "send_desc"),
            type=get_str(payload, "send_type"),
            permitted_countries=countries or (),
            final_type=get_str(payload, "send_final_type"),
            can_generate_self_print=get_bool(payload, "can_generate_self_print"),
            self_print_voucher_url=get_str(payload, "self_print_voucher_url"),
            has_html_page=get_bool(payload, "has_html_page"),
        )


@dataclass(slots=True, frozen=True)
class SendMethodsResult:
    source_code: str = ""
    currency_code: str = ""
    currency_details: dict[str, Currency] = field(default_factory=dict)
    send_methods: tuple[SendMethod, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> SendMethodsResult:
        methods = get_object(
            payload,
            "send_methods",
            lambda inner: get_list(inner, "send_method", SendMethod.from_payload),
        )
        return cls(
            source_code=get_str(payload, "source_code"),
            currency_code=get_str(payload, "currency_code"),
            currency_details=currency_table(payload),
            send_methods=methods or (),
        )


__all__ = [
    "User",
    "Currency",
    "currency_table",
    "Offer",
    "CostRange",
    "CostRangeDetails",
    "GeoData",
    "UpsellList",
    "Content",
    "Field",
    "Media",
    "Review",
    "AvailabilityDetails",
    "Event",
    "PagingStatus",
    "ListEventsResults",
    "Performance",
    "ListPerformancesResults",
    "PerformanceTime",
    "ListPerformanceTimesResults",
    "UserCommission",
    "GrossCommission",
    "Discount",
    "PriceBand",
    "TicketType",
    "Availability",
    "AvailabilityResult",
    "DiscountsResult",
    "Source",
    "SourcesResult",
    "Country",
    "SendMethod",
    "SendMethodsResult",
]
