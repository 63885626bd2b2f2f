"""Transaction models: trolley contents, customers and transaction results."""

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
    get_object,
    get_raw_mapping,
    get_str,
    get_str_list,
    get_str_mapping,
)
from .models import (
    Currency,
    Event,
    GrossCommission,
    Performance,
    SendMethod,
    User,
    UserCommission,
    currency_table,
)

CANCELLATION_STATUS_CANCELLED = "cancelled"

_ZERO = Decimal("0")


@dataclass(slots=True, frozen=True)
class Seat:
    column_id: str = ""
    full_id: str = ""
    is_restricted_view: bool = False
    row_id: str = ""
    seat_text: str = ""
    seat_subdata: str = ""
    barcode: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Seat:
        return cls(
            column_id=get_str(payload, "col_id"),
            full_id=get_str(payload, "full_id"),
            is_restricted_view=get_bool(payload, "is_restricted_view"),
            row_id=get_str(payload, "row_id"),
            seat_text=get_str(payload, "seat_text"),
            seat_subdata=get_str(payload, "seat_subdata"),
            barcode=get_str(payload, "barcode"),
        )


@dataclass(slots=True, frozen=True)
class TicketOrder:
    """Seats of one discount within an order."""

    discount_code: str = ""
    discount_description: str = ""
    number_of_seats: int = 0
    sale_seat_price: Decimal = _ZERO
    sale_surcharge: Decimal = _ZERO
    seats: tuple[Seat, ...] = ()
    total_sale_seat_price: Decimal = _ZERO
    total_sale_surcharge: Decimal = _ZERO

    @classmethod
    def from_payload(cls, payload: JsonObject) -> TicketOrder:
        return cls(
            discount_code=get_str(payload, "discount_code"),
            discount_description=get_str(payload, "discount_desc"),
            number_of_seats=get_int(payload, "no_of_seats"),
            sale_seat_price=get_decimal(payload, "sale_seatprice"),
            sale_surcharge=get_decimal(payload, "sale_surcharge"),
            seats=get_list(payload, "seats", Seat.from_payload),
            total_sale_seat_price=get_decimal(payload, "total_sale_seatprice"),
            total_sale_surcharge=get_decimal(payload, "total_sale_surcharge"),
        )


@dataclass(slots=True, frozen=True)
class Order:
    """Tickets for one performance, ticket type and price band."""

    item_number: int = 0
    event: Event | None = None
    performance: Performance | None = None
    got_requested_seats: bool = False
    price_band_code: str = ""
    requested_seat_ids: tuple[str, ...] = ()
    reserve_failure_comment: str = ""
    seat_request_status: str = ""
    send_method: SendMethod | None = None
    ticket_orders: tuple[TicketOrder, ...] = ()
    ticket_type_code: str = ""
    ticket_type_description: str = ""
    total_number_of_seats: int = 0
    total_sale_seat_price: Decimal = _ZERO
    total_sale_surcharge: Decimal = _ZERO
    user_commission: UserCommission | None = None
    gross_commission: GrossCommission | None = None
    backend_purchase_reference: str = ""
    cancellation_status: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Order:
        ticket_orders = get_object(
            payload,
            "ticket_orders",
            lambda inner: get_list(inner, "ticket_order", TicketOrder.from_payload),
        )
        return cls(
            item_number=get_int(payload, "item_number"),
            event=get_object(payload, "event", Event.from_payload),
            performance=get_object(payload, "performance", Performance.from_payload),
            got_requested_seats=get_bool(payload, "got_requested_seats"),
            price_band_code=get_str(payload, "price_band_code"),
            requested_seat_ids=get_str_list(payload, "requested_seat_ids"),
            reserve_failure_comment=get_str(payload, "reserve_failure_comment"),
            seat_request_status=get_str(payload, "seat_request_status"),
            send_method=get_object(payload, "send_method", SendMethod.from_payload),
            ticket_orders=ticket_orders or (),
            ticket_type_code=get_str(payload, "ticket_type_code"),
            ticket_type_description=get_str(payload, "ticket_type_desc"),
            total_number_of_seats=get_int(payload, "total_no_of_seats"),
            total_sale_seat_price=get_decimal(payload, "total_sale_seatprice"),
            total_sale_surcharge=get_decimal(payload, "total_sale_surcharge"),
            user_commission=get_object(payload, "user_commission", UserCommission.from_payload),
            gross_commission=get_object(
                payload, "gross_commission", GrossCommission.from_payload
            ),
            backend_purchase_reference=get_str(payload, "backend_purchase_reference"),
            cancellation_status=get_str(payload, "cancellation_status"),
        )


@dataclass(slots=True, frozen=True)
class AgentCost:
    currency_code: str = ""
    total_agent_cost: Decimal = _ZERO

    @classmethod
    def from_payload(cls, payload: JsonObject) -> AgentCost:
        return cls(
            currency_code=get_str(payload, "currency_code"),
            total_agent_cost=get_decimal(payload, "total_agent_cost"),
        )


@dataclass(slots=True, frozen=True)
class PurchaseResult:
    is_partial: bool = False
    success: bool = False
    agent_cost: AgentCost | None = None
    is_semi_credit: bool = False

    @classmethod
    def from_payload(cls, payload: JsonObject) -> PurchaseResult:
        return cls(
            is_partial=get_bool(payload, "is_partial"),
            success=get_bool(payload, "success"),
            agent_cost=get_object(payload, "agent_cost", AgentCost.from_payload),
            is_semi_credit=get_bool(payload, "is_semi_credit"),
        )


@dataclass(slots=True, frozen=True)
class Bundle:
    """Orders from a single source system, paid for together."""

    order_count: int = 0
    source_code: str = ""
    source_description: str = ""
    total_cost: Decimal = _ZERO
    total_seat_price: Decimal = _ZERO
    total_send_cost: Decimal = _ZERO
    total_surcharge: Decimal = _ZERO
    currency_code: str = ""
    orders: tuple[Order, ...] = ()
    purchase_result: PurchaseResult | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Bundle:
        return cls(
            order_count=get_int(payload, "bundle_order_count"),
            source_code=get_str(payload, "bundle_source_code"),
            source_description=get_str(payload, "bundle_source_desc"),
            total_cost=get_decimal(payload, "bundle_total_cost"),
            total_seat_price=get_decimal(payload, "bundle_total_seatprice"),
            total_send_cost=get_decimal(payload, "bundle_total_send_cost"),
            total_surcharge=get_decimal(payload, "bundle_total_surcharge"),
            currency_code=get_str(payload, "currency_code"),
            orders=get_list(payload, "order", Order.from_payload),
            purchase_result=get_object(payload, "purchase_result", PurchaseResult.from_payload),
        )


@dataclass(slots=True, frozen=True)
class Trolley:
    """The contents of a transaction, grouped into bundles."""

    bundles: tuple[Bundle, ...] = ()
    transaction_uuid: str = ""
    transaction_id: str = ""
    bundle_count: int = 0
    order_count: int = 0
    purchase_result: PurchaseResult | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Trolley:
        return cls(
            bundles=get_list(payload, "bundle", Bundle.from_payload),
            transaction_uuid=get_str(payload, "transaction_uuid"),
            transaction_id=get_str(payload, "transaction_id"),
            bundle_count=get_int(payload, "trolley_bundle_count"),
            order_count=get_int(payload, "trolley_order_count"),
            purchase_result=get_object(payload, "purchase_result", PurchaseResult.from_payload),
        )

    def is_fully_cancelled(self) -> bool:
        """True when every order of every bundle reports ``"cancelled"``.

        A trolley without bundles has nothing cancelled and returns False.
        """

        if not self.bundles:
            return False
        return all(
            order.cancellation_status == CANCELLATION_STATUS_CANCELLED
            for bundle in self.bundles
            for order in bundle.orders
        )


@dataclass(slots=True, frozen=True)
class Customer:
    """Customer details, both decoded from responses and sent on purchase."""

    agent_reference: str = ""
    first_name: str = ""
    last_name: str = ""
    country_code: str = ""
    title: str = ""
    initials: str = ""
    suffix: str = ""
    postcode: str = ""
    town: str = ""
    county: str = ""
    email_address: str = ""
    phone: str = ""
    work_phone: str = ""
    home_phone: str = ""
    address_line_one: str = ""
    address_line_two: str = ""
    supplier_can_use_customer_data: bool = False
    user_can_use_customer_data: bool = False
    world_can_use_customer_data: bool = False

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Customer:
        return cls(
            agent_reference=get_str(payload, "agent_ref"),
            first_name=get_str(payload, "first_name"),
            last_name=get_str(payload, "last_name"),
            country_code=get_str(payload, "country_code"),
            title=get_str(payload, "title"),
            initials=get_str(payload, "initials"),
            suffix=get_str(payload, "suffix"),
            postcode=get_str(payload, "postcode"),
            town=get_str(payload, "town"),
            county=get_str(payload, "county"),
            email_address=get_str(payload, "email_addr"),
            phone=get_str(payload, "phone"),
            work_phone=get_str(payload, "work_phone"),
            home_phone=get_str(payload, "home_phone"),
            address_line_one=get_str(payload, "addr_line_one"),
            address_line_two=get_str(payload, "addr_line_two"),
            supplier_can_use_customer_data=get_bool(payload, "supplier_can_use_customer_data"),
            user_can_use_customer_data=get_bool(payload, "user_can_use_customer_data"),
            world_can_use_customer_data=get_bool(payload, "world_can_use_customer_data"),
        )

    def flatten(self) -> dict[str, str]:
        """Purchase parameters; every key is always sent."""

        return {
            "agent_ref": self.agent_reference,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "country_code": self.country_code,
            "title": self.title,
            "initials": self.initials,
            "suffix": self.suffix,
            "postcode": self.postcode,
            "town": self.town,
            "county": self.county,
            "email_address": self.email_address,
            "phone": self.phone,
            "work_phone": self.work_phone,
            "home_phone": self.home_phone,
            "address_line_one": self.address_line_one,
            "address_line_two": self.address_line_two,
            "supplier_can_use_customer_data": _consent(self.supplier_can_use_customer_data),
            "user_can_use_customer_data": _consent(self.user_can_use_customer_data),
            "world_can_use_customer_data": _consent(self.world_can_use_customer_data),
        }


def _consent(value: bool) -> str:
    return "1" if value else "0"


@dataclass(slots=True, frozen=True)
class Debitor:
    """A third party taking payment from the customer.

    Absent when selling on credit or when the source system takes payment.
    """

    type: str = ""
    name: str = ""
    description: str = ""
    integration_data: dict[str, object] = field(default_factory=dict)
    aggregation_key: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Debitor:
        return cls(
            type=get_str(payload, "debitor_type"),
            name=get_str(payload, "debitor_name"),
            description=get_str(payload, "debitor_desc"),
            integration_data=get_raw_mapping(payload, "debitor_integration_data"),
            aggregation_key=get_str(payload, "debitor_aggregation_key"),
        )


@dataclass(slots=True, frozen=True)
class Callout:
    """Where to redirect the customer to supply further payment data."""

    code: str = ""
    description: str = ""
    total: Decimal = _ZERO
    type: str = ""
    destination: str = ""
    parameters: dict[str, str] = field(default_factory=dict)
    integration_data: dict[str, object] = field(default_factory=dict)
    debitor: Debitor | None = None
    currency_code: str = ""
    return_token: str = ""

    @classmethod
    def from_payload(cls, payload: JsonObject) -> Callout:
        return cls(
            code=get_str(payload, "bundle_source_code"),
            description=get_str(payload, "bundle_source_desc"),
            total=get_decimal(payload, "bundle_total_cost"),
            type=get_str(payload, "callout_type"),
            destination=get_str(payload, "callout_destination_url"),
            parameters=get_str_mapping(payload, "callout_parameters"),
            integration_data=get_raw_mapping(payload, "callout_integration_data"),
            debitor=get_object(payload, "debitor", Debitor.from_payload),
            currency_code=get_str(payload, "currency_code"),
            return_token=get_str(payload, "return_token"),
        )


@dataclass(slots=True, frozen=True)
class ReservationResult:
    """Outcome of a reservation.

    Orders that could not be held are listed in ``unreserved_orders``; a
    partial reservation is still a successful call.
    """

    status: str = ""
    trolley: Trolley | None = None
    unreserved_orders: tuple[Order, ...] = ()
    allowed_countries: dict[str, str] = field(default_factory=dict)
    can_edit_address: bool = False
    currency_details: dict[str, Currency] = field(default_factory=dict)
    input_contained_unavailable_order: bool = False
    languages: tuple[str, ...] = ()
    minutes_left_on_reserve: float = 0.0
    needs_agent_reference: bool = False
    needs_email_address: bool = False
    needs_payment_card: bool = False
    prefilled_address: dict[str, str] = field(default_factory=dict)
    reserve_time: datetime | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> ReservationResult:
        return cls(
            status=get_str(payload, "transaction_status"),
            trolley=get_object(payload, "trolley_contents", Trolley.from_payload),
            unreserved_orders=get_list(payload, "unreserved_orders", Order.from_payload),
            allowed_countries=get_str_mapping(payload, "allowed_countries"),
            can_edit_address=get_bool(payload, "can_edit_address"),
            currency_details=currency_table(payload),
            input_contained_unavailable_order=get_bool(
                payload, "input_contained_unavailable_order"
            ),
            languages=get_str_list(payload, "language_list"),
            minutes_left_on_reserve=get_float(payload, "minutes_left_on_reserve"),
            needs_agent_reference=get_bool(payload, "needs_agent_reference"),
            needs_email_address=get_bool(payload, "needs_email_address"),
            needs_payment_card=get_bool(payload, "needs_payment_card"),
            prefilled_address=get_str_mapping(payload, "prefilled_address"),
            reserve_time=get_datetime(payload, "reserve_iso8601_date_and_time"),
        )


@dataclass(slots=True, frozen=True)
class MakePurchaseResult:
    """Outcome of a purchase.

    ``callout`` is set when the customer must be redirected before the
    purchase can complete; ``pending_callout`` when a later bundle will need
    one.
    """

    status: str = ""
    callout: Callout | None = None
    pending_callout: Callout | None = None
    currency_details: dict[str, Currency] = field(default_factory=dict)
    trolley: Trolley | None = None
    customer: Customer | None = None
    reserve_time: datetime | None = None
    purchase_time: datetime | None = None
    reserve_user: User | None = None
    languages: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> MakePurchaseResult:
        return cls(
            status=get_str(payload, "transaction_status"),
            callout=get_object(payload, "callout", Callout.from_payload),
            pending_callout=get_object(payload, "pending_callout", Callout.from_payload),
            currency_details=currency_table(payload),
            trolley=get_object(payload, "trolley_contents", Trolley.from_payload),
            customer=get_object(payload, "customer", Customer.from_payload),
            reserve_time=get_datetime(payload, "reserve_iso8601_date_and_time"),
            purchase_time=get_datetime(payload, "purchase_iso8601_date_and_time"),
            reserve_user=get_object(payload, "reserve_user", User.from_payload),
            languages=get_str_list(payload, "language_list"),
        )


@dataclass(slots=True, frozen=True)
class StatusResult:
    status: str = ""
    trolley: Trolley | None = None
    customer: Customer | None = None
    currency_details: dict[str, Currency] = field(default_factory=dict)
    reserve_time: datetime | None = None
    purchase_time: datetime | None = None
    languages: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: JsonObject) -> StatusResult:
        return cls(
            status=get_str(payload, "transaction_status"),
            trolley=get_object(payload, "trolley_contents", Trolley.from_payload),
            customer=get_object(payload, "customer", Customer.from_payload),
            currency_details=currency_table(payload),
            reserve_time=get_datetime(payload, "reserve_iso8601_date_and_time"),
            purchase_time=get_datetime(payload, "purchase_iso8601_date_and_time"),
            languages=get_str_list(payload, "language_list"),
        )


@dataclass(slots=True, frozen=True)
class CancellationResult:
    """Outcome of a cancel call.

    ``must_also_cancel`` lists orders that can only be cancelled together
    with the ones requested.
    """

    cancelled_item_numbers: tuple[int, ...] = ()
    must_also_cancel: tuple[Order, ...] = ()
    trolley: Trolley | None = None
    currency_details: dict[str, Currency] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: JsonObject) -> CancellationResult:
        return cls(
            cancelled_item_numbers=get_int_list(payload, "cancelled_item_numbers"),
            must_also_cancel=get_list(payload, "must_also_cancel", Order.from_payload),
            trolley=get_object(payload, "trolley_contents", Trolley.from_payload),
            currency_details=currency_table(payload),
        )

    def is_fully_cancelled(self) -> bool:
        if self.trolley is None:
            return False
        return self.trolley.is_fully_cancelled()


__all__ = [
    "CANCELLATION_STATUS_CANCELLED",
    "Seat",
    "TicketOrder",
    "Order",
    "AgentCost",
    "PurchaseResult",
    "Bundle",
    "Trolley",
    "Customer",
    "Debitor",
    "Callout",
    "ReservationResult",
    "MakePurchaseResult",
    "StatusResult",
    "CancellationResult",
]
