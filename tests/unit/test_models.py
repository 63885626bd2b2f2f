from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from ticketswitch.core.errors import TicketSwitchDecodeError
from ticketswitch.inventory import fields
from ticketswitch.inventory.models import (
    Availability,
    AvailabilityDetails,
    AvailabilityResult,
    Content,
    CostRange,
    CostRangeDetails,
    Country,
    Currency,
    Discount,
    DiscountsResult,
    Event,
    Field,
    GeoData,
    GrossCommission,
    ListEventsResults,
    ListPerformancesResults,
    ListPerformanceTimesResults,
    Media,
    Offer,
    PagingStatus,
    Performance,
    PerformanceTime,
    PriceBand,
    Review,
    SendMethod,
    SendMethodsResult,
    Source,
    TicketType,
    UpsellList,
    User,
    UserCommission,
)
from ticketswitch.inventory.trolley import (
    AgentCost,
    Bundle,
    Callout,
    CancellationResult,
    Customer,
    Debitor,
    MakePurchaseResult,
    Order,
    PurchaseResult,
    ReservationResult,
    Seat,
    StatusResult,
    TicketOrder,
    Trolley,
)

ENTITY_TYPES = [
    User,
    Currency,
    Offer,
    CostRange,
    CostRangeDetails,
    GeoData,
    UpsellList,
    Content,
    Field,
    Media,
    Review,
    AvailabilityDetails,
    Event,
    PagingStatus,
    ListEventsResults,
    Performance,
    ListPerformancesResults,
    PerformanceTime,
    ListPerformanceTimesResults,
    UserCommission,
    GrossCommission,
    Discount,
    PriceBand,
    TicketType,
    Availability,
    AvailabilityResult,
    DiscountsResult,
    Source,
    Country,
    SendMethod,
    SendMethodsResult,
    Seat,
    TicketOrder,
    Order,
    AgentCost,
    PurchaseResult,
    Bundle,
    Trolley,
    Customer,
    Debitor,
    Callout,
    ReservationResult,
    MakePurchaseResult,
    StatusResult,
    CancellationResult,
]


@pytest.mark.parametrize("entity", ENTITY_TYPES, ids=lambda entity: entity.__name__)
def test_empty_object_decodes_to_zero_value(entity):
    assert entity.from_payload({}) == entity()


@pytest.mark.parametrize("entity", ENTITY_TYPES, ids=lambda entity: entity.__name__)
def test_unknown_keys_are_ignored(entity):
    assert entity.from_payload({"definitely_not_a_field": [1, 2, 3]}) == entity()


def test_null_values_read_as_zero_values():
    event = Event.from_payload({"event_id": None, "cost_range": None, "reviews": None})
    assert event == Event()


@pytest.mark.parametrize(
    ("payload", "reader"),
    [
        ({"k": 1}, fields.get_str),
        ({"k": "true"}, fields.get_bool),
        ({"k": "1"}, fields.get_int),
        ({"k": True}, fields.get_int),
        ({"k": 1.5}, fields.get_int),
        ({"k": "x"}, fields.get_float),
        ({"k": "lots"}, fields.get_decimal),
        ({"k": True}, fields.get_decimal),
        ({"k": 1}, fields.get_datetime),
        ({"k": "yesterday"}, fields.get_datetime),
        ({"k": "a"}, fields.get_str_list),
        ({"k": [1, "2"]}, fields.get_int_list),
        ({"k": [1]}, fields.get_str_list),
        ({"k": []}, fields.get_str_mapping),
        ({"k": {"a": 1}}, fields.get_str_mapping),
    ],
)
def test_wrong_json_type_is_decode_error(payload, reader):
    with pytest.raises(TicketSwitchDecodeError):
        reader(payload, "k")


def test_wrong_nested_type_is_decode_error():
    with pytest.raises(TicketSwitchDecodeError):
        Event.from_payload({"cost_range": "cheap"})
    with pytest.raises(TicketSwitchDecodeError):
        Event.from_payload({"reviews": [1]})
    with pytest.raises(TicketSwitchDecodeError):
        PriceBand.from_payload({"free_seat_blocks": {"row": ["A1"]}})


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("76.50"), Decimal("76.50")),
        (20, Decimal("20")),
        ("3.5", Decimal("3.5")),
        (None, Decimal("0")),
    ],
    ids=["decimal", "int", "string", "null"],
)
def test_get_decimal(value, expected):
    assert fields.get_decimal({"k": value}, "k") == expected


def test_get_datetime_parses_iso8601():
    assert fields.get_datetime({"k": "2018-05-24T15:13:07Z"}, "k") == datetime(
        2018, 5, 24, 15, 13, 7, tzinfo=timezone.utc
    )
    assert fields.get_datetime({"k": "2018-06-09T19:30:00+01:00"}, "k") == datetime(
        2018, 6, 9, 19, 30, tzinfo=timezone(timedelta(hours=1))
    )
    assert fields.get_datetime({"k": ""}, "k") is None
    assert fields.get_datetime({}, "k") is None


def test_user_from_payload():
    user = User.from_payload(
        {
            "user_id": "demo",
            "real_name": "Demo User",
            "default_country_code": "uk",
            "sub_user": "bambam",
            "is_b2b": True,
            "backend_group": "demo",
            "content_group": "demo",
        }
    )
    assert user.id == "demo"
    assert user.name == "Demo User"
    assert user.country == "uk"
    assert user.sub_user == "bambam"
    assert user.is_b2b is True


def test_event_decodes_nested_structures():
    event = Event.from_payload(
        {
            "event_id": "6KT",
            "classes": {"theatre": "Theatre"},
            "content": {"blurb": {"name": "blurb", "value": "Great", "value_html": "<p>Great</p>"}},
            "media": {"square": {"name": "square", "url": "https://x/sq.jpg", "secure": True}},
            "component_events": [{"event_id": "6KT-1"}],
            "cost_range": {
                "min_seatprice": Decimal("20.00"),
                "top_price": {"offer_seatprice": Decimal("79.5")},
                "valid_quantities": [1, 2],
            },
            "is_add_on": True,
        }
    )
    assert event.classes == {"theatre": "Theatre"}
    assert event.content["blurb"].value_html == "<p>Great</p>"
    assert event.media["square"].secure is True
    assert event.component_events == (Event(id="6KT-1"),)
    assert event.cost_range is not None
    assert event.cost_range.top_price_offer == Offer(seat_price=Decimal("79.5"))
    assert event.cost_range.valid_quantities == (1, 2)
    assert event.is_addon is True


def test_commission_amounts_are_not_swapped():
    commission = UserCommission.from_payload(
        {
            "amount_including_vat": "7.65",
            "amount_excluding_vat": "6.38",
            "commission_currency_code": "gbp",
        }
    )
    assert commission.amount_including_vat == Decimal("7.65")
    assert commission.amount_excluding_vat == Decimal("6.38")
    assert commission.currency_code == "gbp"


def test_send_method_reads_final_type_and_self_print():
    method = SendMethod.from_payload(
        {"send_final_type": "self_print", "can_generate_self_print": True}
    )
    assert method.final_type == "self_print"
    assert method.can_generate_self_print is True


def test_debitor_reads_aggregation_key_and_opaque_data():
    debitor = Debitor.from_payload(
        {
            "debitor_type": "stripe",
            "debitor_aggregation_key": "agg",
            "debitor_integration_data": {"publishable_key": "pk", "nested": {"a": [1]}},
        }
    )
    assert debitor.aggregation_key == "agg"
    assert debitor.integration_data["nested"] == {"a": [1]}


def test_entities_are_immutable_with_tuple_sequences():
    band = PriceBand.from_payload({"restricted_view_seats_raw": ["A1"]})
    assert isinstance(band.restricted_view_seats, tuple)
    with pytest.raises(FrozenInstanceError):
        band.code = "X"  # type: ignore[misc]


def _trolley(*bundle_statuses: list[str]) -> Trolley:
    return Trolley(
        bundles=tuple(
            Bundle(orders=tuple(Order(cancellation_status=status) for status in statuses))
            for statuses in bundle_statuses
        )
    )


@pytest.mark.parametrize(
    ("trolley", "expected"),
    [
        (_trolley(), False),
        (_trolley(["cancelled"]), True),
        (_trolley(["cancelled"], ["pending"]), False),
        (_trolley(["cancelled", "cancelled"], ["cancelled"]), True),
        (_trolley(["Cancelled"]), False),
    ],
    ids=["empty", "single-cancelled", "one-pending", "all-cancelled", "case-sensitive"],
)
def test_trolley_cancellation_completeness(trolley: Trolley, expected: bool):
    assert trolley.is_fully_cancelled() is expected
    assert CancellationResult(trolley=trolley).is_fully_cancelled() is expected


def test_cancellation_result_without_trolley_is_not_fully_cancelled():
    assert CancellationResult().is_fully_cancelled() is False
