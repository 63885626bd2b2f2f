from __future__ import annotations

import ticketswitch
import ticketswitch.inventory as inventory


def test_package_exports_clients_config_and_errors():
    expected = {
        "TicketSwitchClient",
        "AsyncTicketSwitchClient",
        "TicketSwitchConfig",
        "RequestContext",
        "Circle",
        "TicketSwitchError",
        "TicketSwitchApiError",
        "EventNotFoundError",
    }
    assert expected.issubset(set(ticketswitch.__all__))
    for name in ticketswitch.__all__:
        assert hasattr(ticketswitch, name)


def test_inventory_package_exports_params_and_models_only():
    expected = {
        "UniversalParams",
        "ListEventsParams",
        "MakeReservationParams",
        "PaymentMethod",
        "Event",
        "AvailabilityResult",
        "Trolley",
        "CancellationResult",
    }
    assert expected.issubset(set(inventory.__all__))
    assert "InventoryService" not in inventory.__all__
    assert "AsyncInventoryService" not in inventory.__all__
    assert not hasattr(inventory, "InventoryService")
    assert not hasattr(inventory, "AsyncInventoryService")
