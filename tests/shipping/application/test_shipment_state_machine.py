"""Tests for the shipment status lifecycle enforced by ShippingService."""

import pytest
from shipping.exceptions import InvalidStateError, NotFoundError, ShippingError, ValidationError
from shipping.shipment.shipment import ShipmentStatus


class TestValidTransitions:
    def test_created_to_in_transit(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        assert service.get_by_tracking_id("T-1").status == ShipmentStatus.IN_TRANSIT

    def test_in_transit_to_delivered(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        service.update_status("T-1", ShipmentStatus.DELIVERED)
        shipment = service.get_by_tracking_id("T-1")
        assert shipment.status == ShipmentStatus.DELIVERED
        assert len(shipment.events) == 3
        assert shipment.events[-1].status == ShipmentStatus.DELIVERED

    def test_in_transit_to_lost(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        service.update_status("T-1", ShipmentStatus.LOST)
        assert service.get_by_tracking_id("T-1").status == ShipmentStatus.LOST

    def test_created_to_lost_is_allowed(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.LOST)
        assert service.get_by_tracking_id("T-1").status == ShipmentStatus.LOST

    def test_created_to_created_is_allowed(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.CREATED)
        shipment = service.get_by_tracking_id("T-1")
        assert shipment.status == ShipmentStatus.CREATED
        assert len(shipment.events) == 2

    def test_in_transit_to_in_transit_is_allowed(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        assert len(service.get_by_tracking_id("T-1").events) == 3

    def test_in_transit_back_to_created_is_allowed(self, create, service):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        service.update_status("T-1", ShipmentStatus.CREATED)
        assert service.get_by_tracking_id("T-1").status == ShipmentStatus.CREATED


class TestTransitionHistory:
    def test_each_transition_appends_one_event(self, create, service):
        shipment = create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        assert len(shipment.events) == 2
        event = shipment.events[-1]
        assert event.status == ShipmentStatus.IN_TRANSIT
        assert event.note == "Status changed to IN_TRANSIT"

    def test_events_are_in_chronological_order(self, create, service):
        shipment = create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        service.update_status("T-1", ShipmentStatus.DELIVERED)
        times = [e.time for e in shipment.events]
        assert times == sorted(times)

    def test_update_persists_shipment(self, create, service, repository):
        create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        assert repository.find_by_tracking_id("T-1").status == ShipmentStatus.IN_TRANSIT


class TestInvalidTransitions:
    def test_created_to_delivered_is_rejected(self, create, service):
        shipment = create(tracking_id="T-1")
        with pytest.raises(InvalidStateError) as exc:
            service.update_status("T-1", ShipmentStatus.DELIVERED)
        assert str(exc.value) == "CREATED -> DELIVERED is not allowed. Use IN_TRANSIT first."
        assert shipment.status == ShipmentStatus.CREATED
        assert len(shipment.events) == 1

    @pytest.mark.parametrize("target", list(ShipmentStatus))
    def test_nothing_follows_delivered(self, create, service, target):
        shipment = create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        service.update_status("T-1", ShipmentStatus.DELIVERED)
        with pytest.raises(InvalidStateError) as exc:
            service.update_status("T-1", target)
        assert str(exc.value) == "Cannot update terminal status: DELIVERED"
        assert shipment.status == ShipmentStatus.DELIVERED
        assert len(shipment.events) == 3

    @pytest.mark.parametrize("target", list(ShipmentStatus))
    def test_nothing_follows_lost(self, create, service, target):
        shipment = create(tracking_id="T-1")
        service.update_status("T-1", ShipmentStatus.LOST)
        with pytest.raises(InvalidStateError) as exc:
            service.update_status("T-1", target)
        assert str(exc.value) == "Cannot update terminal status: LOST"
        assert len(shipment.events) == 2

    def test_unknown_tracking_id(self, service):
        with pytest.raises(NotFoundError) as exc:
            service.update_status("T-404", ShipmentStatus.IN_TRANSIT)
        assert str(exc.value) == "Shipment not found: T-404"

    def test_none_status_is_rejected_without_history_entry(self, create, service):
        shipment = create(tracking_id="T-1")
        with pytest.raises(ValidationError, match="Status must not be null."):
            service.update_status("T-1", None)
        assert shipment.status == ShipmentStatus.CREATED
        assert len(shipment.events) == 1

    def test_invalid_state_is_a_shipping_error(self, create, service):
        create(tracking_id="T-1")
        with pytest.raises(ShippingError):
            service.update_status("T-1", ShipmentStatus.DELIVERED)


class TestStatusInput:
    def test_status_name_is_held_to_the_same_rules(self, create, service):
        shipment = create(tracking_id="T-1")
        with pytest.raises(InvalidStateError):
            service.update_status("T-1", "DELIVERED")
        assert shipment.status is ShipmentStatus.CREATED
        assert len(shipment.events) == 1

    def test_status_name_is_stored_as_member(self, create, service):
        shipment = create(tracking_id="T-1")
        service.update_status("T-1", "IN_TRANSIT")
        assert shipment.status is ShipmentStatus.IN_TRANSIT
        assert shipment.events[-1].note == "Status changed to IN_TRANSIT"
        service.update_status("T-1", ShipmentStatus.DELIVERED)
        assert shipment.status is ShipmentStatus.DELIVERED

    @pytest.mark.parametrize("value", ["SHIPPED", "in_transit", 2])
    def test_unknown_status_leaves_shipment_untouched(self, create, service, value):
        shipment = create(tracking_id="T-1")
        with pytest.raises(ValidationError) as exc:
            service.update_status("T-1", value)
        assert str(exc.value) == f"Unknown status: {value}"
        assert exc.value.field == "status"
        assert shipment.status is ShipmentStatus.CREATED
        assert len(shipment.events) == 1
        service.update_status("T-1", ShipmentStatus.IN_TRANSIT)
        assert shipment.status is ShipmentStatus.IN_TRANSIT
