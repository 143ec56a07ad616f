import pytest
from shipping.pricing.standard_policy import StandardFeePolicy
from shipping.repository.memory_adapter import InMemoryShipmentRepository
from shipping.service import ShippingService
from shipping.shipment.shipment import Address, ShipmentType


@pytest.fixture
def origin():
    return Address(city="Seoul", line="Mapo-gu 1")


@pytest.fixture
def destination():
    return Address(city="Busan", line="Haeundae 2")


@pytest.fixture
def repository():
    return InMemoryShipmentRepository()


@pytest.fixture
def service(repository):
    return ShippingService(repository, StandardFeePolicy())


@pytest.fixture
def create(service, origin, destination):
    """Create a shipment through the service with sensible defaults."""

    def _create(tracking_id="T-1000", shipment_type=ShipmentType.STANDARD, weight_kg=2.0, **overrides):
        kwargs = {
            "shipment_type": shipment_type,
            "tracking_id": tracking_id,
            "sender_name": "Alice",
            "receiver_name": "Bob",
            "origin": origin,
            "destination": destination,
            "weight_kg": weight_kg,
        }
        kwargs.update(overrides)
        return service.create_shipment(**kwargs)

    return _create
