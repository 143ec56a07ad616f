"""In-memory shipment repository: process-local store for development and tests.

Shipments are kept by reference in a dict keyed by tracking id. Nothing
survives a restart.
"""

from threading import Lock

from shipping.exceptions import ValidationError
from shipping.repository.port import ShipmentRepository
from shipping.shipment.shipment import Shipment


class InMemoryShipmentRepository(ShipmentRepository):
    """Dict-backed repository; each operation holds the store lock."""

    def __init__(self):
        self._store: dict[str, Shipment] = {}
        self._lock = Lock()

    def save(self, shipment: Shipment) -> None:
        if shipment is None:
            raise ValidationError("Shipment must not be null.", field="shipment")
        with self._lock:
            self._store[shipment.tracking_id] = shipment

    def find_by_tracking_id(self, tracking_id: str | None) -> Shipment | None:
        if tracking_id is None:
            return None
        with self._lock:
            return self._store.get(tracking_id)

    def find_all(self) -> list[Shipment]:
        with self._lock:
            return list(self._store.values())
