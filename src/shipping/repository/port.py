"""Shipment repository port: abstract interface for shipment storage.

The ShippingService programs against this port; storage adapters are
swapped via configuration.
"""

from abc import ABC, abstractmethod

from shipping.shipment.shipment import Shipment


class ShipmentRepository(ABC):
    """Abstract interface for shipment storage adapters."""

    @abstractmethod
    def save(self, shipment: Shipment) -> None:
        """Insert or overwrite the shipment stored under its tracking id."""
        ...

    @abstractmethod
    def find_by_tracking_id(self, tracking_id: str | None) -> Shipment | None:
        """Return the stored shipment, or None when the id is unknown or None."""
        ...

    @abstractmethod
    def find_all(self) -> list[Shipment]:
        """Return a snapshot of every stored shipment, in no particular order."""
        ...
