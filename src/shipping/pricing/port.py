"""Fee policy port: abstract interface for shipping fee strategies."""

from abc import ABC, abstractmethod

from shipping.shipment.shipment import Shipment


class FeePolicy(ABC):
    """Computes the monetary fee for a shipment. Implementations must be pure."""

    @abstractmethod
    def compute(self, shipment: Shipment) -> float: ...
