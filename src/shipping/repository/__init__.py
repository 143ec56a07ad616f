"""Shipment repository abstraction: pluggable shipment storage."""

import os

from shipping.repository.port import ShipmentRepository


def get_repository(adapter: str | None = None) -> ShipmentRepository:
    """Return a new repository for the configured adapter.

    Uses the in-memory store by default. Override via the
    SHIPPING_REPOSITORY environment variable.
    """
    adapter = adapter or os.environ.get("SHIPPING_REPOSITORY", "memory")
    if adapter == "memory":
        from shipping.repository.memory_adapter import InMemoryShipmentRepository

        return InMemoryShipmentRepository()
    raise ValueError(f"Unknown repository adapter: {adapter}")


__all__ = ["ShipmentRepository", "get_repository"]
