"""Shipping service: use cases over the Shipment aggregate.

The service owns the business rules: input validation, tracking id
uniqueness and the status lifecycle. It depends only on the repository and
fee policy ports and performs no I/O of its own.

Lifecycle rules:
    - DELIVERED and LOST are terminal; nothing may follow them.
    - CREATED may not jump straight to DELIVERED.
    Every other transition, including same-state updates, is accepted.
"""

from datetime import UTC, datetime

from shipping.exceptions import InvalidStateError, NotFoundError, ValidationError
from shipping.pricing.port import FeePolicy
from shipping.repository.port import ShipmentRepository
from shipping.shipment.shipment import (
    Address,
    Shipment,
    ShipmentStatus,
    ShipmentType,
    StatusEvent,
)


def _require_text(value: str | None, field: str, message: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message, field=field)


def _coerce_status(value: ShipmentStatus | str | None) -> ShipmentStatus:
    if value is None:
        raise ValidationError("Status must not be null.", field="status")
    try:
        return ShipmentStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown status: {value}", field="status") from None


class ShippingService:
    """Registers shipments, moves them through their lifecycle and prices them."""

    def __init__(self, repository: ShipmentRepository, fee_policy: FeePolicy):
        if repository is None:
            raise ValidationError("Repository must not be null.", field="repository")
        if fee_policy is None:
            raise ValidationError("FeePolicy must not be null.", field="fee_policy")
        self._repository = repository
        self._fee_policy = fee_policy

    # -------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------
    def create_shipment(
        self,
        shipment_type: ShipmentType,
        tracking_id: str,
        sender_name: str,
        receiver_name: str,
        origin: Address,
        destination: Address,
        weight_kg: float,
    ) -> Shipment:
        """Validate, register and persist a new shipment in CREATED state."""
        self._validate_create(tracking_id, sender_name, receiver_name, origin, destination, weight_kg)

        if self._repository.find_by_tracking_id(tracking_id) is not None:
            raise ValidationError(f"Tracking ID already exists: {tracking_id}", field="tracking_id")

        if not isinstance(shipment_type, ShipmentType):
            raise ValidationError("Unknown shipment type.", field="shipment_type")

        shipment = Shipment.create(
            shipment_type=shipment_type,
            tracking_id=tracking_id,
            sender_name=sender_name,
            receiver_name=receiver_name,
            origin=origin,
            destination=destination,
            weight_kg=weight_kg,
        )
        self._repository.save(shipment)
        return shipment

    def _validate_create(
        self,
        tracking_id: str,
        sender_name: str,
        receiver_name: str,
        origin: Address,
        destination: Address,
        weight_kg: float,
    ) -> None:
        _require_text(tracking_id, "tracking_id", "Tracking ID is required.")
        _require_text(sender_name, "sender_name", "Sender name is required.")
        _require_text(receiver_name, "receiver_name", "Receiver name is required.")
        if origin is None:
            raise ValidationError("From address is required.", field="origin")
        if destination is None:
            raise ValidationError("To address is required.", field="destination")
        if not isinstance(weight_kg, int | float) or isinstance(weight_kg, bool) or not weight_kg > 0:
            raise ValidationError("Weight must be > 0.", field="weight_kg")

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_by_tracking_id(self, tracking_id: str) -> Shipment:
        shipment = self._repository.find_by_tracking_id(tracking_id)
        if shipment is None:
            raise NotFoundError(f"Shipment not found: {tracking_id}")
        return shipment

    def list_all(self) -> list[Shipment]:
        """All shipments ordered by tracking id."""
        return sorted(self._repository.find_all(), key=lambda s: s.tracking_id)

    def calculate_fee(self, tracking_id: str) -> float:
        shipment = self.get_by_tracking_id(tracking_id)
        return self._fee_policy.compute(shipment)

    # -------------------------------------------------------------------
    # Status lifecycle
    # -------------------------------------------------------------------
    def update_status(self, tracking_id: str, new_status: ShipmentStatus) -> None:
        """Move a shipment to ``new_status`` and record the change in its history."""
        shipment = self.get_by_tracking_id(tracking_id)
        new_status = _coerce_status(new_status)
        self._assert_can_transition(shipment.status, new_status)

        event = StatusEvent(
            time=datetime.now(UTC),
            status=new_status,
            note=f"Status changed to {new_status.value}",
        )
        shipment.update_status(new_status)
        shipment.append_event(event)
        self._repository.save(shipment)

    def _assert_can_transition(self, current: ShipmentStatus, target: ShipmentStatus) -> None:
        if current.is_terminal:
            raise InvalidStateError(f"Cannot update terminal status: {current.value}")
        if current == ShipmentStatus.CREATED and target == ShipmentStatus.DELIVERED:
            raise InvalidStateError("CREATED -> DELIVERED is not allowed. Use IN_TRANSIT first.")
