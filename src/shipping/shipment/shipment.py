"""Shipment aggregate: the core of the shipping domain.

A Shipment owns its two addresses and its status history. Status changes are
driven by the ShippingService, which applies the lifecycle rules; the
aggregate only records them.

State Machine:
    CREATED → IN_TRANSIT → {DELIVERED, LOST}
    CREATED → LOST
    DELIVERED, LOST are terminal
    CREATED → DELIVERED is rejected
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from shipping.exceptions import ValidationError


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ShipmentStatus(Enum):
    CREATED = "CREATED"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATUSES


_TERMINAL_STATUSES = frozenset({ShipmentStatus.DELIVERED, ShipmentStatus.LOST})


class ShipmentType(Enum):
    """Creation-time shipment kind with its fixed fee parameters."""

    STANDARD = ("STANDARD", 3.00, 1.00)
    EXPRESS = ("EXPRESS", 6.50, 1.10)
    FRAGILE = ("FRAGILE", 5.00, 1.35)

    def __init__(self, label: str, base_fee: float, risk_factor: float):
        self.label = label
        self.base_fee = base_fee
        self.risk_factor = risk_factor


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
class Address(BaseModel):
    """A pickup or delivery address."""

    model_config = ConfigDict(frozen=True)

    city: str
    line: str

    @model_validator(mode="before")
    @classmethod
    def city_and_line_are_required(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if _is_blank(data.get("city")):
                raise ValidationError("City is required.", field="city")
            if _is_blank(data.get("line")):
                raise ValidationError("Address line is required.", field="line")
        return data

    def short_form(self) -> str:
        return f"{self.city} / {self.line}"


class StatusEvent(BaseModel):
    """A single entry in a shipment's status history."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    status: ShipmentStatus
    note: str = ""

    @model_validator(mode="before")
    @classmethod
    def time_and_status_are_required(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if data.get("time") is None:
                raise ValidationError("Time is required.", field="time")
            if data.get("status") is None:
                raise ValidationError("Status is required.", field="status")
            if data.get("note") is None:
                data = {**data, "note": ""}
        return data

    def display_line(self) -> str:
        return f"{self.time.isoformat()} | {self.status.value} | {self.note}"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
class Shipment(BaseModel):
    tracking_id: str = Field(frozen=True)
    shipment_type: ShipmentType = Field(frozen=True)
    sender_name: str = Field(frozen=True)
    receiver_name: str = Field(frozen=True)
    origin: Address = Field(frozen=True)
    destination: Address = Field(frozen=True)
    weight_kg: float = Field(frozen=True)
    status: ShipmentStatus = ShipmentStatus.CREATED

    _events: list[StatusEvent] = PrivateAttr(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def identity_and_weight_are_valid(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if _is_blank(data.get("tracking_id")):
                raise ValidationError("Tracking ID is required.", field="tracking_id")
            weight = data.get("weight_kg")
            if weight is None or (isinstance(weight, int | float) and not weight > 0):
                raise ValidationError("Weight must be > 0.", field="weight_kg")
        return data

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        shipment_type: ShipmentType,
        tracking_id: str,
        sender_name: str,
        receiver_name: str,
        origin: Address,
        destination: Address,
        weight_kg: float,
    ) -> "Shipment":
        """Build a new shipment in CREATED state with its initial history entry."""
        shipment = cls(
            tracking_id=tracking_id,
            shipment_type=shipment_type,
            sender_name=sender_name,
            receiver_name=receiver_name,
            origin=origin,
            destination=destination,
            weight_kg=weight_kg,
            status=ShipmentStatus.CREATED,
        )
        shipment.append_event(
            StatusEvent(time=datetime.now(UTC), status=ShipmentStatus.CREATED, note="Created")
        )
        return shipment

    # -------------------------------------------------------------------
    # Fee parameters
    # -------------------------------------------------------------------
    @property
    def base_fee(self) -> float:
        return self.shipment_type.base_fee

    @property
    def risk_factor(self) -> float:
        return self.shipment_type.risk_factor

    @property
    def type_label(self) -> str:
        return self.shipment_type.label

    # -------------------------------------------------------------------
    # Status history
    # -------------------------------------------------------------------
    @property
    def events(self) -> tuple[StatusEvent, ...]:
        """Read-only snapshot of the status history, oldest first."""
        return tuple(self._events)

    def update_status(self, new_status: ShipmentStatus) -> None:
        if new_status is None:
            raise ValidationError("Status must not be null.", field="status")
        if not isinstance(new_status, ShipmentStatus):
            raise ValidationError(f"Unknown status: {new_status}", field="status")
        self.status = new_status

    def append_event(self, event: StatusEvent) -> None:
        if event is None:
            raise ValidationError("Event must not be null.", field="event")
        self._events.append(event)

    # -------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------
    def tracking_summary(self) -> str:
        return (
            f"ID={self.tracking_id}"
            f" | TYPE={self.type_label}"
            f" | STATUS={self.status.value}"
            f" | FROM={self.origin.short_form()}"
            f" | TO={self.destination.short_form()}"
            f" | WEIGHT={self.weight_kg}kg"
        )

    def display_line(self) -> str:
        return (
            f"{self.tracking_id}"
            f" | {self.type_label}"
            f" | {self.status.value}"
            f" | {self.sender_name} -> {self.receiver_name}"
            f" | {self.weight_kg:.1f}kg"
        )
