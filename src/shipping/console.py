"""Console front end: interactive menu over the ShippingService.

Reads choices line by line from an input stream and writes results to an
output stream, so the loop can be driven from a terminal or from tests.
"""

import sys
from datetime import datetime
from typing import TextIO

from shipping.exceptions import ShippingError, ValidationError
from shipping.service import ShippingService
from shipping.shipment.shipment import Address, ShipmentStatus, ShipmentType
from shipping.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

_TYPE_CHOICES = {
    "1": ShipmentType.STANDARD,
    "2": ShipmentType.EXPRESS,
    "3": ShipmentType.FRAGILE,
}

_STATUS_CHOICES = {
    "1": ShipmentStatus.CREATED,
    "2": ShipmentStatus.IN_TRANSIT,
    "3": ShipmentStatus.DELIVERED,
    "4": ShipmentStatus.LOST,
}

_DEMO_SHIPMENTS = [
    (ShipmentType.STANDARD, "T-1000", "Alice", "Bob", ("Seoul", "Mapo-gu 1"), ("Busan", "Haeundae 2"), 2.5),
    (ShipmentType.EXPRESS, "T-2000", "Chris", "Dana", ("Incheon", "Bupyeong 3"), ("Daegu", "Suseong 4"), 1.2),
    (ShipmentType.FRAGILE, "T-3000", "Evan", "Frank", ("Daejeon", "Yuseong 5"), ("Gwangju", "Buk-gu 6"), 3.8),
]

RULE = "=" * 47


class EndOfInput(Exception):
    """The input stream was exhausted."""


def parse_type(raw: str | None) -> ShipmentType:
    choice = (raw or "").strip()
    if choice not in _TYPE_CHOICES:
        raise ValidationError("Invalid type selection.", field="shipment_type")
    return _TYPE_CHOICES[choice]


def parse_status(raw: str | None) -> ShipmentStatus:
    choice = (raw or "").strip()
    if choice not in _STATUS_CHOICES:
        raise ValidationError("Invalid status selection.", field="status")
    return _STATUS_CHOICES[choice]


def parse_weight(raw: str | None) -> float:
    try:
        return float((raw or "").strip())
    except ValueError:
        raise ValidationError(f"Not a valid number: {raw}", field="weight_kg") from None


class ConsoleApp:
    def __init__(self, service: ShippingService, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.service = service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._handlers = {
            "1": self.create_shipment,
            "2": self.list_shipments,
            "3": self.track_shipment,
            "4": self.update_status,
            "5": self.calculate_fee,
        }

    # -------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------
    def run(self) -> None:
        while True:
            self._print_header()
            self._print_menu()

            try:
                choice = self._read_line("Select: ").strip()
            except EndOfInput:
                self._write("Bye!")
                break

            if choice == "0":
                self._write("Bye!")
                break

            add_context(command=choice)
            try:
                self.handle(choice)
            except EndOfInput:
                self._write("Bye!")
                break
            except ShippingError as exc:
                logger.warning("Command rejected", error=exc.message, error_type=type(exc).__name__)
                self._write(f"[ERROR] {exc.message}")
            except Exception as exc:
                logger.exception("Command failed")
                self._write(f"[ERROR] Unexpected: {exc}")
            finally:
                clear_context()

            self._write("")

    def handle(self, choice: str) -> None:
        handler = self._handlers.get(choice)
        if handler is None:
            self._write("Unknown command.")
            return
        handler()

    def _print_header(self) -> None:
        self._write(RULE)
        self._write("Shipment Tracker (CLI)")
        self._write(f"Now: {datetime.now().isoformat(timespec='seconds')}")
        self._write(RULE)

    def _print_menu(self) -> None:
        self._write("1) Create shipment")
        self._write("2) List shipments")
        self._write("3) Track shipment")
        self._write("4) Update status")
        self._write("5) Calculate fee")
        self._write("0) Exit")

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def create_shipment(self) -> None:
        self._write("---- Create Shipment ----")
        self._write("Type: 1) STANDARD 2) EXPRESS 3) FRAGILE")
        shipment_type = parse_type(self._read_line("Type: "))

        tracking_id = self._read_line("Tracking ID (e.g., T-1000): ")
        sender = self._read_line("Sender name: ")
        receiver = self._read_line("Receiver name: ")

        sender_city = self._read_line("Sender city: ")
        sender_line = self._read_line("Sender address line: ")
        receiver_city = self._read_line("Receiver city: ")
        receiver_line = self._read_line("Receiver address line: ")

        weight_kg = parse_weight(self._read_line("Weight (kg): "))

        origin = Address(city=sender_city, line=sender_line)
        destination = Address(city=receiver_city, line=receiver_line)

        created = self.service.create_shipment(
            shipment_type, tracking_id, sender, receiver, origin, destination, weight_kg
        )
        logger.info(
            "Shipment created",
            tracking_id=created.tracking_id,
            shipment_type=created.type_label,
            weight_kg=created.weight_kg,
        )
        self._write(f"Created: {created.display_line()}")

    def list_shipments(self) -> None:
        self._write("---- List ----")
        shipments = self.service.list_all()
        if not shipments:
            self._write("(empty)")
            return
        for shipment in shipments:
            self._write(shipment.display_line())

    def track_shipment(self) -> None:
        self._write("---- Track ----")
        tracking_id = self._read_line("Tracking ID: ")

        shipment = self.service.get_by_tracking_id(tracking_id)
        self._write(shipment.tracking_summary())

        self._write("---- Events ----")
        for event in shipment.events:
            self._write(event.display_line())

    def update_status(self) -> None:
        self._write("---- Update Status ----")
        tracking_id = self._read_line("Tracking ID: ")

        self._write("Status: 1) CREATED 2) IN_TRANSIT 3) DELIVERED 4) LOST")
        new_status = parse_status(self._read_line("New status: "))

        self.service.update_status(tracking_id, new_status)
        logger.info("Shipment status updated", tracking_id=tracking_id, status=new_status.value)
        self._write("Updated.")

    def calculate_fee(self) -> None:
        self._write("---- Calculate Fee ----")
        tracking_id = self._read_line("Tracking ID: ")

        fee = self.service.calculate_fee(tracking_id)
        self._write(f"Fee: {fee:.2f}")

    # -------------------------------------------------------------------
    # Demo data
    # -------------------------------------------------------------------
    def seed_demo_data(self) -> None:
        """Register a few demo shipments so the app is usable right away."""
        for shipment_type, tracking_id, sender, receiver, origin, destination, weight_kg in _DEMO_SHIPMENTS:
            self.service.create_shipment(
                shipment_type,
                tracking_id,
                sender,
                receiver,
                Address(city=origin[0], line=origin[1]),
                Address(city=destination[0], line=destination[1]),
                weight_kg,
            )
        logger.info("Demo shipments seeded", count=len(_DEMO_SHIPMENTS))

    # -------------------------------------------------------------------
    # I/O helpers
    # -------------------------------------------------------------------
    def _read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EndOfInput()
        return line.rstrip("\n")

    def _write(self, text: str) -> None:
        print(text, file=self.stdout)
