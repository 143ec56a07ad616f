"""Shipping domain errors.

Every error raised by the shipping core derives from ``ShippingError`` so
callers can tell domain failures apart from unexpected ones.
"""


class ShippingError(Exception):
    """Base class for all shipping domain errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ValidationError(ShippingError):
    """Malformed or missing input, duplicate key or missing dependency."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
        self.messages = {field: [message]}


class NotFoundError(ShippingError):
    """The referenced tracking id does not exist."""


class InvalidStateError(ShippingError):
    """The requested status transition is not allowed."""
