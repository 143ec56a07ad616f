"""Composition root: wires the configured adapters into a ShippingService."""

import os

import structlog

from shipping.pricing import FeePolicy, get_fee_policy
from shipping.repository import ShipmentRepository, get_repository
from shipping.service import ShippingService

logger = structlog.get_logger(__name__)

_FALSY = {"0", "false", "no", "off"}


def seed_demo_enabled() -> bool:
    """Whether the console should start with demo shipments (SHIPPING_SEED_DEMO)."""
    return os.environ.get("SHIPPING_SEED_DEMO", "1").strip().lower() not in _FALSY


def build_service(
    repository: ShipmentRepository | None = None,
    fee_policy: FeePolicy | None = None,
) -> ShippingService:
    """Build a ShippingService, resolving any missing collaborator from the environment."""
    if repository is None:
        repository = get_repository()
    if fee_policy is None:
        fee_policy = get_fee_policy()
    logger.debug(
        "Shipping service built",
        repository=type(repository).__name__,
        fee_policy=type(fee_policy).__name__,
    )
    return ShippingService(repository, fee_policy)
