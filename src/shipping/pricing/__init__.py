"""Fee policy abstraction: pluggable shipping fee computation."""

import os

from shipping.pricing.port import FeePolicy


def get_fee_policy(name: str | None = None) -> FeePolicy:
    """Return the configured fee policy.

    Uses StandardFeePolicy by default. Override via the
    SHIPPING_FEE_POLICY environment variable.
    """
    name = name or os.environ.get("SHIPPING_FEE_POLICY", "standard")
    if name == "standard":
        from shipping.pricing.standard_policy import StandardFeePolicy

        return StandardFeePolicy()
    raise ValueError(f"Unknown fee policy: {name}")


__all__ = ["FeePolicy", "get_fee_policy"]
