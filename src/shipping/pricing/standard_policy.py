"""Standard fee policy.

    fee = (base_fee + weight_kg * PER_KG_SURCHARGE) * risk_factor

base_fee and risk_factor come from the shipment's type.
"""

from shipping.exceptions import ValidationError
from shipping.pricing.port import FeePolicy
from shipping.shipment.shipment import Shipment

PER_KG_SURCHARGE = 1.20


class StandardFeePolicy(FeePolicy):
    def compute(self, shipment: Shipment) -> float:
        if shipment is None:
            raise ValidationError("Shipment must not be null.", field="shipment")

        weight_part = shipment.weight_kg * PER_KG_SURCHARGE
        return (shipment.base_fee + weight_part) * shipment.risk_factor
