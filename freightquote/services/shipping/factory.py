"""
Shipping carrier factory to make carrier selection easy
"""
from typing import Dict, List, Optional, Type

from freightquote.core.exceptions import CarrierNotSupportedError
from freightquote.services.shipping.base import BaseCarrier
from freightquote.services.shipping.carriers import CaribbeanAirlinesCarrier, DeltaCargoCarrier

# Order here is the tie-break order for equal prices
CARRIERS: Dict[str, Type[BaseCarrier]] = {
    CaribbeanAirlinesCarrier.carrier_code: CaribbeanAirlinesCarrier,
    DeltaCargoCarrier.carrier_code: DeltaCargoCarrier,
}


def get_carrier(carrier_code: str, latency: Optional[float] = None) -> BaseCarrier:
    """
    Factory function to get the appropriate carrier by code

    Args:
        carrier_code: The code of the carrier to use
        latency: Optional override for the simulated API latency

    Returns:
        An instance of the appropriate carrier class

    Raises:
        CarrierNotSupportedError: If the carrier code is not supported
    """
    if carrier_code not in CARRIERS:
        raise CarrierNotSupportedError(f"Carrier '{carrier_code}' is not supported", carrier=carrier_code)

    return CARRIERS[carrier_code](latency=latency)


def get_all_carriers(latency: Optional[float] = None) -> List[BaseCarrier]:
    return [carrier_class(latency=latency) for carrier_class in CARRIERS.values()]
