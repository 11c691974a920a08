"""
Packaging options a customer can add to a shipment.

Prices quoted to customers are the internal cost times the packaging markup,
rounded up to the next whole dollar.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

PACKAGING_MARKUP = 1.80


@dataclass(frozen=True)
class PackagingOption:
    sku: str
    code: str
    name: str
    category: str
    cost_usd: float
    max_weight_kg: float

    @property
    def sell_price(self) -> float:
        # round first so 25.00 x 1.80 stays $45 rather than ceiling a float error
        return float(math.ceil(round(self.cost_usd * PACKAGING_MARKUP, 2)))


PACKAGING_OPTIONS: Dict[str, PackagingOption] = {
    option.sku: option
    for option in (
        PackagingOption("sku_plastic_barrel_45l", "PLB-45", "Plastic Barrel - 45L", "barrel", 12.50, 30),
        PackagingOption("sku_fiber_barrel_60l", "FIB-60", "Fiber Barrel - 60L", "barrel", 15.75, 35),
        PackagingOption("sku_econtainer_small", "ECON-S", "E-Container Small", "container", 25.00, 40),
        PackagingOption("sku_mini_econ", "MINI-ECON", "Mini E-Container", "container", 18.00, 20),
        PackagingOption("sku_fragile_protection", "FRAG-PRO", "Fragile Item Protection", "protection", 8.50, 50),
    )
}


def packaging_fee(skus: Optional[Iterable[str]]) -> Optional[float]:
    """
    Total sell price of the requested packaging.

    Args:
        skus: Packaging SKU ids; repeats are charged once per occurrence

    Returns:
        The fee, or None when no packaging was requested
    """
    if not skus:
        return None
    return sum(PACKAGING_OPTIONS[sku].sell_price for sku in skus)
