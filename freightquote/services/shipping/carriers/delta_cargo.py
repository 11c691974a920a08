"""
Delta Cargo

Serves Trinidad, Jamaica, Barbados and Puerto Rico out of JFK.
"""

from freightquote.core.enums import CarrierCode, DestinationCountry
from freightquote.services.shipping.base import StaticLaneCarrier
from freightquote.services.shipping.lanes import DELTA_CARGO_LANES


class DeltaCargoCarrier(StaticLaneCarrier):
    """Delta Cargo carrier implementation."""

    carrier_name = "Delta Cargo"
    carrier_code = CarrierCode.DELTA_CARGO.value
    lane_prefix = "delta"
    served_countries = frozenset({
        DestinationCountry.TRINIDAD,
        DestinationCountry.JAMAICA,
        DestinationCountry.BARBADOS,
        DestinationCountry.PUERTO_RICO,
    })
    fuel_surcharge_percent = 0.10
    cut_off_time = "18:00"  # 6:00 PM ET
    transit_days = 1
    lanes = DELTA_CARGO_LANES
