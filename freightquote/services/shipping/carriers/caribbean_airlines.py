"""
Caribbean Airlines Cargo

Serves Guyana out of JFK. Lane data is maintained locally until the
carrier's rate API is wired in.
"""

from freightquote.core.enums import CarrierCode, DestinationCountry
from freightquote.services.shipping.base import StaticLaneCarrier
from freightquote.services.shipping.lanes import CARIBBEAN_AIRLINES_LANES


class CaribbeanAirlinesCarrier(StaticLaneCarrier):
    """Caribbean Airlines Cargo carrier implementation."""

    carrier_name = "Caribbean Airlines"
    carrier_code = CarrierCode.CARIBBEAN_AIRLINES.value
    lane_prefix = "cal"
    served_countries = frozenset({DestinationCountry.GUYANA})
    fuel_surcharge_percent = 0.12
    cut_off_time = "14:00"  # 2:00 PM ET
    transit_days = 1
    lanes = CARIBBEAN_AIRLINES_LANES
