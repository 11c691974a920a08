"""
Lane tables for the carriers we quote on.

Rates are per kilogram of total shipment weight with a floor per lane.
Everything departs JFK; New Jersey pickups are trucked there.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from freightquote.core.enums import DestinationCountry


@dataclass(frozen=True)
class Lane:
    origin: str
    destination: str
    dest_country: DestinationCountry
    base_rate_per_kg: float
    min_rate: float


CARIBBEAN_AIRLINES_LANES: Tuple[Lane, ...] = (
    Lane("JFK", "GEO", DestinationCountry.GUYANA, 8.50, 120),
)

DELTA_CARGO_LANES: Tuple[Lane, ...] = (
    Lane("JFK", "POS", DestinationCountry.TRINIDAD, 9.20, 110),
    Lane("JFK", "BGI", DestinationCountry.BARBADOS, 10.00, 130),
    Lane("JFK", "KIN", DestinationCountry.JAMAICA, 7.80, 100),
    Lane("JFK", "MBJ", DestinationCountry.JAMAICA, 8.20, 110),
    Lane("JFK", "SJU", DestinationCountry.PUERTO_RICO, 8.90, 120),
)

# Primary arrival airport per country
DESTINATION_AIRPORTS: Dict[DestinationCountry, str] = {
    DestinationCountry.GUYANA: "GEO",
    DestinationCountry.TRINIDAD: "POS",
    DestinationCountry.JAMAICA: "KIN",
    DestinationCountry.BARBADOS: "BGI",
    DestinationCountry.PUERTO_RICO: "SJU",
}


def lanes_for_country(lanes: Tuple[Lane, ...], country: DestinationCountry) -> List[Lane]:
    return [lane for lane in lanes if lane.dest_country == country]
