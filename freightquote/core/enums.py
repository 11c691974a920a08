"""
Shared enums and constants used across the application.
"""

from enum import Enum


class DestinationCountry(str, Enum):
    """Countries we currently ship to"""
    GUYANA = "Guyana"
    TRINIDAD = "Trinidad"
    JAMAICA = "Jamaica"
    BARBADOS = "Barbados"
    PUERTO_RICO = "Puerto Rico"

    @classmethod
    def values(cls):
        return [country.value for country in cls]


class ServiceLevel(str, Enum):
    """Shipping speed tiers offered on a quote"""
    STANDARD = "STANDARD"
    EXPRESS = "EXPRESS"
    NFO = "NFO"  # Next Flight Out


class PieceType(str, Enum):
    BOX = "box"
    BARREL = "barrel"


class CarrierCode(str, Enum):
    CARIBBEAN_AIRLINES = "caribbean_airlines"
    DELTA_CARGO = "delta_cargo"
