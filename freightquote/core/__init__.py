"""
Core module exports.
"""
from .enums import (
    DestinationCountry,
    ServiceLevel,
    PieceType,
    CarrierCode
)

from .exceptions import (
    BaseServiceError,
    QuoteValidationError,
    CarrierServiceError,
    CarrierAPIError,
    CarrierNotSupportedError,
    RateCalculationError
)
