"""
Schemas for priced rate offers and quotes.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from freightquote.core.enums import ServiceLevel
from freightquote.schemas.base import BaseSchema
from freightquote.schemas.quote import QuoteRequest


class RateBreakdown(BaseSchema):
    """Itemised components of a rate, each rounded to cents on its own.

    The sum of the components can differ from ``Rate.total_price`` by a cent
    because the total is rounded from unrounded components.
    """
    model_config = ConfigDict(frozen=True)

    base_rate: float
    fuel_surcharge: float
    security_fee: float
    after_hours_fee: Optional[float] = None
    oversize_fee: Optional[float] = None
    packaging_fee: Optional[float] = None
    storage_fee: Optional[float] = None
    surcharge: Optional[float] = None  # payment collected outside the USA


class Rate(BaseSchema):
    """One priced offer on one carrier lane"""
    model_config = ConfigDict(frozen=True)

    lane_id: str
    carrier: str
    service_level: ServiceLevel
    transit_time: int  # days
    total_price: float
    breakdown: RateBreakdown
    cut_off_time: str  # "HH:MM" Eastern
    departure_airport: str
    arrival_airport: str
    valid_until: datetime


class Quote(BaseSchema):
    """A computed, time-bound set of rate offers for one shipment"""
    id: str
    input: QuoteRequest
    rates: List[Rate]
    created_at: datetime
    expires_at: datetime
    eligibility_warnings: List[str] = Field(default_factory=list)
    disclaimers: List[str] = Field(default_factory=list)
    chargeable_weight_kg: Optional[float] = None
    warnings: List[str] = Field(default_factory=list)
