"""
Base Carrier Interface

This module defines the abstract base class that all carrier rate fetchers
implement.

A carrier owns:
- The destination countries it serves (its applicability gate)
- Its lane table, reached through ``fetch_lanes`` (the remote call)
- Its fuel surcharge percentage, cut-off time and transit time

Pricing itself is shared (see ``surcharges.price_lane``) so swapping a mock
lane source for a live carrier API only means overriding ``fetch_lanes``.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import FrozenSet, List, Optional, Tuple

from freightquote.core.config import get_settings
from freightquote.core.enums import DestinationCountry, ServiceLevel
from freightquote.core.exceptions import CarrierAPIError, CarrierServiceError
from freightquote.schemas.quote import QuoteRequest
from freightquote.schemas.rate import Rate
from freightquote.services.shipping.lanes import Lane, lanes_for_country
from freightquote.services.shipping.surcharges import price_lane

logger = logging.getLogger(__name__)


class BaseCarrier(ABC):
    """Base class for all shipping carriers"""

    carrier_name = "Generic Carrier"
    carrier_code = "generic"
    lane_prefix = "generic"
    served_countries: FrozenSet[DestinationCountry] = frozenset()
    fuel_surcharge_percent = 0.0
    cut_off_time = "12:00"
    transit_days = 1

    def __init__(self, latency: Optional[float] = None):
        """Initialize the carrier

        Args:
            latency: Seconds to wait per lane request; defaults to
                CARRIER_SIMULATED_LATENCY
        """
        settings = get_settings()
        self.latency = settings.CARRIER_SIMULATED_LATENCY if latency is None else latency
        self.validity_hours = settings.RATE_VALIDITY_HOURS

    def serves(self, country: DestinationCountry) -> bool:
        return country in self.served_countries

    def transit_time_for(self, service_level: ServiceLevel) -> int:
        # Same for every service level in the current lane data
        return self.transit_days

    @abstractmethod
    async def fetch_lanes(self, dest_country: DestinationCountry) -> List[Lane]:
        """Fetch the lanes this carrier offers into a country

        Args:
            dest_country: Destination country of the shipment

        Returns:
            Lanes ending in that country (may be empty)

        Raises:
            CarrierAPIError: If the carrier cannot be reached
        """
        pass

    async def get_rates(self, request: QuoteRequest) -> List[Rate]:
        """Get priced rates for a shipment

        Args:
            request: Validated request in metric units (see ``to_metric``)

        Returns:
            One Rate per applicable lane; empty if the destination isn't served

        Raises:
            CarrierAPIError: If fetching lanes fails
        """
        if not self.serves(request.dest_country):
            logger.debug(f"{self.carrier_name} does not serve {request.dest_country.value}")
            return []

        try:
            lanes = await self.fetch_lanes(request.dest_country)
        except CarrierServiceError:
            raise
        except Exception as e:
            logger.error(f"{self.carrier_name} lane request failed: {str(e)}")
            raise CarrierAPIError(
                f"{self.carrier_name} rate request failed: {str(e)}",
                carrier=self.carrier_name,
            ) from e

        valid_until = datetime.now(timezone.utc) + timedelta(hours=self.validity_hours)
        rates = [self._build_rate(lane, request, valid_until) for lane in lanes]
        logger.info(f"{self.carrier_name}: {len(rates)} rate(s) for {request.dest_country.value}")
        return rates

    def _build_rate(self, lane: Lane, request: QuoteRequest, valid_until: datetime) -> Rate:
        breakdown, total_price = price_lane(
            lane,
            request.pieces,
            self.fuel_surcharge_percent,
            after_hours=request.after_hours,
            packaging=request.packaging,
            storage_days=request.storage_days,
            paid_outside_usa=request.paid_outside_usa,
        )
        return Rate(
            lane_id=f"{self.lane_prefix}-{lane.origin}-{lane.destination}",
            carrier=self.carrier_name,
            service_level=request.service_level,
            transit_time=self.transit_time_for(request.service_level),
            total_price=total_price,
            breakdown=breakdown,
            cut_off_time=self.cut_off_time,
            departure_airport=lane.origin,
            arrival_airport=lane.destination,
            valid_until=valid_until,
        )


class StaticLaneCarrier(BaseCarrier):
    """Carrier backed by an in-process lane table.

    Stands in for the carrier's rate API: each lookup waits ``latency``
    seconds the way a network round trip would.
    """

    lanes: Tuple[Lane, ...] = ()

    async def fetch_lanes(self, dest_country: DestinationCountry) -> List[Lane]:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        return lanes_for_country(self.lanes, dest_country)
