# freightquote/services/quote_service.py
"""
Quote creation: validate the request, convert it to metric, collect carrier
rates and wrap them in a time-bound Quote.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Sequence

from freightquote.core.config import get_settings
from freightquote.core.units import volumetric_weight_kg
from freightquote.schemas.quote import QuoteRequest, to_metric, validate_quote_request
from freightquote.schemas.rate import Quote
from freightquote.services.shipping.base import BaseCarrier
from freightquote.services.shipping.rating import aggregate_rates

logger = logging.getLogger(__name__)

# JetPak (small-package airport-to-airport) limits
JETPAK_MAX_PIECE_WEIGHT_KG = 23
JETPAK_MAX_LINEAR_CM = 157

QUOTE_DISCLAIMERS = [
    "Airport-to-airport JetPak service only",
    "Pickup and delivery not included",
    "Subject to TSA and customs inspection",
    "Rates subject to change without notice",
]


def chargeable_weight_kg(metric_request: QuoteRequest) -> float:
    """Sum over pieces of the greater of actual and volumetric weight, in kg"""
    total = 0.0
    for piece in metric_request.pieces:
        dims = piece.dimensions
        volumetric = volumetric_weight_kg(dims.length, dims.width, dims.height) if dims else 0.0
        total += max(piece.weight, volumetric)
    return round(total, 2)


def get_eligibility_warnings(metric_request: QuoteRequest) -> List[str]:
    """Warnings for pieces outside JetPak limits. Expects metric input."""
    warnings = []

    if any(piece.weight > JETPAK_MAX_PIECE_WEIGHT_KG for piece in metric_request.pieces):
        warnings.append("One or more pieces exceed JetPak weight limit (50 lbs)")

    for piece in metric_request.pieces:
        dims = piece.dimensions
        if dims and dims.length + dims.width + dims.height > JETPAK_MAX_LINEAR_CM:
            warnings.append("One or more pieces exceed JetPak dimension limits (62 inches total)")
            break

    return warnings


class QuoteService:
    def __init__(
        self,
        carriers: Optional[Sequence[BaseCarrier]] = None,
        allow_partial: Optional[bool] = None,
    ):
        self.carriers = carriers
        self.allow_partial = allow_partial
        self.validity_hours = get_settings().RATE_VALIDITY_HOURS

    async def create_quote(self, raw: Any) -> Quote:
        """
        Build a quote from a raw request body.

        Args:
            raw: Decoded JSON body or a QuoteRequest, in display units

        Returns:
            Quote with rates sorted cheapest first (possibly none)

        Raises:
            QuoteValidationError: If the request is malformed
            RateCalculationError: If carrier rates could not be calculated
        """
        request = validate_quote_request(raw)
        metric_request = to_metric(request)

        logger.info(
            f"Quote request: {request.origin_zip} -> {request.dest_country.value}, "
            f"{len(request.pieces)} piece(s), {request.total_weight:.1f} lbs, "
            f"{request.service_level.value}"
        )

        rates, warnings = await aggregate_rates(
            metric_request,
            carriers=self.carriers,
            allow_partial=self.allow_partial,
        )

        created_at = datetime.now(timezone.utc)
        return Quote(
            id=f"quote_{uuid.uuid4().hex[:16]}",
            input=request,
            rates=rates,
            created_at=created_at,
            expires_at=created_at + timedelta(hours=self.validity_hours),
            eligibility_warnings=get_eligibility_warnings(metric_request),
            chargeable_weight_kg=chargeable_weight_kg(metric_request),
            disclaimers=list(QUOTE_DISCLAIMERS),
            warnings=warnings,
        )
