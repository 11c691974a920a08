"""
Rate aggregation across carriers.

Every carrier is asked concurrently; results are merged and sorted cheapest
first. A destination no carrier serves yields an empty list, which is a
valid answer and not an error.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from freightquote.core.config import get_settings
from freightquote.core.exceptions import RateCalculationError
from freightquote.schemas.quote import QuoteRequest
from freightquote.schemas.rate import Rate
from freightquote.services.shipping.base import BaseCarrier
from freightquote.services.shipping.factory import get_all_carriers

logger = logging.getLogger(__name__)

RATE_FAILURE_MESSAGE = "Failed to calculate shipping rates. Please try again later."


async def aggregate_rates(
    request: QuoteRequest,
    carriers: Optional[Sequence[BaseCarrier]] = None,
    allow_partial: Optional[bool] = None,
) -> Tuple[List[Rate], List[str]]:
    """
    Fetch rates from all carriers and merge them.

    Args:
        request: Validated request in metric units
        carriers: Carriers to ask; defaults to every registered carrier
        allow_partial: Keep rates from carriers that succeeded when another
            fails. Defaults to ALLOW_PARTIAL_RATES.

    Returns:
        (rates sorted ascending by total price, warnings for failed carriers)

    Raises:
        RateCalculationError: If any carrier fails and partial results are off
    """
    if carriers is None:
        carriers = get_all_carriers()
    if allow_partial is None:
        allow_partial = get_settings().ALLOW_PARTIAL_RATES

    results = await asyncio.gather(
        *(carrier.get_rates(request) for carrier in carriers),
        return_exceptions=True,
    )

    rates: List[Rate] = []
    warnings: List[str] = []
    first_error: Optional[Exception] = None

    for carrier, result in zip(carriers, results):
        if isinstance(result, Exception):
            logger.error(f"Error calculating rates with {carrier.carrier_name}: {str(result)}")
            warnings.append(f"{carrier.carrier_name} rates are currently unavailable")
            if first_error is None:
                first_error = result
            continue
        if isinstance(result, BaseException):
            # Cancellation and interpreter exits are not carrier failures
            raise result
        rates.extend(result)

    if first_error is not None and not allow_partial:
        raise RateCalculationError(RATE_FAILURE_MESSAGE) from first_error

    # sorted() is stable: equal prices keep carrier order, then lane order
    rates = sorted(rates, key=lambda rate: rate.total_price)
    logger.info(
        f"Quoted {len(rates)} rate(s) to {request.dest_country.value} "
        f"from {len(carriers)} carrier(s), {len(warnings)} failure(s)"
    )
    return rates, warnings


async def rate_quote(
    request: QuoteRequest,
    carriers: Optional[Sequence[BaseCarrier]] = None,
    allow_partial: Optional[bool] = None,
) -> List[Rate]:
    """Sorted rates for a metric request; see ``aggregate_rates``."""
    rates, _ = await aggregate_rates(request, carriers=carriers, allow_partial=allow_partial)
    return rates
