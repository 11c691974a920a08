import asyncio
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from freightquote.core.config import get_settings
from freightquote.core.exceptions import QuoteValidationError, RateCalculationError
from freightquote.dependencies import get_quote_service
from freightquote.services.quote_service import QuoteService
from freightquote.services.shipping.factory import CARRIERS
from freightquote.services.shipping.packaging import PACKAGING_OPTIONS

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["quotes"],
    responses={404: {"description": "Not found"}},
)


def _error_response(status_code: int, error: str, details=None) -> JSONResponse:
    content = {"success": False, "error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@router.post("/quote")
async def create_quote_endpoint(
    request: Request,
    quote_service: QuoteService = Depends(get_quote_service),
):
    """Price a shipment against every carrier and return a sorted quote."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error_response(400, "Request body must be valid JSON")

    settings = get_settings()
    try:
        quote = await asyncio.wait_for(
            quote_service.create_quote(payload),
            timeout=settings.QUOTE_TIMEOUT_SECONDS,
        )
    except QuoteValidationError as e:
        logger.info(f"Quote rejected: {str(e)}")
        return _error_response(400, e.message, details=e.errors)
    except RateCalculationError as e:
        logger.error(f"Quote failed: {str(e)}")
        return _error_response(500, str(e))
    except asyncio.TimeoutError:
        logger.error(f"Quote timed out after {settings.QUOTE_TIMEOUT_SECONDS}s")
        return _error_response(504, "Rate calculation timed out. Please try again later.")

    payload = quote.to_payload()
    # top-level rates is an alias of quote.rates for clients reading the flat envelope
    return {
        "success": True,
        "quoteId": quote.id,
        "quote": payload,
        "rates": payload["rates"],
    }


@router.get("/lanes")
async def list_lanes():
    """Lane tables per carrier."""
    return {
        code: {
            "carrier": carrier_class.carrier_name,
            "fuelSurchargePercent": carrier_class.fuel_surcharge_percent,
            "cutOffTime": carrier_class.cut_off_time,
            "servedCountries": sorted(country.value for country in carrier_class.served_countries),
            "lanes": [
                {
                    "origin": lane.origin,
                    "destination": lane.destination,
                    "destCountry": lane.dest_country.value,
                    "baseRatePerKg": lane.base_rate_per_kg,
                    "minRate": lane.min_rate,
                }
                for lane in getattr(carrier_class, "lanes", ())
            ],
        }
        for code, carrier_class in CARRIERS.items()
    }


@router.get("/packaging")
async def list_packaging():
    """Packaging options with customer prices."""
    return {
        "success": True,
        "packaging": [
            {
                "id": option.sku,
                "code": option.code,
                "name": option.name,
                "category": option.category,
                "sellPriceUSD": option.sell_price,
                "maxWeightKg": option.max_weight_kg,
            }
            for option in PACKAGING_OPTIONS.values()
        ],
    }
