from fastapi import APIRouter

from freightquote import __version__
from freightquote.core.config import get_settings
from freightquote.services.shipping.factory import CARRIERS
from freightquote.services.shipping.lanes import DESTINATION_AIRPORTS

router = APIRouter(tags=["health"])

@router.get("/health")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": "Air Freight Quoting",
        "version": __version__,
        "environment": get_settings().ENVIRONMENT,
        "carriers": list(CARRIERS.keys()),
        "destinations": {country.value: airport for country, airport in DESTINATION_AIRPORTS.items()},
    }
