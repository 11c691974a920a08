from typing import Any, Dict, List, Optional


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class QuoteValidationError(BaseServiceError):
    """Raised when a quote request fails validation.

    Carries field-level errors as a list of ``{"field": ..., "message": ...}``.
    """

    def __init__(self, message: str = "Validation failed", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    def __str__(self):
        if not self.errors:
            return self.message
        details = "; ".join(f"{e['field']}: {e['message']}" for e in self.errors)
        return f"{self.message}: {details}"

class CarrierServiceError(BaseServiceError):
    """Base exception for carrier rate fetcher errors."""

    def __init__(self, message: str, carrier: Optional[str] = None):
        super().__init__(message)
        self.carrier = carrier

class CarrierAPIError(CarrierServiceError):
    """Raised when a carrier's rate API call fails."""
    pass

class CarrierNotSupportedError(CarrierServiceError, ValueError):
    """Raised when an unknown carrier code is requested."""
    pass

class RateCalculationError(BaseServiceError):
    """Raised when rates for a quote cannot be calculated."""
    pass
