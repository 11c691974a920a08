from .base import BaseSchema
from .quote import (
    Dimensions,
    Piece,
    QuoteRequest,
    validate_quote_request,
    to_metric
)
from .rate import RateBreakdown, Rate, Quote
