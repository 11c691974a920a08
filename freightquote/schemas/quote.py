"""
Schemas for quote requests, plus validation and unit conversion helpers.

A QuoteRequest is validated in display units (pounds, inches). The rating
engine consumes the metric copy produced by ``to_metric``.
"""

import math
import re
from typing import Any, Dict, List, Optional

from pydantic import Field, ValidationError, field_validator, model_validator

from freightquote.core.enums import DestinationCountry, PieceType, ServiceLevel
from freightquote.core.exceptions import QuoteValidationError
from freightquote.core.units import dimensional_weight, inches_to_cm, lbs_to_kg
from freightquote.schemas.base import BaseSchema
from freightquote.services.shipping.packaging import PACKAGING_OPTIONS

ZIP_CODE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")

MAX_PIECES = 10
MAX_PIECE_WEIGHT_LBS = 200
MAX_TOTAL_WEIGHT_LBS = 500
MAX_DIMENSION_INCHES = 120
MAX_DIMENSIONAL_WEIGHT = 500
MAX_CITY_LENGTH = 100
MAX_STORAGE_DAYS = 365


def _as_number(v, label: str) -> float:
    # bool is an int subclass; a checkbox value is not a weight
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f'{label} must be a number')
    try:
        value = float(v)
    except OverflowError:
        raise ValueError(f'{label} must be a finite number')
    if not math.isfinite(value):
        raise ValueError(f'{label} must be a finite number')
    return value


class Dimensions(BaseSchema):
    length: float
    width: float
    height: float

    @field_validator('length', 'width', 'height', mode='before')
    @classmethod
    def validate_dimension(cls, v, info):
        label = info.field_name.capitalize()
        value = _as_number(v, label)
        if value < 0:
            raise ValueError(f'{label} cannot be negative')
        if value > MAX_DIMENSION_INCHES:
            raise ValueError(f'{label} cannot exceed {MAX_DIMENSION_INCHES} inches')
        return value

    @model_validator(mode='after')
    def validate_dimensional_weight(self):
        if dimensional_weight(self.length, self.width, self.height) > MAX_DIMENSIONAL_WEIGHT:
            raise ValueError('Package dimensions are too large')
        return self


class Piece(BaseSchema):
    type: PieceType
    weight: float
    dimensions: Optional[Dimensions] = None

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v):
        if v not in [t.value for t in PieceType] and not isinstance(v, PieceType):
            raise ValueError('Piece type must be one of: box, barrel')
        return v

    @field_validator('weight', mode='before')
    @classmethod
    def validate_weight(cls, v):
        weight = _as_number(v, 'Weight')
        if weight <= 0:
            raise ValueError('Weight must be greater than 0')
        if weight > MAX_PIECE_WEIGHT_LBS:
            raise ValueError(f'Weight cannot exceed {MAX_PIECE_WEIGHT_LBS} lbs per piece')
        return weight


class QuoteRequest(BaseSchema):
    """Shipment characteristics supplied by the customer (RateInput)"""
    origin_zip: str
    dest_country: DestinationCountry
    dest_city: Optional[str] = None
    pieces: List[Piece]
    service_level: ServiceLevel
    after_hours: bool = False
    is_personal_effects: bool = False  # barrel / C73 eligibility marker, not priced
    packaging: Optional[List[str]] = None  # packaging SKU ids
    storage_days: Optional[int] = None
    paid_outside_usa: bool = Field(False, alias='paidOutsideUSA')

    @field_validator('origin_zip', mode='before')
    @classmethod
    def validate_origin_zip(cls, v):
        if not isinstance(v, str) or not v:
            raise ValueError('Origin ZIP code is required')
        if not ZIP_CODE_PATTERN.fullmatch(v):
            raise ValueError('Invalid ZIP code format')
        return v

    @field_validator('dest_country', mode='before')
    @classmethod
    def validate_dest_country(cls, v):
        if isinstance(v, DestinationCountry):
            return v
        if not v:
            raise ValueError('Destination country is required')
        if v not in DestinationCountry.values():
            raise ValueError('Destination country not supported')
        return v

    @field_validator('dest_city')
    @classmethod
    def validate_dest_city(cls, v):
        if v is not None and len(v) > MAX_CITY_LENGTH:
            raise ValueError('City name is too long')
        return v

    @field_validator('service_level', mode='before')
    @classmethod
    def validate_service_level(cls, v):
        if v not in [level.value for level in ServiceLevel] and not isinstance(v, ServiceLevel):
            raise ValueError('Service level must be one of: STANDARD, EXPRESS, NFO')
        return v

    @field_validator('pieces')
    @classmethod
    def validate_pieces(cls, v):
        if len(v) < 1:
            raise ValueError('At least one piece is required')
        if len(v) > MAX_PIECES:
            raise ValueError(f'Maximum {MAX_PIECES} pieces per shipment')
        if sum(piece.weight for piece in v) > MAX_TOTAL_WEIGHT_LBS:
            raise ValueError(f'Total weight cannot exceed {MAX_TOTAL_WEIGHT_LBS} lbs')
        return v

    @field_validator('packaging')
    @classmethod
    def validate_packaging(cls, v):
        if v is None:
            return v
        unknown = [sku for sku in v if sku not in PACKAGING_OPTIONS]
        if unknown:
            raise ValueError(f'Unknown packaging option: {", ".join(unknown)}')
        return v

    @field_validator('storage_days', mode='before')
    @classmethod
    def validate_storage_days(cls, v):
        if v is None:
            return v
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError('Storage days must be a whole number')
        if v < 0:
            raise ValueError('Storage days cannot be negative')
        if v > MAX_STORAGE_DAYS:
            raise ValueError(f'Storage days cannot exceed {MAX_STORAGE_DAYS}')
        return v

    @property
    def total_weight(self) -> float:
        return sum(piece.weight for piece in self.pieces)


def _format_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "request"
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": field, "message": message})
    return errors


def validate_quote_request(raw: Any) -> QuoteRequest:
    """
    Validate a raw quote request payload.

    Args:
        raw: Decoded JSON body (camelCase keys) or an existing QuoteRequest

    Returns:
        A typed QuoteRequest in display units

    Raises:
        QuoteValidationError: With one entry per offending field
    """
    if isinstance(raw, QuoteRequest):
        return raw
    try:
        return QuoteRequest.model_validate(raw)
    except ValidationError as e:
        raise QuoteValidationError("Validation failed", errors=_format_errors(e)) from e


def to_metric(request: QuoteRequest) -> QuoteRequest:
    """
    Convert piece weights to kilograms and dimensions to centimetres.

    Returns a copy; the input is left untouched. Full float precision is kept.
    Apply once: the result carries no unit marker.
    """
    pieces = []
    for piece in request.pieces:
        dimensions = None
        if piece.dimensions is not None:
            dimensions = piece.dimensions.model_copy(update={
                "length": inches_to_cm(piece.dimensions.length),
                "width": inches_to_cm(piece.dimensions.width),
                "height": inches_to_cm(piece.dimensions.height),
            })
        pieces.append(piece.model_copy(update={
            "weight": lbs_to_kg(piece.weight),
            "dimensions": dimensions,
        }))
    return request.model_copy(update={"pieces": pieces})
