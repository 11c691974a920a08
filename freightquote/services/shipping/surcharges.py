"""
Surcharge calculations shared by every carrier.

All functions take metric input (kilograms) as produced by ``to_metric``.
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from freightquote.core.enums import PieceType
from freightquote.core.units import lbs_to_kg
from freightquote.schemas.quote import Piece
from freightquote.schemas.rate import RateBreakdown
from freightquote.services.shipping.lanes import Lane
from freightquote.services.shipping.packaging import packaging_fee

logger = logging.getLogger(__name__)

SECURITY_FEE_PER_KG = 0.75
AFTER_HOURS_FEE = 25.0
OVERSIZE_FEE = 15.0

# Barrels over 50 lb pay the oversize fee. Pieces are in kg by the time we
# price them, so compare against the converted threshold.
OVERSIZE_BARREL_THRESHOLD_LBS = 50
OVERSIZE_BARREL_THRESHOLD_KG = lbs_to_kg(OVERSIZE_BARREL_THRESHOLD_LBS)

FREE_STORAGE_DAYS = 7
STORAGE_FEE_PER_PIECE_PER_DAY = 2.50

# Payment collected outside the USA
PAID_OUTSIDE_USA_THRESHOLD = 100.0
PAID_OUTSIDE_USA_FLAT_FEE = 10.0
PAID_OUTSIDE_USA_RATE = 0.10


def base_rate(lane: Lane, total_weight_kg: float) -> float:
    return max(lane.min_rate, total_weight_kg * lane.base_rate_per_kg)


def fuel_surcharge(base: float, fuel_percent: float) -> float:
    return base * fuel_percent


def security_fee(total_weight_kg: float) -> float:
    return total_weight_kg * SECURITY_FEE_PER_KG


def after_hours_fee(after_hours: bool) -> Optional[float]:
    """Flat fee, once per quote"""
    return AFTER_HOURS_FEE if after_hours else None


def oversize_fee(pieces: Iterable[Piece]) -> Optional[float]:
    """Flat fee per heavy barrel; None when no piece qualifies"""
    count = sum(
        1 for piece in pieces
        if piece.type == PieceType.BARREL and piece.weight > OVERSIZE_BARREL_THRESHOLD_KG
    )
    return OVERSIZE_FEE * count if count else None


def storage_fee(storage_days: Optional[int], piece_count: int) -> Optional[float]:
    """Per piece, per day held past the free period; None when nothing is owed"""
    if not storage_days or storage_days <= FREE_STORAGE_DAYS:
        return None
    return (storage_days - FREE_STORAGE_DAYS) * STORAGE_FEE_PER_PIECE_PER_DAY * piece_count


def paid_outside_usa_surcharge(subtotal: float, paid_outside_usa: bool) -> Optional[float]:
    """Flat fee under the threshold, a percentage of the subtotal at or above it"""
    if not paid_outside_usa:
        return None
    if subtotal < PAID_OUTSIDE_USA_THRESHOLD:
        return PAID_OUTSIDE_USA_FLAT_FEE
    return subtotal * PAID_OUTSIDE_USA_RATE


def price_lane(
    lane: Lane,
    pieces: Iterable[Piece],
    fuel_percent: float,
    after_hours: bool = False,
    packaging: Optional[Sequence[str]] = None,
    storage_days: Optional[int] = None,
    paid_outside_usa: bool = False,
) -> Tuple[RateBreakdown, float]:
    """
    Price one lane for a shipment.

    Args:
        lane: Lane being priced
        pieces: Metric pieces of the shipment
        fuel_percent: Carrier fuel surcharge as a fraction (0.12 = 12%)
        after_hours: Whether the after-hours fee applies
        packaging: Packaging SKU ids to add
        storage_days: Days the shipment is held before departure
        paid_outside_usa: Whether payment comes from outside the USA

    Returns:
        (breakdown, total_price). Components and total are rounded to cents
        independently.
    """
    pieces = list(pieces)
    total_weight_kg = sum(piece.weight for piece in pieces)

    base = base_rate(lane, total_weight_kg)
    fuel = fuel_surcharge(base, fuel_percent)
    security = security_fee(total_weight_kg)
    after_hours_amount = after_hours_fee(after_hours)
    oversize_amount = oversize_fee(pieces)
    packaging_amount = packaging_fee(packaging)
    storage_amount = storage_fee(storage_days, len(pieces))

    subtotal = (
        base + fuel + security
        + (after_hours_amount or 0)
        + (oversize_amount or 0)
        + (packaging_amount or 0)
        + (storage_amount or 0)
    )
    surcharge = paid_outside_usa_surcharge(subtotal, paid_outside_usa)
    total = subtotal + (surcharge or 0)

    logger.debug(
        f"Priced {lane.origin}-{lane.destination}: {total_weight_kg:.3f}kg "
        f"base={base:.4f} fuel={fuel:.4f} security={security:.4f} "
        f"after_hours={after_hours_amount} oversize={oversize_amount} "
        f"packaging={packaging_amount} storage={storage_amount} surcharge={surcharge}"
    )

    breakdown = RateBreakdown(
        base_rate=round(base, 2),
        fuel_surcharge=round(fuel, 2),
        security_fee=round(security, 2),
        after_hours_fee=after_hours_amount,
        oversize_fee=oversize_amount,
        packaging_fee=packaging_amount,
        storage_fee=_round_optional(storage_amount),
        surcharge=_round_optional(surcharge),
    )
    return breakdown, round(total, 2)


def _round_optional(amount: Optional[float]) -> Optional[float]:
    return None if amount is None else round(amount, 2)
