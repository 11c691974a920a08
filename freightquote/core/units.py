"""
Unit conversions between the display units customers enter (pounds, inches)
and the metric units the rating engine prices in (kilograms, centimetres).

No rounding happens here; round only for display.
"""

LB_TO_KG = 0.45359237
IN_TO_CM = 2.54

# Domestic air divisor for dimensional weight, inches and pounds
DIM_WEIGHT_DIVISOR = 166


def lbs_to_kg(pounds: float) -> float:
    return pounds * LB_TO_KG


def kg_to_lbs(kilograms: float) -> float:
    return kilograms / LB_TO_KG


def inches_to_cm(inches: float) -> float:
    return inches * IN_TO_CM


def cm_to_inches(centimetres: float) -> float:
    return centimetres / IN_TO_CM


def dimensional_weight(length: float, width: float, height: float) -> float:
    """
    Volumetric weight of a package: L x W x H / 166.

    Args:
        length, width, height: Package dimensions in inches

    Returns:
        Dimensional weight in pounds
    """
    return (length * width * height) / DIM_WEIGHT_DIVISOR


# Air freight volumetric divisor, centimetres and kilograms
VOLUMETRIC_DIVISOR_CM = 6000


def volumetric_weight_kg(length_cm: float, width_cm: float, height_cm: float) -> float:
    return (length_cm * width_cm * height_cm) / VOLUMETRIC_DIVISOR_CM
