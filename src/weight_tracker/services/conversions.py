"""Conversions between canonical pounds and display units.

Pounds are the only stored quantity. Every other representation is derived
here and none of these functions raise for negative input; validation is
responsible for rejecting it.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from weight_tracker.domain.weights import DisplayStyle, StonesAndPounds, Unit

POUNDS_PER_STONE = 14
KG_PER_POUND = 0.453592

# Wide enough to quantize any finite float.
_FIXED_CONTEXT = Context(prec=400)


def stones_to_pounds(stones: float, pounds: float) -> float:
    """Convert stones and pounds to total pounds."""
    return stones * POUNDS_PER_STONE + pounds


def pounds_to_stones(total_pounds: float) -> StonesAndPounds:
    """Split total pounds into whole stones and remaining pounds.

    Floor division and floor modulo keep the remainder in [0, 14) for every
    input, so ``stones * 14 + pounds == total_pounds`` also holds for
    negative values.
    """
    total = float(total_pounds)
    stones = math.floor(total / POUNDS_PER_STONE)
    pounds = total % POUNDS_PER_STONE
    return StonesAndPounds(stones=stones, pounds=pounds)


def pounds_to_kg(pounds: float) -> float:
    """Convert pounds to kilograms."""
    return pounds * KG_PER_POUND


def pounds_to_decimal_stones(pounds: float) -> float:
    """Convert pounds to stones rounded to two decimals, half rounding up."""
    return math.floor(pounds / POUNDS_PER_STONE * 100 + 0.5) / 100


def format_weight(
    pounds: float,
    unit: Unit | str,
    style: DisplayStyle | str = DisplayStyle.SHORT,
) -> str:
    """Format a canonical weight for display in the given unit."""
    style = DisplayStyle(style)
    if Unit(unit) is Unit.METRIC:
        kg = pounds_to_kg(pounds)
        places = 1 if style is DisplayStyle.SHORT else 2
        return f"{to_fixed(kg, places)} kg"

    split = pounds_to_stones(pounds)
    if style is DisplayStyle.SHORT:
        return f"{split.stones} st {to_fixed(split.pounds, 0)} lbs"
    return f"{split.stones} stones {to_fixed(split.pounds, 1)} pounds"


def to_fixed(value: float, places: int) -> str:
    """Render a float with a fixed number of decimals, halves away from zero."""
    if not math.isfinite(value):
        return str(value)
    quantum = Decimal(1).scaleb(-places)
    fixed = Decimal(value).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT
    )
    return str(fixed)
