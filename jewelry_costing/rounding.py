"""
Canonical money rounding and display formatting.

round_price() is the single rounding applied to money leaving the core.
Running sums inside the calculators use accumulate(), which keeps
ACCUMULATION_PLACES decimals so that nested recipes do not compound
display rounding (2.70 drifting to 2.62 after a few levels).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

PRICE_STEP = Decimal("0.1")
ACCUMULATION_PLACES = 4

# Suggested wholesale: non-metal costs doubled + metal + per-gram surcharge
WHOLESALE_NON_METAL_MULTIPLIER = 2.0
WHOLESALE_SURCHARGE_PER_GRAM = 2.0


def round_price(price: float) -> float:
    """Round to the nearest 0.10 (21.54 -> 21.50, 21.55 -> 21.60)."""
    if not price:
        return 0.0
    return float(Decimal(repr(float(price))).quantize(PRICE_STEP, rounding=ROUND_HALF_UP))


def accumulate(total: float, line: float) -> float:
    return round(total + line, ACCUMULATION_PLACES)


def format_decimal(num: Optional[float], precision: int = 2) -> str:
    """Format with a comma decimal separator. None/NaN render as zero."""
    if num is None or num != num:
        num = 0.0
    return f"{num:.{precision}f}".replace(".", ",")


def format_currency(num: Optional[float]) -> str:
    return f"{format_decimal(num, 2)}€"


def codify_price(price: float) -> str:
    """
    Retail label price code: '1' + price in cents + '9'.
    36.90 -> 3690 -> '136909'. Non-positive prices have no code.
    """
    if not price or price <= 0:
        return ""
    cents = int(Decimal(repr(float(price))).scaleb(2).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return f"1{cents}9"


def suggested_wholesale_price(total_weight: float, metal_cost: float,
                              labor_cost: float, material_cost: float) -> float:
    """(labor + materials) x 2 + metal + 2 per gram, rounded."""
    non_metal = labor_cost + material_cost
    surcharge = total_weight * WHOLESALE_SURCHARGE_PER_GRAM
    return round_price(non_metal * WHOLESALE_NON_METAL_MULTIPLIER + metal_cost + surcharge)
