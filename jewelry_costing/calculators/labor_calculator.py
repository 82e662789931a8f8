"""
Deterministic labor cost model based on cast weight.

Every labor line is a per-gram rate times a weight, traceable to a rule in
the tables below. A LaborProfile field whose manual-override flag is set
bypasses its formula entirely.

Input: weights in grams, LaborProfile
Output: labor costs in currency units (unrounded)
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..schemas import ComponentRecipeItem, LaborProfile, PlatingType, Product, ProductionType

logger = logging.getLogger(__name__)


# Technician (finishing) rate per gram by weight tier.
# (upper bound g inclusive, rate per g); heavier pieces fall through to the last rate
TECHNICIAN_TIERS: Tuple[Tuple[float, float], ...] = (
    (2.2, 1.30),
    (4.2, 0.90),
    (8.2, 0.70),
)
TECHNICIAN_HEAVY_RATE = 0.50
# Sub-components (STX parts) get a flat finishing rate
COMPONENT_TECHNICIAN_RATE = 0.50

CASTING_RATE_PER_GRAM = 0.15
PLATING_RATE_PER_GRAM = 0.60

PLATED_TYPES = (PlatingType.GOLD_PLATED, PlatingType.PLATINUM)


def technician_rate(weight_g: float) -> float:
    """Per-gram technician rate for the tier `weight_g` falls into."""
    for upper, rate in TECHNICIAN_TIERS:
        if weight_g <= upper:
            return rate
    return TECHNICIAN_HEAVY_RATE


def technician_cost(weight_g: float) -> float:
    """
    Four-tier technician cost:
        <= 2.2g -> w x 1.30
        <= 4.2g -> w x 0.90
        <= 8.2g -> w x 0.70
        else    -> w x 0.50
    """
    if weight_g <= 0:
        return 0.0
    return weight_g * technician_rate(weight_g)


def casting_cost(total_weight_g: float) -> float:
    return max(total_weight_g, 0.0) * CASTING_RATE_PER_GRAM


def plating_cost(weight_g: float, plating_type: PlatingType) -> float:
    """Gold/platinum plating by weight. Every other finish costs nothing here."""
    if plating_type in PLATED_TYPES:
        return weight_g * PLATING_RATE_PER_GRAM
    return 0.0


def resolve_technician_cost(product: Product) -> float:
    labor = product.labor
    if labor.technician_cost_manual_override:
        return labor.technician_cost
    if product.is_component:
        return product.weight_g * COMPONENT_TECHNICIAN_RATE
    return technician_cost(product.total_weight_g)


def resolve_casting_cost(product: Product) -> float:
    labor = product.labor
    if labor.casting_cost_manual_override:
        return labor.casting_cost
    if product.is_component:
        return 0.0
    return casting_cost(product.total_weight_g)


def two_tone_technician_cost(primary_weight_g: float, secondary_weight_g: float) -> float:
    """
    Two-tone pieces get two finishing passes: the primary metal at the rate of
    the piece's total-weight tier, the secondary metal through its own tier.
    """
    total = primary_weight_g + secondary_weight_g
    return primary_weight_g * technician_rate(total) + technician_cost(secondary_weight_g)


def _component_weights(product, products_by_sku):
    # type: (Product, Dict[str, Product]) -> Tuple[float, float]
    primary = 0.0
    secondary = 0.0
    for item in product.recipe:
        if not isinstance(item, ComponentRecipeItem):
            continue
        sub = products_by_sku.get(item.sku)
        if sub is None:
            continue
        primary += sub.weight_g * item.quantity
        secondary += sub.secondary_weight_g * item.quantity
    return primary, secondary


def derive_labor_profile(product: Product, products: Optional[List[Product]] = None) -> LaborProfile:
    """
    Fill every non-overridden labor field of `product` with its formula default.

    Plating X covers the piece plus the weight of its direct components;
    plating D covers the secondary (two-tone) weight the same way. Imported
    products keep their reported technician/casting figures.
    """
    by_sku = {p.sku: p for p in (products or [])}
    labor = product.labor
    updates = {}

    if product.production_type == ProductionType.IN_HOUSE:
        if not labor.technician_cost_manual_override:
            updates["technician_cost"] = resolve_technician_cost(product)
        if not labor.casting_cost_manual_override:
            updates["casting_cost"] = resolve_casting_cost(product)

    comp_primary, comp_secondary = _component_weights(product, by_sku)
    if not labor.plating_cost_x_manual_override:
        updates["plating_cost_x"] = (product.weight_g + comp_primary) * PLATING_RATE_PER_GRAM
    if not labor.plating_cost_d_manual_override:
        updates["plating_cost_d"] = (product.secondary_weight_g + comp_secondary) * PLATING_RATE_PER_GRAM

    logger.debug("Derived labor defaults for %s: %s", product.sku, updates)
    return labor.model_copy(update=updates)
