"""
Variant cost estimator.

Re-prices one variant of a master product. The suffix decides three things
the master's own cost does not know about:

    stone code  -> per-stone material price overrides (e.g. lapis vs. onyx)
    finish 'D'  -> two finishing passes, one per metal
    finish X/H  -> gold/platinum plating labor; 'D' -> two-tone plating labor
"""

import logging
from typing import Optional

from ..code_dictionaries import PLATED_FINISHES, TWO_TONE_FINISH
from ..rounding import round_price
from ..schemas import (
    CostBreakdown,
    CostDetails,
    CostResult,
    PlatingType,
    PricingSettings,
    Product,
    ProductionType,
)
from ..suffix_decomposer import decompose_suffix
from .labor_calculator import casting_cost, derive_labor_profile, technician_cost, two_tone_technician_cost
from .recipe_cost import MaterialCatalog, ProductCatalog, index_materials, index_products, metal_cost, rollup_recipe

logger = logging.getLogger(__name__)


def _plating_kind(finish_code, plating_type):
    # type: (str, PlatingType) -> Optional[str]
    """'x', 'd' or None. An explicit finish wins over the master's plating category."""
    if finish_code:
        if finish_code in PLATED_FINISHES:
            return "x"
        if finish_code == TWO_TONE_FINISH:
            return "d"
        return None
    if plating_type in (PlatingType.GOLD_PLATED, PlatingType.PLATINUM):
        return "x"
    if plating_type == PlatingType.TWO_TONE:
        return "d"
    return None


def _imported_variant_cost(master, finish_code, settings):
    # type: (Product, str, PricingSettings) -> CostResult
    """
    Same metal convention as the resolver: in-house metal cost (loss
    included) next to a purchase price, market metal in a rebuilt quote.
    """
    weight = master.weight_g
    if master.supplier_cost > 0:
        # Per-gram surcharges from the supplier quote are already inside this price
        total = master.supplier_cost
        breakdown = CostBreakdown(metal=metal_cost(weight, settings),
                                  details=CostDetails(total_weight=weight))
        return CostResult(total=round_price(total), raw_total=total, breakdown=breakdown)

    labor = master.labor
    metal = weight * settings.metal_unit_price
    technician = weight * labor.technician_cost
    stones = labor.stone_setting_cost
    kind = _plating_kind(finish_code, master.plating_type)
    if kind == "x":
        plating = weight * labor.plating_cost_x
    elif kind == "d":
        plating = weight * labor.plating_cost_d
    else:
        plating = 0.0

    total = metal + technician + stones + plating
    breakdown = CostBreakdown(
        metal=metal,
        materials=stones,
        labor=technician + plating,
        details=CostDetails(
            technician_cost=technician,
            plating_cost=plating,
            stone_setting_cost=stones,
            total_weight=weight,
        ),
    )
    return CostResult(total=round_price(total), raw_total=total, breakdown=breakdown)


def estimate_variant_cost(master: Product, variant_suffix: str, settings: PricingSettings,
                          materials: MaterialCatalog, products: ProductCatalog) -> CostResult:
    """
    Estimate the cost of `master` built as the variant `variant_suffix`.

    Args:
        master: the master product whose recipe and labor are re-priced
        variant_suffix: e.g. "PKR", "X", "DLA"; decoded with the master's gender
        settings: metal price / loss percentage for this pass
        materials, products: catalog snapshot

    Returns:
        CostResult; breakdown.details.stone_diff shows what the stone
        overrides added (or saved) against base material prices.
    """
    components = decompose_suffix(variant_suffix, master.gender)
    finish_code = components.finish.code
    stone_code = components.stone.code

    if master.production_type == ProductionType.IMPORTED:
        return _imported_variant_cost(master, finish_code, settings)

    materials_by_id = index_materials(materials)
    products_by_sku = index_products(products)

    total_weight = master.total_weight_g
    metal = metal_cost(total_weight, settings)
    rollup = rollup_recipe(master.recipe, settings, materials_by_id, products_by_sku,
                           visited=frozenset({master.sku}), stone_code=stone_code)

    labor = derive_labor_profile(master, list(products_by_sku.values()))
    if labor.technician_cost_manual_override:
        technician = labor.technician_cost
    elif finish_code == TWO_TONE_FINISH:
        technician = two_tone_technician_cost(master.weight_g, master.secondary_weight_g)
    else:
        technician = technician_cost(total_weight)

    casting = labor.casting_cost if labor.casting_cost_manual_override else casting_cost(total_weight)

    kind = _plating_kind(finish_code, master.plating_type)
    if kind == "x":
        plating = labor.plating_cost_x
    elif kind == "d":
        plating = labor.plating_cost_d
    else:
        plating = 0.0

    labor_total = casting + labor.setter_cost + technician + labor.subcontract_cost + plating
    total = metal + rollup.materials_cost + labor_total

    logger.debug("Variant %s%s: finish=%r stone=%r plating=%s total=%.4f",
                 master.sku, variant_suffix, finish_code, stone_code, kind, total)

    breakdown = CostBreakdown(
        metal=metal,
        materials=round(rollup.materials_cost, 2),
        labor=labor_total,
        details=CostDetails(
            casting_cost=casting,
            setter_cost=labor.setter_cost,
            technician_cost=technician,
            subcontract_cost=labor.subcontract_cost,
            plating_cost=plating,
            stone_diff=rollup.stone_diff,
            total_weight=total_weight,
        ),
        error=rollup.error,
        missing_references=rollup.missing_references,
    )
    return CostResult(total=round_price(total), raw_total=total, breakdown=breakdown)


def variant_selling_price(product: Product, suffix: str) -> float:
    """The variant's own selling price if it has one, else the master's."""
    for variant in product.variants:
        if variant.suffix.upper() == (suffix or "").upper() and variant.selling_price is not None:
            return variant.selling_price
    return product.selling_price
