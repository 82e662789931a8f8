"""
Supplier value analysis for purchased (imported) products.

Answers "would we have made this cheaper ourselves?" by pricing the item as
if it were cast in-house:

    intrinsic value       = metal + materials
    theoretical make cost = intrinsic value + benchmark labor
                            (casting + technician + plating at the same weight)

and then reads the supplier's own labor figures forensically: is their labor
line cheaper than ours, and does the price they imply for the metal hide a
margin that should have been in the labor line?
"""

import logging
from typing import List

from ..rounding import round_price
from ..schemas import (
    Efficiency,
    LaborProfile,
    PlatingType,
    PricingSettings,
    SupplierAnalysis,
    SupplierBreakdown,
    Verdict,
)
from .labor_calculator import casting_cost, plating_cost, technician_cost
from .recipe_cost import (
    MaterialCatalog,
    ProductCatalog,
    index_materials,
    index_products,
    metal_cost,
    rollup_recipe,
)

logger = logging.getLogger(__name__)

# Verdict bands on purchase price / theoretical make cost
EXCELLENT_RATIO = 0.95
FAIR_RATIO = 1.30
EXPENSIVE_RATIO = 1.80

# (cheaper below, more expensive above) differences vs. our benchmark
LABOR_EFFICIENCY_BAND = (-0.5, 1.0)
PLATING_EFFICIENCY_BAND = (-0.2, 0.5)

# Implied metal price this far above market means margin hidden in "metal"
HIDDEN_MARKUP_FACTOR = 1.15


def classify_verdict(purchase_price: float, theoretical_make_cost: float) -> Verdict:
    if purchase_price <= theoretical_make_cost * EXCELLENT_RATIO:
        return Verdict.EXCELLENT
    if purchase_price <= theoretical_make_cost * FAIR_RATIO:
        return Verdict.FAIR
    if purchase_price <= theoretical_make_cost * EXPENSIVE_RATIO:
        return Verdict.EXPENSIVE
    return Verdict.OVERPRICED


def classify_efficiency(diff: float, band) -> Efficiency:
    cheaper_below, dearer_above = band
    if diff < cheaper_below:
        return Efficiency.CHEAPER
    if diff > dearer_above:
        return Efficiency.MORE_EXPENSIVE
    return Efficiency.SIMILAR


def analyze_supplier_value(weight: float, purchase_price: float, recipe: List,
                           settings: PricingSettings, materials: MaterialCatalog,
                           products: ProductCatalog,
                           reported_labor: LaborProfile) -> SupplierAnalysis:
    """
    Compare a supplier's price with what the same piece would cost in-house.

    Args:
        weight: piece weight in grams
        purchase_price: what the supplier charges per piece
        recipe: recipe lines of the purchased item (stones, chains, parts)
        settings: current metal price / loss percentage
        materials, products: catalog snapshot for the recipe lines
        reported_labor: the supplier's own labor quote; reference only

    Returns:
        SupplierAnalysis with verdict, premium and forensic flags.
    """
    rollup = rollup_recipe(recipe, settings, index_materials(materials), index_products(products))
    return assess_supplier_price(weight, purchase_price, rollup.materials_cost, settings, reported_labor)


def assess_supplier_price(weight: float, purchase_price: float, material_cost: float,
                          settings: PricingSettings, reported_labor: LaborProfile) -> SupplierAnalysis:
    """
    The analysis itself, for a recipe already rolled up to `material_cost`.
    The recipe resolver calls this with its own roll-up of the imported item.
    """
    metal = metal_cost(weight, settings)
    intrinsic_value = metal + material_cost

    est_casting = casting_cost(weight)
    est_technician = technician_cost(weight)
    reports_plating = reported_labor.plating_cost_x > 0 or reported_labor.plating_cost_d > 0
    est_plating = plating_cost(weight, PlatingType.GOLD_PLATED) if reports_plating else 0.0
    est_labor = est_casting + est_technician + est_plating
    theoretical_make_cost = intrinsic_value + est_labor

    supplier_premium = purchase_price - intrinsic_value
    premium_percent = supplier_premium / purchase_price * 100 if purchase_price > 0 else 0.0
    verdict = classify_verdict(purchase_price, theoretical_make_cost)

    reported_labor_total = reported_labor.technician_cost + reported_labor.stone_setting_cost
    reported_plating_total = reported_labor.plating_cost_x + reported_labor.plating_cost_d
    reported_extras = reported_labor_total + reported_plating_total

    labor_efficiency = Efficiency.SIMILAR
    plating_efficiency = Efficiency.SIMILAR
    effective_metal_price = 0.0
    has_hidden_markup = False

    if reported_extras > 0 and weight > 0:
        if reported_labor_total > 0:
            labor_efficiency = classify_efficiency(
                reported_labor_total - (est_casting + est_technician), LABOR_EFFICIENCY_BAND)
        if reported_plating_total > 0:
            plating_efficiency = classify_efficiency(
                reported_plating_total - est_plating, PLATING_EFFICIENCY_BAND)

        residual_for_metal = purchase_price - material_cost - reported_extras
        effective_metal_price = residual_for_metal / weight
        has_hidden_markup = effective_metal_price > settings.metal_unit_price * HIDDEN_MARKUP_FACTOR
        if has_hidden_markup:
            logger.info(
                "Supplier implies %.3f/g for metal against %.3f/g market, margin hidden in metal line",
                effective_metal_price, settings.metal_unit_price,
            )

    return SupplierAnalysis(
        intrinsic_value=round_price(intrinsic_value),
        theoretical_make_cost=round_price(theoretical_make_cost),
        supplier_premium=round_price(supplier_premium),
        premium_percent=round(premium_percent, 1),
        verdict=verdict,
        effective_metal_price=round(effective_metal_price, 3),
        has_hidden_markup=has_hidden_markup,
        labor_efficiency=labor_efficiency,
        plating_efficiency=plating_efficiency,
        breakdown=SupplierBreakdown(
            metal_cost=metal,
            material_cost=material_cost,
            est_labor=est_labor,
            supplier_reported_total_labor=reported_extras,
        ),
    )
