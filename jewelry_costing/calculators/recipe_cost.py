"""
Recipe cost resolver, a recursive bill-of-materials roll-up.

Pure math over a catalog snapshot:
    in-house:  metal + materials (raw lines + nested components) + labor
    imported:  the stored purchase price, with a supplier analysis attached

Cycle and depth problems never raise. The offending branch resolves to a
zero-cost result tagged with a CostError and the rest of the recipe carries on.
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Optional, Union

from ..rounding import accumulate, round_price
from ..schemas import (
    ComponentRecipeItem,
    CostBreakdown,
    CostDetails,
    CostError,
    CostResult,
    Material,
    PlatingType,
    PricingSettings,
    Product,
    ProductionType,
    RawRecipeItem,
)
from .labor_calculator import resolve_casting_cost, resolve_technician_cost

logger = logging.getLogger(__name__)

MAX_RECIPE_DEPTH = 10

MaterialCatalog = Union[Mapping[str, Material], Iterable[Material]]
ProductCatalog = Union[Mapping[str, Product], Iterable[Product]]


class RecipeRollup(NamedTuple):
    materials_cost: float
    stone_diff: float
    missing_references: List[str]
    # First error raised by a component branch; that branch contributed zero
    error: Optional[CostError] = None


def index_materials(materials: MaterialCatalog) -> Dict[str, Material]:
    if isinstance(materials, Mapping):
        return dict(materials)
    return {m.id: m for m in materials or ()}


def index_products(products: ProductCatalog) -> Dict[str, Product]:
    if isinstance(products, Mapping):
        return dict(products)
    return {p.sku: p for p in products or ()}


def metal_cost(weight_g: float, settings: PricingSettings) -> float:
    """weight x metal price, grossed up by the casting loss percentage."""
    return weight_g * settings.metal_unit_price * (1 + settings.loss_percentage / 100.0)


def effective_unit_cost(material: Material, stone_code: Optional[str] = None) -> float:
    """
    Unit cost of a material for a given stone code: the stone override if the
    material has one, else its base cost. Strand-priced materials are divided
    down to a single stone.
    """
    price = material.cost_per_unit
    if stone_code and stone_code in material.variant_prices:
        price = material.variant_prices[stone_code]
    if material.stones_per_strand:
        price = price / material.stones_per_strand
    return price


def rollup_recipe(recipe, settings, materials_by_id, products_by_sku,
                  depth=0, visited=frozenset(), stone_code=None):
    # type: (list, PricingSettings, Dict[str, Material], Dict[str, Product], int, FrozenSet[str], Optional[str]) -> RecipeRollup
    """
    Sum a recipe's material lines.

    Raw lines use effective_unit_cost(); component lines resolve recursively
    and contribute their unrounded raw_total so rounding does not compound
    across levels. Lines pointing at ids missing from the snapshot add nothing
    and are reported back by id.
    """
    total = 0.0
    stone_diff = 0.0
    missing = []
    error = None

    for item in recipe:
        if isinstance(item, RawRecipeItem):
            material = materials_by_id.get(item.material_id)
            if material is None:
                missing.append(item.material_id)
                continue
            unit = effective_unit_cost(material, stone_code)
            base = effective_unit_cost(material)
            stone_diff += (unit - base) * item.quantity
            total = accumulate(total, unit * item.quantity)
        elif isinstance(item, ComponentRecipeItem):
            sub = products_by_sku.get(item.sku)
            if sub is None:
                missing.append(item.sku)
                continue
            sub_cost = _resolve(sub, settings, materials_by_id, products_by_sku, depth + 1, visited)
            if sub_cost.breakdown.error is not None:
                logger.warning("Component %s of recipe resolved with %s",
                               item.sku, sub_cost.breakdown.error.value)
                error = error or sub_cost.breakdown.error
            total = accumulate(total, sub_cost.raw_total * item.quantity)

    if missing:
        logger.debug("Recipe references missing from snapshot: %s", missing)
    return RecipeRollup(total, stone_diff, missing, error)


def _imported_cost(product, settings, materials_by_id, products_by_sku, depth, path):
    # type: (Product, PricingSettings, Dict[str, Material], Dict[str, Product], int, FrozenSet[str]) -> CostResult
    """
    Purchase price when there is one, with the supplier analysis attached.
    breakdown.metal is then the analysis' in-house metal cost (loss
    included), for reference only. Without a purchase price the total is
    rebuilt from the supplier's per-gram quote and metal is priced at market,
    as the supplier quotes it.
    """
    from .supplier_value import assess_supplier_price

    labor = product.labor
    weight = product.weight_g

    if product.supplier_cost > 0:
        total = product.supplier_cost
        rollup = rollup_recipe(product.recipe, settings, materials_by_id, products_by_sku,
                               depth=depth, visited=path)
        analysis = assess_supplier_price(weight, product.supplier_cost, rollup.materials_cost,
                                         settings, labor)
        breakdown = CostBreakdown(
            metal=analysis.breakdown.metal_cost,
            materials=0.0,
            labor=0.0,
            details=CostDetails(total_weight=weight),
            error=rollup.error,
            missing_references=rollup.missing_references,
            supplier_analysis=analysis,
        )
        return CostResult(total=round_price(total), raw_total=total, breakdown=breakdown)

    metal = weight * settings.metal_unit_price
    technician = weight * labor.technician_cost
    plating = weight * labor.plating_cost_x if product.plating_type != PlatingType.NONE else 0.0
    stones = labor.stone_setting_cost
    total = metal + technician + plating + stones
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


def _resolve(product, settings, materials_by_id, products_by_sku, depth, visited):
    # type: (Product, PricingSettings, Dict[str, Material], Dict[str, Product], int, FrozenSet[str]) -> CostResult
    if product.sku in visited:
        logger.warning("Circular dependency: %s already on path %s", product.sku, sorted(visited))
        return CostResult.zero(CostError.CIRCULAR_DEPENDENCY)
    if depth > MAX_RECIPE_DEPTH:
        logger.warning("Recipe depth %d exceeded at %s", MAX_RECIPE_DEPTH, product.sku)
        return CostResult.zero(CostError.DEPTH_EXCEEDED)

    path = visited | {product.sku}
    if product.production_type == ProductionType.IMPORTED:
        return _imported_cost(product, settings, materials_by_id, products_by_sku, depth, path)

    total_weight = product.total_weight_g
    metal = metal_cost(total_weight, settings)
    rollup = rollup_recipe(product.recipe, settings, materials_by_id, products_by_sku,
                           depth=depth, visited=path)

    labor = product.labor
    technician = resolve_technician_cost(product)
    casting = resolve_casting_cost(product)
    labor_total = casting + labor.setter_cost + technician + labor.subcontract_cost

    total = metal + rollup.materials_cost + labor_total
    breakdown = CostBreakdown(
        metal=metal,
        materials=round(rollup.materials_cost, 2),
        labor=labor_total,
        details=CostDetails(
            casting_cost=casting,
            setter_cost=labor.setter_cost,
            technician_cost=technician,
            subcontract_cost=labor.subcontract_cost,
            total_weight=total_weight,
        ),
        error=rollup.error,
        missing_references=rollup.missing_references,
    )
    return CostResult(total=round_price(total), raw_total=total, breakdown=breakdown)


def resolve_product_cost(product: Product, settings: PricingSettings,
                         materials: MaterialCatalog, products: ProductCatalog,
                         depth: int = 0, visited: FrozenSet[str] = frozenset()) -> CostResult:
    """
    Roll up the full manufacturing cost of `product`.

    Args:
        product: the product to price
        settings: metal price and loss percentage for this pass
        materials: material snapshot (list or {id: Material})
        products: product snapshot (list or {sku: Product}), for components
        depth: current recursion depth; callers normally leave this at 0
        visited: SKUs already on the resolution path

    Returns:
        CostResult with the rounded total for display, the raw total for
        accumulation by a parent recipe, and the breakdown.
    """
    return _resolve(product, settings, index_materials(materials), index_products(products),
                    depth, frozenset(visited))
