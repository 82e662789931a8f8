"""
Jewelry manufacturing cost core.

Recursive BOM costing, weight-tiered labor, variant re-pricing, supplier
value analysis and SKU / variant-suffix decoding.
"""

from .calculators.labor_calculator import (
    casting_cost,
    derive_labor_profile,
    plating_cost,
    technician_cost,
)
from .calculators.recipe_cost import MAX_RECIPE_DEPTH, resolve_product_cost
from .calculators.supplier_value import analyze_supplier_value
from .calculators.variant_cost import estimate_variant_cost
from .rounding import format_currency, format_decimal, round_price
from .sku_analyzer import analyze_sku, expand_sku_range, infer_sku_profile
from .suffix_decomposer import decompose_suffix, describe_suffix

__all__ = [
    "MAX_RECIPE_DEPTH",
    "analyze_sku",
    "analyze_supplier_value",
    "casting_cost",
    "decompose_suffix",
    "derive_labor_profile",
    "describe_suffix",
    "estimate_variant_cost",
    "expand_sku_range",
    "format_currency",
    "format_decimal",
    "infer_sku_profile",
    "plating_cost",
    "resolve_product_cost",
    "round_price",
    "technician_cost",
]
