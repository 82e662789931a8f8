"""
SKU analysis: splits full product codes into master SKU + variant suffix.

    MN050XS   -> bridge item, its own master (distinct mold/weight)
    MN050X    -> master MN050, finish variant X
    XR2020PKR -> master XR2020, suffix PKR (patina + carnelian)

Transliteration of scanned codes into this alphabet happens upstream.
"""

import logging
import re
from typing import List, NamedTuple, Optional, Tuple

from .code_dictionaries import (
    BRIDGE_MARKER,
    COMPONENT_PREFIX,
    FINISH_CODES_ORDERED,
    FINISH_TO_PLATING,
    SKU_PREFIX_MEN,
    SKU_PREFIX_WOMEN,
    XR_MACRAME_RELIGIOUS,
    XR_NUMBER_BANDS,
    XR_UPPER_BANDS,
)
from .schemas import Gender, PlatingType, Product, ProductVariant, SkuAnalysis
from .suffix_decomposer import decompose_suffix, describe_suffix

logger = logging.getLogger(__name__)

# Shortest master SKU the split-point scan will consider
MIN_MASTER_LENGTH = 3
# Largest range expand_sku_range will produce
MAX_RANGE_SPAN = 500

_FINISH_CLASS = "[" + "".join(FINISH_CODES_ORDERED) + "]"
_BRIDGE_RE = re.compile(r"^([A-Z-]+\d+)(" + _FINISH_CLASS + ")(" + BRIDGE_MARKER + ")$")
_PLAIN_FINISH_RE = re.compile(r"^([A-Z-]+\d+)(" + _FINISH_CLASS + ")$")
_RANGE_RE = re.compile(r"^([A-Z-]+)(\d+)([A-Z]*)-([A-Z-]+)(\d+)([A-Z]*)$", re.IGNORECASE)


class SkuProfile(NamedTuple):
    gender: Gender
    category: str


def _sku_number(sku):
    # type: (str) -> Optional[int]
    digits = re.match(r"\d+", re.sub(r"[A-Z-]", "", sku))
    return int(digits.group()) if digits else None


def infer_sku_profile(sku: str) -> SkuProfile:
    """Gender and category implied by a SKU's prefix (and number, for XR)."""
    clean = sku.strip().upper()
    prefix = clean[:2]

    if clean.startswith(COMPONENT_PREFIX):
        return SkuProfile(Gender.UNISEX, "Component")

    number = _sku_number(clean)
    if prefix == "XR" and number is not None:
        for upper, gender, category in XR_NUMBER_BANDS:
            if number <= upper:
                return SkuProfile(gender, category)
        low, high = XR_MACRAME_RELIGIOUS
        if low <= number <= high:
            return SkuProfile(Gender.UNISEX, "Religious Macrame Bracelet")
        for upper, gender, category in XR_UPPER_BANDS:
            if number <= upper:
                return SkuProfile(gender, category)
        return SkuProfile(Gender.MEN, "Bracelet")

    if prefix in SKU_PREFIX_WOMEN:
        return SkuProfile(Gender.WOMEN, SKU_PREFIX_WOMEN[prefix])
    if prefix in SKU_PREFIX_MEN:
        return SkuProfile(Gender.MEN, SKU_PREFIX_MEN[prefix])
    return SkuProfile(Gender.UNISEX, "Cross" if prefix == "ST" else "General")


def analyze_sku(raw_sku: str, gender: Optional[Gender] = None) -> SkuAnalysis:
    """
    Split a full code into master SKU and variant suffix.

    Bridge codes (ROOT + finish + 'S') are reported as their own master.
    Otherwise split points are scanned from the end of the code back to
    MIN_MASTER_LENGTH; the first split whose suffix yields a finish or stone
    code wins, and the scan stops as soon as that master ends in a digit.
    Codes with no recognizable suffix come back as a bare master.
    """
    clean = raw_sku.strip().upper()
    gender = gender or infer_sku_profile(clean).gender

    bridge = _BRIDGE_RE.match(clean)
    if bridge:
        return SkuAnalysis(
            is_variant=False,
            master_sku=clean,
            detected_plating=FINISH_TO_PLATING.get(bridge.group(2), PlatingType.NONE),
            detected_bridge=bridge.group(3),
        )

    plain = _PLAIN_FINISH_RE.match(clean)
    if plain:
        finish = plain.group(2)
        plating = FINISH_TO_PLATING.get(finish, PlatingType.NONE)
        return SkuAnalysis(
            is_variant=True,
            master_sku=plain.group(1),
            suffix=finish,
            detected_plating=plating,
            description=describe_suffix(finish, gender, plating) or "",
        )

    best = SkuAnalysis(is_variant=False, master_sku=clean)
    for i in range(len(clean) - 1, MIN_MASTER_LENGTH - 1, -1):
        master, suffix = clean[:i], clean[i:]
        components = decompose_suffix(suffix, gender)
        if not components.is_recognized:
            continue
        plating = FINISH_TO_PLATING.get(components.finish.code, PlatingType.NONE)
        best = SkuAnalysis(
            is_variant=True,
            master_sku=master,
            suffix=suffix,
            detected_plating=plating,
            detected_bridge=components.bridge,
            description=describe_suffix(suffix, gender, plating) or "",
        )
        if master[-1].isdigit():
            break

    if not best.is_variant:
        logger.debug("No variant suffix recognized in %r", clean)
    return best


def expand_sku_range(token: str) -> List[str]:
    """
    Expand "DA050-DA063" (or "DA050X-DA063X") into individual SKUs.

    Prefixes and suffixes on both ends must match. Anything that is not a
    valid range, runs backwards, or spans more than MAX_RANGE_SPAN comes
    back unchanged as [token].
    """
    match = _RANGE_RE.match(token)
    if not match:
        return [token]
    prefix1, start_str, suffix1, prefix2, end_str, suffix2 = match.groups()
    if prefix1.upper() != prefix2.upper() or suffix1.upper() != suffix2.upper():
        return [token]

    start, end = int(start_str), int(end_str)
    if start > end or end - start > MAX_RANGE_SPAN:
        return [token]

    width = len(start_str)
    pad = (start_str.startswith("0") and width > 1) or width == len(end_str)
    expanded = []
    for n in range(start, end + 1):
        number = str(n).zfill(width) if pad else str(n)
        expanded.append(f"{prefix1.upper()}{number}{suffix1.upper()}")
    return expanded


def prevalent_variant(variants: List[ProductVariant]) -> Optional[ProductVariant]:
    """The variant shown by default: plain patina, else gold plated, else the first."""
    if not variants:
        return None
    for v in variants:
        if "P" in v.suffix and "X" not in v.suffix and "D" not in v.suffix:
            return v
    for v in variants:
        if "X" in v.suffix:
            return v
    return variants[0]


def find_product_by_code(code: str, products: List[Product]) -> Optional[Tuple[Product, Optional[ProductVariant]]]:
    """Match a typed or scanned code to (product, variant) in the catalog."""
    clean = code.strip().upper()
    for product in products:
        if product.sku.upper() == clean:
            return product, None
        for variant in product.variants:
            if (product.sku + variant.suffix).upper() == clean:
                return product, variant
    return None
