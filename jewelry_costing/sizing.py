"""
Size ranges for sized products (rings, bracelets), keyed by SKU prefix.
"""

from typing import List, NamedTuple, Optional

RINGS_MEN = "RN"
RINGS_WOMEN = "DA"
BRACELETS_WOMEN = "BR"
BRACELETS_MEN = "XR"

SIZED_PREFIXES = (RINGS_MEN, RINGS_WOMEN, BRACELETS_WOMEN, BRACELETS_MEN)

RING_SIZES_MEN = [str(n) for n in range(58, 71)]
RING_SIZES_WOMEN = [str(n) for n in range(48, 63)]
BRACELET_SIZES_WOMEN = ["17cm", "19cm", "21cm"]
BRACELET_SIZES_MEN = ["19cm", "21cm", "23cm"]


class SizingInfo(NamedTuple):
    kind: str          # "ring_size" or "length"
    sizes: List[str]


_SIZING = {
    RINGS_MEN: SizingInfo("ring_size", RING_SIZES_MEN),
    RINGS_WOMEN: SizingInfo("ring_size", RING_SIZES_WOMEN),
    BRACELETS_MEN: SizingInfo("length", BRACELET_SIZES_MEN),
    BRACELETS_WOMEN: SizingInfo("length", BRACELET_SIZES_WOMEN),
}


def _prefix(sku):
    # type: (str) -> str
    return sku.strip().upper()[:2]


def is_sizable(sku: str) -> bool:
    return _prefix(sku) in SIZED_PREFIXES


def get_sizing_info(sku: str) -> Optional[SizingInfo]:
    info = _SIZING.get(_prefix(sku))
    if info is None:
        return None
    return SizingInfo(info.kind, list(info.sizes))
