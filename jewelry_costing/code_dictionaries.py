"""
Code dictionaries for variant suffixes and SKU prefixes.

Suffix grammar: [FINISH][STONE][BRIDGE]
    FINISH: one letter from FINISH_CODES ('' is the default polished finish)
    STONE: 2-4 letters; meaning depends on the product's gender
    BRIDGE: trailing 'S', a structurally distinct manufactured item

The two stone dictionaries overlap partially and disagree on some tokens
(e.g. women's 'PCO' is a single stone, which also reads as 'P' + 'CO').
Match order is data: every lookup goes through the *_ORDERED tuples,
longest code first.
"""

from typing import Dict, Optional, Tuple

from .schemas import Gender, PlatingType


FINISH_CODES: Dict[str, str] = {
    "": "Polished",
    "P": "Patina",
    "X": "Gold Plated",
    "D": "Two-Tone",
    "H": "Platinum",
}

BRIDGE_MARKER = "S"

STONE_CODES_WOMEN: Dict[str, str] = {
    "CO": "Copper",
    "PCO": "Green Copper",
    "MCO": "Purple Copper",
    "PAX": "Green Agate",
    "MAX": "Blue Agate",
    "KAX": "Red Agate",
    "AI": "Hematite",
    "AP": "Apatite",
    "AM": "Amazonite",
    "LR": "Labradorite",
    "LA": "Lapis",
    "FI": "Mother of Pearl",
    "TPR": "Green Triplet",
    "TKO": "Red Triplet",
    "TMP": "Blue Triplet",
    "BST": "Blue Sky Topaz",
}

STONE_CODES_MEN: Dict[str, str] = {
    "KR": "Carnelian",
    "LA": "Lapis",
    "LE": "Howlite",
    "AX": "Agate",
    "TG": "Tiger Eye",
    "QN": "Onyx",
    "TY": "Turquoise",
}

# Gender-unspecified contexts see both dictionaries; women's wins on a clash
STONE_CODES_ALL: Dict[str, str] = {**STONE_CODES_MEN, **STONE_CODES_WOMEN}

FINISH_TO_PLATING: Dict[str, PlatingType] = {
    "": PlatingType.NONE,
    "P": PlatingType.NONE,
    "X": PlatingType.GOLD_PLATED,
    "D": PlatingType.TWO_TONE,
    "H": PlatingType.PLATINUM,
}

PLATING_TO_FINISH: Dict[PlatingType, str] = {
    PlatingType.GOLD_PLATED: "X",
    PlatingType.PLATINUM: "H",
    PlatingType.TWO_TONE: "D",
}

# Finishes that get the gold/platinum plating pass
PLATED_FINISHES = ("X", "H")
TWO_TONE_FINISH = "D"


def _longest_first(codes) -> Tuple[str, ...]:
    # sorted() is stable, so equal-length codes keep dictionary order
    return tuple(sorted(codes, key=len, reverse=True))


FINISH_CODES_ORDERED: Tuple[str, ...] = _longest_first(c for c in FINISH_CODES if c)
STONE_CODES_MEN_ORDERED: Tuple[str, ...] = _longest_first(STONE_CODES_MEN)
STONE_CODES_WOMEN_ORDERED: Tuple[str, ...] = _longest_first(STONE_CODES_WOMEN)
STONE_CODES_ALL_ORDERED: Tuple[str, ...] = _longest_first(STONE_CODES_ALL)


def stone_codes_for(gender: Optional[Gender]) -> Dict[str, str]:
    """Stone dictionary for a declared gender; unisex/unknown merges both."""
    if gender == Gender.MEN:
        return STONE_CODES_MEN
    if gender == Gender.WOMEN:
        return STONE_CODES_WOMEN
    return STONE_CODES_ALL


def ordered_stone_codes_for(gender: Optional[Gender]) -> Tuple[str, ...]:
    if gender == Gender.MEN:
        return STONE_CODES_MEN_ORDERED
    if gender == Gender.WOMEN:
        return STONE_CODES_WOMEN_ORDERED
    return STONE_CODES_ALL_ORDERED


# --- SKU prefixes ---

SKU_PREFIX_MEN: Dict[str, str] = {
    "XR": "Bracelet",
    "CR": "Cross",
    "RN": "Ring",
    "PN": "Pendant",
}

SKU_PREFIX_WOMEN: Dict[str, str] = {
    "DA": "Ring",
    "SK": "Earrings",
    "MN": "Pendant",
    "BR": "Bracelet",
}

COMPONENT_PREFIX = "STX"

# Men's bracelet (XR) number bands: (upper bound inclusive, gender, category)
XR_NUMBER_BANDS: Tuple[Tuple[int, Gender, str], ...] = (
    (100, Gender.MEN, "Leather Bracelet"),
    (199, Gender.MEN, "Solid Bracelet"),
    (700, Gender.UNISEX, "Stone Bracelet"),
)
XR_MACRAME_RELIGIOUS = (1100, 1149)
XR_UPPER_BANDS: Tuple[Tuple[int, Gender, str], ...] = (
    (1199, Gender.UNISEX, "Multicolor Macrame Bracelet"),
    (1290, Gender.UNISEX, "Religious Leather Bracelet"),
)
