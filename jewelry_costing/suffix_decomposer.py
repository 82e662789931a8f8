"""
Variant suffix decomposition.

A suffix packs up to three facts into one token: finish letter, stone code,
bridge marker. The stone dictionaries overlap, so a token can have more than
one valid reading. Strategies run in strict priority order, first success
wins:

1. Finish-first lookahead: leading finish letter, and the rest (minus an
   optional trailing bridge 'S') is empty or an exact stone code.
2. End stripping: strip the longest stone code the token ends with, then a
   trailing bridge 'S'; the remainder must be exactly a finish ('' allowed).
3. Prefix fallback: the unmatched remainder starts with a finish code; the
   rest is kept as a best-effort stone code, possibly unknown.

When strategy 1 wins but strategy 2 would have produced a different exact
reading, the result is flagged ambiguous so the code can be reviewed by hand.
"""

import logging
from typing import NamedTuple, Optional

from .code_dictionaries import (
    BRIDGE_MARKER,
    FINISH_CODES,
    FINISH_CODES_ORDERED,
    PLATING_TO_FINISH,
    ordered_stone_codes_for,
    stone_codes_for,
)
from .schemas import CodeMatch, Gender, PlatingType, VariantComponents

logger = logging.getLogger(__name__)


class _Reading(NamedTuple):
    finish: str
    stone: str
    bridge: str


def _finish_first(token, stones):
    # type: (str, dict) -> Optional[_Reading]
    if not token or token[0] not in FINISH_CODES_ORDERED:
        return None
    finish, rest = token[0], token[1:]
    bridge = ""
    if rest.endswith(BRIDGE_MARKER):
        rest, bridge = rest[:-1], BRIDGE_MARKER
    if rest == "" or rest in stones:
        return _Reading(finish, rest, bridge)
    return None


def _strip_from_end(token, ordered_stones):
    # type: (str, tuple) -> tuple
    """Returns (stone, bridge, remainder) after stripping stone and bridge."""
    working = token
    stone = ""
    for code in ordered_stones:
        if working.endswith(code):
            stone = code
            working = working[:-len(code)]
            break
    bridge = ""
    if working.endswith(BRIDGE_MARKER):
        bridge = BRIDGE_MARKER
        working = working[:-1]
    return stone, bridge, working


def _end_stripping_reading(token, ordered_stones):
    # type: (str, tuple) -> Optional[_Reading]
    stone, bridge, remainder = _strip_from_end(token, ordered_stones)
    if remainder == "" or remainder in FINISH_CODES_ORDERED:
        return _Reading(remainder, stone, bridge)
    return None


def _build(reading, stones, ambiguous=False):
    # type: (_Reading, dict, bool) -> VariantComponents
    return VariantComponents(
        finish=CodeMatch(
            code=reading.finish,
            name=FINISH_CODES.get(reading.finish, FINISH_CODES[""]),
        ),
        stone=CodeMatch(code=reading.stone, name=stones.get(reading.stone, reading.stone)),
        bridge=reading.bridge,
        ambiguous=ambiguous,
    )


def decompose_suffix(suffix: str, gender: Optional[Gender] = None) -> VariantComponents:
    """
    Split a variant suffix into finish, stone and bridge marker.

    Args:
        suffix: the variant token, e.g. "PKR", "XS", "PCO". Case-insensitive.
        gender: selects the stone dictionary; None/unisex merges both.

    Returns:
        VariantComponents. An unrecognized token comes back with empty
        finish and stone codes rather than raising.
    """
    token = (suffix or "").strip().upper()
    stones = stone_codes_for(gender)
    ordered_stones = ordered_stone_codes_for(gender)

    # Strategy 1
    reading = _finish_first(token, stones)
    if reading is not None:
        alternative = _end_stripping_reading(token, ordered_stones)
        ambiguous = alternative is not None and alternative != reading
        if ambiguous:
            logger.warning(
                "Ambiguous suffix %r (%s): finish-first %s+%s, end-stripping %s+%s",
                token, gender.value if gender else "any",
                reading.finish, reading.stone, alternative.finish, alternative.stone,
            )
        return _build(reading, stones, ambiguous)

    # Strategy 2
    stone, bridge, remainder = _strip_from_end(token, ordered_stones)
    if remainder == "" or remainder in FINISH_CODES_ORDERED:
        return _build(_Reading(remainder, stone, bridge), stones)

    # Strategy 3
    for code in FINISH_CODES_ORDERED:
        if remainder.startswith(code):
            if not stone:
                stone = remainder[len(code):]
            logger.debug("Suffix %r matched by finish prefix only: %s+%s", token, code, stone)
            return _build(_Reading(code, stone, bridge), stones)

    logger.debug("Unrecognized suffix %r", token)
    return _build(_Reading("", stone, bridge), stones)


def describe_suffix(suffix: str, gender: Optional[Gender] = None,
                    plating: Optional[PlatingType] = None) -> Optional[str]:
    """Human-readable 'Finish - Stone' label, or None for an empty suffix."""
    components = decompose_suffix(suffix, gender)
    finish, stone = components.finish, components.stone

    if finish.code:
        finish_name = finish.name
    elif plating and plating != PlatingType.NONE:
        finish_name = FINISH_CODES[PLATING_TO_FINISH[plating]] if plating in PLATING_TO_FINISH else ""
    else:
        finish_name = FINISH_CODES[""]

    if stone.code:
        return f"{finish_name} - {stone.name}" if finish_name else stone.name
    if finish.code or suffix:
        return finish_name or None
    return None
