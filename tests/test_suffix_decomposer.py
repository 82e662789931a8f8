"""
Tests for variant suffix decomposition (suffix_decomposer.py).

Tests:
1-3.  Finish + stone round trip for every dictionary entry
4-6.  Gender-dependent readings and ambiguity (PCO)
7-9.  Bridge marker, longest-match, prefix fallback
10-11. Empty and unrecognized tokens
12-14. Human-readable descriptions
"""

import logging

import pytest

from jewelry_costing.code_dictionaries import (
    FINISH_CODES_ORDERED,
    STONE_CODES_MEN,
    STONE_CODES_WOMEN,
)
from jewelry_costing.schemas import Gender, PlatingType
from jewelry_costing.suffix_decomposer import decompose_suffix, describe_suffix


# ============================================================
# Round trip
# ============================================================

@pytest.mark.parametrize("gender,stones", [
    (Gender.MEN, STONE_CODES_MEN),
    (Gender.WOMEN, STONE_CODES_WOMEN),
])
def test_finish_and_stone_round_trip(gender, stones):
    """Every finish letter + every stone of the gender decodes back to itself."""
    for finish in FINISH_CODES_ORDERED:
        for stone in stones:
            result = decompose_suffix(finish + stone, gender)
            assert (result.finish.code, result.stone.code) == (finish, stone), finish + stone


@pytest.mark.parametrize("gender,stones", [
    (Gender.MEN, STONE_CODES_MEN),
    (Gender.WOMEN, STONE_CODES_WOMEN),
])
def test_bridge_round_trip(gender, stones):
    for stone in stones:
        result = decompose_suffix("X" + stone + "S", gender)
        assert (result.finish.code, result.stone.code, result.bridge) == ("X", stone, "S")


def test_stone_without_finish():
    """Stones that do not start with a finish letter decode with the default finish."""
    for stone in ("KR", "TG", "QN"):
        result = decompose_suffix(stone, Gender.MEN)
        assert result.finish.code == ""
        assert result.finish.name == "Polished"
        assert result.stone.code == stone


# ============================================================
# Gender and ambiguity
# ============================================================

def test_pco_for_women_is_patina_copper_and_ambiguous(caplog):
    """Finish-first wins (P + CO); end-stripping would read green copper."""
    with caplog.at_level(logging.WARNING, logger="jewelry_costing.suffix_decomposer"):
        result = decompose_suffix("PCO", Gender.WOMEN)
    assert result.finish.code == "P"
    assert result.stone.code == "CO"
    assert result.stone.name == "Copper"
    assert result.ambiguous is True
    assert "PCO" in caplog.text


def test_pco_for_men_uses_prefix_fallback():
    """Men's dictionary has no CO: P is kept and CO passes through unnamed."""
    result = decompose_suffix("PCO", Gender.MEN)
    assert result.finish.code == "P"
    assert result.stone.code == "CO"
    assert result.stone.name == "CO"
    assert result.ambiguous is False


def test_unisex_sees_both_dictionaries():
    assert decompose_suffix("PKR").stone.name == "Carnelian"
    assert decompose_suffix("XBST", Gender.UNISEX).stone.name == "Blue Sky Topaz"


def test_lowercase_and_whitespace():
    result = decompose_suffix("  pkr ", Gender.MEN)
    assert (result.finish.code, result.stone.code) == ("P", "KR")


# ============================================================
# Bridge, longest match, fallback
# ============================================================

def test_bridge_without_stone():
    result = decompose_suffix("XS", Gender.WOMEN)
    assert result.finish.code == "X"
    assert result.stone.code == ""
    assert result.bridge == "S"
    assert result.ambiguous is False


def test_longest_stone_code_wins():
    """MCO is stripped whole, not as CO after an unknown M."""
    result = decompose_suffix("MCO", Gender.WOMEN)
    assert result.finish.code == ""
    assert result.stone.code == "MCO"
    assert result.stone.name == "Purple Copper"


def test_finish_prefix_with_unknown_stone():
    result = decompose_suffix("XZZ", Gender.MEN)
    assert result.finish.code == "X"
    assert result.stone.code == "ZZ"
    assert result.is_recognized


# ============================================================
# Empty and unrecognized
# ============================================================

def test_empty_suffix():
    result = decompose_suffix("")
    assert result.finish.code == ""
    assert result.stone.code == ""
    assert result.bridge == ""
    assert not result.is_recognized


def test_unrecognized_suffix_does_not_raise():
    result = decompose_suffix("ZZ", Gender.MEN)
    assert not result.is_recognized
    assert decompose_suffix(None).finish.code == ""


# ============================================================
# Descriptions
# ============================================================

def test_describe_finish_and_stone():
    assert describe_suffix("PKR", Gender.MEN) == "Patina - Carnelian"
    assert describe_suffix("KR", Gender.MEN) == "Polished - Carnelian"
    assert describe_suffix("DLA", Gender.WOMEN) == "Two-Tone - Lapis"


def test_describe_uses_master_plating_when_no_finish():
    assert describe_suffix("KR", Gender.MEN, PlatingType.GOLD_PLATED) == "Gold Plated - Carnelian"


def test_describe_finish_only_and_empty():
    assert describe_suffix("X") == "Gold Plated"
    assert describe_suffix("H") == "Platinum"
    assert describe_suffix("") is None
