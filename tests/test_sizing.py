"""
Tests for ring / bracelet sizing tables (sizing.py).

Tests:
1. Sized SKU prefixes
2. Size ranges by prefix
"""

from jewelry_costing.sizing import get_sizing_info, is_sizable


def test_sizable_prefixes():
    assert is_sizable("DA1005")
    assert is_sizable("rn100")
    assert is_sizable("XR2020")
    assert not is_sizable("MN050")


def test_sizing_info():
    men = get_sizing_info("RN100")
    assert men.kind == "ring_size"
    assert men.sizes[0] == "58"
    assert men.sizes[-1] == "70"

    women = get_sizing_info("DA1005")
    assert women.sizes[0] == "48"

    assert get_sizing_info("BR010").kind == "length"
    assert get_sizing_info("MN050") is None

    # Callers get their own copy of the size list
    get_sizing_info("RN100").sizes.append("99")
    assert "99" not in get_sizing_info("RN100").sizes
