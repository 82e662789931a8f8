"""
Shared test fixtures: a small catalog snapshot and pricing settings.
"""

import pytest

from jewelry_costing.schemas import (
    ComponentRecipeItem,
    Gender,
    LaborProfile,
    Material,
    MaterialType,
    PricingSettings,
    Product,
    ProductVariant,
    RawRecipeItem,
)


@pytest.fixture
def pricing():
    """1.00/g metal with 10% casting loss, 1.1 per gram cast."""
    return PricingSettings(metal_unit_price=1.0, loss_percentage=10.0)


@pytest.fixture
def flat_pricing():
    """1.00/g metal, no loss; keeps hand-computed totals simple."""
    return PricingSettings(metal_unit_price=1.0, loss_percentage=0.0)


@pytest.fixture
def materials():
    return [
        Material(id="zircon", name="White zircon 1.5mm", type=MaterialType.STONE, cost_per_unit=0.05),
        Material(id="cord", name="Black leather cord", type=MaterialType.CORD, cost_per_unit=0.50),
        Material(id="clasp", name="Lobster clasp 9mm", type=MaterialType.COMPONENT, cost_per_unit=1.20),
        Material(id="bezel_stone", name="Bezel stone 8mm", type=MaterialType.STONE,
                 cost_per_unit=3.0, variant_prices={"LA": 5.0, "QN": 2.0}),
        Material(id="onyx_strand", name="Onyx beads 4mm strand", type=MaterialType.STONE,
                 cost_per_unit=12.0, stones_per_strand=40),
    ]


@pytest.fixture
def component():
    """STX part: cast in-house, used inside other recipes."""
    return Product(
        sku="STX-505",
        weight_g=2.5,
        is_component=True,
        recipe=[RawRecipeItem(material_id="zircon", quantity=1)],
    )


@pytest.fixture
def bracelet(component):
    """Men's bracelet built from a cord and two STX-505 motifs."""
    return Product(
        sku="XR2020",
        gender=Gender.MEN,
        weight_g=12.0,
        recipe=[
            RawRecipeItem(material_id="cord", quantity=1),
            ComponentRecipeItem(sku=component.sku, quantity=2),
        ],
        variants=[
            ProductVariant(suffix="PKR", description="Patina - Carnelian"),
            ProductVariant(suffix="TG", description="Polished - Tiger Eye", selling_price=130.0),
        ],
        selling_price=120.0,
    )


@pytest.fixture
def ring():
    """Women's ring with one bezel stone; the stone price depends on the variant."""
    return Product(
        sku="DA1005",
        gender=Gender.WOMEN,
        weight_g=3.0,
        recipe=[RawRecipeItem(material_id="bezel_stone", quantity=1)],
        labor=LaborProfile(setter_cost=0.5),
    )


@pytest.fixture
def products(component, bracelet, ring):
    return [component, bracelet, ring]
