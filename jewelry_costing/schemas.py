"""
Catalog snapshot and result schemas.

Everything the cost core reads (materials, products, settings) and everything
it returns (cost results, supplier analyses, SKU analyses) is a frozen
pydantic model. The core never mutates its inputs.
"""

import enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# --- Enums ---

class Gender(str, enum.Enum):
    MEN = "men"
    WOMEN = "women"
    UNISEX = "unisex"


class PlatingType(str, enum.Enum):
    NONE = "none"
    GOLD_PLATED = "gold_plated"
    TWO_TONE = "two_tone"
    PLATINUM = "platinum"
    ROSE_GOLD = "rose_gold"


class ProductionType(str, enum.Enum):
    IN_HOUSE = "in_house"
    IMPORTED = "imported"


class MaterialType(str, enum.Enum):
    STONE = "stone"
    CORD = "cord"
    CHAIN = "chain"
    COMPONENT = "component"
    OTHER = "other"


class CostError(str, enum.Enum):
    CIRCULAR_DEPENDENCY = "circular_dependency"
    DEPTH_EXCEEDED = "depth_exceeded"


class Verdict(str, enum.Enum):
    EXCELLENT = "Excellent"
    FAIR = "Fair"
    EXPENSIVE = "Expensive"
    OVERPRICED = "Overpriced"


class Efficiency(str, enum.Enum):
    CHEAPER = "Cheaper"
    SIMILAR = "Similar"
    MORE_EXPENSIVE = "More Expensive"


# --- Catalog snapshot ---

class Material(BaseModel):
    id: str
    name: str
    type: MaterialType = MaterialType.OTHER
    cost_per_unit: float = Field(0.0, ge=0)
    unit: str = "pcs"
    # Per-stone-code price overrides, e.g. {"LA": 5.0}
    variant_prices: Dict[str, float] = Field(default_factory=dict)
    # When set, cost_per_unit (and any override) is the price of a whole strand
    stones_per_strand: Optional[float] = Field(None, gt=0)

    class Config:
        frozen = True
        allow_inf_nan = False


class RawRecipeItem(BaseModel):
    type: Literal["raw"] = "raw"
    material_id: str
    quantity: float = Field(1.0, ge=0)

    class Config:
        frozen = True
        allow_inf_nan = False


class ComponentRecipeItem(BaseModel):
    type: Literal["component"] = "component"
    sku: str
    quantity: float = Field(1.0, ge=0)

    class Config:
        frozen = True
        allow_inf_nan = False


RecipeItem = Annotated[
    Union[RawRecipeItem, ComponentRecipeItem],
    Field(discriminator="type"),
]


class LaborProfile(BaseModel):
    casting_cost: float = 0.0
    setter_cost: float = 0.0
    technician_cost: float = 0.0
    plating_cost_x: float = 0.0
    plating_cost_d: float = 0.0
    subcontract_cost: float = 0.0
    stone_setting_cost: float = 0.0
    casting_cost_manual_override: bool = False
    technician_cost_manual_override: bool = False
    plating_cost_x_manual_override: bool = False
    plating_cost_d_manual_override: bool = False

    class Config:
        frozen = True
        allow_inf_nan = False


class ProductVariant(BaseModel):
    suffix: str
    description: str = ""
    selling_price: Optional[float] = None

    class Config:
        frozen = True
        allow_inf_nan = False


class Product(BaseModel):
    sku: str
    gender: Gender = Gender.UNISEX
    weight_g: float = Field(0.0, ge=0)
    secondary_weight_g: float = Field(0.0, ge=0)
    plating_type: PlatingType = PlatingType.NONE
    production_type: ProductionType = ProductionType.IN_HOUSE
    is_component: bool = False
    supplier_cost: float = Field(0.0, ge=0)
    selling_price: float = 0.0
    recipe: List[RecipeItem] = Field(default_factory=list)
    labor: LaborProfile = Field(default_factory=LaborProfile)
    variants: List[ProductVariant] = Field(default_factory=list)

    class Config:
        frozen = True
        allow_inf_nan = False

    @property
    def total_weight_g(self) -> float:
        return self.weight_g + self.secondary_weight_g


class PricingSettings(BaseModel):
    """Market inputs threaded explicitly through every cost call."""
    metal_unit_price: float = Field(..., ge=0)   # per gram
    loss_percentage: float = Field(0.0, ge=0)

    class Config:
        frozen = True
        allow_inf_nan = False


# --- Results ---

class CostDetails(BaseModel):
    casting_cost: float = 0.0
    setter_cost: float = 0.0
    technician_cost: float = 0.0
    subcontract_cost: float = 0.0
    plating_cost: float = 0.0
    stone_setting_cost: float = 0.0
    stone_diff: float = 0.0
    total_weight: float = 0.0

    class Config:
        frozen = True


class SupplierBreakdown(BaseModel):
    metal_cost: float
    material_cost: float
    est_labor: float
    supplier_reported_total_labor: float

    class Config:
        frozen = True


class SupplierAnalysis(BaseModel):
    intrinsic_value: float
    theoretical_make_cost: float
    supplier_premium: float
    premium_percent: float
    verdict: Verdict
    effective_metal_price: float
    has_hidden_markup: bool
    labor_efficiency: Efficiency
    plating_efficiency: Efficiency
    breakdown: SupplierBreakdown

    class Config:
        frozen = True


class CostBreakdown(BaseModel):
    metal: float = 0.0
    materials: float = 0.0
    labor: float = 0.0
    details: CostDetails = Field(default_factory=CostDetails)
    error: Optional[CostError] = None
    missing_references: List[str] = Field(default_factory=list)
    supplier_analysis: Optional[SupplierAnalysis] = None

    class Config:
        frozen = True


class CostResult(BaseModel):
    total: float          # display value, canonical rounding applied
    raw_total: float      # unrounded, for accumulation by parent recipes
    breakdown: CostBreakdown = Field(default_factory=CostBreakdown)

    class Config:
        frozen = True

    @classmethod
    def zero(cls, error: Optional[CostError] = None) -> "CostResult":
        return cls(total=0.0, raw_total=0.0, breakdown=CostBreakdown(error=error))


class CodeMatch(BaseModel):
    code: str = ""
    name: str = ""

    class Config:
        frozen = True


class VariantComponents(BaseModel):
    finish: CodeMatch
    stone: CodeMatch
    bridge: str = ""
    # Finish-first and end-stripping readings disagree; needs manual review
    ambiguous: bool = False

    class Config:
        frozen = True

    @property
    def is_recognized(self) -> bool:
        return bool(self.finish.code or self.stone.code)


class SkuAnalysis(BaseModel):
    is_variant: bool
    master_sku: str
    suffix: str = ""
    detected_plating: PlatingType = PlatingType.NONE
    detected_bridge: str = ""
    description: str = ""

    class Config:
        frozen = True
