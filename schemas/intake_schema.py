"""Schemas for the protein, fiber, hydration and caffeine calculators."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common_schema import ActivityLevel, Sex, WeightUnit


class ProteinGoal(str, Enum):
    MAINTAIN = "maintain"
    LOSE_WEIGHT = "lose-weight"
    BUILD_MUSCLE = "build-muscle"


class ProteinBand(str, Enum):
    BASELINE = "baseline"
    ELEVATED = "elevated"
    HIGH = "high"


class FiberStatus(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs-improvement"
    LOW = "low"


class PregnancyStatus(str, Enum):
    NONE = "none"
    PREGNANT = "pregnant"
    NURSING = "nursing"


class HydrationBand(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class CaffeinePopulation(str, Enum):
    ADULT = "adult"
    PREGNANT = "pregnant"
    ADOLESCENT = "adolescent"


class CaffeineSensitivity(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class CaffeineStatus(str, Enum):
    UNDER_LIMIT = "under-limit"
    NEAR_LIMIT = "near-limit"
    OVER_LIMIT = "over-limit"


class ProteinRequest(BaseModel):
    """Request payload for the protein calculator."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    weight: Optional[float] = Field(None, examples=[70.0], description="Body weight in `weight_unit`")
    weight_unit: WeightUnit = Field(WeightUnit.KG, examples=["kg"])
    activity_level: Optional[ActivityLevel] = Field(None, examples=["moderate"])
    goal: ProteinGoal = Field(ProteinGoal.MAINTAIN, examples=["build-muscle"], description="Training goal")


class FiberRequest(BaseModel):
    """Request payload for the fiber calculator."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    age: Optional[int] = Field(None, examples=[30], description="Age in years (0-120)")
    sex: Optional[Sex] = Field(None, examples=["female"])
    current_intake_g: Optional[float] = Field(None, examples=[15.0], description="Fiber currently eaten per day, if known")


class HydrationRequest(BaseModel):
    """Request payload for the hydration calculator."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    weight: Optional[float] = Field(None, examples=[70.0])
    weight_unit: WeightUnit = Field(WeightUnit.KG, examples=["kg"])
    activity_level: Optional[ActivityLevel] = Field(None, examples=["moderate"])
    hot_climate: bool = Field(False, description="Adds 500 ml for hot or humid climates")
    pregnancy: PregnancyStatus = Field(PregnancyStatus.NONE, examples=["none"])


class CaffeineRequest(BaseModel):
    """Request payload for the caffeine tracker.

    `doses_mg` is the caller's own log for the day; nothing is stored
    between calls.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    doses_mg: Optional[List[float]] = Field(None, examples=[[95, 95, 150]], description="Caffeine already logged today, mg per dose")
    population: CaffeinePopulation = Field(CaffeinePopulation.ADULT, examples=["adult"])
    sensitivity: CaffeineSensitivity = Field(CaffeineSensitivity.NORMAL, examples=["normal"])
    limit_mg: Optional[float] = Field(None, examples=[300], description="Lower personal limit for sensitive users")


class ProteinResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    daily_protein_g: int
    grams_per_kg: float
    per_meal_g: int
    meals_per_day: int
    band: ProteinBand


class FiberResult(BaseModel):
    """Recommended fiber for the age/sex bracket and, optionally, the gap to it."""

    model_config = ConfigDict(frozen=True)

    recommended_g: int
    bracket: str
    current_intake_g: Optional[float] = None
    gap_g: Optional[int] = None
    percent_of_target: Optional[int] = None
    status: Optional[FiberStatus] = None
    servings_needed: Optional[int] = None


class HydrationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    liters_per_day: float
    band: HydrationBand
    ounces_per_day: int
    glasses_per_day: int
    ml_per_hour: int
    bottles_per_day: int


class CaffeineResult(BaseModel):
    """Running caffeine total against the applicable daily limit."""

    model_config = ConfigDict(frozen=True)

    total_mg: float
    limit_mg: float
    percent_of_limit: float
    remaining_mg: float
    status: CaffeineStatus
    half_life_hours: float
    clearance_hours: int
    dose_count: int
    recommendations: List[str] = []


class CaffeineSource(BaseModel):
    """Catalogue entry: caffeine per standard serving of a common product."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    caffeine_mg: float
    serving: str
