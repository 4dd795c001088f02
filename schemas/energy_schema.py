"""Schemas for the BMI, calorie (BMR/TDEE) and macro calculators."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common_schema import ActivityLevel, CalculatorWarning, HeightUnit, Sex, WeightUnit


class BmiCategory(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class CalorieGoal(str, Enum):
    MAINTENANCE = "maintenance"
    MILD_DEFICIT = "mild-deficit"
    DEFICIT = "deficit"
    MILD_SURPLUS = "mild-surplus"
    SURPLUS = "surplus"


class DietPreset(str, Enum):
    BALANCED = "balanced"
    LOW_CARB = "low-carb"
    HIGH_PROTEIN = "high-protein"
    KETO = "keto"


class BodyMeasurements(BaseModel):
    """Weight and height as entered, each tagged with its unit."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    weight: Optional[float] = Field(None, examples=[70.0], description="Body weight in `weight_unit`")
    weight_unit: WeightUnit = Field(WeightUnit.KG, examples=["kg"], description="kg or lb")
    height: Optional[float] = Field(None, examples=[175.0], description="Height in `height_unit`")
    height_unit: HeightUnit = Field(HeightUnit.CM, examples=["cm"], description="cm, in or ft")


class BmiRequest(BodyMeasurements):
    """Request payload for the BMI calculator."""


class EnergyProfile(BodyMeasurements):
    """Biometric profile needed for BMR and TDEE."""

    age: Optional[int] = Field(None, examples=[30], description="Age in years (0-120)")
    sex: Optional[Sex] = Field(None, examples=["male"], description="male or female")
    activity_level: Optional[ActivityLevel] = Field(
        None,
        examples=["moderate"],
        description="Activity level: sedentary, light, moderate, active, very-active",
    )


class CalorieRequest(EnergyProfile):
    """Request payload for the calorie calculator."""

    goal: Optional[CalorieGoal] = Field(
        None,
        examples=["deficit"],
        description="Optional goal whose target is echoed as `target_calories`",
    )


class MacroRequest(EnergyProfile):
    """Request payload for the macro calculator."""

    preset: DietPreset = Field(DietPreset.BALANCED, examples=["balanced"], description="balanced, low-carb, high-protein or keto")
    goal: CalorieGoal = Field(CalorieGoal.MAINTENANCE, examples=["maintenance"], description="Calorie goal the split is applied to")


class BmiResult(BaseModel):
    """BMI with its classification and the healthy weight range for the height."""

    model_config = ConfigDict(frozen=True)

    bmi: float
    category: BmiCategory
    description: str
    caveat: str
    weight_kg: float
    height_cm: float
    healthy_weight_min_kg: int
    healthy_weight_max_kg: int
    weight_to_lose_kg: Optional[float] = None
    weight_to_gain_kg: Optional[float] = None


class GoalTarget(BaseModel):
    """One row of the per-goal calorie table."""

    model_config = ConfigDict(frozen=True)

    goal: CalorieGoal
    adjustment: int
    calories: int
    weekly_calories: int
    weekly_change_kg: float
    below_safe_minimum: bool = False


class CalorieResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    bmr: int
    tdee: int
    activity_multiplier: float
    targets: List[GoalTarget]
    goal: Optional[CalorieGoal] = None
    target_calories: Optional[int] = None
    warnings: List[CalculatorWarning] = []

    def target_for(self, goal: CalorieGoal) -> GoalTarget:
        """Return the table row for `goal`."""
        return next(t for t in self.targets if t.goal == CalorieGoal(goal))


class MacroAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    grams: int
    calories: int
    percentage: int


class MacroResult(BaseModel):
    """Daily macronutrient targets for a diet preset."""

    model_config = ConfigDict(frozen=True)

    preset: DietPreset
    goal: CalorieGoal
    bmr: int
    tdee: int
    total_calories: int
    carbs: MacroAmount
    protein: MacroAmount
    fat: MacroAmount
    warnings: List[CalculatorWarning] = []

    @property
    def macro_calories(self) -> int:
        return self.carbs.calories + self.protein.calories + self.fat.calories
