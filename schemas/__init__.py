"""Pydantic schema package for calculator requests and results."""

from .common_schema import ActivityLevel, CalculatorWarning, HeightUnit, Sex, WeightUnit
from .energy_schema import (
    BmiCategory,
    BmiRequest,
    BmiResult,
    CalorieGoal,
    CalorieRequest,
    CalorieResult,
    DietPreset,
    GoalTarget,
    MacroAmount,
    MacroRequest,
    MacroResult,
)
from .intake_schema import (
    CaffeinePopulation,
    CaffeineRequest,
    CaffeineResult,
    CaffeineSensitivity,
    CaffeineSource,
    CaffeineStatus,
    FiberRequest,
    FiberResult,
    FiberStatus,
    HydrationBand,
    HydrationRequest,
    HydrationResult,
    PregnancyStatus,
    ProteinBand,
    ProteinGoal,
    ProteinRequest,
    ProteinResult,
)

__all__ = [
    "ActivityLevel",
    "CalculatorWarning",
    "HeightUnit",
    "Sex",
    "WeightUnit",
    "BmiCategory",
    "BmiRequest",
    "BmiResult",
    "CalorieGoal",
    "CalorieRequest",
    "CalorieResult",
    "DietPreset",
    "GoalTarget",
    "MacroAmount",
    "MacroRequest",
    "MacroResult",
    "CaffeinePopulation",
    "CaffeineRequest",
    "CaffeineResult",
    "CaffeineSensitivity",
    "CaffeineSource",
    "CaffeineStatus",
    "FiberRequest",
    "FiberResult",
    "FiberStatus",
    "HydrationBand",
    "HydrationRequest",
    "HydrationResult",
    "PregnancyStatus",
    "ProteinBand",
    "ProteinGoal",
    "ProteinRequest",
    "ProteinResult",
]
