"""Calculators API router.

One POST endpoint per calculator. Each takes the calculator's request
record as the JSON body and returns its result record; validation failures
raised by the services are rendered by the registered exception handlers.
"""

from fastapi import APIRouter

from core.logger import get_logger
from schemas import (
    BmiRequest,
    BmiResult,
    CaffeineRequest,
    CaffeineResult,
    CalorieRequest,
    CalorieResult,
    FiberRequest,
    FiberResult,
    HydrationRequest,
    HydrationResult,
    MacroRequest,
    MacroResult,
    ProteinRequest,
    ProteinResult,
)
from services.intake_calculator import intake_calculator
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("api.calculators")
router = APIRouter(prefix="/api/calculators", tags=["calculators"])


@router.post("/bmi", response_model=BmiResult)
def calculate_bmi(payload: BmiRequest):
    """Return BMI, its category and the healthy weight range for the height."""
    result = nutrition_calculator.calculate_bmi(payload)
    logger.info("BMI calculated: %s (%s)", result.bmi, result.category.value)
    return result


@router.post("/calories", response_model=CalorieResult)
def calculate_calories(payload: CalorieRequest):
    """Return BMR, TDEE and the calorie target for every goal.

    Deficit targets under the safe minimum are clamped and reported in
    `warnings` rather than rejected.
    """
    result = nutrition_calculator.calculate_calories(payload)
    logger.info("Calories calculated: tdee=%s warnings=%s", result.tdee, len(result.warnings))
    return result


@router.post("/macros", response_model=MacroResult)
def calculate_macros(payload: MacroRequest):
    """Return the macronutrient split of the goal's calorie target."""
    result = nutrition_calculator.calculate_macros(payload)
    logger.info("Macros calculated: %s kcal (%s)", result.total_calories, result.preset.value)
    return result


@router.post("/protein", response_model=ProteinResult)
def calculate_protein(payload: ProteinRequest):
    result = intake_calculator.calculate_protein(payload)
    logger.info("Protein calculated: %s g", result.daily_protein_g)
    return result


@router.post("/fiber", response_model=FiberResult)
def calculate_fiber(payload: FiberRequest):
    result = intake_calculator.calculate_fiber(payload)
    logger.info("Fiber calculated: %s g (%s)", result.recommended_g, result.bracket)
    return result


@router.post("/hydration", response_model=HydrationResult)
def calculate_hydration(payload: HydrationRequest):
    result = intake_calculator.calculate_hydration(payload)
    logger.info("Hydration calculated: %s L", result.liters_per_day)
    return result


@router.post("/caffeine", response_model=CaffeineResult)
def calculate_caffeine(payload: CaffeineRequest):
    """Compare the caller's caffeine log for today against the daily limit."""
    result = intake_calculator.calculate_caffeine(payload)
    logger.info("Caffeine calculated: %s mg (%s)", result.total_mg, result.status.value)
    return result
