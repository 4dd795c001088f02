"""Daily intake calculators: protein, fiber, hydration and caffeine.

Each calculator is a single formula (or, for fiber, a lookup table) over a
validated request record. The caffeine tracker keeps no log of its own; the
caller passes the doses already consumed today on every call.
"""

import math
from typing import List, Optional

from core.exceptions import NotFoundError
from core.logger import get_logger
from data.caffeine_sources import CAFFEINE_SOURCES
from schemas.common_schema import ActivityLevel, Sex
from schemas.intake_schema import (
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
from services.units import check_range, normalize_weight, require, round_half_up, round_whole, validate_age

logger = get_logger("services.intake_calculator")

PROTEIN_RDA_G_PER_KG = 0.8
PROTEIN_MAX_G_PER_KG = 2.0
PROTEIN_MEALS_PER_DAY = 4

PROTEIN_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.0,
    ActivityLevel.LIGHT: 1.1,
    ActivityLevel.MODERATE: 1.3,
    ActivityLevel.ACTIVE: 1.5,
    ActivityLevel.VERY_ACTIVE: 1.7,
}

PROTEIN_GOAL_MULTIPLIERS = {
    ProteinGoal.MAINTAIN: 1.0,
    ProteinGoal.LOSE_WEIGHT: 1.2,
    ProteinGoal.BUILD_MUSCLE: 1.4,
}

# Daily fiber in grams, keyed by (sex, under 50).
FIBER_TABLE = {
    (Sex.MALE, True): 38,
    (Sex.MALE, False): 30,
    (Sex.FEMALE, True): 25,
    (Sex.FEMALE, False): 21,
}
FIBER_AGE_CUTOFF = 50
FIBER_GRAMS_PER_SERVING = 5
MAX_FIBER_INTAKE_G = 200.0

WATER_L_PER_KG = 0.033
HOT_CLIMATE_L = 0.5
HYDRATION_ACTIVITY_L = {
    ActivityLevel.SEDENTARY: 0.0,
    ActivityLevel.LIGHT: 0.25,
    ActivityLevel.MODERATE: 0.5,
    ActivityLevel.ACTIVE: 0.75,
    ActivityLevel.VERY_ACTIVE: 1.0,
}
PREGNANCY_EXTRA_L = {
    PregnancyStatus.NONE: 0.0,
    PregnancyStatus.PREGNANT: 0.3,
    PregnancyStatus.NURSING: 0.7,
}
OZ_PER_LITER = 33.814
GLASS_OZ = 8
WAKING_HOURS = 16
BOTTLES_PER_LITER = 2

CAFFEINE_LIMITS_MG = {
    CaffeinePopulation.ADULT: 400.0,
    CaffeinePopulation.PREGNANT: 200.0,
    CaffeinePopulation.ADOLESCENT: 100.0,
}
CAFFEINE_HALF_LIFE_HOURS = {
    CaffeineSensitivity.LOW: 3.0,
    CaffeineSensitivity.NORMAL: 5.0,
    CaffeineSensitivity.HIGH: 7.0,
}
PREGNANCY_HALF_LIFE_HOURS = 10.0
ADOLESCENT_HALF_LIFE_HOURS = 5.0
CLEARANCE_HALF_LIVES = 5.5
CAFFEINE_NEAR_LIMIT_PCT = 80.0
MAX_SINGLE_DOSE_MG = 1000.0
MAX_SERVINGS = 20

CAFFEINE_STATUS_ADVICE = {
    CaffeineStatus.OVER_LIMIT: [
        "Your caffeine intake exceeds safe limits",
        "Consider reducing your caffeine consumption",
        "Watch for symptoms: anxiety, rapid heartbeat, insomnia",
    ],
    CaffeineStatus.NEAR_LIMIT: [
        "You're approaching the safe daily limit",
        "Avoid additional caffeine today",
    ],
    CaffeineStatus.UNDER_LIMIT: [
        "Your caffeine intake is within safe limits",
        "Continue monitoring your consumption",
    ],
}
CAFFEINE_GENERAL_ADVICE = [
    "Avoid caffeine 6+ hours before bedtime",
    "Stay hydrated - drink water with caffeinated beverages",
]
PREGNANCY_CAFFEINE_ADVICE = "Consult your healthcare provider about caffeine intake"


class IntakeCalculator:
    """Class-based calculator for daily protein, fiber, water and caffeine."""

    def calculate_protein(self, request: ProteinRequest) -> ProteinResult:
        """Daily protein from body weight, activity level and training goal."""
        weight_kg = normalize_weight(request.weight, request.weight_unit)
        activity = ActivityLevel(require(request.activity_level, "activity_level"))
        goal = ProteinGoal(request.goal)

        factor = PROTEIN_RDA_G_PER_KG * PROTEIN_ACTIVITY_MULTIPLIERS[activity] * PROTEIN_GOAL_MULTIPLIERS[goal]
        factor = min(factor, PROTEIN_MAX_G_PER_KG)
        daily = round_whole(weight_kg * factor)

        if factor < 1.0:
            band = ProteinBand.BASELINE
        elif factor < 1.6:
            band = ProteinBand.ELEVATED
        else:
            band = ProteinBand.HIGH

        logger.debug("Protein calculated: %s g (%.2f g/kg)", daily, factor)
        return ProteinResult(
            daily_protein_g=daily,
            grams_per_kg=round_half_up(daily / weight_kg, 1),
            per_meal_g=round_whole(daily / PROTEIN_MEALS_PER_DAY),
            meals_per_day=PROTEIN_MEALS_PER_DAY,
            band=band,
        )

    def calculate_fiber(self, request: FiberRequest) -> FiberResult:
        """Look up recommended fiber for the age/sex bracket.

        When the current intake is supplied, also report the gap to the target
        and how many 5 g servings would close it.
        """
        age = validate_age(request.age)
        sex = Sex(require(request.sex, "sex"))
        under_cutoff = age < FIBER_AGE_CUTOFF
        recommended = FIBER_TABLE[(sex, under_cutoff)]
        bracket = f"{sex.value}-{'under-50' if under_cutoff else '50-plus'}"

        if request.current_intake_g is None:
            return FiberResult(recommended_g=recommended, bracket=bracket)

        current = check_range(
            "current_intake_g", request.current_intake_g, 0.0, MAX_FIBER_INTAKE_G,
            unit="g", inclusive_min=True,
        )
        gap = round_whole(recommended - current)
        percent = round_whole(current / recommended * 100)
        if percent >= 90:
            status = FiberStatus.EXCELLENT
        elif percent >= 70:
            status = FiberStatus.GOOD
        elif percent >= 50:
            status = FiberStatus.NEEDS_IMPROVEMENT
        else:
            status = FiberStatus.LOW

        logger.debug("Fiber calculated: %s g recommended, %s%% met", recommended, percent)
        return FiberResult(
            recommended_g=recommended,
            bracket=bracket,
            current_intake_g=current,
            gap_g=gap,
            percent_of_target=percent,
            status=status,
            servings_needed=max(0, math.ceil(gap / FIBER_GRAMS_PER_SERVING)),
        )

    def calculate_hydration(self, request: HydrationRequest) -> HydrationResult:
        """Daily water from body weight plus activity, climate and pregnancy increments."""
        weight_kg = normalize_weight(request.weight, request.weight_unit)
        activity = ActivityLevel(require(request.activity_level, "activity_level"))

        liters = weight_kg * WATER_L_PER_KG + HYDRATION_ACTIVITY_L[activity]
        if request.hot_climate:
            liters += HOT_CLIMATE_L
        liters += PREGNANCY_EXTRA_L[PregnancyStatus(request.pregnancy)]
        liters = round_half_up(liters, 1)

        if liters < 2.0:
            band = HydrationBand.LOW
        elif liters < 3.0:
            band = HydrationBand.MODERATE
        else:
            band = HydrationBand.HIGH

        ounces = round_whole(liters * OZ_PER_LITER)
        logger.debug("Hydration calculated: %s L", liters)
        return HydrationResult(
            liters_per_day=liters,
            band=band,
            ounces_per_day=ounces,
            glasses_per_day=round_whole(ounces / GLASS_OZ),
            ml_per_hour=round_whole(liters / WAKING_HOURS * 1000),
            bottles_per_day=round_whole(liters * BOTTLES_PER_LITER),
        )

    def caffeine_limit(self, population: CaffeinePopulation, limit_mg: Optional[float] = None) -> float:
        """Daily limit for the population, or the caller's lower personal limit."""
        default = CAFFEINE_LIMITS_MG[CaffeinePopulation(population)]
        if limit_mg is None:
            return default
        return check_range("limit_mg", limit_mg, 0.0, default, unit="mg", inclusive_max=True)

    def classify_caffeine(self, percent_of_limit: float) -> CaffeineStatus:
        if percent_of_limit > 100.0:
            return CaffeineStatus.OVER_LIMIT
        if percent_of_limit >= CAFFEINE_NEAR_LIMIT_PCT:
            return CaffeineStatus.NEAR_LIMIT
        return CaffeineStatus.UNDER_LIMIT

    def calculate_caffeine(self, request: CaffeineRequest) -> CaffeineResult:
        """Total the day's logged doses and compare against the daily limit."""
        doses = require(request.doses_mg, "doses_mg")
        for i, dose in enumerate(doses):
            check_range(f"doses_mg[{i}]", dose, 0.0, MAX_SINGLE_DOSE_MG, unit="mg", inclusive_min=True, inclusive_max=True)

        population = CaffeinePopulation(request.population)
        limit = self.caffeine_limit(population, request.limit_mg)
        total = float(sum(doses))
        percent = total / limit * 100
        status = self.classify_caffeine(percent)

        # sensitivity only shifts the adult half-life
        if population is CaffeinePopulation.PREGNANT:
            half_life = PREGNANCY_HALF_LIFE_HOURS
        elif population is CaffeinePopulation.ADOLESCENT:
            half_life = ADOLESCENT_HALF_LIFE_HOURS
        else:
            half_life = CAFFEINE_HALF_LIFE_HOURS[CaffeineSensitivity(request.sensitivity)]

        logger.debug("Caffeine calculated: %s/%s mg (%s)", total, limit, status.value)
        return CaffeineResult(
            total_mg=total,
            limit_mg=limit,
            percent_of_limit=round_half_up(percent, 1),
            remaining_mg=max(0.0, limit - total),
            status=status,
            half_life_hours=half_life,
            clearance_hours=round_whole(half_life * CLEARANCE_HALF_LIVES),
            dose_count=len(doses),
            recommendations=self.caffeine_recommendations(status, population),
        )

    def caffeine_recommendations(self, status: CaffeineStatus, population: CaffeinePopulation) -> List[str]:
        advice = CAFFEINE_STATUS_ADVICE[CaffeineStatus(status)] + CAFFEINE_GENERAL_ADVICE
        if CaffeinePopulation(population) is CaffeinePopulation.PREGNANT:
            advice = advice + [PREGNANCY_CAFFEINE_ADVICE]
        return advice

    def caffeine_sources(self, category: Optional[str] = None) -> List[CaffeineSource]:
        """Return the caffeine catalogue, optionally filtered by category."""
        sources = [CaffeineSource(**s) for s in CAFFEINE_SOURCES]
        if category:
            sources = [s for s in sources if s.category.lower() == category.lower()]
        return sources

    def caffeine_source(self, name: str) -> CaffeineSource:
        for source in self.caffeine_sources():
            if source.name.lower() == name.strip().lower():
                return source
        raise NotFoundError("Caffeine source", name)

    def dose_for(self, name: str, servings: float = 1) -> float:
        """Caffeine in `servings` of a catalogue product, ready to append to a dose log."""
        check_range("servings", servings, 0.0, MAX_SERVINGS, inclusive_max=True)
        return self.caffeine_source(name).caffeine_mg * servings


# export singleton
intake_calculator = IntakeCalculator()
__all__ = ["IntakeCalculator", "intake_calculator"]
