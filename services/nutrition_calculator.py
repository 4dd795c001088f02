"""Energy calculators: BMI, BMR/TDEE calorie targets and macro splits.

Request records are validated and normalized to metric through
`services.units` before any formula runs. The formula helpers
(`body_mass_index`, `calculate_bmr`, `calculate_tdee`, `calorie_targets`,
`split_macros`) are public so callers holding already-validated numbers can
reuse them.
"""

from typing import Dict, List, Tuple

from core.exceptions import BelowSafeMinimumWarning, OutOfRangeError
from core.logger import get_logger
from schemas.common_schema import ActivityLevel, CalculatorWarning, Sex
from schemas.energy_schema import (
    BmiCategory,
    BmiRequest,
    BmiResult,
    CalorieGoal,
    CalorieRequest,
    CalorieResult,
    DietPreset,
    EnergyProfile,
    GoalTarget,
    MacroAmount,
    MacroRequest,
    MacroResult,
)
from services.units import (
    check_range,
    normalize_height,
    normalize_weight,
    require,
    round_half_up,
    round_whole,
    validate_age,
)

logger = get_logger("services.nutrition_calculator")

# Lower bound of each band, inclusive; checked from the top down.
BMI_BANDS = [
    (30.0, BmiCategory.OBESE),
    (25.0, BmiCategory.OVERWEIGHT),
    (18.5, BmiCategory.NORMAL),
    (0.0, BmiCategory.UNDERWEIGHT),
]

BMI_DESCRIPTIONS = {
    BmiCategory.UNDERWEIGHT: "Below healthy weight range. Consider consulting a healthcare provider.",
    BmiCategory.NORMAL: "Within healthy weight range. Maintain with balanced diet and exercise.",
    BmiCategory.OVERWEIGHT: "Above healthy weight range. Consider lifestyle modifications.",
    BmiCategory.OBESE: "Significantly above healthy weight. Consult a healthcare provider.",
}

BMI_CAVEAT = (
    "BMI is a screening tool, not a diagnostic. It does not account for muscle mass, "
    "bone density, body composition or fat distribution."
)

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 25.0

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_ADJUSTMENTS = {
    CalorieGoal.MAINTENANCE: 0,
    CalorieGoal.MILD_DEFICIT: -250,
    CalorieGoal.DEFICIT: -500,
    CalorieGoal.MILD_SURPLUS: 250,
    CalorieGoal.SURPLUS: 500,
}

SAFE_MINIMUM_CALORIES = {
    Sex.FEMALE: 1200,
    Sex.MALE: 1500,
}

KCAL_PER_KG_FAT = 7700
MAX_DAILY_CALORIES = 20000.0

# carbs / protein / fat, percent of total calories
MACRO_PRESETS = {
    DietPreset.BALANCED: (40, 30, 30),
    DietPreset.LOW_CARB: (25, 40, 35),
    DietPreset.HIGH_PROTEIN: (35, 40, 25),
    DietPreset.KETO: (5, 25, 70),
}

KCAL_PER_GRAM = {"carbs": 4, "protein": 4, "fat": 9}


class NutritionCalculator:
    """Class-based energy calculator used by the calculators API."""

    def body_mass_index(self, weight_kg: float, height_cm: float) -> float:
        """Unrounded BMI from metric weight and height."""
        height_m = height_cm / 100.0
        return weight_kg / (height_m * height_m)

    def classify_bmi(self, bmi: float) -> BmiCategory:
        """Map a positive BMI onto its band; lower bounds are inclusive."""
        check_range("bmi", bmi, 0.0, float("inf"), inclusive_min=True)
        for lower, category in BMI_BANDS:
            if bmi >= lower:
                return category
        return BmiCategory.UNDERWEIGHT

    def calculate_bmi(self, request: BmiRequest) -> BmiResult:
        """Calculate BMI, its category and the healthy weight range for the height."""
        weight_kg = normalize_weight(request.weight, request.weight_unit)
        height_cm = normalize_height(request.height, request.height_unit)

        bmi = round_half_up(self.body_mass_index(weight_kg, height_cm), 1)
        category = self.classify_bmi(bmi)

        height_m_sq = (height_cm / 100.0) ** 2
        healthy_min = round_whole(HEALTHY_BMI_MIN * height_m_sq)
        healthy_max = round_whole(HEALTHY_BMI_MAX * height_m_sq)
        to_lose = to_gain = None
        if weight_kg > healthy_max:
            to_lose = round_half_up(weight_kg - healthy_max, 1)
        elif weight_kg < healthy_min:
            to_gain = round_half_up(healthy_min - weight_kg, 1)

        logger.debug("BMI calculated: %s (%s)", bmi, category.value)
        return BmiResult(
            bmi=bmi,
            category=category,
            description=BMI_DESCRIPTIONS[category],
            caveat=BMI_CAVEAT,
            weight_kg=round_half_up(weight_kg, 1),
            height_cm=round_half_up(height_cm, 1),
            healthy_weight_min_kg=healthy_min,
            healthy_weight_max_kg=healthy_max,
            weight_to_lose_kg=to_lose,
            weight_to_gain_kg=to_gain,
        )

    def calculate_bmr(self, sex: Sex, weight_kg: float, height_cm: float, age: int) -> float:
        """Mifflin-St Jeor basal metabolic rate, unrounded."""
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        if Sex(sex) is Sex.MALE:
            return base + 5
        return base - 161

    def calculate_tdee(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Scale BMR by the fixed multiplier for the activity level."""
        val = bmr * ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
        logger.debug("TDEE calculated: %s", val)
        return val

    def calorie_targets(self, tdee: int, sex: Sex) -> Tuple[List[GoalTarget], List[BelowSafeMinimumWarning]]:
        """Build the per-goal calorie table for a TDEE.

        Deficits never go below the safe minimum for `sex` (nor above
        maintenance when TDEE itself is under that minimum); clamped rows are
        flagged and reported as warnings.
        """
        check_range("tdee", tdee, 0.0, MAX_DAILY_CALORIES, unit="kcal")
        sex = Sex(require(sex, "sex"))
        floor = min(SAFE_MINIMUM_CALORIES[sex], tdee)

        targets = []
        warnings = []
        for goal, adjustment in GOAL_ADJUSTMENTS.items():
            calories = tdee + adjustment
            clamped = adjustment < 0 and calories < floor
            if clamped:
                warnings.append(BelowSafeMinimumWarning(goal.value, calories, floor))
                calories = floor
            targets.append(GoalTarget(
                goal=goal,
                adjustment=adjustment,
                calories=calories,
                weekly_calories=calories * 7,
                weekly_change_kg=round_half_up((calories - tdee) * 7 / KCAL_PER_KG_FAT, 2),
                below_safe_minimum=clamped,
            ))
        if warnings:
            logger.debug("Calorie targets clamped for %s: %s", sex.value, [w.goal for w in warnings])
        return targets, warnings

    def _energy_baseline(self, profile: EnergyProfile) -> Tuple[Sex, int, int, float]:
        """Validate a profile and return (sex, bmr, tdee, multiplier) in whole kcal."""
        weight_kg = normalize_weight(profile.weight, profile.weight_unit)
        height_cm = normalize_height(profile.height, profile.height_unit)
        age = validate_age(profile.age)
        sex = Sex(require(profile.sex, "sex"))
        activity = ActivityLevel(require(profile.activity_level, "activity_level"))

        bmr = round_whole(self.calculate_bmr(sex, weight_kg, height_cm, age))
        if bmr <= 0:
            raise OutOfRangeError("bmr", bmr, 0, MAX_DAILY_CALORIES, unit="kcal")
        tdee = round_whole(self.calculate_tdee(bmr, activity))
        return sex, bmr, tdee, ACTIVITY_MULTIPLIERS[activity]

    def calculate_calories(self, request: CalorieRequest) -> CalorieResult:
        """Calculate BMR, TDEE and the calorie target for every goal."""
        sex, bmr, tdee, multiplier = self._energy_baseline(request)
        targets, warnings = self.calorie_targets(tdee, sex)

        goal = CalorieGoal(request.goal) if request.goal is not None else None
        target_calories = None
        if goal is not None:
            target_calories = next(t.calories for t in targets if t.goal is goal)

        logger.debug("Calories calculated: bmr=%s tdee=%s goal=%s", bmr, tdee, goal)
        return CalorieResult(
            bmr=bmr,
            tdee=tdee,
            activity_multiplier=multiplier,
            targets=targets,
            goal=goal,
            target_calories=target_calories,
            warnings=[CalculatorWarning.from_warning(w) for w in warnings],
        )

    def split_macros(self, total_calories: float, preset: DietPreset) -> Dict[str, MacroAmount]:
        """Allocate `total_calories` across carbs, protein and fat for a preset."""
        check_range("total_calories", total_calories, 0.0, MAX_DAILY_CALORIES, unit="kcal")
        percentages = dict(zip(("carbs", "protein", "fat"), MACRO_PRESETS[DietPreset(preset)]))
        macros = {}
        for name, pct in percentages.items():
            kcal = total_calories * pct / 100
            macros[name] = MacroAmount(
                grams=round_whole(kcal / KCAL_PER_GRAM[name]),
                calories=round_whole(kcal),
                percentage=pct,
            )
        logger.debug("Macros calculated: %s", {k: v.grams for k, v in macros.items()})
        return macros

    def calculate_macros(self, request: MacroRequest) -> MacroResult:
        """Split the calorie target for the requested goal by the diet preset."""
        sex, bmr, tdee, _ = self._energy_baseline(request)
        goal = CalorieGoal(request.goal)
        targets, warnings = self.calorie_targets(tdee, sex)
        total = next(t.calories for t in targets if t.goal is goal)
        macros = self.split_macros(total, request.preset)

        return MacroResult(
            preset=DietPreset(request.preset),
            goal=goal,
            bmr=bmr,
            tdee=tdee,
            total_calories=total,
            warnings=[CalculatorWarning.from_warning(w) for w in warnings if w.goal == goal.value],
            **macros,
        )


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator"]
