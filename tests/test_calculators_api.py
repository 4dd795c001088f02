"""Tests for the calculator routers, mostly called directly without an HTTP client."""
import pydantic
import pytest
from fastapi.testclient import TestClient

from api.caffeine_sources import caffeine_dose, list_caffeine_sources
from api.calculators import (
    calculate_bmi,
    calculate_caffeine,
    calculate_calories,
    calculate_fiber,
    calculate_hydration,
    calculate_macros,
    calculate_protein,
)
from core.exceptions import NotFoundError, OutOfRangeError
from main import app, health
from schemas import (
    BmiRequest,
    CaffeineRequest,
    CalorieRequest,
    FiberRequest,
    HydrationRequest,
    MacroRequest,
    ProteinRequest,
)

PROFILE = {"weight": 70, "height": 175, "age": 25, "sex": "male", "activity_level": "sedentary"}


def test_routes_are_registered():
    paths = set(app.openapi()["paths"])
    for name in ("bmi", "calories", "macros", "protein", "fiber", "hydration", "caffeine"):
        assert f"/api/calculators/{name}" in paths
    assert "/api/caffeine-sources" in paths
    assert "/health" in paths


def test_health():
    assert health() == {"status": "healthy"}


def test_energy_endpoints():
    assert calculate_bmi(BmiRequest(weight=70, height=175)).bmi == 22.9
    calories = calculate_calories(CalorieRequest(**PROFILE))
    assert (calories.bmr, calories.tdee) == (1674, 2009)
    macros = calculate_macros(MacroRequest(preset="low-carb", **PROFILE))
    assert macros.total_calories == 2009
    assert macros.protein.percentage == 40


def test_intake_endpoints():
    assert calculate_protein(ProteinRequest(weight=70, activity_level="sedentary")).daily_protein_g == 56
    assert calculate_fiber(FiberRequest(age=30, sex="male")).recommended_g == 38
    assert calculate_hydration(HydrationRequest(weight=70, activity_level="sedentary")).liters_per_day == 2.3
    assert calculate_caffeine(CaffeineRequest(doses_mg=[95, 95, 150])).status.value == "near-limit"


def test_endpoint_errors_propagate_to_handlers():
    with pytest.raises(OutOfRangeError) as exc_info:
        calculate_bmi(BmiRequest(weight=70, height=320))
    assert exc_info.value.field == "height"


def test_request_models_reject_non_finite_numbers():
    with pytest.raises(pydantic.ValidationError):
        BmiRequest(weight=float("nan"), height=175)
    with pytest.raises(pydantic.ValidationError):
        CaffeineRequest(doses_mg=[float("inf")])


@pytest.mark.parametrize("path, body", [
    ("/api/calculators/bmi", '{"weight": NaN, "height": 175}'),
    ("/api/calculators/calories", '{"weight": 70, "height": Infinity, "age": 25, "sex": "male", "activity_level": "sedentary"}'),
    ("/api/calculators/caffeine", '{"doses_mg": [95, -Infinity]}'),
])
def test_non_finite_json_numbers_get_a_422(path, body):
    client = TestClient(app, raise_server_exceptions=False)
    response = client.post(path, content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"


def test_caffeine_sources_endpoints():
    coffee = list_caffeine_sources(category="Coffee")
    assert {s.name for s in coffee} >= {"Espresso (1 shot)", "Cold Brew (12oz)"}
    assert len(list_caffeine_sources()) > len(coffee)

    dose = caffeine_dose(name="Espresso (1 shot)", servings=2)
    assert dose == {"name": "Espresso (1 shot)", "servings": 2, "caffeine_mg": 128}
    with pytest.raises(NotFoundError):
        caffeine_dose(name="Unknown brew")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
