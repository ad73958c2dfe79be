"""Tests for food search, recommendations and meal evaluation."""

import asyncio
from datetime import UTC, datetime

import pytest

from calorie_coach.domain.foods import FoodAnalysisResult
from calorie_coach.services.analysis import FoodAnalysisService
from calorie_coach.services.foods import FoodCatalogService, as_food_item
from calorie_coach.services.meals import MealService, evaluate_meal
from tests.conftest import FakeCompletionClient


def _meal(category: str) -> FoodAnalysisResult:
    return FoodAnalysisResult(
        name="Bowl",
        calories=400,
        protein=30,
        carbs=40,
        fat=12,
        category=category,
        reasoning="test",
    )


def test_search_is_case_insensitive_substring() -> None:
    result = FoodCatalogService().search("  GREEK ")

    assert [food.name for food in result.items] == ["Greek Yogurt"]
    assert result.suggest_ai_analysis is False


def test_search_without_match_suggests_ai() -> None:
    result = FoodCatalogService().search("dragonfruit")

    assert result.items == []
    assert result.suggest_ai_analysis is True


def test_blank_search_is_ignored() -> None:
    result = FoodCatalogService().search("   ")

    assert result.items == []
    assert result.suggest_ai_analysis is False


def test_recommendations_open_goal_tab() -> None:
    result = FoodCatalogService().recommend(800, "bulking")

    assert result.active_tab == "bulking"
    assert set(result.tabs) == {"cutting", "bulking", "health"}
    assert result.caption == "Based on your remaining 800 calories and bulking goal"


def test_recommendations_maintenance_opens_health_tab() -> None:
    result = FoodCatalogService().recommend(500, "maintenance")

    assert result.active_tab == "health"


def test_as_food_item_uses_timestamp_id() -> None:
    moment = datetime(2024, 1, 1, tzinfo=UTC)

    item = as_food_item(_meal("cutting"), created_at=moment)

    assert item.id == f"ai-{int(moment.timestamp() * 1000)}"
    assert item.reasoning == "test"


@pytest.mark.parametrize(
    ("goal", "category", "aligned"),
    [
        ("maintenance", "bulking", True),
        ("cutting", "cutting", True),
        ("bulking", "bulking", True),
        ("cutting", "general", False),
        ("bulking", "cutting", False),
    ],
)
def test_evaluate_meal_alignment(goal: str, category: str, aligned: bool) -> None:
    evaluation = evaluate_meal(_meal(category), goal)

    assert evaluation.aligned is aligned
    if aligned:
        assert evaluation.message == f"Good for {goal}!"
        assert evaluation.recommendation is None
    else:
        assert evaluation.message == f"Not ideal for {goal}"
        assert evaluation.recommendation


def test_cutting_recommendation_text() -> None:
    evaluation = evaluate_meal(_meal("bulking"), "cutting")

    assert "fewer calories" in (evaluation.recommendation or "")


def test_meal_service_rejects_blank_description() -> None:
    service = MealService(FoodAnalysisService(client=FakeCompletionClient(), model="m"))

    with pytest.raises(ValueError):
        asyncio.run(service.analyze("   ", "cutting"))


def test_meal_service_analyzes_and_evaluates() -> None:
    service = MealService(FoodAnalysisService(client=FakeCompletionClient(), model="m"))

    evaluation = asyncio.run(service.analyze("an apple", "cutting"))

    assert evaluation.meal.name == "Apple"
    assert evaluation.aligned is True
