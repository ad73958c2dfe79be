"""Food search, AI analysis and meal evaluation endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from calorie_coach.api.dependencies import current_profile, get_container, require_user
from calorie_coach.api.models import (
    AnalyzeFoodRequest,
    AnalyzeMealRequest,
    EvaluateMealRequest,
)
from calorie_coach.containers import AppContainer
from calorie_coach.domain.profiles import UserProfile
from calorie_coach.services.foods import as_food_item
from calorie_coach.services.meals import MealEvaluation, evaluate_meal

router = APIRouter(tags=["foods"], dependencies=[Depends(require_user)])


@router.get("/foods/search")
async def search_foods(
    q: str = "",
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Search the sample food database."""
    result = container.food_catalog_service.search(q)
    return asdict(result)


@router.post("/foods/analyze")
async def analyze_food(
    payload: AnalyzeFoodRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Estimate nutrition for a food the catalog does not know."""
    result = await container.analysis_service.analyze(payload.query)
    if result.fallback:
        return {
            "result": result,
            "item": None,
            "retry_suggested": True,
            "error": result.reasoning,
        }
    return {
        "result": result,
        "item": as_food_item(result),
        "retry_suggested": False,
        "error": None,
    }


@router.get("/foods/recommendations")
async def recommendations(
    remaining_calories: int | None = None,
    profile: UserProfile = Depends(current_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return recommendation tabs for the user's goal."""
    remaining = (
        remaining_calories if remaining_calories is not None else profile.calories_goal
    )
    result = container.food_catalog_service.recommend(remaining, profile.fitness_goal)
    return asdict(result)


@router.post("/meals/analyze")
async def analyze_meal(
    payload: AnalyzeMealRequest,
    profile: UserProfile = Depends(current_profile),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Analyze a described meal and evaluate it for the user's goal."""
    evaluation = await container.meal_service.analyze(
        payload.description, profile.fitness_goal
    )
    return _evaluation_payload(evaluation)


@router.post("/meals/evaluate")
async def evaluate(
    payload: EvaluateMealRequest,
    profile: UserProfile = Depends(current_profile),
) -> dict[str, object]:
    """Evaluate an already analyzed meal."""
    evaluation = evaluate_meal(payload.meal, payload.user_goal or profile.fitness_goal)
    return _evaluation_payload(evaluation)


def _evaluation_payload(evaluation: MealEvaluation) -> dict[str, object]:
    return {
        "meal": evaluation.meal,
        "user_goal": evaluation.user_goal,
        "aligned": evaluation.aligned,
        "message": evaluation.message,
        "recommendation": evaluation.recommendation,
        "retry_suggested": evaluation.meal.fallback,
    }
