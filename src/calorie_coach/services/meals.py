"""Meal analysis and goal evaluation."""

from dataclasses import dataclass

from calorie_coach.domain.foods import FoodAnalysisResult
from calorie_coach.services.analysis import FoodAnalysisService

_CUTTING_ADVICE = "Consider options with fewer calories and carbs, but higher protein."
_BULKING_ADVICE = (
    "Consider options with more calories and protein to support muscle growth."
)


@dataclass(frozen=True)
class MealEvaluation:
    """How well an analyzed meal fits the user's fitness goal."""

    meal: FoodAnalysisResult
    user_goal: str
    aligned: bool
    message: str
    recommendation: str | None


@dataclass
class MealService:
    """Analyze free-text meals and judge them against a goal."""

    analysis_service: FoodAnalysisService

    async def analyze(self, description: str, user_goal: str) -> MealEvaluation:
        """Analyze a meal description and evaluate it for the goal."""
        cleaned = description.strip()
        if not cleaned:
            raise ValueError("Meal description must not be empty")
        meal = await self.analysis_service.analyze(cleaned)
        return evaluate_meal(meal, user_goal)


def evaluate_meal(meal: FoodAnalysisResult, user_goal: str) -> MealEvaluation:
    """Return the goal feedback shown next to an analyzed meal."""
    aligned = user_goal == "maintenance" or meal.category == user_goal
    if aligned:
        return MealEvaluation(
            meal=meal,
            user_goal=user_goal,
            aligned=True,
            message=f"Good for {user_goal}!",
            recommendation=None,
        )
    return MealEvaluation(
        meal=meal,
        user_goal=user_goal,
        aligned=False,
        message=f"Not ideal for {user_goal}",
        recommendation=_CUTTING_ADVICE if user_goal == "cutting" else _BULKING_ADVICE,
    )
