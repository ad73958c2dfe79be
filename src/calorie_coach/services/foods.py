"""Food search and recommendations over the sample catalog."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calorie_coach.domain.catalog import RECOMMENDATIONS, SAMPLE_FOODS
from calorie_coach.domain.foods import FoodAnalysisResult, FoodItem


@dataclass(frozen=True)
class FoodSearchResult:
    """Matches for a search query."""

    query: str
    items: list[FoodItem]
    suggest_ai_analysis: bool


@dataclass(frozen=True)
class Recommendations:
    """Recommendation tabs for the user's remaining budget."""

    remaining_calories: int
    fitness_goal: str
    active_tab: str
    caption: str
    tabs: dict[str, list[FoodItem]]


@dataclass
class FoodCatalogService:
    """Search and recommend foods from static sample data."""

    foods: tuple[FoodItem, ...] = SAMPLE_FOODS
    recommendations: dict[str, tuple[FoodItem, ...]] = field(
        default_factory=lambda: dict(RECOMMENDATIONS)
    )

    def search(self, query: str) -> FoodSearchResult:
        """Match foods whose name contains the query, case-insensitively."""
        cleaned = query.strip()
        if not cleaned:
            return FoodSearchResult(query=query, items=[], suggest_ai_analysis=False)
        needle = cleaned.lower()
        items = [food for food in self.foods if needle in food.name.lower()]
        return FoodSearchResult(
            query=cleaned, items=items, suggest_ai_analysis=not items
        )

    def recommend(self, remaining_calories: int, fitness_goal: str) -> Recommendations:
        """Return every recommendation tab, opening the one for the goal."""
        active_tab = fitness_goal if fitness_goal in self.recommendations else "health"
        return Recommendations(
            remaining_calories=remaining_calories,
            fitness_goal=fitness_goal,
            active_tab=active_tab,
            caption=(
                f"Based on your remaining {remaining_calories} calories "
                f"and {fitness_goal} goal"
            ),
            tabs={tab: list(items) for tab, items in self.recommendations.items()},
        )


def as_food_item(
    result: FoodAnalysisResult, created_at: datetime | None = None
) -> FoodItem:
    """Convert an AI analysis into a food entry the client can add."""
    moment = created_at or datetime.now(tz=UTC)
    return FoodItem(
        id=f"ai-{int(moment.timestamp() * 1000)}",
        name=result.name,
        calories=result.calories,
        protein=result.protein,
        carbs=result.carbs,
        fat=result.fat,
        category=result.category,
        reasoning=result.reasoning,
    )
