"""Food and analysis domain models."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

FoodCategory = Literal["cutting", "bulking", "general"]

FOOD_CATEGORIES: tuple[str, ...] = ("cutting", "bulking", "general")
DEFAULT_CATEGORY: FoodCategory = "general"


class FoodAnalysisResult(BaseModel):
    """Sanitized nutrition estimate for a dish or ingredient list."""

    name: str
    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)
    category: FoodCategory = DEFAULT_CATEGORY
    reasoning: str
    fallback: bool = False


@dataclass(frozen=True)
class FoodItem:
    """Food entry shown in search results and recommendations."""

    id: str
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    category: str
    image_url: str | None = None
    reasoning: str | None = None
