"""User profile domain models."""

from typing import Literal

from pydantic import BaseModel, Field

FitnessGoal = Literal["cutting", "bulking", "maintenance"]

FITNESS_GOALS: tuple[str, ...] = ("cutting", "bulking", "maintenance")
DEFAULT_FITNESS_GOAL: FitnessGoal = "maintenance"
DEFAULT_CALORIES_GOAL = 2000


class Macros(BaseModel):
    """Daily macronutrient targets in grams."""

    protein: int = Field(default=0, ge=0)
    carbs: int = Field(default=0, ge=0)
    fat: int = Field(default=0, ge=0)


DEFAULT_MACROS = Macros(protein=120, carbs=200, fat=65)


class GoalPreset(BaseModel):
    """Suggested targets for a fitness goal."""

    fitness_goal: FitnessGoal
    calories_goal: int
    macros: Macros


GOAL_PRESETS: dict[str, GoalPreset] = {
    "cutting": GoalPreset(
        fitness_goal="cutting",
        calories_goal=1800,
        macros=Macros(protein=150, carbs=150, fat=50),
    ),
    "bulking": GoalPreset(
        fitness_goal="bulking",
        calories_goal=2500,
        macros=Macros(protein=180, carbs=300, fat=70),
    ),
    "maintenance": GoalPreset(
        fitness_goal="maintenance",
        calories_goal=DEFAULT_CALORIES_GOAL,
        macros=DEFAULT_MACROS,
    ),
}


class UserProfile(BaseModel):
    """Nutrition goal profile owned by a single user."""

    id: str
    display_name: str | None = None
    email: str | None = None
    fitness_goal: FitnessGoal = DEFAULT_FITNESS_GOAL
    calories_goal: int = Field(default=DEFAULT_CALORIES_GOAL, gt=0)
    macros: Macros = Field(default_factory=lambda: DEFAULT_MACROS.model_copy())
    setup_completed: bool = False
